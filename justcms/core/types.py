"""
Core types for the JustCMS public API.

These dataclasses mirror the JSON documents returned by the API. Each one is
built with ``from_dict`` (camelCase wire keys) and turned back into the wire
shape with ``to_dict``.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar

from justcms.core.client import DecodeError

# =============================================================================
# Categories
# =============================================================================


@dataclass(frozen=True)
class Category:
    """A category attached to pages. The slug is the stable identifier."""

    name: str
    slug: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Category":
        """Create from API response dict."""
        return cls(name=data["name"], slug=data["slug"])

    def to_dict(self) -> dict[str, Any]:
        """Convert to the API response dict shape."""
        return {"name": self.name, "slug": self.slug}


# =============================================================================
# Image Types
# =============================================================================


@dataclass(frozen=True)
class ImageVariant:
    """One rendition of a source image."""

    url: str
    width: int
    height: int
    filename: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ImageVariant":
        """Create from API response dict."""
        return cls(
            url=data["url"],
            width=data.get("width", 0),
            height=data.get("height", 0),
            filename=data.get("filename", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the API response dict shape."""
        return {
            "url": self.url,
            "width": self.width,
            "height": self.height,
            "filename": self.filename,
        }


@dataclass(frozen=True)
class Image:
    """
    An image with its renditions.

    Variants keep the order the API sends them in, smallest first. The second
    entry is the "large" rendition (see ``helpers.get_large_image_variant``).
    """

    alt: str
    variants: list[ImageVariant] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Image":
        """Create from API response dict."""
        return cls(
            alt=data.get("alt") or "",
            variants=[ImageVariant.from_dict(v) for v in data.get("variants") or []],
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the API response dict shape."""
        return {"alt": self.alt, "variants": [v.to_dict() for v in self.variants]}


# =============================================================================
# Content Blocks
# =============================================================================


@dataclass(frozen=True)
class ContentBlock:
    """Base for every content block variant. ``type`` is the discriminator."""

    type: ClassVar[str] = ""

    styles: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ContentBlock":
        """Create from API response dict. Implemented by each variant."""
        raise NotImplementedError

    def to_dict(self) -> dict[str, Any]:
        """Convert to the API response dict shape."""
        return {"type": self.type, "styles": list(self.styles)}


@dataclass(frozen=True)
class HeaderBlock(ContentBlock):
    type: ClassVar[str] = "header"

    header: str = ""
    subheader: str | None = None
    size: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HeaderBlock":
        """Create from API response dict."""
        return cls(
            styles=list(data.get("styles") or []),
            header=data["header"],
            subheader=data.get("subheader"),
            size=data.get("size") or "",
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the API response dict shape."""
        result = super().to_dict()
        result.update({"header": self.header, "subheader": self.subheader, "size": self.size})
        return result


@dataclass(frozen=True)
class ListOption:
    """An entry of a list block."""

    title: str
    subtitle: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ListOption":
        """Create from API response dict."""
        return cls(title=data["title"], subtitle=data.get("subtitle"))

    def to_dict(self) -> dict[str, Any]:
        """Convert to the API response dict shape."""
        return {"title": self.title, "subtitle": self.subtitle}


@dataclass(frozen=True)
class ListBlock(ContentBlock):
    type: ClassVar[str] = "list"

    options: list[ListOption] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ListBlock":
        """Create from API response dict."""
        return cls(
            styles=list(data.get("styles") or []),
            options=[ListOption.from_dict(o) for o in data.get("options") or []],
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the API response dict shape."""
        result = super().to_dict()
        result["options"] = [o.to_dict() for o in self.options]
        return result


@dataclass(frozen=True)
class EmbedBlock(ContentBlock):
    type: ClassVar[str] = "embed"

    url: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EmbedBlock":
        """Create from API response dict."""
        return cls(styles=list(data.get("styles") or []), url=data["url"])

    def to_dict(self) -> dict[str, Any]:
        """Convert to the API response dict shape."""
        result = super().to_dict()
        result["url"] = self.url
        return result


@dataclass(frozen=True)
class ImageBlock(ContentBlock):
    type: ClassVar[str] = "image"

    images: list[Image] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ImageBlock":
        """Create from API response dict."""
        return cls(
            styles=list(data.get("styles") or []),
            images=[Image.from_dict(i) for i in data.get("images") or []],
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the API response dict shape."""
        result = super().to_dict()
        result["images"] = [i.to_dict() for i in self.images]
        return result


@dataclass(frozen=True)
class CodeBlock(ContentBlock):
    type: ClassVar[str] = "code"

    code: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CodeBlock":
        """Create from API response dict."""
        return cls(styles=list(data.get("styles") or []), code=data["code"])

    def to_dict(self) -> dict[str, Any]:
        """Convert to the API response dict shape."""
        result = super().to_dict()
        result["code"] = self.code
        return result


@dataclass(frozen=True)
class TextBlock(ContentBlock):
    type: ClassVar[str] = "text"

    text: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TextBlock":
        """Create from API response dict."""
        return cls(styles=list(data.get("styles") or []), text=data["text"])

    def to_dict(self) -> dict[str, Any]:
        """Convert to the API response dict shape."""
        result = super().to_dict()
        result["text"] = self.text
        return result


@dataclass(frozen=True)
class CtaBlock(ContentBlock):
    """Call-to-action button."""

    type: ClassVar[str] = "cta"

    text: str = ""
    url: str = ""
    description: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CtaBlock":
        """Create from API response dict."""
        return cls(
            styles=list(data.get("styles") or []),
            text=data["text"],
            url=data["url"],
            description=data.get("description"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the API response dict shape."""
        result = super().to_dict()
        result.update({"text": self.text, "url": self.url, "description": self.description})
        return result


@dataclass(frozen=True)
class CustomBlock(ContentBlock):
    """
    A block defined by the project itself.

    Only ``blockId`` is known ahead of time; every other key of the payload is
    kept in ``fields``.
    """

    type: ClassVar[str] = "custom"

    block_id: str = ""
    fields: dict[str, Any] = field(default_factory=dict)

    _KNOWN_KEYS: ClassVar[frozenset[str]] = frozenset({"type", "styles", "blockId"})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CustomBlock":
        """Create from API response dict."""
        return cls(
            styles=list(data.get("styles") or []),
            block_id=data["blockId"],
            fields={k: v for k, v in data.items() if k not in cls._KNOWN_KEYS},
        )

    def get(self, name: str, default: Any = None) -> Any:
        """Get an additional field by its wire name."""
        return self.fields.get(name, default)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the API response dict shape."""
        result = super().to_dict()
        result["blockId"] = self.block_id
        result.update(self.fields)
        return result


BLOCK_TYPES: dict[str, type[ContentBlock]] = {
    cls.type: cls
    for cls in (HeaderBlock, ListBlock, EmbedBlock, ImageBlock, CodeBlock, TextBlock, CtaBlock, CustomBlock)
}


def content_block_from_dict(data: dict[str, Any]) -> ContentBlock:
    """Create the content block variant named by ``data["type"]``."""
    block_type = data.get("type")
    block_cls = BLOCK_TYPES.get(block_type)  # type: ignore[arg-type]
    if block_cls is None:
        raise DecodeError(f"Unknown content block type: {block_type!r}", details={"block": data})
    return block_cls.from_dict(data)


# =============================================================================
# Page Types
# =============================================================================


@dataclass(frozen=True)
class PageSummary:
    """A page as returned by the pages listing."""

    title: str
    slug: str
    subtitle: str = ""
    cover_image: Image | None = None
    categories: list[Category] = field(default_factory=list)
    created_at: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PageSummary":
        """Create from API response dict."""
        cover = data.get("coverImage")
        return cls(
            title=data["title"],
            slug=data["slug"],
            subtitle=data.get("subtitle") or "",
            cover_image=Image.from_dict(cover) if cover else None,
            categories=[Category.from_dict(c) for c in data.get("categories") or []],
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the API response dict shape."""
        return {
            "title": self.title,
            "subtitle": self.subtitle,
            "coverImage": self.cover_image.to_dict() if self.cover_image else None,
            "slug": self.slug,
            "categories": [c.to_dict() for c in self.categories],
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }


@dataclass(frozen=True)
class PageMeta:
    """SEO metadata of a page."""

    title: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PageMeta":
        """Create from API response dict."""
        return cls(title=data.get("title") or "", description=data.get("description") or "")

    def to_dict(self) -> dict[str, Any]:
        """Convert to the API response dict shape."""
        return {"title": self.title, "description": self.description}


@dataclass(frozen=True)
class PageDetail(PageSummary):
    """A single page with its metadata and content blocks."""

    meta: PageMeta = field(default_factory=PageMeta)
    content: list[ContentBlock] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PageDetail":
        """Create from API response dict."""
        summary = PageSummary.from_dict(data)
        return cls(
            title=summary.title,
            slug=summary.slug,
            subtitle=summary.subtitle,
            cover_image=summary.cover_image,
            categories=summary.categories,
            created_at=summary.created_at,
            updated_at=summary.updated_at,
            meta=PageMeta.from_dict(data.get("meta") or {}),
            content=[content_block_from_dict(b) for b in data.get("content") or []],
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the API response dict shape."""
        result = super().to_dict()
        result["meta"] = self.meta.to_dict()
        result["content"] = [b.to_dict() for b in self.content]
        return result


@dataclass(frozen=True)
class PagesResponse:
    """One slice of the pages listing."""

    items: list[PageSummary]
    total: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PagesResponse":
        """Create from API response dict."""
        items = [PageSummary.from_dict(p) for p in data.get("items") or []]
        return cls(items=items, total=data.get("total", len(items)))

    def to_dict(self) -> dict[str, Any]:
        """Convert to the API response dict shape."""
        return {"items": [p.to_dict() for p in self.items], "total": self.total}


@dataclass(frozen=True)
class CategoryFilter:
    slug: str


@dataclass(frozen=True)
class PageFilters:
    """Filters accepted by the pages listing. Only category is supported."""

    category: CategoryFilter

    @classmethod
    def by_category(cls, slug: str) -> "PageFilters":
        return cls(category=CategoryFilter(slug=slug))


# =============================================================================
# Menu Types
# =============================================================================


@dataclass(frozen=True)
class MenuItem:
    """A menu entry. Children nest to any depth."""

    title: str
    url: str = ""
    icon: str = ""
    subtitle: str | None = None
    styles: list[str] = field(default_factory=list)
    children: list["MenuItem"] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MenuItem":
        """Create from API response dict."""
        return cls(
            title=data["title"],
            url=data.get("url") or "",
            icon=data.get("icon") or "",
            subtitle=data.get("subtitle"),
            styles=list(data.get("styles") or []),
            children=[MenuItem.from_dict(c) for c in data.get("children") or []],
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the API response dict shape."""
        return {
            "title": self.title,
            "subtitle": self.subtitle,
            "icon": self.icon,
            "url": self.url,
            "styles": list(self.styles),
            "children": [c.to_dict() for c in self.children],
        }


@dataclass(frozen=True)
class Menu:
    """A navigation menu."""

    id: str
    name: str
    items: list[MenuItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Menu":
        """Create from API response dict."""
        return cls(
            id=data["id"],
            name=data.get("name") or "",
            items=[MenuItem.from_dict(i) for i in data.get("items") or []],
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the API response dict shape."""
        return {"id": self.id, "name": self.name, "items": [i.to_dict() for i in self.items]}


# =============================================================================
# Layout Types
# =============================================================================


@dataclass(frozen=True)
class LayoutItem:
    """
    A labelled value inside a layout.

    ``value`` is a bool when ``type`` is "boolean" and a string otherwise. The
    API guarantees this pairing; it is not checked here.
    """

    label: str
    uid: str
    type: str
    value: str | bool
    description: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LayoutItem":
        """Create from API response dict."""
        return cls(
            label=data.get("label") or "",
            uid=data["uid"],
            type=data["type"],
            value=data.get("value", False if data.get("type") == "boolean" else ""),
            description=data.get("description") or "",
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the API response dict shape."""
        return {
            "label": self.label,
            "description": self.description,
            "uid": self.uid,
            "type": self.type,
            "value": self.value,
        }


@dataclass(frozen=True)
class Layout:
    """A named set of reusable items, e.g. footer text."""

    id: str
    name: str
    items: list[LayoutItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Layout":
        """Create from API response dict."""
        return cls(
            id=data["id"],
            name=data.get("name") or "",
            items=[LayoutItem.from_dict(i) for i in data.get("items") or []],
        )

    def item(self, uid: str) -> LayoutItem | None:
        """Find an item by its uid."""
        for item in self.items:
            if item.uid == uid:
                return item
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the API response dict shape."""
        return {"id": self.id, "name": self.name, "items": [i.to_dict() for i in self.items]}
