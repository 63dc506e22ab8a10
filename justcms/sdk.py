"""
JustCMS SDK - High-level client with typed results.

Built on top of the core APIClient. Every method issues exactly one GET.
"""

from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from justcms import helpers
from justcms.core.client import APIClient, DecodeError
from justcms.core.types import Category, Layout, Menu, PageDetail, PageFilters, PagesResponse

T = TypeVar("T")

# Separator for several layout ids in one path segment. Ids are not escaped.
LAYOUT_ID_SEPARATOR = ";"


def _parse(parser: Callable[[Any], T], data: Any, what: str) -> T:
    """Run a from_dict parser, turning structural mismatches into DecodeError."""
    try:
        return parser(data)
    except DecodeError:
        raise
    except (KeyError, TypeError, AttributeError) as e:
        raise DecodeError(f"Unexpected {what} response: {e!r}") from e


def _parse_list(parser: Callable[[Any], T], data: Any, what: str) -> list[T]:
    if not isinstance(data, list):
        raise DecodeError(f"Unexpected {what} response: expected a list, got {type(data).__name__}")
    return [_parse(parser, item, what) for item in data]


class JustCmsClient:
    """
    High-level JustCMS API client.

    Example:
        client = create_client()

        categories = client.get_categories()
        pages = client.pages.list(PageFilters.by_category("blog"), start=0, offset=10)
        page = client.pages.get("about")
        footer = client.layouts.get("footer")

    """

    def __init__(
        self,
        token: str | None = None,
        project_id: str | None = None,
        env: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ):
        """
        Initialize the JustCMS client.

        Args:
            token: JustCMS API token (or JUSTCMS_TOKEN in env)
            project_id: JustCMS project ID (or JUSTCMS_PROJECT in env)
            env: Fallback configuration source, defaults to os.environ
            timeout: Request timeout in seconds, None for the socket default

        Raises:
            ConfigurationError: If the token or project ID is missing

        """
        self._client = APIClient(token=token, project_id=project_id, env=env, timeout=timeout)

        # Sub-clients for different resources
        self.categories = CategoryOperations(self._client)
        self.pages = PageOperations(self._client)
        self.menus = MenuOperations(self._client)
        self.layouts = LayoutOperations(self._client)

    @property
    def project_id(self) -> str:
        return self._client.project_id

    # =========================================================================
    # Flat accessors
    # =========================================================================

    def get_categories(self) -> list[Category]:
        return self.categories.list()

    def get_pages(
        self,
        filters: PageFilters | None = None,
        start: int | None = None,
        offset: int | None = None,
    ) -> PagesResponse:
        return self.pages.list(filters, start=start, offset=offset)

    def get_page_by_slug(self, slug: str, version: str | None = None) -> PageDetail:
        return self.pages.get(slug, version=version)

    def get_menu_by_id(self, menu_id: str) -> Menu:
        return self.menus.get(menu_id)

    def get_layout_by_id(self, layout_id: str) -> Layout:
        return self.layouts.get(layout_id)

    def get_layouts_by_ids(self, layout_ids: list[str]) -> list[Layout]:
        return self.layouts.get_many(layout_ids)

    # Content helpers, kept on the client for convenience
    is_block_has_style = staticmethod(helpers.is_block_has_style)
    get_large_image_variant = staticmethod(helpers.get_large_image_variant)
    get_first_image = staticmethod(helpers.get_first_image)
    has_category = staticmethod(helpers.has_category)


def create_client(
    token: str | None = None,
    project_id: str | None = None,
    env: Mapping[str, str] | None = None,
    timeout: float | None = None,
) -> JustCmsClient:
    """
    Create a JustCMS client.

    Raises:
        ConfigurationError: If the token or project ID is missing

    """
    return JustCmsClient(token=token, project_id=project_id, env=env, timeout=timeout)


# =============================================================================
# Category Operations
# =============================================================================


class CategoryOperations:
    """Operations for categories."""

    def __init__(self, client: APIClient):
        self._client = client

    def list(self) -> list[Category]:
        """
        List all categories of the project.

        Returns:
            Categories, unwrapped from the ``{"categories": [...]}`` envelope

        """
        result = self._client.get()
        if not isinstance(result, dict) or "categories" not in result:
            raise DecodeError("Unexpected categories response: missing 'categories'")
        return _parse_list(Category.from_dict, result["categories"], "categories")


# =============================================================================
# Page Operations
# =============================================================================


class PageOperations:
    """Operations for pages."""

    def __init__(self, client: APIClient):
        self._client = client

    def list(
        self,
        filters: PageFilters | None = None,
        start: int | None = None,
        offset: int | None = None,
    ) -> PagesResponse:
        """
        List pages.

        Args:
            filters: Optional category filter
            start: Index of the first page to return
            offset: Number of pages to return

        Returns:
            PagesResponse with the items and the total count

        """
        params: dict[str, Any] = {}
        if filters is not None:
            params["filter.category.slug"] = filters.category.slug
        if start is not None:
            params["start"] = start
        if offset is not None:
            params["offset"] = offset

        result = self._client.get("pages", params)
        return _parse(PagesResponse.from_dict, result, "pages")

    def get(self, slug: str, version: str | None = None) -> PageDetail:
        """
        Get a page by slug.

        Args:
            slug: The page slug
            version: Optional version, e.g. "draft"

        Returns:
            PageDetail with metadata and content blocks

        """
        params: dict[str, Any] = {}
        if version:
            params["v"] = version

        result = self._client.get(f"pages/{slug}", params)
        return _parse(PageDetail.from_dict, result, "page")


# =============================================================================
# Menu Operations
# =============================================================================


class MenuOperations:
    """Operations for menus."""

    def __init__(self, client: APIClient):
        self._client = client

    def get(self, menu_id: str) -> Menu:
        """Get a menu by ID."""
        result = self._client.get(f"menus/{menu_id}")
        return _parse(Menu.from_dict, result, "menu")


# =============================================================================
# Layout Operations
# =============================================================================


class LayoutOperations:
    """Operations for layouts."""

    def __init__(self, client: APIClient):
        self._client = client

    def get(self, layout_id: str) -> Layout:
        """Get a layout by ID."""
        result = self._client.get(f"layouts/{layout_id}")
        return _parse(Layout.from_dict, result, "layout")

    def get_many(self, layout_ids: list[str]) -> list[Layout]:
        """
        Get several layouts in one request.

        Ids are joined with ";" into a single path segment and are not escaped,
        so an id containing ";" is read by the API as two ids.

        Returns:
            Layouts in the order the API returns them

        """
        result = self._client.get(f"layouts/{LAYOUT_ID_SEPARATOR.join(layout_ids)}")
        return _parse_list(Layout.from_dict, result, "layouts")
