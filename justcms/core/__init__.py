"""
Core layer - Raw types and HTTP client.

This layer provides:
- Typed dataclasses for JustCMS API responses
- Low-level HTTP client with auth and error handling
"""

from justcms.core.client import (
    APIClient,
    APIError,
    ConfigurationError,
    DecodeError,
    JustCmsError,
    MissingElementError,
    resolve_credentials,
)
from justcms.core.types import (
    Category,
    CategoryFilter,
    CodeBlock,
    ContentBlock,
    CtaBlock,
    CustomBlock,
    EmbedBlock,
    HeaderBlock,
    Image,
    ImageBlock,
    ImageVariant,
    Layout,
    LayoutItem,
    ListBlock,
    ListOption,
    Menu,
    MenuItem,
    PageDetail,
    PageFilters,
    PageMeta,
    PagesResponse,
    PageSummary,
    TextBlock,
    content_block_from_dict,
)

__all__ = [
    "APIClient",
    "APIError",
    "Category",
    "CategoryFilter",
    "CodeBlock",
    "ConfigurationError",
    "ContentBlock",
    "CtaBlock",
    "CustomBlock",
    "DecodeError",
    "EmbedBlock",
    "HeaderBlock",
    "Image",
    "ImageBlock",
    "ImageVariant",
    "JustCmsError",
    "Layout",
    "LayoutItem",
    "ListBlock",
    "ListOption",
    "Menu",
    "MenuItem",
    "MissingElementError",
    "PageDetail",
    "PageFilters",
    "PageMeta",
    "PageSummary",
    "PagesResponse",
    "TextBlock",
    "content_block_from_dict",
    "resolve_credentials",
]
