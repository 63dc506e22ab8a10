"""
JustCMS - Typed Python client for the JustCMS public API.

Layers:
- core: Types and HTTP client
- sdk: JustCmsClient with typed accessors
- helpers: Pure functions for fetched content
- cli: Command-line interface
"""

from justcms.core import (
    APIError,
    ConfigurationError,
    DecodeError,
    JustCmsError,
    MissingElementError,
    PageFilters,
)
from justcms.helpers import get_first_image, get_large_image_variant, has_category, is_block_has_style
from justcms.sdk import JustCmsClient, create_client

__version__ = "0.1.0"
__all__ = [
    "APIError",
    "ConfigurationError",
    "DecodeError",
    "JustCmsClient",
    "JustCmsError",
    "MissingElementError",
    "PageFilters",
    "create_client",
    "get_first_image",
    "get_large_image_variant",
    "has_category",
    "is_block_has_style",
]
