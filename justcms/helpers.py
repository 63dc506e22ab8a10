"""
Helpers for working with fetched JustCMS content.

All functions are pure; none of them talk to the API.
"""

from justcms.core.client import MissingElementError
from justcms.core.types import ContentBlock, Image, ImageBlock, ImageVariant, MenuItem, PageSummary

# Position of the "large" rendition in Image.variants.
LARGE_VARIANT_INDEX = 1


def is_block_has_style(block: ContentBlock | MenuItem, style: str) -> bool:
    """Check if a block (or anything else with ``styles``) has a style, ignoring case."""
    wanted = style.lower()
    return any(s.lower() == wanted for s in block.styles)


def get_large_image_variant(image: Image) -> ImageVariant:
    """
    Get the large rendition of an image.

    The API does not label variants; the second one is the large rendition.

    Raises:
        MissingElementError: If the image has fewer than two variants

    """
    if len(image.variants) <= LARGE_VARIANT_INDEX:
        raise MissingElementError(
            f"Image has {len(image.variants)} variant(s), the large variant needs at least {LARGE_VARIANT_INDEX + 1}",
            details={"alt": image.alt},
        )
    return image.variants[LARGE_VARIANT_INDEX]


def get_first_image(block: ImageBlock) -> Image:
    """
    Get the first image of an image block.

    Raises:
        MissingElementError: If the block has no images

    """
    if not block.images:
        raise MissingElementError("Image block has no images")
    return block.images[0]


def has_category(page: PageSummary, category_slug: str) -> bool:
    """Check if a page is in a category. Slugs are compared exactly."""
    return any(category.slug == category_slug for category in page.categories)
