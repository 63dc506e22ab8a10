"""Tests for the content helpers."""

import pytest

from justcms import JustCmsClient
from justcms.core.client import DecodeError
from justcms.core.types import Category, Image, ImageBlock, ImageVariant, MenuItem, PageSummary, TextBlock
from justcms.helpers import get_first_image, get_large_image_variant, has_category, is_block_has_style


def make_variant(width: int) -> ImageVariant:
    return ImageVariant(url=f"https://cdn/{width}.webp", width=width, height=width, filename=f"{width}.webp")


class TestIsBlockHasStyle:
    def test_case_insensitive_match(self):
        assert is_block_has_style(TextBlock(styles=["Highlight"]), "highlight")
        assert is_block_has_style(TextBlock(styles=["highlight"]), "HIGHLIGHT")

    def test_no_match(self):
        assert not is_block_has_style(TextBlock(styles=["Highlight"]), "other")
        assert not is_block_has_style(TextBlock(styles=[]), "highlight")

    def test_menu_items_have_styles_too(self):
        assert is_block_has_style(MenuItem(title="Docs", styles=["Bold"]), "bold")


class TestGetLargeImageVariant:
    def test_second_variant(self):
        small, large = make_variant(480), make_variant(1200)
        assert get_large_image_variant(Image(alt="", variants=[small, large])) is large

    def test_positional_even_with_more_variants(self):
        variants = [make_variant(320), make_variant(640), make_variant(1920)]
        assert get_large_image_variant(Image(alt="", variants=variants)).width == 640

    @pytest.mark.parametrize("count", [0, 1])
    def test_needs_two_variants(self, count):
        image = Image(alt="lonely", variants=[make_variant(480)] * count)
        with pytest.raises(DecodeError, match="at least 2"):
            get_large_image_variant(image)

    def test_precondition_failure_is_an_index_error(self):
        with pytest.raises(IndexError):
            get_large_image_variant(Image(alt="", variants=[make_variant(480)]))


class TestGetFirstImage:
    def test_first(self):
        first, second = Image(alt="a"), Image(alt="b")
        assert get_first_image(ImageBlock(images=[first, second])) is first

    def test_empty_block(self):
        with pytest.raises(DecodeError):
            get_first_image(ImageBlock(images=[]))


class TestHasCategory:
    @pytest.fixture
    def page(self) -> PageSummary:
        return PageSummary(
            title="Post",
            slug="post",
            categories=[Category(name="Blog", slug="blog"), Category(name="News", slug="news")],
        )

    def test_member(self, page):
        assert has_category(page, "news")

    def test_not_member(self, page):
        assert not has_category(page, "docs")

    def test_case_sensitive(self, page):
        assert not has_category(page, "Blog")


def test_helpers_available_on_client():
    assert JustCmsClient.has_category is has_category
    assert JustCmsClient.is_block_has_style is is_block_has_style
    assert JustCmsClient.get_large_image_variant is get_large_image_variant
    assert JustCmsClient.get_first_image is get_first_image
