"""Unit tests for entry content."""

import pytest

from atomfeed.content import Content, ContentKind
from atomfeed.errors import ContentInvalid
from atomfeed.iri import IRI


class TestContentKindUnit:
    """Unit tests for ContentKind."""

    def test_text_kinds(self):
        for kind in (ContentKind.TEXT, ContentKind.HTML, ContentKind.XHTML):
            assert not kind.is_media
            assert kind.media_type is None

    def test_media_kind(self):
        kind = ContentKind.media("image/png")

        assert kind.is_media
        assert kind.media_type == "image/png"
        assert str(kind) == "image/png"

    def test_named_kinds_compare_by_string(self):
        assert ContentKind("html") == ContentKind.HTML
        assert ContentKind.media("text") == ContentKind.TEXT
        assert ContentKind(" HTML ") == ContentKind.HTML

    def test_media_types_are_case_insensitive(self):
        assert ContentKind.media("Image/PNG") == ContentKind.media("image/png")

    @pytest.mark.parametrize("value", ["", " ", "\t\n"])
    def test_empty_kind_is_rejected(self, value):
        with pytest.raises(ContentInvalid):
            ContentKind(value)
        with pytest.raises(ContentInvalid):
            Content.inline("abc", kind=value)


class TestContentUnit:
    """Unit tests for Content."""

    def test_inline_content(self):
        content = Content.inline("Hello, world!")

        assert content.value == "Hello, world!"
        assert content.src is None
        assert content.kind == ContentKind.TEXT
        assert content.is_inline
        assert not content.is_out_of_line

    def test_out_of_line_content(self):
        content = Content.out_of_line("https://example.com/image.png", kind=ContentKind.media("image/png"))

        assert content.value is None
        assert content.src == IRI.parse("https://example.com/image.png")
        assert content.is_out_of_line

    def test_both_value_and_src_rejected(self):
        with pytest.raises(ContentInvalid):
            Content(value="inline", src="https://example.com/")

    def test_neither_value_nor_src_rejected(self):
        with pytest.raises(ContentInvalid):
            Content(kind=ContentKind.HTML)

    def test_from_bytes_base64_encodes(self):
        content = Content.from_bytes(b"\x89PNG\r\n", "image/png")

        assert content.kind == ContentKind.media("image/png")
        assert content.value == "iVBORw0K"
        assert content.decoded_bytes() == b"\x89PNG\r\n"

    def test_decoded_bytes_requires_opaque_content(self):
        with pytest.raises(ValueError):
            Content.inline("<p>hi</p>", kind=ContentKind.HTML).decoded_bytes()
        with pytest.raises(ValueError):
            Content.out_of_line("https://example.com/a.png", kind="image/png").decoded_bytes()

    @pytest.mark.parametrize(
        "kind",
        ["text", "html", "xhtml", "text/plain", "text/html", "application/xml",
         "text/xml", "application/atom+xml", "image/svg+xml"],
    )
    def test_character_kinds_do_not_need_encoding(self, kind):
        assert not Content.inline("x", kind=kind).requires_encoding_as_opaque_bytes

    @pytest.mark.parametrize(
        "kind",
        ["image/png", "application/pdf", "audio/mpeg", "application/json",
         "application/octet-stream", "application/xml-dtd"],
    )
    def test_binary_kinds_need_encoding(self, kind):
        assert Content.inline("eA==", kind=kind).requires_encoding_as_opaque_bytes
