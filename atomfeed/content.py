"""Entry content (RFC 4287 section 4.1.3)."""

import base64
from dataclasses import dataclass
from typing import Any, ClassVar

from .errors import ContentInvalid
from .iri import IRI, optional_iri

_TEXT_KINDS = ("text", "html", "xhtml")


@dataclass(frozen=True)
class ContentKind:
    """Content type: ``text``, ``html``, ``xhtml`` or a MIME media type.

    Values are compared by their stripped, lower-cased string, so
    ``ContentKind("HTML") == ContentKind.HTML``.
    """

    value: str

    TEXT: ClassVar["ContentKind"]
    HTML: ClassVar["ContentKind"]
    XHTML: ClassVar["ContentKind"]

    def __post_init__(self):
        value = self.value.strip().lower()
        if not value:
            raise ContentInvalid(f"Content type must not be empty: {self.value!r}")
        object.__setattr__(self, "value", value)

    @classmethod
    def media(cls, media_type: str) -> "ContentKind":
        return cls(media_type)

    @classmethod
    def coerce(cls, value: Any) -> "ContentKind":
        if isinstance(value, ContentKind):
            return value
        if isinstance(value, str):
            return cls(value)
        raise TypeError(f"Cannot convert {type(value).__name__} to ContentKind")

    @property
    def is_media(self) -> bool:
        return self.value not in _TEXT_KINDS

    @property
    def media_type(self) -> str | None:
        return self.value if self.is_media else None

    def __str__(self) -> str:
        return self.value


ContentKind.TEXT = ContentKind("text")
ContentKind.HTML = ContentKind("html")
ContentKind.XHTML = ContentKind("xhtml")


@dataclass(frozen=True)
class Content:
    """Inline or out-of-line content of an entry.

    Inline content carries ``value``; out-of-line content carries ``src``.
    Use ``Content.inline``, ``Content.out_of_line`` or ``Content.from_bytes``.
    """

    kind: ContentKind = ContentKind.TEXT
    value: str | None = None
    src: IRI | None = None
    base: IRI | None = None
    lang: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "kind", ContentKind.coerce(self.kind))
        object.__setattr__(self, "src", optional_iri(self.src))
        object.__setattr__(self, "base", optional_iri(self.base))
        if (self.value is None) == (self.src is None):
            raise ContentInvalid("Content requires exactly one of an inline value or a src")

    @classmethod
    def inline(
        cls, value: str, kind: Any = ContentKind.TEXT, base: Any = None, lang: str | None = None
    ) -> "Content":
        return cls(kind=kind, value=value, base=base, lang=lang)

    @classmethod
    def out_of_line(
        cls, src: Any, kind: Any = ContentKind.TEXT, base: Any = None, lang: str | None = None
    ) -> "Content":
        return cls(kind=kind, src=src, base=base, lang=lang)

    @classmethod
    def from_bytes(
        cls, data: bytes, media_type: str, base: Any = None, lang: str | None = None
    ) -> "Content":
        """Build inline content by base64-encoding binary ``data``."""
        encoded = base64.b64encode(data).decode("ascii")
        return cls(kind=ContentKind.media(media_type), value=encoded, base=base, lang=lang)

    @property
    def is_inline(self) -> bool:
        return self.src is None

    @property
    def is_out_of_line(self) -> bool:
        return self.src is not None

    @property
    def requires_encoding_as_opaque_bytes(self) -> bool:
        """True for media types that must be carried base64-encoded.

        XML media types (``*/xml``, ``*+xml``) and ``text/*`` types are
        carried as character data; every other media type is opaque bytes.
        """
        media_type = self.kind.media_type
        if media_type is None:
            return False
        if media_type.endswith("/xml") or media_type.endswith("+xml"):
            return False
        return not media_type.startswith("text/")

    def decoded_bytes(self) -> bytes:
        """Return the binary payload of inline base64-encoded content.

        Raises:
            ValueError: If the content is out-of-line or not opaque bytes
        """
        if self.value is None or not self.requires_encoding_as_opaque_bytes:
            raise ValueError("Content does not carry base64-encoded bytes")
        return base64.b64decode(self.value, validate=True)
