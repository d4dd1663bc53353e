"""Text constructs (RFC 4287 section 3.1)."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .iri import IRI, optional_iri


class TextType(str, Enum):
    """Markup kind of a text construct."""

    TEXT = "text"
    HTML = "html"
    XHTML = "xhtml"


@dataclass(frozen=True)
class Text:
    """Human-readable text tagged with its markup kind.

    The value is not checked against its kind; rendering code decides how to
    treat HTML or XHTML markup.
    """

    value: str
    type: TextType = TextType.TEXT
    base: IRI | None = None
    lang: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "type", TextType(self.type))
        object.__setattr__(self, "base", optional_iri(self.base))

    @classmethod
    def coerce(cls, value: Any) -> "Text":
        """Accept a Text or a plain string."""
        if isinstance(value, Text):
            return value
        if isinstance(value, str):
            return cls(value)
        raise TypeError(f"Cannot convert {type(value).__name__} to Text")

    def __str__(self) -> str:
        return self.value


def optional_text(value: Any) -> Text | None:
    if value is None:
        return None
    return Text.coerce(value)
