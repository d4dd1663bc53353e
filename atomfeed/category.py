"""Category constructs (RFC 4287 section 4.2.2)."""

from dataclasses import dataclass
from typing import Any

from .iri import IRI, optional_iri


@dataclass(frozen=True)
class Category:
    term: str
    scheme: IRI | None = None
    label: str | None = None
    base: IRI | None = None
    lang: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "scheme", optional_iri(self.scheme))
        object.__setattr__(self, "base", optional_iri(self.base))

    @classmethod
    def coerce(cls, value: Any) -> "Category":
        if isinstance(value, Category):
            return value
        if isinstance(value, str):
            return cls(term=value)
        raise TypeError(f"Cannot convert {type(value).__name__} to Category")


def categories_tuple(values: Any) -> tuple[Category, ...]:
    return tuple(Category.coerce(value) for value in values)
