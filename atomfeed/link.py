"""Link constructs (RFC 4287 section 4.2.7)."""

from dataclasses import dataclass
from typing import Any, ClassVar

from .iri import IRI, optional_iri

IANA_RELATION_PREFIX = "http://www.iana.org/assignments/relation/"


@dataclass(frozen=True)
class Relation:
    """A link relation type.

    The set is open: any string is a relation, and the standard names are
    provided as constants. Equality and hashing use the normalized string,
    so ``Relation("alternate") == Relation.ALTERNATE``.
    """

    value: str

    ALTERNATE: ClassVar["Relation"]
    RELATED: ClassVar["Relation"]
    SELF: ClassVar["Relation"]
    ENCLOSURE: ClassVar["Relation"]
    VIA: ClassVar["Relation"]
    REPLIES: ClassVar["Relation"]

    def __post_init__(self):
        value = self.value.strip()
        # The IANA registry IRI of a registered relation is the same relation.
        if value.startswith(IANA_RELATION_PREFIX) and len(value) > len(IANA_RELATION_PREFIX):
            value = value[len(IANA_RELATION_PREFIX):]
        object.__setattr__(self, "value", value)

    @classmethod
    def coerce(cls, value: Any) -> "Relation | None":
        if value is None or isinstance(value, Relation):
            return value
        if isinstance(value, str):
            return cls(value)
        raise TypeError(f"Cannot convert {type(value).__name__} to Relation")

    def __str__(self) -> str:
        return self.value


Relation.ALTERNATE = Relation("alternate")
Relation.RELATED = Relation("related")
Relation.SELF = Relation("self")
Relation.ENCLOSURE = Relation("enclosure")
Relation.VIA = Relation("via")
# Atom Threading Extensions (RFC 4685)
Relation.REPLIES = Relation("replies")


@dataclass(frozen=True)
class Link:
    """A reference from a feed or entry to a Web resource."""

    href: IRI
    relation: Relation | None = None
    media_type: str | None = None
    hreflang: str | None = None
    title: str | None = None
    length: int | None = None
    base: IRI | None = None
    lang: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "href", IRI.coerce(self.href))
        object.__setattr__(self, "relation", Relation.coerce(self.relation))
        object.__setattr__(self, "base", optional_iri(self.base))

    @property
    def is_alternate(self) -> bool:
        """True when the link acts as an alternate link.

        A link without a relation is interpreted as ``alternate``.
        """
        return self.relation is None or self.relation == Relation.ALTERNATE

    @classmethod
    def coerce(cls, value: Any) -> "Link":
        """Accept a Link, or an IRI-like value for a link with no relation."""
        if isinstance(value, Link):
            return value
        return cls(href=IRI.coerce(value))


def links_tuple(values: Any) -> tuple[Link, ...]:
    return tuple(Link.coerce(value) for value in values)
