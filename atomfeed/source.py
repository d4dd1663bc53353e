"""Source constructs (RFC 4287 section 4.2.11)."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

from .category import Category, categories_tuple
from .generator import Generator
from .iri import IRI, optional_iri
from .link import Link, links_tuple
from .person import Author, Contributor, authors_tuple, contributors_tuple
from .text import Text, optional_text
from .timestamps import optional_timestamp

if TYPE_CHECKING:
    from .feed import Feed


@dataclass(frozen=True)
class Source:
    """Metadata of the feed an entry was copied from.

    Every field is optional so that a partial snapshot can be kept.
    """

    authors: tuple[Author, ...] = field(default_factory=tuple)
    categories: tuple[Category, ...] = field(default_factory=tuple)
    contributors: tuple[Contributor, ...] = field(default_factory=tuple)
    generator: Generator | None = None
    icon: IRI | None = None
    id: IRI | None = None
    links: tuple[Link, ...] = field(default_factory=tuple)
    logo: IRI | None = None
    rights: Text | None = None
    subtitle: Text | None = None
    title: Text | None = None
    updated: datetime | None = None
    base: IRI | None = None
    lang: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "authors", authors_tuple(self.authors))
        object.__setattr__(self, "categories", categories_tuple(self.categories))
        object.__setattr__(self, "contributors", contributors_tuple(self.contributors))
        object.__setattr__(self, "generator", Generator.coerce(self.generator))
        object.__setattr__(self, "icon", optional_iri(self.icon))
        object.__setattr__(self, "id", optional_iri(self.id))
        object.__setattr__(self, "links", links_tuple(self.links))
        object.__setattr__(self, "logo", optional_iri(self.logo))
        object.__setattr__(self, "rights", optional_text(self.rights))
        object.__setattr__(self, "subtitle", optional_text(self.subtitle))
        object.__setattr__(self, "title", optional_text(self.title))
        object.__setattr__(self, "updated", optional_timestamp(self.updated))
        object.__setattr__(self, "base", optional_iri(self.base))

    @classmethod
    def from_feed(cls, feed: "Feed") -> "Source":
        """Snapshot the feed-level metadata of ``feed`` (entries excluded)."""
        return cls(
            authors=feed.authors,
            categories=feed.categories,
            contributors=feed.contributors,
            generator=feed.generator,
            icon=feed.icon,
            id=feed.id,
            links=feed.links,
            logo=feed.logo,
            rights=feed.rights,
            subtitle=feed.subtitle,
            title=feed.title,
            updated=feed.updated,
            base=feed.base,
            lang=feed.lang,
        )
