"""Atom feed documents (RFC 4287 section 4.1.1)."""

from dataclasses import dataclass, field
from datetime import datetime

from .category import Category, categories_tuple
from .entry import Entry
from .errors import FeedIncomplete
from .generator import Generator
from .iri import IRI, optional_iri
from .link import Link, Relation, links_tuple
from .person import Author, Contributor, authors_tuple, contributors_tuple
from .text import Text, optional_text
from .timestamps import coerce_timestamp


@dataclass(frozen=True)
class Feed:
    """A feed document and its entries.

    Every entry must be attributed: either the feed lists authors (which
    apply to entries without their own) or each entry lists its own.
    A feed without entries needs no authors.

    Raises:
        FeedIncomplete: When the authorship rule is violated
    """

    id: IRI
    title: Text
    updated: datetime
    authors: tuple[Author, ...] = field(default_factory=tuple)
    entries: tuple[Entry, ...] = field(default_factory=tuple)
    links: tuple[Link, ...] = field(default_factory=tuple)
    categories: tuple[Category, ...] = field(default_factory=tuple)
    contributors: tuple[Contributor, ...] = field(default_factory=tuple)
    generator: Generator | None = None
    icon: IRI | None = None
    logo: IRI | None = None
    rights: Text | None = None
    subtitle: Text | None = None
    base: IRI | None = None
    lang: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "id", IRI.coerce(self.id))
        object.__setattr__(self, "title", Text.coerce(self.title))
        object.__setattr__(self, "updated", coerce_timestamp(self.updated))
        object.__setattr__(self, "authors", authors_tuple(self.authors))
        object.__setattr__(self, "entries", tuple(self.entries))
        object.__setattr__(self, "links", links_tuple(self.links))
        object.__setattr__(self, "categories", categories_tuple(self.categories))
        object.__setattr__(self, "contributors", contributors_tuple(self.contributors))
        object.__setattr__(self, "generator", Generator.coerce(self.generator))
        object.__setattr__(self, "icon", optional_iri(self.icon))
        object.__setattr__(self, "logo", optional_iri(self.logo))
        object.__setattr__(self, "rights", optional_text(self.rights))
        object.__setattr__(self, "subtitle", optional_text(self.subtitle))
        object.__setattr__(self, "base", optional_iri(self.base))
        for entry in self.entries:
            if not isinstance(entry, Entry):
                raise TypeError(f"Expected Entry, got {type(entry).__name__}")
        self._validate()

    def _validate(self) -> None:
        feed_has_authors = bool(self.authors)
        all_entries_have_authors = all(entry.authors for entry in self.entries)

        if not (feed_has_authors or not self.entries or all_entries_have_authors):
            raise FeedIncomplete()

    def authors_for(self, entry: Entry) -> tuple[Author, ...]:
        """Authors that apply to ``entry``.

        The entry's own authors win, then those of its source, then the
        feed's authors.
        """
        if entry.authors:
            return entry.authors
        if entry.source is not None and entry.source.authors:
            return entry.source.authors
        return self.authors

    @property
    def self_link(self) -> Link | None:
        for link in self.links:
            if link.relation == Relation.SELF:
                return link
        return None
