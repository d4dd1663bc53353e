"""Atom entries (RFC 4287 section 4.1.2)."""

from dataclasses import dataclass, field
from datetime import datetime

from .category import Category, categories_tuple
from .content import Content
from .errors import EntryIncomplete
from .iri import IRI, optional_iri
from .link import Link, links_tuple
from .person import Author, Contributor, authors_tuple, contributors_tuple
from .source import Source
from .text import Text, optional_text
from .timestamps import coerce_timestamp, optional_timestamp


@dataclass(frozen=True)
class Entry:
    """A single entry of a feed.

    Construction validates the entry:

    - it must have content or at least one alternate link, so that a reader
      can get to what the entry describes;
    - content given by ``src`` or carried as opaque bytes needs a summary,
      since the content itself may not be displayable.

    Raises:
        EntryIncomplete: When either rule is violated
    """

    id: IRI
    title: Text
    updated: datetime
    authors: tuple[Author, ...] = field(default_factory=tuple)
    content: Content | None = None
    links: tuple[Link, ...] = field(default_factory=tuple)
    categories: tuple[Category, ...] = field(default_factory=tuple)
    contributors: tuple[Contributor, ...] = field(default_factory=tuple)
    published: datetime | None = None
    rights: Text | None = None
    source: Source | None = None
    summary: Text | None = None
    base: IRI | None = None
    lang: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "id", IRI.coerce(self.id))
        object.__setattr__(self, "title", Text.coerce(self.title))
        object.__setattr__(self, "updated", coerce_timestamp(self.updated))
        object.__setattr__(self, "authors", authors_tuple(self.authors))
        object.__setattr__(self, "links", links_tuple(self.links))
        object.__setattr__(self, "categories", categories_tuple(self.categories))
        object.__setattr__(self, "contributors", contributors_tuple(self.contributors))
        object.__setattr__(self, "published", optional_timestamp(self.published))
        object.__setattr__(self, "rights", optional_text(self.rights))
        object.__setattr__(self, "summary", optional_text(self.summary))
        object.__setattr__(self, "base", optional_iri(self.base))
        if self.content is not None and not isinstance(self.content, Content):
            raise TypeError(f"Expected Content, got {type(self.content).__name__}")
        if self.source is not None and not isinstance(self.source, Source):
            raise TypeError(f"Expected Source, got {type(self.source).__name__}")
        self._validate()

    def _validate(self) -> None:
        has_content = self.content is not None
        has_alternate_link = any(link.is_alternate for link in self.links)

        if not (has_content or has_alternate_link):
            raise EntryIncomplete(EntryIncomplete.MISSING_CONTENT_OR_ALTERNATE)

        if has_content:
            summary_required = (
                self.content.src is not None
                or self.content.requires_encoding_as_opaque_bytes
            )
            if summary_required and self.summary is None:
                raise EntryIncomplete(EntryIncomplete.MISSING_SUMMARY)

    @property
    def alternate_links(self) -> tuple[Link, ...]:
        return tuple(link for link in self.links if link.is_alternate)
