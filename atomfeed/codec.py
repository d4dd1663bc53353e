"""JSON serialization of feeds and entries.

Field names are stable across releases. Optional fields that are absent
and collections that are empty are left out of the encoded document.
Decoding rebuilds every value through its validating constructor, so a
decoded feed satisfies the same rules as one built in code.
"""

import json
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from .addresses import EmailAddress
from .category import Category
from .config import CodecConfig
from .content import Content, ContentKind
from .entry import Entry
from .errors import DocumentInvalid
from .feed import Feed
from .generator import Generator
from .iri import IRI
from .link import Link, Relation
from .logging_config import create_execution_logger
from .person import Author, Contributor, Person
from .source import Source
from .text import Text, TextType
from .timestamps import format_timestamp, parse_timestamp


def _compact(data: dict[str, Any]) -> dict[str, Any]:
    """Drop absent optionals and empty collections."""
    return {
        key: value
        for key, value in data.items()
        if value is not None and value != []
    }


def _iri(value: IRI | None) -> str | None:
    return value.value if value is not None else None


def _timestamp(value: datetime | None) -> str | None:
    return format_timestamp(value) if value is not None else None


def encode_text(text: Text | None) -> dict[str, Any] | None:
    if text is None:
        return None
    return _compact(
        {
            "type": text.type.value,
            "value": text.value,
            "base": _iri(text.base),
            "lang": text.lang,
        }
    )


def encode_person(person: Person) -> dict[str, Any]:
    return _compact(
        {
            "name": person.name,
            "uri": _iri(person.uri),
            "email": person.email.value if person.email is not None else None,
            "base": _iri(person.base),
            "lang": person.lang,
        }
    )


def encode_link(link: Link) -> dict[str, Any]:
    return _compact(
        {
            "href": link.href.value,
            "rel": link.relation.value if link.relation is not None else None,
            "type": link.media_type,
            "hreflang": link.hreflang,
            "title": link.title,
            "length": link.length,
            "base": _iri(link.base),
            "lang": link.lang,
        }
    )


def encode_category(category: Category) -> dict[str, Any]:
    return _compact(
        {
            "term": category.term,
            "scheme": _iri(category.scheme),
            "label": category.label,
            "base": _iri(category.base),
            "lang": category.lang,
        }
    )


def encode_generator(generator: Generator | None) -> dict[str, Any] | None:
    if generator is None:
        return None
    return _compact(
        {
            "name": generator.name,
            "uri": _iri(generator.uri),
            "version": generator.version,
            "base": _iri(generator.base),
            "lang": generator.lang,
        }
    )


def encode_content(content: Content | None) -> dict[str, Any] | None:
    if content is None:
        return None
    return _compact(
        {
            "type": content.kind.value,
            "value": content.value,
            "src": _iri(content.src),
            "base": _iri(content.base),
            "lang": content.lang,
        }
    )


def encode_source(source: Source | None) -> dict[str, Any] | None:
    if source is None:
        return None
    return _compact(
        {
            "authors": [encode_person(author.person) for author in source.authors],
            "categories": [encode_category(c) for c in source.categories],
            "contributors": [encode_person(c.person) for c in source.contributors],
            "generator": encode_generator(source.generator),
            "icon": _iri(source.icon),
            "id": _iri(source.id),
            "links": [encode_link(link) for link in source.links],
            "logo": _iri(source.logo),
            "rights": encode_text(source.rights),
            "subtitle": encode_text(source.subtitle),
            "title": encode_text(source.title),
            "updated": _timestamp(source.updated),
            "base": _iri(source.base),
            "lang": source.lang,
        }
    )


def encode_entry(entry: Entry) -> dict[str, Any]:
    return _compact(
        {
            "id": entry.id.value,
            "title": encode_text(entry.title),
            "updated": format_timestamp(entry.updated),
            "authors": [encode_person(author.person) for author in entry.authors],
            "content": encode_content(entry.content),
            "links": [encode_link(link) for link in entry.links],
            "categories": [encode_category(c) for c in entry.categories],
            "contributors": [encode_person(c.person) for c in entry.contributors],
            "published": _timestamp(entry.published),
            "rights": encode_text(entry.rights),
            "source": encode_source(entry.source),
            "summary": encode_text(entry.summary),
            "base": _iri(entry.base),
            "lang": entry.lang,
        }
    )


def encode_feed(feed: Feed) -> dict[str, Any]:
    return _compact(
        {
            "id": feed.id.value,
            "title": encode_text(feed.title),
            "updated": format_timestamp(feed.updated),
            "authors": [encode_person(author.person) for author in feed.authors],
            "entries": [encode_entry(entry) for entry in feed.entries],
            "links": [encode_link(link) for link in feed.links],
            "categories": [encode_category(c) for c in feed.categories],
            "contributors": [encode_person(c.person) for c in feed.contributors],
            "generator": encode_generator(feed.generator),
            "icon": _iri(feed.icon),
            "logo": _iri(feed.logo),
            "rights": encode_text(feed.rights),
            "subtitle": encode_text(feed.subtitle),
            "base": _iri(feed.base),
            "lang": feed.lang,
        }
    )


class _Decoder:
    """Rebuilds model values from decoded JSON data."""

    def __init__(self, trusted: bool = False):
        self.trusted = trusted

    # Shape helpers

    def _mapping(self, value: Any, where: str) -> Mapping[str, Any]:
        if not isinstance(value, Mapping):
            raise DocumentInvalid(f"{where}: expected an object, got {type(value).__name__}")
        return value

    def _list(self, data: Mapping[str, Any], key: str, where: str) -> list[Any]:
        value = data.get(key)
        if value is None:
            return []
        if not isinstance(value, list):
            raise DocumentInvalid(f"{where}.{key}: expected an array")
        return value

    def _string(self, data: Mapping[str, Any], key: str, where: str, required: bool = False) -> str | None:
        value = data.get(key)
        if value is None:
            if required:
                raise DocumentInvalid(f"{where}: missing required field '{key}'")
            return None
        if not isinstance(value, str):
            raise DocumentInvalid(f"{where}.{key}: expected a string")
        return value

    def _required(self, data: Mapping[str, Any], key: str, where: str) -> Any:
        if data.get(key) is None:
            raise DocumentInvalid(f"{where}: missing required field '{key}'")
        return data[key]

    # Collaborator values

    def iri(self, data: Mapping[str, Any], key: str, where: str, required: bool = False) -> IRI | None:
        value = self._string(data, key, where, required)
        if value is None:
            return None
        if self.trusted:
            return IRI._from_trusted(value)
        return IRI.parse(value)

    def email(self, data: Mapping[str, Any], where: str) -> EmailAddress | None:
        value = self._string(data, "email", where)
        if value is None:
            return None
        if self.trusted:
            return EmailAddress._from_trusted(value)
        return EmailAddress.parse(value)

    def timestamp(self, data: Mapping[str, Any], key: str, where: str, required: bool = False) -> datetime | None:
        value = self._string(data, key, where, required)
        if value is None:
            return None
        return parse_timestamp(value)

    # Constructs

    def text(self, value: Any, where: str) -> Text | None:
        if value is None:
            return None
        data = self._mapping(value, where)
        kind = self._string(data, "type", where)
        if kind is None:
            kind = TextType.TEXT.value
        try:
            text_type = TextType(kind)
        except ValueError as e:
            raise DocumentInvalid(f"{where}.type: unknown text type {kind!r}") from e
        return Text(
            value=self._string(data, "value", where, required=True),
            type=text_type,
            base=self.iri(data, "base", where),
            lang=self._string(data, "lang", where),
        )

    def person(self, value: Any, where: str) -> Person:
        data = self._mapping(value, where)
        return Person(
            name=self._string(data, "name", where, required=True),
            uri=self.iri(data, "uri", where),
            email=self.email(data, where),
            base=self.iri(data, "base", where),
            lang=self._string(data, "lang", where),
        )

    def authors(self, data: Mapping[str, Any], where: str) -> list[Author]:
        return [
            Author(self.person(item, f"{where}.authors[{i}]"))
            for i, item in enumerate(self._list(data, "authors", where))
        ]

    def contributors(self, data: Mapping[str, Any], where: str) -> list[Contributor]:
        return [
            Contributor(self.person(item, f"{where}.contributors[{i}]"))
            for i, item in enumerate(self._list(data, "contributors", where))
        ]

    def link(self, value: Any, where: str) -> Link:
        data = self._mapping(value, where)
        relation = self._string(data, "rel", where)
        length = data.get("length")
        if length is not None and (isinstance(length, bool) or not isinstance(length, int)):
            raise DocumentInvalid(f"{where}.length: expected an integer")
        return Link(
            href=self.iri(data, "href", where, required=True),
            relation=Relation(relation) if relation is not None else None,
            media_type=self._string(data, "type", where),
            hreflang=self._string(data, "hreflang", where),
            title=self._string(data, "title", where),
            length=length,
            base=self.iri(data, "base", where),
            lang=self._string(data, "lang", where),
        )

    def links(self, data: Mapping[str, Any], where: str) -> list[Link]:
        return [
            self.link(item, f"{where}.links[{i}]")
            for i, item in enumerate(self._list(data, "links", where))
        ]

    def category(self, value: Any, where: str) -> Category:
        data = self._mapping(value, where)
        return Category(
            term=self._string(data, "term", where, required=True),
            scheme=self.iri(data, "scheme", where),
            label=self._string(data, "label", where),
            base=self.iri(data, "base", where),
            lang=self._string(data, "lang", where),
        )

    def categories(self, data: Mapping[str, Any], where: str) -> list[Category]:
        return [
            self.category(item, f"{where}.categories[{i}]")
            for i, item in enumerate(self._list(data, "categories", where))
        ]

    def generator(self, value: Any, where: str) -> Generator | None:
        if value is None:
            return None
        data = self._mapping(value, where)
        return Generator(
            name=self._string(data, "name", where, required=True),
            uri=self.iri(data, "uri", where),
            version=self._string(data, "version", where),
            base=self.iri(data, "base", where),
            lang=self._string(data, "lang", where),
        )

    def content(self, value: Any, where: str) -> Content | None:
        if value is None:
            return None
        data = self._mapping(value, where)
        kind = self._string(data, "type", where)
        if kind is None:
            kind = ContentKind.TEXT.value
        return Content(
            kind=ContentKind(kind),
            value=self._string(data, "value", where),
            src=self.iri(data, "src", where),
            base=self.iri(data, "base", where),
            lang=self._string(data, "lang", where),
        )

    def source(self, value: Any, where: str) -> Source | None:
        if value is None:
            return None
        data = self._mapping(value, where)
        return Source(
            authors=self.authors(data, where),
            categories=self.categories(data, where),
            contributors=self.contributors(data, where),
            generator=self.generator(data.get("generator"), f"{where}.generator"),
            icon=self.iri(data, "icon", where),
            id=self.iri(data, "id", where),
            links=self.links(data, where),
            logo=self.iri(data, "logo", where),
            rights=self.text(data.get("rights"), f"{where}.rights"),
            subtitle=self.text(data.get("subtitle"), f"{where}.subtitle"),
            title=self.text(data.get("title"), f"{where}.title"),
            updated=self.timestamp(data, "updated", where),
            base=self.iri(data, "base", where),
            lang=self._string(data, "lang", where),
        )

    def entry(self, value: Any, where: str = "entry") -> Entry:
        data = self._mapping(value, where)
        return Entry(
            id=self.iri(data, "id", where, required=True),
            title=self.text(self._required(data, "title", where), f"{where}.title"),
            updated=self.timestamp(data, "updated", where, required=True),
            authors=self.authors(data, where),
            content=self.content(data.get("content"), f"{where}.content"),
            links=self.links(data, where),
            categories=self.categories(data, where),
            contributors=self.contributors(data, where),
            published=self.timestamp(data, "published", where),
            rights=self.text(data.get("rights"), f"{where}.rights"),
            source=self.source(data.get("source"), f"{where}.source"),
            summary=self.text(data.get("summary"), f"{where}.summary"),
            base=self.iri(data, "base", where),
            lang=self._string(data, "lang", where),
        )

    def feed(self, value: Any, where: str = "feed") -> Feed:
        data = self._mapping(value, where)
        return Feed(
            id=self.iri(data, "id", where, required=True),
            title=self.text(self._required(data, "title", where), f"{where}.title"),
            updated=self.timestamp(data, "updated", where, required=True),
            authors=self.authors(data, where),
            entries=[
                self.entry(item, f"{where}.entries[{i}]")
                for i, item in enumerate(self._list(data, "entries", where))
            ],
            links=self.links(data, where),
            categories=self.categories(data, where),
            contributors=self.contributors(data, where),
            generator=self.generator(data.get("generator"), f"{where}.generator"),
            icon=self.iri(data, "icon", where),
            logo=self.iri(data, "logo", where),
            rights=self.text(data.get("rights"), f"{where}.rights"),
            subtitle=self.text(data.get("subtitle"), f"{where}.subtitle"),
            base=self.iri(data, "base", where),
            lang=self._string(data, "lang", where),
        )


class AtomJSONCodec:
    """Encodes feeds and entries to JSON text and decodes them back."""

    def __init__(self, config: CodecConfig | None = None, execution_id: str | None = None):
        """Initialize the codec.

        Args:
            config: Output formatting and decoding trust settings
            execution_id: Execution ID for logging context
        """
        self.config = config or CodecConfig()
        self.logger = create_execution_logger("codec", execution_id)
        self._decoder = _Decoder(trusted=self.config.trusted)

    def _dumps(self, data: dict[str, Any]) -> str:
        return json.dumps(
            data,
            indent=self.config.indent,
            ensure_ascii=self.config.ensure_ascii,
        )

    def _loads(self, text: str | bytes) -> Any:
        try:
            return json.loads(text)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            self.logger.log_rejection("JSON", e)
            raise DocumentInvalid(f"Document is not valid JSON: {e}") from e

    def encode_feed(self, feed: Feed) -> str:
        self.logger.debug(
            "Encoding feed",
            document_id=feed.id.value,
            entries_count=len(feed.entries),
        )
        return self._dumps(encode_feed(feed))

    def encode_entry(self, entry: Entry) -> str:
        self.logger.debug("Encoding entry", document_id=entry.id.value)
        return self._dumps(encode_entry(entry))

    def decode_feed(self, text: str | bytes) -> Feed:
        """Decode a feed document.

        Raises:
            DocumentInvalid: If the JSON is malformed or misses required fields
            FeedIncomplete, EntryIncomplete: If an invariant does not hold
            IdentifierInvalid, TimestampInvalid, EmailInvalid: For bad field values
        """
        data = self._loads(text)
        try:
            feed = self._decoder.feed(data)
        except ValueError as e:
            self.logger.log_rejection("feed", e)
            raise
        self.logger.log_document_processing("feed", feed.id.value, len(feed.entries))
        return feed

    def decode_entry(self, text: str | bytes) -> Entry:
        data = self._loads(text)
        try:
            entry = self._decoder.entry(data)
        except ValueError as e:
            self.logger.log_rejection("entry", e)
            raise
        self.logger.log_document_processing("entry", entry.id.value, 1)
        return entry


def dumps(value: Feed | Entry, config: CodecConfig | None = None) -> str:
    """Encode a feed or entry with a default codec."""
    codec = AtomJSONCodec(config)
    if isinstance(value, Feed):
        return codec.encode_feed(value)
    if isinstance(value, Entry):
        return codec.encode_entry(value)
    raise TypeError(f"Cannot encode {type(value).__name__}")


def loads_feed(text: str | bytes, config: CodecConfig | None = None) -> Feed:
    return AtomJSONCodec(config).decode_feed(text)


def loads_entry(text: str | bytes, config: CodecConfig | None = None) -> Entry:
    return AtomJSONCodec(config).decode_entry(text)
