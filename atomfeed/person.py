"""Person constructs (RFC 4287 section 3.2) and the author/contributor roles."""

from dataclasses import dataclass
from typing import Any

from .addresses import EmailAddress
from .iri import IRI, optional_iri


@dataclass(frozen=True)
class Person:
    """A name with optional IRI and email address."""

    name: str
    uri: IRI | None = None
    email: EmailAddress | None = None
    base: IRI | None = None
    lang: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "uri", optional_iri(self.uri))
        object.__setattr__(self, "email", EmailAddress.coerce(self.email))
        object.__setattr__(self, "base", optional_iri(self.base))


class _PersonRole:
    """Read-only access to the wrapped person's fields."""

    person: Person

    @property
    def name(self) -> str:
        return self.person.name

    @property
    def uri(self) -> IRI | None:
        return self.person.uri

    @property
    def email(self) -> EmailAddress | None:
        return self.person.email

    @property
    def base(self) -> IRI | None:
        return self.person.base

    @property
    def lang(self) -> str | None:
        return self.person.lang


@dataclass(frozen=True)
class Author(_PersonRole):
    """A person credited as author of a feed or entry."""

    person: Person

    @classmethod
    def named(cls, name: str, **kwargs) -> "Author":
        """Build an author from person fields (uri, email, base, lang)."""
        return cls(Person(name, **kwargs))

    @classmethod
    def coerce(cls, value: Any) -> "Author":
        if isinstance(value, Author):
            return value
        if isinstance(value, Person):
            return cls(value)
        if isinstance(value, str):
            return cls(Person(value))
        raise TypeError(f"Expected Author, Person or str, got {type(value).__name__}")


@dataclass(frozen=True)
class Contributor(_PersonRole):
    """A person credited as contributor to a feed or entry."""

    person: Person

    @classmethod
    def named(cls, name: str, **kwargs) -> "Contributor":
        return cls(Person(name, **kwargs))

    @classmethod
    def coerce(cls, value: Any) -> "Contributor":
        if isinstance(value, Contributor):
            return value
        if isinstance(value, Person):
            return cls(value)
        if isinstance(value, str):
            return cls(Person(value))
        raise TypeError(
            f"Expected Contributor, Person or str, got {type(value).__name__}"
        )


def authors_tuple(values: Any) -> tuple[Author, ...]:
    return tuple(Author.coerce(value) for value in values)


def contributors_tuple(values: Any) -> tuple[Contributor, ...]:
    return tuple(Contributor.coerce(value) for value in values)
