"""Generator constructs (RFC 4287 section 4.2.4)."""

from dataclasses import dataclass
from typing import Any

from .iri import IRI, optional_iri


@dataclass(frozen=True)
class Generator:
    """The agent used to produce a feed."""

    name: str
    uri: IRI | None = None
    version: str | None = None
    base: IRI | None = None
    lang: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "uri", optional_iri(self.uri))
        object.__setattr__(self, "base", optional_iri(self.base))

    @classmethod
    def coerce(cls, value: Any) -> "Generator | None":
        if value is None or isinstance(value, Generator):
            return value
        if isinstance(value, str):
            return cls(name=value)
        raise TypeError(f"Cannot convert {type(value).__name__} to Generator")
