"""Internationalized resource identifiers (RFC 3987)."""

from dataclasses import dataclass
from pathlib import PurePath
from typing import Any

import rfc3987

from .errors import IdentifierInvalid


@dataclass(frozen=True)
class IRI:
    """A validated IRI reference.

    Build instances with ``IRI.parse`` or ``IRI.coerce``. Two IRIs are equal
    when their strings are equal; no normalization is applied.
    """

    value: str

    @classmethod
    def parse(cls, value: str) -> "IRI":
        """Validate ``value`` against the RFC 3987 IRI-reference grammar.

        Raises:
            IdentifierInvalid: If the string is empty or not an IRI reference
        """
        if not isinstance(value, str):
            raise IdentifierInvalid(repr(value), f"IRI must be a string, got {type(value).__name__}")
        if not value or rfc3987.match(value, rule="IRI_reference") is None:
            raise IdentifierInvalid(value)
        return cls(value)

    @classmethod
    def _from_trusted(cls, value: str) -> "IRI":
        """Wrap ``value`` without validation.

        Trust boundary: only for strings this library serialized from an
        already-validated IRI (trusted decoding). Never use it on user input.
        """
        return cls(value)

    @classmethod
    def coerce(cls, value: Any) -> "IRI":
        """Convert a URI-like value into an IRI.

        Accepts an ``IRI``, a string, anything with ``geturl()`` (the
        ``urllib.parse`` result types) or an absolute ``PurePath``.
        """
        if isinstance(value, IRI):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, PurePath):
            try:
                return cls.parse(value.as_uri())
            except ValueError as e:
                raise IdentifierInvalid(str(value), f"Path is not absolute: {value}") from e
        if hasattr(value, "geturl"):
            return cls.parse(value.geturl())
        raise TypeError(f"Cannot convert {type(value).__name__} to IRI")

    def __str__(self) -> str:
        return self.value


def optional_iri(value: Any) -> IRI | None:
    """Coerce ``value`` to an IRI, passing ``None`` through."""
    if value is None:
        return None
    return IRI.coerce(value)
