"""Email addresses for person constructs (RFC 2822 addr-spec)."""

from dataclasses import dataclass
from typing import Any

from email_validator import validate_email


@dataclass(frozen=True)
class EmailAddress:
    """An email address accepted by the address-grammar validator.

    The stored value is the validator's normalized form, which is also the
    textual representation used when serializing.
    """

    value: str

    @classmethod
    def parse(cls, text: str) -> "EmailAddress":
        """Validate ``text`` as an addr-spec.

        Raises:
            email_validator.EmailNotValidError: Propagated unchanged
        """
        result = validate_email(text, check_deliverability=False)
        return cls(result.normalized)

    @classmethod
    def _from_trusted(cls, text: str) -> "EmailAddress":
        """Wrap ``text`` without validation (trusted decoding only)."""
        return cls(text)

    @classmethod
    def coerce(cls, value: Any) -> "EmailAddress | None":
        if value is None or isinstance(value, EmailAddress):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        raise TypeError(f"Cannot convert {type(value).__name__} to EmailAddress")

    @property
    def local_part(self) -> str:
        return self.value.rsplit("@", 1)[0]

    @property
    def domain(self) -> str:
        return self.value.rsplit("@", 1)[1]

    def __str__(self) -> str:
        return self.value
