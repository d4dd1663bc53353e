"""Error types raised while building Atom documents."""

from email_validator import EmailNotValidError

# Address-grammar failures are surfaced as the collaborator's own error type.
EmailInvalid = EmailNotValidError


class AtomValidationError(ValueError):
    """Base class for validation errors raised by atomfeed."""


class EntryIncomplete(AtomValidationError):
    """An entry has neither content nor an alternate link, or lacks a required summary."""

    MISSING_CONTENT_OR_ALTERNATE = "missing_content_or_alternate"
    MISSING_SUMMARY = "missing_summary"

    def __init__(self, reason: str, message: str | None = None):
        self.reason = reason
        if message is None:
            if reason == self.MISSING_SUMMARY:
                message = (
                    "Entry with out-of-line or binary content requires a summary"
                )
            else:
                message = "Entry requires content or an alternate link"
        super().__init__(message)


class FeedIncomplete(AtomValidationError):
    """A feed has no authors and at least one of its entries has none either."""

    def __init__(self, message: str = "Feed requires authors or authors on every entry"):
        super().__init__(message)


class IdentifierInvalid(AtomValidationError):
    """A string is not a valid IRI reference."""

    def __init__(self, value: str, message: str | None = None):
        self.value = value
        super().__init__(message or f"Invalid IRI: {value!r}")


class TimestampInvalid(AtomValidationError):
    """Text does not match the RFC 3339 date-time profile."""

    def __init__(self, value: object, message: str | None = None):
        self.value = value
        super().__init__(message or f"Invalid RFC 3339 timestamp: {value!r}")


class ContentInvalid(AtomValidationError):
    """Content has an empty type, or carries both or neither of an inline value and a src."""


class DocumentInvalid(AtomValidationError):
    """A serialized document does not have the expected shape."""
