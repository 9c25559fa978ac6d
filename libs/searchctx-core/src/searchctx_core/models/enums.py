"""Enumerations for the search context identifier model."""

from enum import StrEnum


class ContextIdErrorKind(StrEnum):
    """Outcome category of a failed encode or decode."""

    INVALID_IDENTIFIER = "INVALID_IDENTIFIER"
    CORRUPT_PAYLOAD = "CORRUPT_PAYLOAD"
    TRAILING_DATA = "TRAILING_DATA"
    ENCODING_FAILED = "ENCODING_FAILED"
