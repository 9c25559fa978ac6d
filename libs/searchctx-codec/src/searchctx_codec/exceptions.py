"""Error hierarchy for searchctx-codec."""

from __future__ import annotations

from typing import ClassVar

from searchctx_core.models.enums import ContextIdErrorKind


class SearchContextIdError(ValueError):
    """Base exception for every encode/decode failure. None are retryable by re-decoding."""

    kind: ClassVar[ContextIdErrorKind]


class InvalidIdentifierError(SearchContextIdError):
    """The identifier is not valid URL-safe base64 text."""

    kind = ContextIdErrorKind.INVALID_IDENTIFIER

    def __init__(self, identifier: object) -> None:
        super().__init__(f"invalid id: [{identifier}]")
        self.identifier = identifier


class CorruptPayloadError(SearchContextIdError):
    """The decoded bytes end before a declared field or violate the wire layout."""

    kind = ContextIdErrorKind.CORRUPT_PAYLOAD

    def __init__(self, reason: str, offset: int) -> None:
        super().__init__(f"{reason} (at byte {offset})")
        self.reason = reason
        self.offset = offset


class UnknownNamedWriteableError(CorruptPayloadError):
    """The payload names a filter type no registered reader understands."""

    def __init__(self, name: str, offset: int) -> None:
        super().__init__(f"Unknown NamedWriteable [{name}]", offset)
        self.name = name


class TrailingDataError(SearchContextIdError):
    """Both maps were read but unread bytes remain."""

    kind = ContextIdErrorKind.TRAILING_DATA

    def __init__(self, offset: int, remaining: int) -> None:
        super().__init__(f"Not all bytes were read: {remaining} left at byte {offset}")
        self.offset = offset
        self.remaining = remaining


class EncodingFailedError(SearchContextIdError):
    """Writing the identifier failed. The underlying error is chained as ``__cause__``."""

    kind = ContextIdErrorKind.ENCODING_FAILED

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to encode search context id: {reason}")
        self.reason = reason
