"""searchctx codec: wire format for point-in-time search context ids."""

__version__ = "0.1.0"

from searchctx_codec.config import CodecSettings
from searchctx_codec.context_id import SearchPhaseResult, decode, derived_index_names, encode
from searchctx_codec.exceptions import (
    CorruptPayloadError,
    EncodingFailedError,
    InvalidIdentifierError,
    SearchContextIdError,
    TrailingDataError,
    UnknownNamedWriteableError,
)
from searchctx_codec.registry import (
    Entry,
    NamedWriteable,
    NamedWriteableRegistry,
    NamedWriteableResolver,
)
from searchctx_codec.stream import StreamInput, StreamOutput, read_version, write_version

__all__ = [
    "CodecSettings",
    "CorruptPayloadError",
    "EncodingFailedError",
    "Entry",
    "InvalidIdentifierError",
    "NamedWriteable",
    "NamedWriteableRegistry",
    "NamedWriteableResolver",
    "SearchContextIdError",
    "SearchPhaseResult",
    "StreamInput",
    "StreamOutput",
    "TrailingDataError",
    "UnknownNamedWriteableError",
    "decode",
    "derived_index_names",
    "encode",
    "read_version",
    "write_version",
]
