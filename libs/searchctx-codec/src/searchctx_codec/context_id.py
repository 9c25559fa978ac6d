"""Encode and decode point-in-time search context ids.

An id is the URL-safe base64 form of::

    [version int][shard count vint]([shard id][node context])*[alias count vint]([alias][alias filter])*

Decoding is strict: the payload must be consumed exactly.
"""

from __future__ import annotations

import base64
import binascii
import logging
import re
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Protocol

from searchctx_core.models.entities import AliasFilter, SearchContextId
from searchctx_core.models.values import SearchContextIdForNode, ShardId

from searchctx_codec.config import CodecSettings
from searchctx_codec.exceptions import (
    EncodingFailedError,
    InvalidIdentifierError,
    SearchContextIdError,
    TrailingDataError,
)
from searchctx_codec.mappers import (
    AliasFilterMapper,
    SearchContextIdForNodeMapper,
    ShardIdMapper,
    read_string_key,
    write_string_key,
)
from searchctx_codec.stream import StreamInput, StreamOutput, read_version, write_version

if TYPE_CHECKING:
    from searchctx_core.models.values import SearchShardTarget, ShardSearchContextId, Version

    from searchctx_codec.registry import NamedWriteableResolver

logger = logging.getLogger(__name__)

_URL_SAFE_BASE64 = re.compile(r"[A-Za-z0-9_-]*={0,2}")


class SearchPhaseResult(Protocol):
    """A shard-level result that holds an open search context."""

    @property
    def search_shard_target(self) -> SearchShardTarget: ...

    @property
    def context_id(self) -> ShardSearchContextId: ...


def encode(
    results: Iterable[SearchPhaseResult],
    alias_filters: Mapping[str, AliasFilter],
    version: Version | None = None,
) -> str:
    """Build the id for ``results`` and return it as URL-safe base64 text.

    If two results share a shard id, the later one wins.
    """
    if version is None:
        version = CodecSettings().version

    out = StreamOutput()
    try:
        shards: dict[ShardId, SearchContextIdForNode] = {}
        for result in results:
            target = result.search_shard_target
            if target.shard_id in shards:
                logger.debug("Shard %s listed more than once; keeping the last result", target.shard_id)
            shards[target.shard_id] = SearchContextIdForNode(
                cluster_alias=target.cluster_alias,
                node_id=target.node_id,
                search_context_id=result.context_id,
            )
        write_version(out, version)
        out.write_map(shards, ShardIdMapper.write, SearchContextIdForNodeMapper.write, version)
        out.write_map(alias_filters, write_string_key, AliasFilterMapper.write, version)
    except (ValueError, TypeError, OverflowError, MemoryError) as e:
        raise EncodingFailedError(str(e) or type(e).__name__) from e

    logger.debug(
        "Encoded search context id: version=%s shards=%d alias_filters=%d bytes=%d",
        version,
        len(shards),
        len(alias_filters),
        len(out),
    )
    return base64.urlsafe_b64encode(out.to_bytes()).decode("ascii")


def _decode_text(encoded_id: str) -> bytes:
    settings = CodecSettings()
    if not isinstance(encoded_id, str) or len(encoded_id) > settings.max_identifier_length:
        raise InvalidIdentifierError(encoded_id)
    if _URL_SAFE_BASE64.fullmatch(encoded_id) is None:
        raise InvalidIdentifierError(encoded_id)
    if "=" in encoded_id:
        if len(encoded_id) % 4:
            raise InvalidIdentifierError(encoded_id)
        padded = encoded_id
    else:
        padded = encoded_id + "=" * (-len(encoded_id) % 4)
    try:
        return base64.urlsafe_b64decode(padded)
    except binascii.Error as e:
        raise InvalidIdentifierError(encoded_id) from e


def decode(resolver: NamedWriteableResolver, encoded_id: str) -> SearchContextId:
    """Rebuild a :class:`SearchContextId` from its text form.

    ``resolver`` supplies readers for the alias filter payloads. Raises a
    :class:`SearchContextIdError` subclass if the id is malformed in any way.
    """
    try:
        stream = StreamInput(_decode_text(encoded_id))
        version = read_version(stream)
        shards = stream.read_map(ShardIdMapper.read, SearchContextIdForNodeMapper.read, version)
        alias_filters = stream.read_map(read_string_key, AliasFilterMapper.reader(resolver), version)
        if stream.available() > 0:
            raise TrailingDataError(stream.position, stream.available())
    except SearchContextIdError as e:
        logger.debug("Rejected search context id: %s", e)
        raise

    logger.debug(
        "Decoded search context id: version=%s shards=%d alias_filters=%d",
        version,
        len(shards),
        len(alias_filters),
    )
    return SearchContextId(shards=shards, alias_filters=alias_filters)


def derived_index_names(context_id: SearchContextId) -> frozenset[str]:
    """Index names behind ``context_id``, prefixed with the cluster alias for remote shards."""
    return context_id.derived_index_names()
