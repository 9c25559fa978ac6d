"""Bidirectional mappers between domain models and wire bytes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel, ValidationError

from searchctx_core.models.entities import AliasFilter
from searchctx_core.models.identifiers import (
    AliasName,
    ClusterAlias,
    IndexName,
    IndexUuid,
    NodeId,
    SessionId,
)
from searchctx_core.models.values import (
    Index,
    SearchContextIdForNode,
    ShardId,
    ShardSearchContextId,
)

from searchctx_codec.exceptions import CorruptPayloadError
from searchctx_codec.registry import (
    read_optional_named_writeable,
    write_optional_named_writeable,
)

if TYPE_CHECKING:
    from searchctx_core.models.values import Version

    from searchctx_codec.registry import NamedWriteableResolver
    from searchctx_codec.stream import Reader, StreamInput, StreamOutput

ModelT = TypeVar("ModelT", bound=BaseModel)


def _build(model: type[ModelT], offset: int, **fields: Any) -> ModelT:
    """Construct a model from decoded fields, reporting constraint violations as corruption."""
    try:
        return model(**fields)
    except ValidationError as e:
        msg = f"Invalid {model.__name__}: {e.error_count()} validation error(s)"
        raise CorruptPayloadError(msg, offset) from e


class IndexMapper:
    """``[name string][uuid string]``"""

    @staticmethod
    def write(out: StreamOutput, index: Index, version: Version) -> None:
        out.write_string(index.name)
        out.write_string(index.uuid)

    @staticmethod
    def read(stream: StreamInput, version: Version) -> Index:
        offset = stream.position
        name = stream.read_string()
        uuid = stream.read_string()
        return _build(Index, offset, name=IndexName(name), uuid=IndexUuid(uuid))


class ShardIdMapper:
    """``[index][shard number vint]``"""

    @staticmethod
    def write(out: StreamOutput, shard_id: ShardId, version: Version) -> None:
        IndexMapper.write(out, shard_id.index, version)
        out.write_vint(shard_id.id)

    @staticmethod
    def read(stream: StreamInput, version: Version) -> ShardId:
        offset = stream.position
        index = IndexMapper.read(stream, version)
        return _build(ShardId, offset, index=index, id=stream.read_vint())


class ShardSearchContextIdMapper:
    """``[session id string][id long]``"""

    @staticmethod
    def write(out: StreamOutput, context_id: ShardSearchContextId, version: Version) -> None:
        out.write_string(context_id.session_id)
        out.write_long(context_id.id)

    @staticmethod
    def read(stream: StreamInput, version: Version) -> ShardSearchContextId:
        offset = stream.position
        session_id = stream.read_string()
        return _build(
            ShardSearchContextId, offset, session_id=SessionId(session_id), id=stream.read_long()
        )


class SearchContextIdForNodeMapper:
    """``[optional cluster alias string][node id string][context handle]``"""

    @staticmethod
    def write(out: StreamOutput, node_context: SearchContextIdForNode, version: Version) -> None:
        out.write_optional_string(node_context.cluster_alias)
        out.write_string(node_context.node_id)
        ShardSearchContextIdMapper.write(out, node_context.search_context_id, version)

    @staticmethod
    def read(stream: StreamInput, version: Version) -> SearchContextIdForNode:
        offset = stream.position
        cluster_alias = stream.read_optional_string()
        node_id = stream.read_string()
        search_context_id = ShardSearchContextIdMapper.read(stream, version)
        return _build(
            SearchContextIdForNode,
            offset,
            cluster_alias=None if cluster_alias is None else ClusterAlias(cluster_alias),
            node_id=NodeId(node_id),
            search_context_id=search_context_id,
        )


class AliasFilterMapper:
    """``[aliases string array][optional named filter]``

    Reading needs a resolver for the filter's type tag, so readers are bound with
    :meth:`reader`.
    """

    @staticmethod
    def write(out: StreamOutput, alias_filter: AliasFilter, version: Version) -> None:
        out.write_string_array(alias_filter.aliases)
        write_optional_named_writeable(out, alias_filter.filter, version)

    @staticmethod
    def read(
        stream: StreamInput, version: Version, resolver: NamedWriteableResolver
    ) -> AliasFilter:
        offset = stream.position
        aliases = tuple(AliasName(alias) for alias in stream.read_string_array())
        query_filter = read_optional_named_writeable(stream, version, resolver)
        return _build(AliasFilter, offset, aliases=aliases, filter=query_filter)

    @staticmethod
    def reader(resolver: NamedWriteableResolver) -> Reader[AliasFilter]:
        def _read(stream: StreamInput, version: Version) -> AliasFilter:
            return AliasFilterMapper.read(stream, version, resolver)

        return _read


def write_string_key(out: StreamOutput, value: str, version: Version) -> None:
    out.write_string(value)


def read_string_key(stream: StreamInput, version: Version) -> str:
    return stream.read_string()
