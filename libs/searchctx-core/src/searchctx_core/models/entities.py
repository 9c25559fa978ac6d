"""Aggregates for the search context identifier model."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from searchctx_core.models.constants import REMOTE_CLUSTER_INDEX_SEPARATOR
from searchctx_core.models.identifiers import AliasName, NodeId
from searchctx_core.models.values import (
    SearchContextIdForNode,
    SearchShardTarget,
    ShardId,
    ShardSearchContextId,
)


class AliasFilter(BaseModel):
    """The filter an index alias applied when the search context was opened.

    ``filter`` is an opaque named payload. The model only requires it to carry a
    ``writeable_name`` tag; the codec resolves a parser for that tag on decode.
    """

    model_config = ConfigDict(frozen=True)

    aliases: tuple[AliasName, ...] = ()
    filter: Any = None

    @field_validator("filter")
    @classmethod
    def _check_filter(cls, value: Any) -> Any:
        if value is None:
            return value
        name = getattr(value, "writeable_name", None)
        if not isinstance(name, str) or not name:
            msg = f"Alias filter payload {type(value).__name__} has no writeable_name"
            raise ValueError(msg)
        if not callable(getattr(value, "write_to", None)):
            msg = f"Alias filter payload {type(value).__name__} has no write_to()"
            raise ValueError(msg)
        return value


class ShardSearchResult(BaseModel):
    """A per-shard search-phase result that left an open context behind."""

    model_config = ConfigDict(frozen=True)

    search_shard_target: SearchShardTarget
    context_id: ShardSearchContextId


class SearchContextId(BaseModel):
    """Everything needed to resume a point-in-time search across the cluster.

    Both maps are exposed as read-only views. Equality compares map contents, so
    two ids built from the same entries in a different order are equal.
    """

    model_config = ConfigDict(frozen=True)

    shards: Mapping[ShardId, SearchContextIdForNode]
    alias_filters: Mapping[str, AliasFilter] = Field(default_factory=dict, validate_default=True)

    @field_validator("shards", "alias_filters", mode="after")
    @classmethod
    def _read_only(cls, value: Mapping[Any, Any]) -> Mapping[Any, Any]:
        return MappingProxyType(dict(value))

    def __hash__(self) -> int:
        return hash((frozenset(self.shards.items()), frozenset(self.alias_filters.items())))

    def derived_index_names(self) -> frozenset[str]:
        """Index names the context was opened against, qualified by cluster alias when remote."""
        indices: set[str] = set()
        for shard_id, node_context in self.shards.items():
            if node_context.cluster_alias is None:
                indices.add(shard_id.index_name)
            else:
                indices.add(
                    f"{node_context.cluster_alias}{REMOTE_CLUSTER_INDEX_SEPARATOR}{shard_id.index_name}"
                )
        return frozenset(indices)

    def node_ids(self) -> frozenset[NodeId]:
        return frozenset(node_context.node_id for node_context in self.shards.values())

    def shards_on_node(self, node_id: NodeId) -> dict[ShardId, SearchContextIdForNode]:
        """Shard entries whose context lives on ``node_id``, in shard order."""
        return {
            shard_id: self.shards[shard_id]
            for shard_id in sorted(self.shards)
            if self.shards[shard_id].node_id == node_id
        }
