"""searchctx domain model, re-exporting all public types."""

from searchctx_core.models.constants import (
    REMOTE_CLUSTER_INDEX_SEPARATOR,
    UNKNOWN_INDEX_UUID,
)
from searchctx_core.models.entities import (
    AliasFilter,
    SearchContextId,
    ShardSearchResult,
)
from searchctx_core.models.enums import ContextIdErrorKind
from searchctx_core.models.identifiers import (
    AliasName,
    ClusterAlias,
    IndexName,
    IndexUuid,
    NodeId,
    SessionId,
)
from searchctx_core.models.values import (
    CURRENT,
    V_2_0_0,
    V_2_11_0,
    Index,
    SearchContextIdForNode,
    SearchShardTarget,
    ShardId,
    ShardSearchContextId,
    Version,
)

__all__ = [
    # Constants
    "REMOTE_CLUSTER_INDEX_SEPARATOR",
    "UNKNOWN_INDEX_UUID",
    # Identifiers
    "AliasName",
    "ClusterAlias",
    "IndexName",
    "IndexUuid",
    "NodeId",
    "SessionId",
    # Enums
    "ContextIdErrorKind",
    # Value Objects
    "CURRENT",
    "V_2_0_0",
    "V_2_11_0",
    "Index",
    "SearchContextIdForNode",
    "SearchShardTarget",
    "ShardId",
    "ShardSearchContextId",
    "Version",
    # Entities
    "AliasFilter",
    "SearchContextId",
    "ShardSearchResult",
]
