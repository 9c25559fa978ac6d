"""Shared fixtures for domain model tests."""

import pytest

from searchctx_core.models.identifiers import ClusterAlias, NodeId, SessionId
from searchctx_core.models.values import (
    SearchContextIdForNode,
    ShardId,
    ShardSearchContextId,
)


@pytest.fixture
def logs_shard() -> ShardId:
    return ShardId.of("logs", 0, uuid="u7Fq2xkJT0yD1y3tPj9bNg")


@pytest.fixture
def metrics_shard() -> ShardId:
    return ShardId.of("metrics", 3)


@pytest.fixture
def context_handle() -> ShardSearchContextId:
    return ShardSearchContextId(session_id=SessionId("b1c6f3a2-session"), id=42)


@pytest.fixture
def local_context(context_handle: ShardSearchContextId) -> SearchContextIdForNode:
    return SearchContextIdForNode(node_id=NodeId("node-1"), search_context_id=context_handle)


@pytest.fixture
def remote_context(context_handle: ShardSearchContextId) -> SearchContextIdForNode:
    return SearchContextIdForNode(
        cluster_alias=ClusterAlias("remote1"),
        node_id=NodeId("node-9"),
        search_context_id=context_handle,
    )
