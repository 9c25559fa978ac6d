"""Shared fixtures for codec tests: stub filter payloads, a registry, and shard results."""

from collections.abc import Callable
from typing import ClassVar

import pytest
from pydantic import BaseModel, ConfigDict

from searchctx_core.models.entities import ShardSearchResult
from searchctx_core.models.identifiers import ClusterAlias, NodeId, SessionId
from searchctx_core.models.values import (
    SearchShardTarget,
    ShardId,
    ShardSearchContextId,
    Version,
)
from searchctx_codec.registry import Entry, NamedWriteableRegistry
from searchctx_codec.stream import StreamInput, StreamOutput


class TermQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    writeable_name: ClassVar[str] = "term"

    field: str
    value: str

    def write_to(self, out: StreamOutput, version: Version) -> None:
        out.write_string(self.field)
        out.write_string(self.value)

    @classmethod
    def read_from(cls, stream: StreamInput, version: Version) -> "TermQuery":
        return cls(field=stream.read_string(), value=stream.read_string())


class MatchAllQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    writeable_name: ClassVar[str] = "match_all"

    def write_to(self, out: StreamOutput, version: Version) -> None:
        pass

    @classmethod
    def read_from(cls, stream: StreamInput, version: Version) -> "MatchAllQuery":
        return cls()


@pytest.fixture
def registry() -> NamedWriteableRegistry:
    return NamedWriteableRegistry(
        [
            Entry(TermQuery.writeable_name, TermQuery.read_from),
            Entry(MatchAllQuery.writeable_name, MatchAllQuery.read_from),
        ]
    )


@pytest.fixture
def empty_registry() -> NamedWriteableRegistry:
    return NamedWriteableRegistry([])


@pytest.fixture
def term_query() -> TermQuery:
    return TermQuery(field="tenant", value="acme")


@pytest.fixture
def match_all() -> MatchAllQuery:
    return MatchAllQuery()


ResultFactory = Callable[..., ShardSearchResult]


@pytest.fixture
def make_result() -> ResultFactory:
    def _make(
        index: str,
        shard: int,
        node: str = "node-1",
        *,
        cluster_alias: str | None = None,
        session: str = "session-a",
        context: int = 1,
    ) -> ShardSearchResult:
        return ShardSearchResult(
            search_shard_target=SearchShardTarget(
                node_id=NodeId(node),
                shard_id=ShardId.of(index, shard),
                cluster_alias=None if cluster_alias is None else ClusterAlias(cluster_alias),
            ),
            context_id=ShardSearchContextId(session_id=SessionId(session), id=context),
        )

    return _make
