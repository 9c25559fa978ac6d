"""Frozen value objects for the search context identifier model."""

from __future__ import annotations

import re
from functools import total_ordering

from pydantic import BaseModel, ConfigDict, Field, field_validator

from searchctx_core.models.constants import REMOTE_CLUSTER_INDEX_SEPARATOR, UNKNOWN_INDEX_UUID
from searchctx_core.models.identifiers import ClusterAlias, IndexName, IndexUuid, NodeId, SessionId

_VERSION_PATTERN = re.compile(r"^(\d+)\.(\d+)\.(\d+)$")
_RELEASE_BUILD = 99

LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1


@total_ordering
class Version(BaseModel):
    """A cluster protocol version, encoded as ``major*1_000_000 + minor*10_000 + revision*100 + build``."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(gt=0, lt=2**31)

    @classmethod
    def from_id(cls, version_id: int) -> Version:
        return cls(id=version_id)

    @classmethod
    def from_string(cls, value: str) -> Version:
        """Parse a ``major.minor.revision`` string such as ``"2.11.0"``."""
        match = _VERSION_PATTERN.match(value.strip())
        if match is None:
            msg = f"Illegal version format: {value!r}"
            raise ValueError(msg)
        major, minor, revision = (int(part) for part in match.groups())
        if minor > 99 or revision > 99:
            msg = f"Minor and revision must be below 100: {value!r}"
            raise ValueError(msg)
        return cls(id=major * 1_000_000 + minor * 10_000 + revision * 100 + _RELEASE_BUILD)

    @property
    def major(self) -> int:
        return self.id // 1_000_000

    @property
    def minor(self) -> int:
        return self.id // 10_000 % 100

    @property
    def revision(self) -> int:
        return self.id // 100 % 100

    def on_or_after(self, other: Version) -> bool:
        return self.id >= other.id

    def before(self, other: Version) -> bool:
        return self.id < other.id

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.id < other.id

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.revision}"


V_2_0_0 = Version.from_string("2.0.0")
V_2_11_0 = Version.from_string("2.11.0")
CURRENT = V_2_11_0


class Index(BaseModel):
    """An index as named at the time the search context was opened."""

    model_config = ConfigDict(frozen=True)

    name: IndexName = Field(min_length=1)
    uuid: IndexUuid = IndexUuid(UNKNOWN_INDEX_UUID)


@total_ordering
class ShardId(BaseModel):
    """One partition of an index. Ordered by index name, index uuid, then shard number."""

    model_config = ConfigDict(frozen=True)

    index: Index
    id: int = Field(ge=0, lt=2**31)

    @classmethod
    def of(cls, index_name: str, shard: int, uuid: str = UNKNOWN_INDEX_UUID) -> ShardId:
        return cls(index=Index(name=IndexName(index_name), uuid=IndexUuid(uuid)), id=shard)

    @property
    def index_name(self) -> IndexName:
        return self.index.name

    def _sort_key(self) -> tuple[str, str, int]:
        return (self.index.name, self.index.uuid, self.id)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ShardId):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __str__(self) -> str:
        return f"[{self.index.name}][{self.id}]"


class ShardSearchContextId(BaseModel):
    """Engine-assigned handle of an open search context on one node.

    Opaque to the codec: both fields are carried through unchanged.
    """

    model_config = ConfigDict(frozen=True)

    session_id: SessionId
    id: int = Field(ge=LONG_MIN, le=LONG_MAX)


class SearchContextIdForNode(BaseModel):
    """Where a shard's search context lives: cluster, node, and the context handle itself."""

    model_config = ConfigDict(frozen=True)

    cluster_alias: ClusterAlias | None = None
    node_id: NodeId
    search_context_id: ShardSearchContextId

    @field_validator("cluster_alias", mode="before")
    @classmethod
    def _empty_alias_is_local(cls, value: object) -> object:
        return None if value == "" else value


class SearchShardTarget(BaseModel):
    """The shard a search-phase result was produced on."""

    model_config = ConfigDict(frozen=True)

    node_id: NodeId
    shard_id: ShardId
    cluster_alias: ClusterAlias | None = None

    @field_validator("cluster_alias", mode="before")
    @classmethod
    def _empty_alias_is_local(cls, value: object) -> object:
        return None if value == "" else value

    @property
    def index_name(self) -> IndexName:
        return self.shard_id.index_name

    @property
    def fully_qualified_index_name(self) -> str:
        if self.cluster_alias is None:
            return self.index_name
        return f"{self.cluster_alias}{REMOTE_CLUSTER_INDEX_SEPARATOR}{self.index_name}"
