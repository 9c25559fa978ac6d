"""Typed identifiers: NewType wrappers over str to prevent stringly-typed bugs."""

from typing import NewType

IndexName = NewType("IndexName", str)
IndexUuid = NewType("IndexUuid", str)
NodeId = NewType("NodeId", str)
ClusterAlias = NewType("ClusterAlias", str)
AliasName = NewType("AliasName", str)
SessionId = NewType("SessionId", str)
