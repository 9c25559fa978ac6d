"""Cluster-wide constants shared by the model and the codec."""

from typing import Final

REMOTE_CLUSTER_INDEX_SEPARATOR: Final = ":"
UNKNOWN_INDEX_UUID: Final = "_na_"
