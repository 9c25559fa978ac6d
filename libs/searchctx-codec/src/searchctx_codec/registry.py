"""Named writeables: payloads tagged with a type name and parsed by a registered reader."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from types import MappingProxyType
from typing import TYPE_CHECKING, NamedTuple, Protocol, runtime_checkable

from searchctx_codec.exceptions import (
    CorruptPayloadError,
    SearchContextIdError,
    UnknownNamedWriteableError,
)

if TYPE_CHECKING:
    from searchctx_core.models.values import Version

    from searchctx_codec.stream import StreamInput, StreamOutput


@runtime_checkable
class NamedWriteable(Protocol):
    """A payload that knows its own type tag and how to write itself."""

    @property
    def writeable_name(self) -> str: ...

    def write_to(self, out: StreamOutput, version: Version) -> None: ...


NamedWriteableReader = Callable[["StreamInput", "Version"], NamedWriteable]


class NamedWriteableResolver(Protocol):
    """Anything that can hand out a reader for a type tag."""

    def resolve(self, name: str) -> NamedWriteableReader: ...


class Entry(NamedTuple):
    name: str
    reader: NamedWriteableReader


class NamedWriteableRegistry:
    """Fixed set of readers keyed by type tag. Read-only once built, so it can be shared freely."""

    def __init__(self, entries: Iterable[Entry]) -> None:
        readers: dict[str, NamedWriteableReader] = {}
        for entry in entries:
            if entry.name in readers:
                msg = f"NamedWriteable [{entry.name}] is already registered"
                raise ValueError(msg)
            readers[entry.name] = entry.reader
        self._readers = MappingProxyType(readers)

    def names(self) -> frozenset[str]:
        return frozenset(self._readers)

    def resolve(self, name: str) -> NamedWriteableReader:
        """Return the reader registered for ``name``. Raises LookupError if there is none."""
        try:
            return self._readers[name]
        except KeyError:
            msg = f"Unknown NamedWriteable [{name}]"
            raise LookupError(msg) from None


def write_named_writeable(out: StreamOutput, value: NamedWriteable, version: Version) -> None:
    out.write_string(value.writeable_name)
    value.write_to(out, version)


def write_optional_named_writeable(
    out: StreamOutput, value: NamedWriteable | None, version: Version
) -> None:
    if value is None:
        out.write_bool(False)
    else:
        out.write_bool(True)
        write_named_writeable(out, value, version)


def read_named_writeable(
    stream: StreamInput, version: Version, resolver: NamedWriteableResolver
) -> NamedWriteable:
    offset = stream.position
    name = stream.read_string()
    try:
        reader = resolver.resolve(name)
    except LookupError as e:
        raise UnknownNamedWriteableError(name, offset) from e
    try:
        return reader(stream, version)
    except SearchContextIdError:
        raise
    except ValueError as e:
        msg = f"Invalid [{name}] payload: {e}"
        raise CorruptPayloadError(msg, offset) from e


def read_optional_named_writeable(
    stream: StreamInput, version: Version, resolver: NamedWriteableResolver
) -> NamedWriteable | None:
    if stream.read_bool():
        return read_named_writeable(stream, version, resolver)
    return None
