"""Versioned binary stream primitives.

Every element writer has the shape ``(out, value, version)`` and every element reader
``(in, version)``. The wire version is always passed explicitly; streams hold no
version state of their own.
"""

from __future__ import annotations

import struct
from collections.abc import Callable, Iterable, Mapping
from typing import TypeVar

from searchctx_core.models.values import LONG_MAX, LONG_MIN, Version

from searchctx_codec.exceptions import CorruptPayloadError

K = TypeVar("K")
V = TypeVar("V")
T = TypeVar("T")

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_MAX_VINT_BYTES = 5

_INT = struct.Struct(">i")
_LONG = struct.Struct(">q")


class StreamOutput:
    """A growable in-memory byte buffer."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    def __len__(self) -> int:
        return len(self._buffer)

    def to_bytes(self) -> bytes:
        return bytes(self._buffer)

    def write_byte(self, value: int) -> None:
        if not 0 <= value <= 0xFF:
            msg = f"Byte out of range: {value}"
            raise ValueError(msg)
        self._buffer.append(value)

    def write_bytes(self, value: bytes) -> None:
        self._buffer.extend(value)

    def write_bool(self, value: bool) -> None:
        self.write_byte(1 if value else 0)

    def write_int(self, value: int) -> None:
        if not INT_MIN <= value <= INT_MAX:
            msg = f"Int out of range: {value}"
            raise ValueError(msg)
        self._buffer.extend(_INT.pack(value))

    def write_long(self, value: int) -> None:
        if not LONG_MIN <= value <= LONG_MAX:
            msg = f"Long out of range: {value}"
            raise ValueError(msg)
        self._buffer.extend(_LONG.pack(value))

    def write_vint(self, value: int) -> None:
        """Write a non-negative int in 7-bit groups, low group first."""
        if not 0 <= value <= INT_MAX:
            msg = f"Cannot write {value} as a vint"
            raise ValueError(msg)
        while value & ~0x7F:
            self._buffer.append((value & 0x7F) | 0x80)
            value >>= 7
        self._buffer.append(value)

    def write_string(self, value: str) -> None:
        encoded = value.encode("utf-8")
        self.write_vint(len(encoded))
        self._buffer.extend(encoded)

    def write_optional_string(self, value: str | None) -> None:
        if value is None:
            self.write_bool(False)
        else:
            self.write_bool(True)
            self.write_string(value)

    def write_string_array(self, values: Iterable[str]) -> None:
        items = list(values)
        self.write_vint(len(items))
        for item in items:
            self.write_string(item)

    def write_map(
        self,
        mapping: Mapping[K, V],
        key_writer: Writer[K],
        value_writer: Writer[V],
        version: Version,
    ) -> None:
        """Write a count prefix followed by the entries in the mapping's own iteration order."""
        self.write_vint(len(mapping))
        for key, value in mapping.items():
            key_writer(self, key, version)
            value_writer(self, value, version)


class StreamInput:
    """A read cursor over an immutable byte payload."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._position = 0

    @property
    def position(self) -> int:
        return self._position

    def available(self) -> int:
        return len(self._data) - self._position

    def ensure_can_read(self, length: int) -> None:
        if length > self.available():
            msg = f"Expected {length} more bytes but only {self.available()} remain"
            raise CorruptPayloadError(msg, self._position)

    def read_bytes(self, length: int) -> bytes:
        self.ensure_can_read(length)
        start = self._position
        self._position += length
        return self._data[start : self._position]

    def read_byte(self) -> int:
        self.ensure_can_read(1)
        value = self._data[self._position]
        self._position += 1
        return value

    def read_bool(self) -> bool:
        offset = self._position
        value = self.read_byte()
        if value == 0:
            return False
        if value == 1:
            return True
        msg = f"Unexpected byte for boolean: {value:#04x}"
        raise CorruptPayloadError(msg, offset)

    def read_int(self) -> int:
        return int(_INT.unpack(self.read_bytes(_INT.size))[0])

    def read_long(self) -> int:
        return int(_LONG.unpack(self.read_bytes(_LONG.size))[0])

    def read_vint(self) -> int:
        offset = self._position
        result = 0
        for group in range(_MAX_VINT_BYTES):
            byte = self.read_byte()
            result |= (byte & 0x7F) << (7 * group)
            if not byte & 0x80:
                if result > INT_MAX:
                    break
                return result
        msg = "Invalid vint"
        raise CorruptPayloadError(msg, offset)

    def read_array_size(self) -> int:
        """Read a collection count; every element needs at least one byte."""
        offset = self._position
        size = self.read_vint()
        if size > self.available():
            msg = f"Declared {size} entries but only {self.available()} bytes remain"
            raise CorruptPayloadError(msg, offset)
        return size

    def read_string(self) -> str:
        length = self.read_vint()
        offset = self._position
        raw = self.read_bytes(length)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            msg = f"Invalid UTF-8 string: {e.reason}"
            raise CorruptPayloadError(msg, offset) from e

    def read_optional_string(self) -> str | None:
        if self.read_bool():
            return self.read_string()
        return None

    def read_string_array(self) -> list[str]:
        return [self.read_string() for _ in range(self.read_array_size())]

    def read_map(self, key_reader: Reader[K], value_reader: Reader[V], version: Version) -> dict[K, V]:
        """Read a count prefix and that many entries. A repeated key keeps the last value."""
        result: dict[K, V] = {}
        for _ in range(self.read_array_size()):
            key = key_reader(self, version)
            result[key] = value_reader(self, version)
        return result


Writer = Callable[[StreamOutput, T, Version], None]
Reader = Callable[[StreamInput, Version], T]


def write_version(out: StreamOutput, version: Version) -> None:
    """Write the fixed-width version tag that opens every payload."""
    out.write_int(version.id)


def read_version(stream: StreamInput) -> Version:
    offset = stream.position
    version_id = stream.read_int()
    if version_id <= 0:
        msg = f"Invalid version id {version_id}"
        raise CorruptPayloadError(msg, offset)
    return Version.from_id(version_id)
