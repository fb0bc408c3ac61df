"""Wire format for the typed simulator protocol.

Every frame starts with one label byte that names the type of the value,
followed by its payload. Integers are 4-byte and doubles 8-byte little-endian
values. Strings and vectors carry a 4-byte element count ahead of their data.
"""

from __future__ import annotations

import enum
import struct
from collections.abc import Callable, Iterable

_CHUNK_SIZE = 8192
_INT = struct.Struct("<i")
_DOUBLE = struct.Struct("<d")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class ValueType(bytes, enum.Enum):
    """Label byte that opens each frame."""

    DOUBLE = b"d"
    INTEGER = b"i"
    STRING = b"s"
    DOUBLE_VECTOR = b"D"
    INTEGER_VECTOR = b"I"

    @property
    def description(self):
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ValueType.DOUBLE: "double value",
    ValueType.INTEGER: "integer value",
    ValueType.STRING: "string value",
    ValueType.DOUBLE_VECTOR: "double vector",
    ValueType.INTEGER_VECTOR: "integer vector",
}


class ProtocolError(Exception):
    """Raised when a frame is malformed, truncated or of an unexpected type."""


def _describe(label: bytes) -> str:
    try:
        kind = ValueType(label)
    except ValueError:
        return f'<unknown "{label[0] if label else -1}">'
    return f"<{kind.description}> '{kind.value.decode('ascii')}'"


def _pack_int(value) -> bytes:
    value = int(value)
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer {value} does not fit into 32 bits")
    return _INT.pack(value)


def encode_int(value):
    """Frame a single 32-bit integer."""
    return ValueType.INTEGER.value + _pack_int(value)


def encode_double(value):
    """Frame a single double."""
    return ValueType.DOUBLE.value + _DOUBLE.pack(float(value))


def encode_string(value):
    """Frame a string as its UTF-8 bytes preceded by their count."""
    data = value.encode("utf-8")
    return ValueType.STRING.value + _pack_int(len(data)) + data


def encode_int_vector(values: Iterable[int]):
    """Frame a sequence of 32-bit integers."""
    items = list(values)
    body = b"".join(_pack_int(v) for v in items)
    return ValueType.INTEGER_VECTOR.value + _pack_int(len(items)) + body


def encode_double_vector(values: Iterable[float]):
    """Frame a sequence of doubles."""
    items = [float(v) for v in items_of(values)]
    body = b"".join(_DOUBLE.pack(v) for v in items)
    return ValueType.DOUBLE_VECTOR.value + _pack_int(len(items)) + body


def items_of(values):
    return list(values)


def _read_exact(read: Callable[[int], bytes], size: int) -> bytes:
    parts = []
    remaining = size
    while remaining > 0:
        chunk = read(min(remaining, _CHUNK_SIZE))
        if not chunk:
            raise ProtocolError(
                f"connection closed with {remaining} of {size} bytes outstanding"
            )
        parts.append(chunk)
        remaining -= len(chunk)
    return b"".join(parts)


def read_frame(read, expected):
    """Read one frame of type ``expected`` using ``read(n) -> bytes``.

    Returns the payload after the label byte; for strings and vectors it
    still starts with the 4-byte count.
    """
    expected = ValueType(expected)
    label = _read_exact(read, 1)
    if label != expected.value:
        raise ProtocolError(
            f"Com communication error. Awaited {_describe(expected.value)}"
            f" but received {_describe(label)}"
        )
    if expected is ValueType.INTEGER:
        return _read_exact(read, _INT.size)
    if expected is ValueType.DOUBLE:
        return _read_exact(read, _DOUBLE.size)

    header = _read_exact(read, _INT.size)
    (count,) = _INT.unpack(header)
    if count < 0:
        raise ProtocolError(f"negative element count {count}")
    width = {
        ValueType.STRING: 1,
        ValueType.INTEGER_VECTOR: _INT.size,
        ValueType.DOUBLE_VECTOR: _DOUBLE.size,
    }[expected]
    return header + _read_exact(read, count * width)


def _require(payload: bytes, size: int, what: str) -> None:
    if len(payload) < size:
        raise ProtocolError(
            f"{what} needs {size} bytes but the payload holds {len(payload)}"
        )


def _count(payload: bytes, what: str) -> int:
    _require(payload, _INT.size, what)
    (count,) = _INT.unpack_from(payload, 0)
    if count < 0:
        raise ProtocolError(f"negative element count {count}")
    return count


def decode_int(payload):
    """Decode the payload of an integer frame."""
    _require(payload, _INT.size, "integer")
    return _INT.unpack_from(payload, 0)[0]


def decode_double(payload):
    """Decode the payload of a double frame."""
    _require(payload, _DOUBLE.size, "double")
    return _DOUBLE.unpack_from(payload, 0)[0]


def decode_string(payload):
    """Decode the payload of a string frame."""
    count = _count(payload, "string")
    _require(payload, _INT.size + count, "string")
    return payload[_INT.size : _INT.size + count].decode("utf-8")


def decode_int_vector(payload):
    """Decode the payload of an integer vector frame."""
    count = _count(payload, "integer vector")
    _require(payload, _INT.size * (count + 1), "integer vector")
    return [v for (v,) in _INT.iter_unpack(payload[_INT.size : _INT.size * (count + 1)])]


def decode_double_vector(payload):
    """Decode the payload of a double vector frame."""
    count = _count(payload, "double vector")
    end = _INT.size + count * _DOUBLE.size
    _require(payload, end, "double vector")
    return [v for (v,) in _DOUBLE.iter_unpack(payload[_INT.size : end])]