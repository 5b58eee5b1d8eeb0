"""
Open Assets Protocol Serialization Utilities

Fixed-width integers are BIG-ENDIAN. Compact size prefixes use the
Bitcoin encoding (little-endian payload), asset quantities use LEB128.
"""

from __future__ import annotations
from typing import Tuple

from oap.constants import (
    BIG_ENDIAN,
    LITTLE_ENDIAN,
    COMPACT_SIZE_U16,
    COMPACT_SIZE_U32,
    COMPACT_SIZE_U64,
    LEB128_CONTINUATION,
    LEB128_VALUE_MASK,
    LEB128_GROUP_BITS,
)
from oap.errors import (
    TruncatedLengthError,
    TruncatedVarintError,
    TruncatedMetadataError,
)


# ==============================================================================
# Integer Serialization (Big-Endian)
# ==============================================================================

def serialize_u16(value: int) -> bytes:
    """Serialize unsigned 16-bit integer (big-endian)."""
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"u16 value out of range: {value}")
    return value.to_bytes(2, BIG_ENDIAN)


def deserialize_u16(data: bytes, offset: int = 0) -> Tuple[int, int]:
    """
    Deserialize unsigned 16-bit integer (big-endian).
    Returns (value, bytes_consumed).

    A short read yields the value of the bytes present, so a truncated
    header never compares equal to a protocol constant.
    """
    return int.from_bytes(data[offset:offset + 2], BIG_ENDIAN), 2


# ==============================================================================
# Compact Size (Bitcoin-style varint)
# ==============================================================================

def serialize_varint(value: int) -> bytes:
    """
    Serialize integer as variable-length integer (Bitcoin-style).

    - 0x00-0xFC: 1 byte
    - 0xFD-0xFFFF: 0xFD + 2 bytes (little-endian)
    - 0x10000-0xFFFFFFFF: 0xFE + 4 bytes (little-endian)
    - 0x100000000+: 0xFF + 8 bytes (little-endian)
    """
    if value < 0:
        raise ValueError(f"Varint cannot be negative: {value}")
    if value > 0xFFFFFFFFFFFFFFFF:
        raise ValueError(f"Varint out of range: {value}")

    if value < COMPACT_SIZE_U16:
        return bytes([value])
    elif value <= 0xFFFF:
        return bytes([COMPACT_SIZE_U16]) + value.to_bytes(2, LITTLE_ENDIAN)
    elif value <= 0xFFFFFFFF:
        return bytes([COMPACT_SIZE_U32]) + value.to_bytes(4, LITTLE_ENDIAN)
    else:
        return bytes([COMPACT_SIZE_U64]) + value.to_bytes(8, LITTLE_ENDIAN)


def deserialize_varint(data: bytes, offset: int = 0) -> Tuple[int, int]:
    """
    Deserialize variable-length integer.
    Returns (value, bytes_consumed).

    Raises:
        TruncatedLengthError: If the prefix or its payload is cut short
    """
    available = len(data) - offset
    if available < 1:
        raise TruncatedLengthError(offset, 1, max(available, 0))

    first_byte = data[offset]
    if first_byte < COMPACT_SIZE_U16:
        return first_byte, 1

    if first_byte == COMPACT_SIZE_U16:
        width = 2
    elif first_byte == COMPACT_SIZE_U32:
        width = 4
    else:  # 0xFF
        width = 8

    if available < 1 + width:
        raise TruncatedLengthError(offset, 1 + width, available)
    value = int.from_bytes(data[offset + 1:offset + 1 + width], LITTLE_ENDIAN)
    return value, 1 + width


def varint_size(value: int) -> int:
    """Return the number of bytes needed to encode value as varint."""
    if value < COMPACT_SIZE_U16:
        return 1
    elif value <= 0xFFFF:
        return 3
    elif value <= 0xFFFFFFFF:
        return 5
    else:
        return 9


# ==============================================================================
# LEB128 (unsigned)
# ==============================================================================

def leb128_encode(value: int) -> bytes:
    """
    Encode an unsigned integer as LEB128.

    Always canonical: emission stops as soon as the remaining value is zero.
    """
    if value < 0:
        raise ValueError(f"LEB128 value cannot be negative: {value}")

    result = bytearray()
    while True:
        byte = value & LEB128_VALUE_MASK
        value >>= LEB128_GROUP_BITS
        if value != 0:
            byte |= LEB128_CONTINUATION
        result.append(byte)
        if value == 0:
            return bytes(result)


def leb128_decode(data: bytes, offset: int = 0) -> Tuple[int, int]:
    """
    Decode an unsigned LEB128 value.
    Returns (value, bytes_consumed).

    Decoding stops at the first byte with the high bit clear. Padded
    (non-canonical) encodings are accepted and yield the same value as
    their canonical form.

    Raises:
        TruncatedVarintError: If the data ends before a terminating byte
    """
    result = 0
    shift = 0
    position = offset
    while position < len(data):
        byte = data[position]
        result |= (byte & LEB128_VALUE_MASK) << shift
        position += 1
        if not byte & LEB128_CONTINUATION:
            return result, position - offset
        shift += LEB128_GROUP_BITS

    raise TruncatedVarintError(offset)


# ==============================================================================
# Byte Array Serialization
# ==============================================================================

def serialize_bytes(data: bytes) -> bytes:
    """
    Serialize variable-length byte array with length prefix (varint).
    Format: varint(length) || data
    """
    return serialize_varint(len(data)) + data


def deserialize_bytes(data: bytes, offset: int = 0) -> Tuple[bytes, int]:
    """
    Deserialize variable-length byte array.
    Returns (bytes_data, total_bytes_consumed).

    Raises:
        TruncatedLengthError: If the length prefix is cut short
        TruncatedMetadataError: If fewer bytes remain than the prefix declares
    """
    length, length_size = deserialize_varint(data, offset)
    start = offset + length_size
    available = len(data) - start
    if available < length:
        raise TruncatedMetadataError(start, length, available)
    return data[start:start + length], length_size + length


# ==============================================================================
# Sequential Helpers
# ==============================================================================

class ByteReader:
    """
    Helper class for sequential deserialization.
    """

    def __init__(self, data: bytes):
        self.data = data
        self.offset = 0

    def read_u16(self) -> int:
        value, size = deserialize_u16(self.data, self.offset)
        self.offset += size
        return value

    def read_varint(self) -> int:
        value, size = deserialize_varint(self.data, self.offset)
        self.offset += size
        return value

    def read_leb128(self) -> int:
        value, size = leb128_decode(self.data, self.offset)
        self.offset += size
        return value

    def read_bytes(self) -> bytes:
        """Read variable-length byte array (varint-prefixed)."""
        value, size = deserialize_bytes(self.data, self.offset)
        self.offset += size
        return value

    def remaining(self) -> int:
        """Return number of bytes remaining."""
        return max(len(self.data) - self.offset, 0)

    def is_empty(self) -> bool:
        """Check if all bytes have been read."""
        return self.offset >= len(self.data)


class ByteWriter:
    """
    Helper class for sequential serialization.
    """

    def __init__(self):
        self.buffer = bytearray()

    def write_u16(self, value: int) -> "ByteWriter":
        self.buffer.extend(serialize_u16(value))
        return self

    def write_varint(self, value: int) -> "ByteWriter":
        self.buffer.extend(serialize_varint(value))
        return self

    def write_leb128(self, value: int) -> "ByteWriter":
        self.buffer.extend(leb128_encode(value))
        return self

    def write_bytes(self, data: bytes) -> "ByteWriter":
        """Write variable-length byte array (varint-prefixed)."""
        self.buffer.extend(serialize_bytes(data))
        return self

    def write_raw(self, data: bytes) -> "ByteWriter":
        """Write raw bytes without length prefix."""
        self.buffer.extend(data)
        return self

    def to_bytes(self) -> bytes:
        """Return the serialized bytes."""
        return bytes(self.buffer)

    def __len__(self) -> int:
        return len(self.buffer)
