"""Base-128 varint and tag primitives shared by the encoder and decoder."""

from typing import Tuple

from fsnode.constants import (
    INT64_MAX,
    INT64_MIN,
    MAX_VARINT_BYTES,
    TAG_TYPE_BITS,
    TAG_TYPE_MASK,
    UINT64_MAX,
)
from fsnode.exceptions import (
    FieldValueError,
    UnexpectedEndOfInputError,
    VarintOverflowError,
)


def encode_varint(value: int) -> bytes:
    """
    Encode an unsigned 64-bit integer as a little-endian base-128 varint.

    Args:
        value: Integer in the range 0..2**64-1

    Returns:
        Between 1 and 10 bytes, high bit set on all but the last
    """
    if value < 0 or value > UINT64_MAX:
        raise FieldValueError(f"Varint value out of uint64 range: {value}")

    out = bytearray()
    while value > 0x7F:
        out.append((value & 0x7F) | 0x80)
        value >>= 7
    out.append(value)
    return bytes(out)


def decode_varint(data: bytes, pos: int) -> Tuple[int, int]:
    """
    Decode a varint starting at pos.

    Args:
        data: Input buffer
        pos: Offset of the first varint byte

    Returns:
        Tuple of (value, offset just past the varint)
    """
    result = 0
    shift = 0
    start = pos
    end = len(data)

    while True:
        if pos - start >= MAX_VARINT_BYTES:
            raise VarintOverflowError(
                f"Varint longer than {MAX_VARINT_BYTES} bytes", offset=start
            )
        if pos >= end:
            raise UnexpectedEndOfInputError("Input ended inside a varint", offset=pos)

        byte = data[pos]
        pos += 1
        result |= (byte & 0x7F) << shift

        if not byte & 0x80:
            break
        shift += 7

    if result > UINT64_MAX:
        raise VarintOverflowError("Varint exceeds 64 bits", offset=start)

    return result, pos


def to_uint64(value: int) -> int:
    """Reinterpret a signed 64-bit value as its two's-complement unsigned pattern."""
    if value < INT64_MIN or value > INT64_MAX:
        raise FieldValueError(f"Value out of int64 range: {value}")
    return value & UINT64_MAX


def to_int64(value: int) -> int:
    """Reinterpret an unsigned 64-bit pattern as a signed two's-complement value."""
    if value > INT64_MAX:
        return value - (1 << 64)
    return value


def encode_tag(field_number: int, wire_type: int) -> bytes:
    """Encode a field key as the varint (field_number << 3) | wire_type."""
    return encode_varint((field_number << TAG_TYPE_BITS) | wire_type)


def split_tag(tag: int) -> Tuple[int, int]:
    """Split a decoded tag into (field_number, wire_type)."""
    return tag >> TAG_TYPE_BITS, tag & TAG_TYPE_MASK
