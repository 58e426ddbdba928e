"""Wire-format constants (field numbers, wire types, integer bounds)."""

WIRE_TYPE_VARINT: int = 0
WIRE_TYPE_FIXED64: int = 1
WIRE_TYPE_LENGTH_DELIMITED: int = 2
WIRE_TYPE_START_GROUP: int = 3
WIRE_TYPE_END_GROUP: int = 4
WIRE_TYPE_FIXED32: int = 5

TAG_TYPE_BITS: int = 3
TAG_TYPE_MASK: int = (1 << TAG_TYPE_BITS) - 1

FIELD_NAME: int = 1
FIELD_NODE_TYPE: int = 2
FIELD_PERMISSIONS: int = 3
FIELD_LAST_MODIFIED: int = 4
FIELD_SIZE: int = 5

MAX_VARINT_BYTES: int = 10  # enough for 64 bits at 7 bits per byte

UINT64_MAX: int = (1 << 64) - 1
INT64_MIN: int = -(1 << 63)
INT64_MAX: int = (1 << 63) - 1
