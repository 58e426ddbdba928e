"""Serializes a FileSystemNode into its binary wire form."""

import logging

from fsnode import config
from fsnode.constants import WIRE_TYPE_LENGTH_DELIMITED
from fsnode.exceptions import NameTooLargeError
from fsnode.types import FIELDS, KIND_INT64, KIND_STRING, FileSystemNode
from fsnode.varint import encode_tag, encode_varint, to_uint64

logger = logging.getLogger(__name__)


def encode_length_delimited(field_number: int, payload: bytes) -> bytes:
    """
    Frame a byte payload as a length-delimited field.

    Args:
        field_number: Field number for the tag
        payload: Raw bytes to write after the length prefix

    Returns:
        Tag, varint length and payload
    """
    return encode_tag(field_number, WIRE_TYPE_LENGTH_DELIMITED) + encode_varint(len(payload)) + payload


def _encode_name(field_number: int, name: str) -> bytes:
    payload = name.encode("utf-8")
    limit = config.MAX_NAME_BYTES
    if limit > 0 and len(payload) > limit:
        raise NameTooLargeError(f"Name is {len(payload)} bytes, limit is {limit}")
    return encode_length_delimited(field_number, payload)


def encode(node: FileSystemNode) -> bytes:
    """
    Encode a record deterministically.

    Fields are written in ascending field-number order. `name` is always
    written; optional fields are written only when present.

    Args:
        node: Record to serialize (not modified)

    Returns:
        Encoded bytes
    """
    out = bytearray()

    for spec in FIELDS:
        if spec.optional and not node.has(spec.name):
            continue

        if spec.kind == KIND_STRING:
            out += _encode_name(spec.number, node.name)
            continue

        value = node.raw(spec.name)
        if spec.kind == KIND_INT64:
            value = to_uint64(value)

        out += encode_tag(spec.number, spec.wire_type)
        out += encode_varint(value)

    logger.debug(f"Encoded FileSystemNode fields={node.present_fields()} size={len(out)}")
    return bytes(out)
