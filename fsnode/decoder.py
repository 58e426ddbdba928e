"""Parses the binary wire form back into a FileSystemNode.

Unknown field numbers are skipped using their wire type, which lets an
older decoder read bytes written by a newer producer. A known field framed
with the wrong wire type is rejected instead of being reinterpreted.
"""

import logging
from enum import Enum
from typing import Union

from fsnode import config
from fsnode.constants import (
    WIRE_TYPE_FIXED32,
    WIRE_TYPE_FIXED64,
    WIRE_TYPE_LENGTH_DELIMITED,
    WIRE_TYPE_VARINT,
)
from fsnode.exceptions import (
    DecodeError,
    InvalidUtf8Error,
    MalformedFieldError,
    MessageTooLargeError,
    UnexpectedEndOfInputError,
)
from fsnode.types import FIELDS_BY_NUMBER, KIND_INT64, KIND_STRING, FileSystemNode
from fsnode.varint import decode_varint, split_tag, to_int64

logger = logging.getLogger(__name__)

FIXED_WIDTHS = {WIRE_TYPE_FIXED64: 8, WIRE_TYPE_FIXED32: 4}


class DecoderState(Enum):
    READING_TAG = "reading_tag"
    READING_VALUE = "reading_value"
    DONE = "done"
    FAILED = "failed"


class FileSystemNodeDecoder:
    """
    Single-use parser over one input buffer.

    Walks READING_TAG -> READING_VALUE -> READING_TAG until the input ends
    on a tag boundary (DONE). Any error moves to FAILED and is raised; the
    partially filled record is discarded.
    """

    def __init__(self, data: Union[bytes, bytearray, memoryview]):
        self.data = bytes(data)
        self.pos = 0
        self.state = DecoderState.READING_TAG
        self.field_number = 0
        self.wire_type = 0
        self.skipped_fields = 0
        self._node = FileSystemNode()

    def run(self) -> FileSystemNode:
        """
        Parse the whole buffer.

        Returns:
            Decoded record
        """
        try:
            while self.state is not DecoderState.DONE:
                if self.state is DecoderState.READING_TAG:
                    self._read_tag()
                else:
                    self._read_value()
        except DecodeError as e:
            self.state = DecoderState.FAILED
            logger.debug(f"Decode failed at offset {e.offset}: {e}")
            raise

        if self.skipped_fields:
            logger.debug(f"Skipped {self.skipped_fields} unknown field(s)")
        return self._node

    def _read_tag(self) -> None:
        if self.pos == len(self.data):
            self.state = DecoderState.DONE
            return

        tag_offset = self.pos
        tag, self.pos = decode_varint(self.data, self.pos)
        self.field_number, self.wire_type = split_tag(tag)

        if self.field_number == 0:
            raise MalformedFieldError("Field number 0 is not allowed", offset=tag_offset)

        self.state = DecoderState.READING_VALUE

    def _read_value(self) -> None:
        spec = FIELDS_BY_NUMBER.get(self.field_number)

        if spec is None:
            self._skip_unknown()
        elif self.wire_type != spec.wire_type:
            raise MalformedFieldError(
                f"Field {self.field_number} ({spec.name}) has wire type {self.wire_type}, "
                f"expected {spec.wire_type}",
                offset=self.pos,
                field_number=self.field_number,
            )
        elif spec.kind == KIND_STRING:
            self._node.set(spec.name, self._decode_text(self._read_length_delimited()))
        else:
            value, self.pos = decode_varint(self.data, self.pos)
            if spec.kind == KIND_INT64:
                value = to_int64(value)
            self._node.set(spec.name, value)

        self.state = DecoderState.READING_TAG

    def _read_length_delimited(self) -> bytes:
        length, start = decode_varint(self.data, self.pos)
        end = start + length
        if end > len(self.data):
            raise UnexpectedEndOfInputError(
                f"Length-delimited field declares {length} bytes, "
                f"{len(self.data) - start} remain",
                offset=start,
                field_number=self.field_number,
            )
        self.pos = end
        return self.data[start:end]

    def _decode_text(self, payload: bytes) -> str:
        if not config.STRICT_UTF8:
            return payload.decode("utf-8", errors="replace")
        try:
            return payload.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidUtf8Error(
                f"Field {self.field_number} is not valid UTF-8: {e.reason}",
                offset=self.pos - len(payload) + e.start,
                field_number=self.field_number,
            ) from e

    def _skip_unknown(self) -> None:
        if self.wire_type == WIRE_TYPE_VARINT:
            _, self.pos = decode_varint(self.data, self.pos)
        elif self.wire_type == WIRE_TYPE_LENGTH_DELIMITED:
            self._read_length_delimited()
        elif self.wire_type in FIXED_WIDTHS:
            end = self.pos + FIXED_WIDTHS[self.wire_type]
            if end > len(self.data):
                raise UnexpectedEndOfInputError(
                    f"Fixed-width field {self.field_number} is truncated",
                    offset=self.pos,
                    field_number=self.field_number,
                )
            self.pos = end
        else:
            raise MalformedFieldError(
                f"Unsupported wire type {self.wire_type} on field {self.field_number}",
                offset=self.pos,
                field_number=self.field_number,
            )
        self.skipped_fields += 1


def decode(data: Union[bytes, bytearray, memoryview]) -> FileSystemNode:
    """
    Decode bytes into a new FileSystemNode.

    Args:
        data: Encoded record

    Returns:
        Decoded record; never a partial one

    Raises:
        DecodeError: One of its subclasses describing why the input was rejected
    """
    limit = config.MAX_MESSAGE_BYTES
    if limit > 0 and len(data) > limit:
        raise MessageTooLargeError(f"Input is {len(data)} bytes, limit is {limit}")
    return FileSystemNodeDecoder(data).run()
