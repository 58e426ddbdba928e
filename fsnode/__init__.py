"""Binary wire codec for FileSystemNode records."""

from fsnode.decoder import decode
from fsnode.encoder import encode
from fsnode.exceptions import (
    CodecError,
    DecodeError,
    EncodeError,
    FieldValueError,
    InvalidUtf8Error,
    MalformedFieldError,
    MessageTooLargeError,
    NameTooLargeError,
    UnexpectedEndOfInputError,
    UnknownFieldError,
    VarintOverflowError,
)
from fsnode.types import FileSystemNode, FileSystemNodeType, FileSystemPermission

__all__ = [
    "encode",
    "decode",
    "FileSystemNode",
    "FileSystemNodeType",
    "FileSystemPermission",
    "CodecError",
    "DecodeError",
    "EncodeError",
    "FieldValueError",
    "InvalidUtf8Error",
    "MalformedFieldError",
    "MessageTooLargeError",
    "NameTooLargeError",
    "UnexpectedEndOfInputError",
    "UnknownFieldError",
    "VarintOverflowError",
]
