"""Custom exception classes for the FileSystemNode codec."""

from typing import Optional


class CodecError(Exception):
    """
    Base exception class for all codec errors.
    """
    pass


class FieldValueError(CodecError, ValueError):
    """
    Raised when a value is outside the domain of the field it is assigned to.
    """
    pass


class UnknownFieldError(CodecError, KeyError):
    """
    Raised when a record accessor is called with a field name the record does not define.
    """

    def __str__(self) -> str:
        return Exception.__str__(self)


class EncodeError(CodecError):
    """
    Base class for failures while producing bytes from a record.
    """
    pass


class NameTooLargeError(EncodeError):
    """
    Raised when the UTF-8 encoded name exceeds the configured limit.
    """
    pass


class DecodeError(CodecError):
    """
    Base class for failures while parsing bytes into a record.

    Attributes:
        offset: Byte position in the input where the problem was detected
        field_number: Field number being read, if a tag had been parsed
    """

    def __init__(self, message: str, offset: int = 0, field_number: Optional[int] = None):
        super().__init__(message)
        self.offset = offset
        self.field_number = field_number


class MalformedFieldError(DecodeError):
    """
    Raised when a field carries a wire type it cannot have.
    """
    pass


class VarintOverflowError(DecodeError):
    """
    Raised when a varint does not fit in 64 bits.
    """
    pass


class UnexpectedEndOfInputError(DecodeError):
    """
    Raised when the input ends in the middle of a tag or payload.
    """
    pass


class InvalidUtf8Error(DecodeError):
    """
    Raised when the name payload is not valid UTF-8.
    """
    pass


class MessageTooLargeError(DecodeError):
    """
    Raised when the input is larger than the configured message limit.
    """
    pass
