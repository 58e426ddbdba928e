"""FileSystemNode record model with explicit presence tracking for optional fields."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, List, Optional, Tuple, Type

from fsnode.constants import (
    FIELD_LAST_MODIFIED,
    FIELD_NAME,
    FIELD_NODE_TYPE,
    FIELD_PERMISSIONS,
    FIELD_SIZE,
    INT64_MAX,
    INT64_MIN,
    UINT64_MAX,
    WIRE_TYPE_LENGTH_DELIMITED,
    WIRE_TYPE_VARINT,
)
from fsnode.exceptions import FieldValueError, UnknownFieldError


class FileSystemNodeType(IntEnum):
    FILE = 0
    DIRECTORY = 1


class FileSystemPermission(IntEnum):
    READ_ONLY = 0
    READ_WRITE = 1


KIND_STRING = "string"
KIND_ENUM = "enum"
KIND_INT64 = "int64"
KIND_UINT64 = "uint64"


@dataclass(frozen=True)
class FieldSpec:
    """
    Wire description of one record field.

    Attributes:
        number: Permanent field number used in the tag
        name: Attribute name on the record
        wire_type: Wire type the field is framed with
        kind: Value domain (string, enum, int64, uint64)
        optional: Whether the field has a presence flag
        enum_type: Enum class for enum fields
    """
    number: int
    name: str
    wire_type: int
    kind: str
    optional: bool = True
    enum_type: Optional[Type[IntEnum]] = None

    @property
    def default(self) -> Any:
        if self.kind == KIND_STRING:
            return ""
        if self.enum_type is not None:
            return self.enum_type(0)
        return 0


FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec(FIELD_NAME, "name", WIRE_TYPE_LENGTH_DELIMITED, KIND_STRING, optional=False),
    FieldSpec(FIELD_NODE_TYPE, "node_type", WIRE_TYPE_VARINT, KIND_ENUM, enum_type=FileSystemNodeType),
    FieldSpec(FIELD_PERMISSIONS, "permissions", WIRE_TYPE_VARINT, KIND_ENUM, enum_type=FileSystemPermission),
    FieldSpec(FIELD_LAST_MODIFIED, "last_modified", WIRE_TYPE_VARINT, KIND_INT64),
    FieldSpec(FIELD_SIZE, "size", WIRE_TYPE_VARINT, KIND_UINT64),
)

FIELDS_BY_NUMBER: Dict[int, FieldSpec] = {spec.number: spec for spec in FIELDS}
FIELDS_BY_NAME: Dict[str, FieldSpec] = {spec.name: spec for spec in FIELDS}


def _field_spec(field: str) -> FieldSpec:
    try:
        return FIELDS_BY_NAME[field]
    except KeyError:
        raise UnknownFieldError(f"FileSystemNode has no field '{field}'") from None


def _check_value(spec: FieldSpec, value: Any) -> Any:
    """
    Validate a value against its field and return the form stored on the record.

    Enum fields are stored as plain ints so that values outside the known
    members survive unchanged.
    """
    if spec.kind == KIND_STRING:
        if not isinstance(value, str):
            raise FieldValueError(f"Field '{spec.name}' expects str, got {type(value).__name__}")
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as e:
            raise FieldValueError(f"Field '{spec.name}' is not encodable as UTF-8: {e.reason}") from e
        return value

    if isinstance(value, bool) or not isinstance(value, int):
        raise FieldValueError(f"Field '{spec.name}' expects int, got {type(value).__name__}")

    if spec.kind == KIND_INT64:
        if value < INT64_MIN or value > INT64_MAX:
            raise FieldValueError(f"Field '{spec.name}' out of int64 range: {value}")
    elif value < 0 or value > UINT64_MAX:
        raise FieldValueError(f"Field '{spec.name}' out of uint64 range: {value}")

    return int(value)


class FileSystemNode:
    """
    One filesystem entry (file or directory).

    `name` is always present. Every other field has its own presence flag,
    so an absent `size` is distinct from `size == 0`.

    Usage:
        node = FileSystemNode(name="report.txt", node_type=FileSystemNodeType.FILE)
        node.set("size", 1024)
        value, present = node.get("size")
        node.clear("size")
    """

    __slots__ = ("_values", "_present")

    def __init__(self, name: str = "", **fields: Any):
        self._values: Dict[str, Any] = {spec.name: spec.default for spec in FIELDS}
        self._present: Dict[str, bool] = {spec.name: False for spec in FIELDS if spec.optional}
        self.set("name", name)
        for field, value in fields.items():
            self.set(field, value)

    def set(self, field: str, value: Any) -> None:
        """
        Assign a field and mark it present.

        Args:
            field: Field name
            value: New value; enum fields accept members or raw ints
        """
        spec = _field_spec(field)
        self._values[field] = _check_value(spec, value)
        if spec.optional:
            self._present[field] = True

    def get(self, field: str) -> Tuple[Any, bool]:
        """
        Read a field together with its presence flag.

        Returns:
            Tuple of (value, is_present). Absent fields report the wire default.
            Enum values come back as enum members when known, raw ints otherwise.
        """
        spec = _field_spec(field)
        if not spec.optional:
            return self._values[field], True
        if not self._present[field]:
            return spec.default, False

        value = self._values[field]
        if spec.enum_type is not None:
            try:
                return spec.enum_type(value), True
            except ValueError:
                return value, True
        return value, True

    def clear(self, field: str) -> None:
        """Mark a field absent. Clearing `name` resets it to the empty string."""
        spec = _field_spec(field)
        self._values[field] = spec.default
        if spec.optional:
            self._present[field] = False

    def has(self, field: str) -> bool:
        spec = _field_spec(field)
        return not spec.optional or self._present[field]

    def raw(self, field: str) -> int:
        """Stored integer for a present numeric or enum field, without enum conversion."""
        spec = _field_spec(field)
        if spec.kind == KIND_STRING:
            raise FieldValueError(f"Field '{field}' is not numeric")
        return self._values[field]

    def present_fields(self) -> List[str]:
        return [spec.name for spec in FIELDS if not spec.optional or self._present[spec.name]]

    def copy(self) -> "FileSystemNode":
        clone = FileSystemNode()
        clone._values = dict(self._values)
        clone._present = dict(self._present)
        return clone

    @property
    def name(self) -> str:
        return self._values["name"]

    def _state(self) -> Tuple:
        return tuple(
            (spec.name, self._values[spec.name])
            for spec in FIELDS
            if not spec.optional or self._present[spec.name]
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileSystemNode):
            return NotImplemented
        return self._state() == other._state()

    __hash__ = None

    def __repr__(self) -> str:
        parts = [f"{name}={value!r}" for name, value in self._state()]
        return f"FileSystemNode({', '.join(parts)})"
