"""Pydantic schema for the JSON view of a FileSystemNode."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from fsnode.constants import INT64_MAX, INT64_MIN, UINT64_MAX
from fsnode.types import FIELDS, FileSystemNode


class FileSystemNodeSchema(BaseModel):
    """JSON representation of a FileSystemNode. None means the field is absent."""
    name: str = ""
    node_type: Optional[int] = Field(None, ge=0, le=UINT64_MAX)
    permissions: Optional[int] = Field(None, ge=0, le=UINT64_MAX)
    last_modified: Optional[int] = Field(None, ge=INT64_MIN, le=INT64_MAX)
    size: Optional[int] = Field(None, ge=0, le=UINT64_MAX)

    @classmethod
    def from_node(cls, node: FileSystemNode) -> "FileSystemNodeSchema":
        values: Dict[str, Any] = {"name": node.name}
        for spec in FIELDS:
            if spec.optional and node.has(spec.name):
                values[spec.name] = node.raw(spec.name)
        return cls(**values)

    def to_node(self) -> FileSystemNode:
        node = FileSystemNode(name=self.name)
        for spec in FIELDS:
            if not spec.optional:
                continue
            value = getattr(self, spec.name)
            if value is not None:
                node.set(spec.name, value)
        return node


def node_to_dict(node: FileSystemNode) -> Dict[str, Any]:
    """
    Convert a record into a JSON-ready dict.

    Args:
        node: Record to convert

    Returns:
        Dict with `name` and every present optional field; absent fields are omitted
    """
    return FileSystemNodeSchema.from_node(node).model_dump(exclude_none=True)
