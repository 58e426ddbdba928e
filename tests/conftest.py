"""Shared pytest fixtures for all tests."""

import pytest

from fsnode.types import FileSystemNode, FileSystemNodeType, FileSystemPermission


@pytest.fixture
def file_node():
    """
    Create a record with every field present.

    Returns:
        FileSystemNode describing a regular file
    """
    return FileSystemNode(
        name="report.txt",
        node_type=FileSystemNodeType.FILE,
        permissions=FileSystemPermission.READ_WRITE,
        last_modified=1_700_000_000,
        size=4096,
    )


@pytest.fixture
def directory_node():
    """
    Create a directory record without a size.

    Returns:
        FileSystemNode describing a read-only directory
    """
    return FileSystemNode(
        name="docs",
        node_type=FileSystemNodeType.DIRECTORY,
        permissions=FileSystemPermission.READ_ONLY,
        last_modified=-86400,
    )


@pytest.fixture
def unknown_fields_payload():
    """
    Bytes for a record followed by fields a newer producer might add.

    Returns:
        Encoded bytes with unknown fields 6 (varint), 7 (length-delimited),
        8 (32-bit) and 9 (64-bit) interleaved with known ones
    """
    return (
        b"\x0a\x03abc"
        + b"\x30\x96\x01"
        + b"\x10\x01"
        + b"\x3a\x02hi"
        + b"\x45\x01\x02\x03\x04"
        + b"\x28\x0a"
        + b"\x49" + bytes(range(8))
    )
