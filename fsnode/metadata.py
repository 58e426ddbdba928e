"""Builds FileSystemNode records from filesystem metadata of a single entry."""

import logging
import os
import stat
from pathlib import Path
from typing import Optional, Union

from fsnode.types import FileSystemNode, FileSystemNodeType, FileSystemPermission

logger = logging.getLogger(__name__)

NANOSECONDS_PER_SECOND = 1_000_000_000


def _apply_metadata(
    node: FileSystemNode,
    path: str,
    is_dir: Optional[bool],
    st: Optional[os.stat_result]
) -> None:
    """
    Fill optional fields from whatever metadata could be read.

    Args:
        node: Record to populate
        path: Filesystem path used for the access check
        is_dir: Entry type, or None if it could not be determined
        st: Stat result, or None if it could not be read
    """
    if is_dir is not None:
        node.set("node_type", FileSystemNodeType.DIRECTORY if is_dir else FileSystemNodeType.FILE)

    if st is None:
        return

    writable = os.access(path, os.W_OK)
    node.set("permissions", FileSystemPermission.READ_WRITE if writable else FileSystemPermission.READ_ONLY)
    node.set("last_modified", st.st_mtime_ns // NANOSECONDS_PER_SECOND)

    if is_dir is False:
        node.set("size", st.st_size)


def node_from_dir_entry(entry: os.DirEntry) -> FileSystemNode:
    """
    Convert one directory entry (as yielded by os.scandir) into a record.

    Symlinks are followed. Fields whose metadata cannot be read are left absent.

    Args:
        entry: Directory entry

    Returns:
        Populated record
    """
    node = FileSystemNode(name=entry.name)

    is_dir = None
    try:
        is_dir = entry.is_dir()
    except OSError as e:
        logger.debug(f"Cannot determine type of {entry.path}: {e}")

    st = None
    try:
        st = entry.stat()
    except OSError as e:
        logger.debug(f"Cannot stat {entry.path}: {e}")

    _apply_metadata(node, entry.path, is_dir, st)
    return node


def node_from_path(path: Union[str, Path]) -> FileSystemNode:
    """
    Convert a single path into a record named after its final component.

    Args:
        path: Filesystem path

    Returns:
        Populated record; only `name` is set when the path cannot be stat'ed
    """
    path = Path(path)
    node = FileSystemNode(name=path.name)

    try:
        st = path.stat()
    except OSError as e:
        logger.debug(f"Cannot stat {path}: {e}")
        return node

    _apply_metadata(node, str(path), stat.S_ISDIR(st.st_mode), st)
    return node
