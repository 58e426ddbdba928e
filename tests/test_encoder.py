"""Unit tests for the encoder byte layout."""

import pytest

from fsnode import config
from fsnode.encoder import encode, encode_length_delimited
from fsnode.exceptions import EncodeError, NameTooLargeError
from fsnode.types import FileSystemNode, FileSystemNodeType, FileSystemPermission


class TestEncodeLayout:
    """Test exact bytes produced for records."""

    def test_empty_record_writes_only_name(self):
        assert encode(FileSystemNode()) == b"\x0a\x00"

    def test_all_fields(self):
        node = FileSystemNode(
            name="a",
            node_type=FileSystemNodeType.FILE,
            permissions=FileSystemPermission.READ_WRITE,
            last_modified=1,
            size=300,
        )
        assert encode(node) == b"\x0a\x01a\x10\x00\x18\x01\x20\x01\x28\xac\x02"

    def test_present_zero_values_are_written(self):
        node = FileSystemNode(size=0, node_type=FileSystemNodeType.FILE)
        assert encode(node) == b"\x0a\x00\x10\x00\x28\x00"

    def test_negative_timestamp_uses_ten_byte_twos_complement(self):
        node = FileSystemNode(last_modified=-1)
        assert encode(node) == b"\x0a\x00\x20" + b"\xff" * 9 + b"\x01"

    def test_utf8_name(self):
        assert encode(FileSystemNode(name="é")) == b"\x0a\x02\xc3\xa9"

    def test_unknown_enum_value_written_raw(self):
        assert encode(FileSystemNode(node_type=7)) == b"\x0a\x00\x10\x07"

    def test_length_delimited_helper(self):
        assert encode_length_delimited(7, b"hi") == b"\x3a\x02hi"


class TestEncodeDeterminism:
    """Test that encoding depends only on record state."""

    def test_field_order_independent_of_set_order(self):
        a = FileSystemNode(name="x")
        a.set("size", 5)
        a.set("node_type", 0)
        b = FileSystemNode(name="x")
        b.set("node_type", 0)
        b.set("size", 5)
        assert encode(a) == encode(b)

    def test_repeated_encoding_is_identical(self, file_node):
        assert encode(file_node) == encode(file_node)

    def test_encoding_does_not_modify_record(self, file_node):
        before = file_node.copy()
        encode(file_node)
        assert file_node == before

    def test_cleared_field_is_not_written(self, file_node):
        file_node.clear("size")
        assert encode(file_node) == encode(FileSystemNode(
            name="report.txt",
            node_type=FileSystemNodeType.FILE,
            permissions=FileSystemPermission.READ_WRITE,
            last_modified=1_700_000_000,
        ))


class TestNameLimit:
    """Test the optional name length guard."""

    def test_unbounded_by_default(self, monkeypatch):
        monkeypatch.setattr(config, "MAX_NAME_BYTES", 0)
        assert len(encode(FileSystemNode(name="n" * 5000))) > 5000

    def test_name_over_limit(self, monkeypatch):
        monkeypatch.setattr(config, "MAX_NAME_BYTES", 4)
        with pytest.raises(NameTooLargeError):
            encode(FileSystemNode(name="12345"))

    def test_limit_counts_utf8_bytes(self, monkeypatch):
        monkeypatch.setattr(config, "MAX_NAME_BYTES", 3)
        encode(FileSystemNode(name="ab"))
        with pytest.raises(EncodeError):
            encode(FileSystemNode(name="éé"))
