import io

import pytest

from merkleledger.block import Block
from merkleledger.hashing import sha256_hex
from merkleledger.merkle import MerkleTree


@pytest.fixture
def csv_file(tmp_path):
    path = tmp_path / "block.csv"
    path.write_text("sender,receiver,amount\nalice,bob,10\nbob,carol,5\ncarol,dave,2\n", encoding="utf-8")
    return path


def test_header_is_skipped(csv_file):
    block = Block(csv_file)
    assert block.data_blocks == ["alice,bob,10", "bob,carol,5", "carol,dave,2"]


def test_root_hash_matches_tree_over_records(csv_file):
    block = Block(csv_file)
    tree = MerkleTree(["alice,bob,10", "bob,carol,5", "carol,dave,2"])
    tree.build()
    assert block.root_hash() == tree.root_hash()


def test_block_hash_combines_root_and_previous(csv_file):
    block = Block(csv_file, "abc")
    assert block.prev_hash() == "abc"
    assert block.block_hash() == sha256_hex(block.root_hash() + "abc")


def test_default_previous_hash_is_empty(csv_file):
    block = Block(csv_file)
    assert block.prev_hash() == ""
    assert block.block_hash() == sha256_hex(block.root_hash())


def test_previous_hash_changes_block_hash(csv_file):
    assert Block(csv_file, "a").block_hash() != Block(csv_file, "b").block_hash()
    assert Block(csv_file, "a").root_hash() == Block(csv_file, "b").root_hash()


def test_print_file_writes_records(csv_file):
    block = Block(csv_file)
    out = io.StringIO()
    block.print_file(out)
    assert out.getvalue() == "alice,bob,10\nbob,carol,5\ncarol,dave,2\n"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Block(tmp_path / "absent.csv")


def test_header_only_file_has_no_records(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("header\n", encoding="utf-8")
    with pytest.raises(ValueError):
        Block(path)


def test_last_line_without_newline_is_kept(tmp_path):
    path = tmp_path / "b.csv"
    path.write_text("h\nx\ny", encoding="utf-8")
    assert Block(path).data_blocks == ["x", "y"]


def test_read_file_appends_and_returns_records(csv_file, tmp_path):
    other = tmp_path / "other.csv"
    other.write_text("h\nextra\n", encoding="utf-8")
    block = Block(csv_file)
    assert block.read_file(other) == ["extra"]
    assert block.data_blocks[-1] == "extra"
    assert len(block.data_blocks) == 4


def test_records_verify_in_tree(csv_file):
    block = Block(csv_file)
    for index, record in enumerate(block.data_blocks):
        assert block.tree.verify(index, sha256_hex(record))