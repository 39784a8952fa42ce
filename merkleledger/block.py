"""A ledger block: a Merkle tree over the records of a CSV file."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO, Union

from .hashing import sha256_hex
from .merkle import MerkleTree

PathLike = Union[str, Path]


class Block:
    """A block whose records are the lines of a file after its header line.

    The block hash is the SHA-256 of the Merkle root digest followed by the
    previous block's hash.
    """

    def __init__(self, filename: PathLike, prev_hash: str = "") -> None:
        self._prev_hash = prev_hash
        self._data_blocks: list[str] = []
        self.read_file(filename)
        self._tree = MerkleTree(self._data_blocks)
        self._tree.build()

    def read_file(self, filename: PathLike) -> list[str]:
        """Append the records of ``filename`` (header skipped) and return them.

        Raises OSError if the file cannot be opened.
        """
        with open(filename, encoding="utf-8", newline="") as handle:
            records = list(self._records(handle))
        self._data_blocks.extend(records)
        return records

    @staticmethod
    def _records(handle: TextIO) -> Iterator[str]:
        lines = (line[:-1] if line.endswith("\n") else line for line in handle)
        next(lines, None)
        yield from lines

    @property
    def data_blocks(self) -> list[str]:
        """The records held by this block, in file order."""
        return list(self._data_blocks)

    @property
    def tree(self) -> MerkleTree:
        """The Merkle tree built over the records."""
        return self._tree

    def print_file(self, stream: TextIO | None = None) -> None:
        """Write each record on its own line."""
        out = sys.stdout if stream is None else stream
        for entry in self._data_blocks:
            print(entry, file=out)

    def root_hash(self) -> str:
        """Merkle root digest of the records."""
        return self._tree.root_hash()

    def block_hash(self) -> str:
        """Digest identifying this block within a chain."""
        return sha256_hex(self.root_hash() + self._prev_hash)

    def prev_hash(self) -> str:
        """Hash of the preceding block; empty for the first block."""
        return self._prev_hash