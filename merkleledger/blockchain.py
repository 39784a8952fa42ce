"""A chain of blocks, each linked to the hash of the one before it."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import TextIO

from .block import Block, PathLike

DEFAULT_GENESIS_FILE = "dataset/block1.csv"


class Blockchain:
    """An append-only list of blocks started from a genesis file."""

    def __init__(self, genesis_file: PathLike = DEFAULT_GENESIS_FILE) -> None:
        self._chain: list[Block] = [Block(genesis_file, "")]

    def __len__(self) -> int:
        return len(self._chain)

    def __iter__(self) -> Iterator[Block]:
        return iter(self._chain)

    def __getitem__(self, index: int) -> Block:
        return self._chain[index]

    def latest_hash(self) -> str:
        """Hash of the most recently added block."""
        return self._chain[-1].block_hash()

    def add_block(self, filename: PathLike) -> Block:
        """Append a block built from ``filename`` and return it."""
        block = Block(filename, self.latest_hash())
        self._chain.append(block)
        return block

    def print_chain(self, stream: TextIO | None = None) -> None:
        """Write a summary of every block, numbered from 1."""
        out = sys.stdout if stream is None else stream
        for number, block in enumerate(self._chain, start=1):
            print(f"Block #{number}", file=out)
            print(f"Previous Hash: {block.prev_hash()}", file=out)
            print(f"Block Hash: {block.block_hash()}", file=out)
            print(f"Merkle Root Hash: {block.root_hash()}", file=out)
            print(file=out)