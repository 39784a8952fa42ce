"""A binary Merkle tree over text blocks, with inclusion proofs."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional

from .hashing import sha256_hex


class Side(enum.IntEnum):
    """Which side of the current node its sibling sits on."""

    LEFT = 0
    RIGHT = 1


@dataclass(eq=False)
class Node:
    """A tree node holding a hex digest and links to its neighbours."""

    hash_value: str
    parent: Optional["Node"] = field(default=None, repr=False)
    left: Optional["Node"] = field(default=None, repr=False)
    right: Optional["Node"] = field(default=None, repr=False)


@dataclass(frozen=True)
class ProofStep:
    """One step of an inclusion proof: a sibling digest and its side."""

    sibling_hash: str
    side: Side


class MerkleTree:
    """Merkle tree whose leaves are the SHA-256 digests of the data blocks.

    A level with an odd number of nodes pairs its last node with itself.
    """

    def __init__(self, data_blocks: Iterable[str | bytes]) -> None:
        self._leaves: list[Node] = [Node(sha256_hex(block)) for block in data_blocks]
        self._root: Optional[Node] = None
        self._root_hash = ""

    def __len__(self) -> int:
        return len(self._leaves)

    def build(self) -> None:
        """Build (or rebuild) the tree from the current leaves."""
        if not self._leaves:
            raise ValueError("cannot build a Merkle tree without data blocks")
        level = self._leaves
        while len(level) > 1:
            level = list(self._pair_up(level))
        self._root = level[0]
        self._root_hash = self._root.hash_value

    @staticmethod
    def _pair_up(level: list[Node]):
        for left, right in zip(level[::2], level[1::2] + [None]):
            if right is None:
                parent = Node(sha256_hex(left.hash_value + left.hash_value), left=left, right=left)
                left.parent = parent
            else:
                parent = Node(sha256_hex(left.hash_value + right.hash_value), left=left, right=right)
                left.parent = parent
                right.parent = parent
            yield parent

    def root_hash(self) -> str:
        """Digest at the root; empty until the tree is built."""
        return self._root_hash

    def root(self) -> Optional[Node]:
        """The root node, or None until the tree is built."""
        return self._root

    def leaf_hashes(self) -> list[str]:
        """Digests of the leaves, in block order."""
        return [leaf.hash_value for leaf in self._leaves]

    def _leaf(self, index: int) -> Node:
        if not 0 <= index < len(self._leaves):
            raise IndexError(f"leaf index {index} out of range for {len(self._leaves)} leaves")
        return self._leaves[index]

    def _require_built(self) -> Node:
        if self._root is None:
            raise ValueError("the tree has not been built")
        return self._root

    def proof(self, index: int) -> list[ProofStep]:
        """Sibling digests from leaf ``index`` up to the root."""
        root = self._require_built()
        node = self._leaf(index)
        steps: list[ProofStep] = []
        while node is not root:
            parent = node.parent
            if parent is None:
                raise ValueError("leaf is not connected to the root; rebuild the tree")
            if parent.left is node:
                steps.append(ProofStep(parent.right.hash_value, Side.RIGHT))
            elif parent.right is node:
                steps.append(ProofStep(parent.left.hash_value, Side.LEFT))
            node = parent
        return steps

    def verify(self, index: int, hash_value: str) -> bool:
        """Check that ``hash_value`` at leaf ``index`` leads to the root digest."""
        root = self._require_built()
        current = hash_value
        for step in self.proof(index):
            if step.side is Side.RIGHT:
                current = sha256_hex(current + step.sibling_hash)
            else:
                current = sha256_hex(step.sibling_hash + current)
        return current == root.hash_value

    def remove(self, index: int) -> None:
        """Drop leaf ``index`` and rebuild the tree."""
        self._leaf(index)
        if len(self._leaves) == 1:
            raise ValueError("cannot remove the last leaf of a Merkle tree")
        del self._leaves[index]
        self.build()