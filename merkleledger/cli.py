"""Command-line demonstration of Merkle tree hashing and verification."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence

from .merkle import MerkleTree

DEMO_VALUES = ("hello", "world", "ds2", "blockchain", "pls")
DEMO_CHECKS = (
    "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824",
    "486ea46224d1bb4fb680f34f7c9ad96a8f24ec88be73ea8e5a6c65260e9cb8a7",
    "75e7a56a890f3b1a085c89ff77a4b51874d9142343c8c2e1d297cfc85b0f30cc",
    "ef7797e13d3a75526946a3bcf00daec9fc9c9c4d51ddc7cc5df888f74dd434d1",
    "c8f1413fe5b6cb2cb588f7bfa576f1b0590515058f9e2be5b913b23ac5ef96d",
)


def format_listing(values: Iterable[str]) -> str:
    """Number each value as ``index:value`` per line, ending with a blank line."""
    return "".join(f"{index}:{value}\n" for index, value in enumerate(values)) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Build a tree, print its leaves and root, and verify every leaf."""
    parser = argparse.ArgumentParser(
        prog="merkleledger",
        description="Hash values into a Merkle tree and verify each leaf.",
    )
    parser.add_argument(
        "values",
        nargs="*",
        help="data blocks to hash (a built-in example is used when none are given)",
    )
    args = parser.parse_args(argv)

    if args.values:
        values = list(args.values)
        checks = None
    else:
        values = list(DEMO_VALUES)
        checks = list(DEMO_CHECKS)

    print(format_listing(values), end="")
    tree = MerkleTree(values)
    tree.build()
    leaf_hashes = tree.leaf_hashes()
    print(format_listing(leaf_hashes), end="")
    print(tree.root_hash())

    expected = checks if checks is not None else leaf_hashes
    print("".join("1" if tree.verify(index, value) else "0" for index, value in enumerate(expected)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())