# merkleledger

A small library for building SHA-256 Merkle trees, producing and checking
inclusion proofs, and linking blocks of records into a hash chain.

## Installation

```
pip install merkleledger
```

Tests need the `test` extra (`pip install merkleledger[test]`), then run
`pytest`.

## Hashing

`merkleledger.hashing.sha256_hex(data)` returns the SHA-256 digest of `data`
as 64 lower-case hex characters. Text is encoded as UTF-8 before it is hashed;
`bytes` are hashed as they are. Any other type raises `TypeError`.

## Merkle trees

```python
from merkleledger.merkle import MerkleTree, Side
from merkleledger.hashing import sha256_hex

tree = MerkleTree(["hello", "world", "ds2", "blockchain", "pls"])
tree.build()

print(len(tree))             # 5 leaves
print(tree.root_hash())      # hex digest of the root
print(tree.leaf_hashes())    # SHA-256 of each data block, in order

for step in tree.proof(2):   # sibling hashes from leaf 2 up to the root
    print(step.side.name, step.sibling_hash)

assert tree.verify(2, sha256_hex("ds2"))

tree.remove(4)               # drop a leaf and rebuild the tree
```

How the tree is formed:

- Each leaf is the SHA-256 hex digest of one data block.
- Each parent is the SHA-256 of its children's hex digests joined together
  (left then right).
- On a level with an odd number of nodes, the last node is paired with itself.

`MerkleTree(data_blocks)` only hashes the leaves; call `build()` to form the
tree. Until then `root_hash()` is an empty string and `root()` is `None`.
`root()` returns the root `Node`, which carries `hash_value` and links to its
`parent`, `left` and `right` nodes.

`proof(index)` returns a list of `ProofStep` values, each holding a
`sibling_hash` and a `Side` (`Side.LEFT` or `Side.RIGHT`) telling which side
the sibling sits on. `verify(index, hash_value)` folds `hash_value` through
that proof and reports whether the result equals the root digest.

Errors:

- `build()` on a tree with no data blocks raises `ValueError`.
- `proof()` and `verify()` before `build()` raise `ValueError`.
- A leaf index outside the tree raises `IndexError` (negative indices are not
  accepted).
- `remove()` of the only remaining leaf raises `ValueError`.

## Blocks and chains

A block is read from a text file. The first line is a header and is skipped;
every other line becomes one data block of the block's Merkle tree.

```python
from merkleledger.block import Block
from merkleledger.blockchain import Blockchain

block = Block("dataset/block1.csv")          # previous hash defaults to ""
print(block.root_hash(), block.block_hash(), block.prev_hash())
print(block.data_blocks)                     # the records, header excluded
block.print_file()                           # one record per line

chain = Blockchain("dataset/block1.csv")
chain.add_block("dataset/block2.csv")
print(len(chain), chain.latest_hash())
chain.print_chain()
```

A block's hash is the SHA-256 of its Merkle root digest followed by the
previous block's hash, so every block commits to the whole chain before it.
A file that cannot be opened raises `OSError`; a file with no records after
its header raises `ValueError`, since its tree cannot be built.

`Blockchain()` with no argument starts from `dataset/block1.csv`, relative to
the working directory. `add_block(filename)` links the new block to the latest
block's hash and returns it. The chain can be iterated, indexed and measured
with `len()`. `print_chain()` and `Block.print_file()` write to standard
output, or to the stream passed to them.

## Command line

```
merkleledger
merkleledger apple banana cherry
```

With no arguments the command builds a tree over a fixed set of sample
strings; otherwise it uses the values given. It prints the values and the leaf
hashes as numbered `index:value` lines, then the root hash, then one `1` or
`0` per leaf telling whether that leaf verifies. For the built-in sample the
leaves are checked against a fixed list of expected digests; for values given
on the command line they are checked against their own leaf hashes.

## What it does not do

The chain lives in memory only: blocks are not saved, loaded or sent
anywhere, and there is no method that checks an existing chain for tampering.
The command line works with Merkle trees only; blocks and chains are used from
Python.