"""SHA-256 Merkle trees with inclusion proofs, and blocks linked into a hash chain."""

__version__ = "0.1.0"
__all__ = ["block", "blockchain", "cli", "hashing", "merkle"]