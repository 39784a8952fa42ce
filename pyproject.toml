[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "merkleledger"
version = "0.1.0"
description = "SHA-256 Merkle trees with inclusion proofs and a simple hash-linked chain of blocks"
requires-python = ">=3.10"
dependencies = []
keywords = ["merkle", "merkle-tree", "sha256", "blockchain", "hash", "proof"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
merkleledger = "merkleledger.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["merkleledger"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
