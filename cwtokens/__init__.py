"""Multi-token ledger contract and atomic swap state over an ordered in-memory store."""

__version__ = "0.1.0"