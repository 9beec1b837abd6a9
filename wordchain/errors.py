"""Exceptions raised by :mod:`wordchain`."""


class ChainError(Exception):
    """Base class for chain errors."""


class EmptyChainError(ChainError, LookupError):
    """Raised when a prefix is requested from a chain with no entries."""


class ChainConsistencyError(ChainError, RuntimeError):
    """Raised when the chain's table breaks one of its own invariants."""
