"""Word level Markov chain text generator."""

from .chain import DEFAULT_PREFIX_LENGTH, Chain
from .codec import Codec, ReadReport, SkippedLine, TextCodec
from .errors import ChainConsistencyError, ChainError, EmptyChainError
from .random_source import RandomSource

__version__ = "0.1.0"

__all__ = [
    "Chain",
    "ChainConsistencyError",
    "ChainError",
    "Codec",
    "DEFAULT_PREFIX_LENGTH",
    "EmptyChainError",
    "RandomSource",
    "ReadReport",
    "SkippedLine",
    "TextCodec",
]
