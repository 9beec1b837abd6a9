"""Word level Markov chain.

A :class:`Chain` maps every run of ``prefix_length`` consecutive words seen in
the training text (a *prefix*) to the list of words that followed it. Repeated
continuations are stored repeatedly, so a uniform pick from the list follows
the observed frequencies.

Instances are not thread safe. Each one owns its :class:`RandomSource`, so
separate chains never share random state.
"""

import io
import logging

from .codec import TextCodec
from .errors import ChainConsistencyError, EmptyChainError
from .random_source import RandomSource

logger = logging.getLogger(__name__)

DEFAULT_PREFIX_LENGTH = 2


def _as_prefix(prefix):
    if isinstance(prefix, str):
        return tuple(prefix.split())
    return tuple(prefix)


def _lines(source):
    if isinstance(source, str):
        return source.splitlines()
    return source


class Chain:
    """Prefix to suffix-list table plus the sliding window used to fill it.

    Prefixes may be passed as any sequence of words or as a single string of
    whitespace separated words.
    """

    def __init__(self, prefix_length=DEFAULT_PREFIX_LENGTH, random_source=None):
        if prefix_length < 0:
            raise ValueError(f"prefix length must be >= 0, got {prefix_length}")
        self._table = {}
        self._ordered = None
        self._window = ()
        self._prefix_length = prefix_length
        self._random = random_source if random_source is not None else RandomSource()

    def __len__(self):
        return len(self._table)

    def __contains__(self, prefix):
        return self.is_valid_prefix(prefix)

    def __repr__(self):
        return f"Chain(prefix_length={self._prefix_length}, entries={len(self._table)})"

    # Training

    def add(self, token):
        """Feed one word to the chain."""
        if len(self._window) == self._prefix_length:
            self._entry(self._window).append(token)
            self._window = self._window[1:]
        if self._prefix_length:
            self._window += (token,)

    def add_text(self, source, reset_window=False):
        """Feed every whitespace separated word of ``source``.

        ``source`` is a string or an iterable of lines such as an open file.
        With ``reset_window`` the window is emptied first, so the new text
        does not continue the previous one. Returns the number of words read.
        """
        if reset_window:
            self._window = ()
        count = 0
        for line in _lines(source):
            for token in line.split():
                self.add(token)
                count += 1
        return count

    def extend(self, prefix, suffixes):
        """Append ``suffixes`` to the entry for ``prefix``, creating it if needed."""
        prefix = _as_prefix(prefix)
        suffixes = list(suffixes)
        if len(prefix) != self._prefix_length:
            raise ValueError(
                f"prefix {prefix!r} has {len(prefix)} words, "
                f"chain expects {self._prefix_length}"
            )
        if not suffixes:
            raise ValueError(f"no suffixes given for prefix {prefix!r}")
        self._entry(prefix).extend(suffixes)

    def _entry(self, prefix):
        suffixes = self._table.get(prefix)
        if suffixes is None:
            suffixes = self._table[prefix] = []
            self._ordered = None
        return suffixes

    def _sorted_prefixes(self):
        if self._ordered is None:
            self._ordered = sorted(self._table)
        return self._ordered

    # Generation

    def generate(self, sink, word_count, start_prefix=None):
        """Write up to ``word_count`` generated words to ``sink``.

        The walk starts at ``start_prefix`` when it is in the chain and at a
        random prefix otherwise. Output is the start prefix followed by the
        drawn words, separated by spaces and ended by a newline. The walk
        stops early when it reaches a prefix that was never followed by
        anything in the training text. Returns the number of words written.
        """
        if word_count < 0:
            raise ValueError(f"word count must be >= 0, got {word_count}")
        if start_prefix is not None and self.is_valid_prefix(start_prefix):
            self._window = _as_prefix(start_prefix)
        else:
            self._window = self.random_prefix()
        self._random.seed()

        words = list(self._window[:word_count])
        sink.write(" ".join(words))
        emitted = len(words)
        while emitted < word_count:
            suffixes = self._table.get(self._window)
            if not suffixes:
                raise ChainConsistencyError(f"no suffixes recorded for {self._window!r}")
            word = suffixes[self._random.randbelow(len(suffixes))]
            sink.write(" " + word if emitted else word)
            emitted += 1
            candidate = (self._window + (word,))[1:]
            if candidate not in self._table:
                logger.debug("Stopped after %d of %d words at %r", emitted, word_count, candidate)
                break
            self._window = candidate
        sink.write("\n")
        return emitted

    def generate_text(self, word_count, start_prefix=None):
        """Like :meth:`generate` but return the words as a string."""
        buf = io.StringIO()
        self.generate(buf, word_count, start_prefix)
        return buf.getvalue().rstrip("\n")

    def random_prefix(self):
        """Return a prefix picked uniformly from the chain."""
        self._random.seed()
        if not self._table:
            raise EmptyChainError("cannot pick a prefix from an empty chain")
        index = self._random.randbelow(len(self._table))
        return self._sorted_prefixes()[index]

    # Serialization

    def write(self, sink, codec=None):
        """Serialize the chain to ``sink`` (text format unless ``codec`` is given)."""
        codec = codec if codec is not None else TextCodec()
        return codec.write(self, sink)

    def read(self, source, codec=None):
        """Replace the chain's contents with the data read from ``source``."""
        codec = codec if codec is not None else TextCodec()
        return codec.read(self, source)

    # Accessors

    def prefixes(self):
        """Iterate over the prefixes in sorted order."""
        return iter(self._sorted_prefixes())

    def suffixes(self, prefix):
        """Return a copy of the suffix list recorded for ``prefix``."""
        return list(self._table[_as_prefix(prefix)])

    def current_prefix(self, prefix=None):
        """Return the window, first moving it to ``prefix`` if that is a valid key."""
        if prefix is not None and self.is_valid_prefix(prefix):
            self._window = _as_prefix(prefix)
        return self._window

    def is_valid_prefix(self, prefix):
        return _as_prefix(prefix) in self._table

    def prefix_length(self, length=None):
        """Return the prefix length.

        Given ``length``, empty the chain and its window and switch to the
        new length first.
        """
        if length is not None:
            if length < 0:
                raise ValueError(f"prefix length must be >= 0, got {length}")
            self._table.clear()
            self._ordered = None
            self._window = ()
            self._prefix_length = length
        return self._prefix_length

    def is_seeded(self):
        return self._random.is_seeded()

    def seed(self, force=False):
        self._random.seed(force)
