"""Serialization strategies for :class:`wordchain.chain.Chain`.

A codec reads and writes a chain only through the chain's public methods, so
new storage formats can be added without subclassing the chain.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
import logging
from typing import List

logger = logging.getLogger(__name__)

SEPARATOR = " : "


@dataclass(frozen=True)
class SkippedLine:
    """A serialized line that could not be loaded."""

    lineno: int
    text: str
    reason: str


@dataclass
class ReadReport:
    """Outcome of reading a serialized chain."""

    lines: int = 0
    entries: int = 0
    skipped: List[SkippedLine] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.skipped


class Codec(ABC):
    """Interface for chain serialization formats."""

    @abstractmethod
    def write(self, chain, sink) -> int:
        """Write every entry of ``chain`` to ``sink``, returning the entry count."""

    @abstractmethod
    def read(self, chain, source) -> ReadReport:
        """Replace the contents of ``chain`` with the entries in ``source``."""


class TextCodec(Codec):
    """Line oriented text format, one chain entry per line::

        the cat : sat ran
        cat sat : on

    Prefix words, then ``" : "``, then the suffix words, each group joined by
    single spaces. Lines are split on single spaces when read, so doubled
    spaces produce empty words rather than being collapsed. A line is
    split at its first ``" : "``, so an entry whose prefix has the word ``:``
    anywhere but first does not read back and is reported as skipped.
    """

    def write(self, chain, sink) -> int:
        count = 0
        for prefix in chain.prefixes():
            sink.write(" ".join(prefix) + SEPARATOR + " ".join(chain.suffixes(prefix)) + "\n")
            count += 1
        return count

    def read(self, chain, source) -> ReadReport:
        chain.prefix_length(0)
        report = ReadReport()
        lines = source.splitlines() if isinstance(source, str) else source
        for lineno, raw in enumerate(lines, start=1):
            report.lines += 1
            line = raw.rstrip("\r\n")
            reason = self._parse_line(chain, line)
            if reason is None:
                report.entries += 1
            else:
                logger.debug("Skipping line %d (%s): %r", lineno, reason, line)
                report.skipped.append(SkippedLine(lineno, line, reason))
        return report

    @staticmethod
    def _parse_line(chain, line):
        head, sep, tail = line.partition(SEPARATOR)
        if not sep:
            return "missing separator"
        prefix = tuple(head.split(" "))
        if chain.prefix_length() == 0:
            chain.prefix_length(len(prefix))
        if len(prefix) != chain.prefix_length():
            return f"expected {chain.prefix_length()} prefix words, got {len(prefix)}"
        chain.extend(prefix, tail.split(" "))
        chain.current_prefix(prefix)
        return None
