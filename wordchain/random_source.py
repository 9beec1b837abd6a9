"""Lazily seeded source of uniform random indexes."""

import logging
import os
import random
import time

logger = logging.getLogger(__name__)


def _entropy_seed():
    try:
        return int.from_bytes(os.urandom(8), "little")
    except NotImplementedError:
        logger.debug("No OS entropy source, seeding from the clock")
        return time.time_ns()


class RandomSource:
    """Uniform integer draws backed by a private ``random.Random``.

    The generator is seeded on first use from OS entropy, or from the wall
    clock when the platform has none. Passing ``seed`` seeds it right away
    with a fixed value, which makes every draw reproducible.

    Not thread safe.
    """

    def __init__(self, seed=None):
        self._random = random.Random()
        self._seeded = False
        if seed is not None:
            self._random.seed(seed)
            self._seeded = True

    def is_seeded(self):
        return self._seeded

    def seed(self, force=False):
        """Seed the generator unless it already is, or ``force`` is set."""
        if force or not self._seeded:
            self._random.seed(_entropy_seed())
            self._seeded = True

    def randbelow(self, n):
        """Return an integer drawn uniformly from ``[0, n)``."""
        if n <= 0:
            raise ValueError(f"cannot draw from an empty range (n={n})")
        self.seed()
        return self._random.randrange(n)
