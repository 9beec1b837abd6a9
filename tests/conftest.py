from __future__ import annotations

import pytest

from wordchain import Chain


class FixedSource:
    """Random source that replays a fixed list of draws."""

    def __init__(self, *draws: int) -> None:
        self.draws = list(draws)
        self.calls: list[int] = []
        self.seeded = False

    def is_seeded(self) -> bool:
        return self.seeded

    def seed(self, force: bool = False) -> None:
        self.seeded = True

    def randbelow(self, n: int) -> int:
        self.calls.append(n)
        value = self.draws.pop(0) if self.draws else 0
        assert 0 <= value < n
        return value


@pytest.fixture
def fixed_source():
    return FixedSource


@pytest.fixture
def cat_chain() -> Chain:
    chain = Chain(2)
    chain.add_text("the cat sat on the mat the cat ran")
    return chain
