"""Pytest configuration and shared fixtures for klaw-distributions tests."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

import pytest
from klaw_distributions import XorShiftBitSource


class ScriptedBitSource:
    """Bit source replaying fixed words, recording every draw.

    ``next_u32`` and ``next_u64`` consume separate queues. Drawing from an
    empty queue fails the test instead of inventing randomness.
    """

    def __init__(self, u32: Iterable[int] = (), u64: Iterable[int] = ()) -> None:
        self._u32 = deque(u32)
        self._u64 = deque(u64)
        self.draws: list[str] = []

    def next_u32(self) -> int:
        self.draws.append('u32')
        if not self._u32:
            pytest.fail('scripted bit source ran out of 32-bit words')
        return self._u32.popleft()

    def next_u64(self) -> int:
        self.draws.append('u64')
        if not self._u64:
            pytest.fail('scripted bit source ran out of 64-bit words')
        return self._u64.popleft()


@pytest.fixture
def src() -> XorShiftBitSource:
    """Deterministic bit source, fresh for every test."""
    return XorShiftBitSource.from_seed(0xC0FFEE)


@pytest.fixture
def scripted() -> type[ScriptedBitSource]:
    """The ScriptedBitSource class, for building sources with chosen words."""
    return ScriptedBitSource

