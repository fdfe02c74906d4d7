"""Bit sources: suppliers of uniform 32-bit and 64-bit words.

Distributions consume randomness only through the ``BitSource`` protocol.
Two implementations ship with the package:

- ``XorShiftBitSource``: small, fast, deterministic (Marsaglia xorshift128).
- ``OsBitSource``: words read from ``os.urandom``.

Neither is synchronized; give each thread its own source.
"""

from __future__ import annotations

import os
from typing import Protocol, runtime_checkable

from klaw_distributions._logging import get_logger
from klaw_distributions.errors import InvalidSeedError

__all__ = ['BitSource', 'OsBitSource', 'XorShiftBitSource', 'splitmix64']

logger = get_logger(__name__)

_MASK32 = 0xFFFF_FFFF
_MASK64 = 0xFFFF_FFFF_FFFF_FFFF


@runtime_checkable
class BitSource(Protocol):
    """Protocol for a source of uniformly distributed unsigned words.

    Successive calls must be uniform and independent. A source that can fail
    raises from these methods; samplers let that exception propagate.
    """

    def next_u32(self) -> int:
        """Return a uniform integer in ``[0, 2**32)``."""
        ...

    def next_u64(self) -> int:
        """Return a uniform integer in ``[0, 2**64)``."""
        ...


def splitmix64(state: int) -> tuple[int, int]:
    """Advance a splitmix64 state, returning ``(new_state, output)``."""
    state = (state + 0x9E37_79B9_7F4A_7C15) & _MASK64
    z = state
    z = ((z ^ (z >> 30)) * 0xBF58_476D_1CE4_E5B9) & _MASK64
    z = ((z ^ (z >> 27)) * 0x94D0_49BB_1331_11EB) & _MASK64
    return state, z ^ (z >> 31)


class XorShiftBitSource:
    """Marsaglia's xorshift128 generator over four 32-bit words.

    Not suitable for cryptographic use. The state must not be all zero,
    otherwise the generator would only ever produce zeros.

    Example:
        ```python
        src = XorShiftBitSource.from_seed(42)
        src.next_u32()
        ```
    """

    __slots__ = ('_w', '_x', '_y', '_z')

    def __init__(
        self,
        x: int = 0x193A_6754,
        y: int = 0xA8A7_D469,
        z: int = 0x9783_0E05,
        w: int = 0x113B_A7BB,
    ) -> None:
        words = (x & _MASK32, y & _MASK32, z & _MASK32, w & _MASK32)
        if not any(words):
            raise InvalidSeedError('xorshift', 'state must not be all zero')
        self._x, self._y, self._z, self._w = words

    @classmethod
    def from_seed(cls, seed: int) -> XorShiftBitSource:
        """Build a source from an arbitrary integer seed.

        The seed is expanded through splitmix64 into the four state words,
        so nearby seeds still give unrelated streams.
        """
        state = seed & _MASK64
        state, a = splitmix64(state)
        _, b = splitmix64(state)
        logger.debug('bit_source.seeded', source='xorshift', seed=seed)
        return cls(a >> 32, a & _MASK32, b >> 32, b & _MASK32)

    @classmethod
    def from_entropy(cls) -> XorShiftBitSource:
        """Build a source seeded from ``os.urandom``."""
        return cls.from_seed(int.from_bytes(os.urandom(8), 'little'))

    def next_u32(self) -> int:
        t = self._x ^ ((self._x << 11) & _MASK32)
        self._x, self._y, self._z = self._y, self._z, self._w
        w = self._w
        self._w = w ^ (w >> 19) ^ (t ^ (t >> 8))
        return self._w

    def next_u64(self) -> int:
        high = self.next_u32()
        return (high << 32) | self.next_u32()

    def __repr__(self) -> str:
        return f'XorShiftBitSource(x={self._x:#x}, y={self._y:#x}, z={self._z:#x}, w={self._w:#x})'


class OsBitSource:
    """Bit source reading words from the operating system's entropy pool."""

    __slots__ = ()

    def next_u32(self) -> int:
        return int.from_bytes(os.urandom(4), 'little')

    def next_u64(self) -> int:
        return int.from_bytes(os.urandom(8), 'little')

    def __repr__(self) -> str:
        return 'OsBitSource()'
