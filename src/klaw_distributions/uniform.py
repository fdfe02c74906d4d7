"""Full-width uniform sampling for primitive integer kinds.

Every kind draws from the narrowest word that covers it and keeps the low
bits: each bit of a uniform word is uniform, so the low ``n`` bits are
uniform over all ``2**n`` patterns.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import msgspec

from klaw_distributions.api import default_distribution, into_distribution, register_default
from klaw_distributions.integers import BOOL, I64, U8, IntKind

if TYPE_CHECKING:
    from klaw_distributions.bitsource import BitSource

__all__ = ['Uniform', 'draw_bits']


def draw_bits(kind: IntKind, bit_source: BitSource) -> int:
    """Draw one uniform unsigned bit pattern as wide as ``kind``.

    Up to 32 bits use one ``next_u32``, up to 64 bits one ``next_u64``, and
    wider kinds two ``next_u64`` words (high word first).
    """
    if kind.bits <= 32:
        return bit_source.next_u32() & kind.mask
    if kind.bits <= 64:
        return bit_source.next_u64() & kind.mask
    high = bit_source.next_u64()
    return ((high << 64) | bit_source.next_u64()) & kind.mask


class Uniform(msgspec.Struct, frozen=True, gc=False):
    """Uniform distribution over every value of one kind.

    Never fails: every bit pattern is a valid output. ``Uniform(BOOL)``
    takes the lowest bit of a byte and yields ``True``/``False``.

    Example:
        ```python
        Uniform(I8).sample(src)  # any of -128..127
        ```
    """

    kind: IntKind

    def sample_unsigned(self, bit_source: BitSource) -> int:
        """Draw the raw unsigned bit pattern."""
        if self.kind == BOOL:
            return draw_bits(U8, bit_source) & 1
        return draw_bits(self.kind, bit_source)

    def sample(self, bit_source: BitSource) -> int | bool:
        bits = self.sample_unsigned(bit_source)
        if self.kind == BOOL:
            return bool(bits)
        return self.kind.from_unsigned(bits)


@into_distribution.instance(IntKind)
def _kind_into_distribution(kind: IntKind) -> Uniform:
    return Uniform(kind)


@into_distribution.instance(Uniform)
def _uniform_into_distribution(dist: Uniform) -> Uniform:
    return dist


@default_distribution.instance(IntKind)
def _kind_default(kind: IntKind) -> Uniform:
    return Uniform(kind)


@register_default(bool)
def _bool_default(_tp: type) -> Uniform:
    return Uniform(BOOL)


@register_default(int)
def _int_default(_tp: type) -> Uniform:
    return Uniform(I64)
