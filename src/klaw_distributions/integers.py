"""Primitive integer kinds: fixed-width integer semantics over Python ints.

Python integers are unbounded, so every width-dependent operation goes
through an ``IntKind``. Each kind knows its same-width unsigned counterpart
and reinterprets values between the two as raw bit patterns (two's
complement), never by value conversion.
"""

from __future__ import annotations

import sys

import msgspec

__all__ = [
    'BOOL',
    'I8',
    'I16',
    'I32',
    'I64',
    'I128',
    'ISIZE',
    'KINDS',
    'U8',
    'U16',
    'U32',
    'U64',
    'U128',
    'USIZE',
    'IntKind',
    'IntRange',
    'kind_of',
]

POINTER_BITS = sys.maxsize.bit_length() + 1


class IntKind(msgspec.Struct, frozen=True, gc=False):
    """A primitive integer type of fixed bit width.

    Attributes:
        name: Short type name, e.g. ``'u8'`` or ``'isize'``.
        bits: Bit width of the type.
        signed: Whether values are two's complement signed.
    """

    name: str
    bits: int
    signed: bool

    @property
    def unsigned(self) -> IntKind:
        """The unsigned kind of identical width (self when already unsigned)."""
        return _BY_NAME[_UNSIGNED_OF.get(self.name, self.name)]

    @property
    def mask(self) -> int:
        """All-ones bit pattern of this width, the unsigned maximum."""
        return (1 << self.bits) - 1

    @property
    def min_value(self) -> int:
        if self.signed:
            return -(1 << (self.bits - 1))
        return 0

    @property
    def max_value(self) -> int:
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return self.mask

    def contains(self, value: int) -> bool:
        """Return True if ``value`` is representable in this kind."""
        return self.min_value <= value <= self.max_value

    def to_unsigned(self, value: int) -> int:
        """Reinterpret ``value`` as the bit pattern of the unsigned counterpart."""
        return value & self.mask

    def from_unsigned(self, bits: int) -> int:
        """Reinterpret an unsigned bit pattern as a value of this kind."""
        bits &= self.mask
        if self.signed and bits >> (self.bits - 1):
            return bits - (1 << self.bits)
        return bits

    def wrapping_add(self, a: int, b: int) -> int:
        """Add two unsigned patterns modulo ``2**bits``."""
        return (a + b) & self.mask

    def wrapping_sub(self, a: int, b: int) -> int:
        """Subtract two unsigned patterns modulo ``2**bits``."""
        return (a - b) & self.mask

    def range(self, low: int, high: int) -> IntRange:
        """Build the half-open range ``[low, high)`` over this kind."""
        return IntRange(low, high, self)

    def __repr__(self) -> str:
        return self.name.upper()


class IntRange(msgspec.Struct, frozen=True, gc=False):
    """Half-open integer range ``[low, high)`` over one kind.

    This only records the bounds; bounds are checked when it is converted
    into a distribution.
    """

    low: int
    high: int
    kind: IntKind


U8 = IntKind('u8', 8, False)
U16 = IntKind('u16', 16, False)
U32 = IntKind('u32', 32, False)
U64 = IntKind('u64', 64, False)
U128 = IntKind('u128', 128, False)
USIZE = IntKind('usize', POINTER_BITS, False)
I8 = IntKind('i8', 8, True)
I16 = IntKind('i16', 16, True)
I32 = IntKind('i32', 32, True)
I64 = IntKind('i64', 64, True)
I128 = IntKind('i128', 128, True)
ISIZE = IntKind('isize', POINTER_BITS, True)

# Sampled as the lowest bit of a byte; not a range kind.
BOOL = IntKind('bool', 1, False)

KINDS: tuple[IntKind, ...] = (U8, U16, U32, U64, U128, USIZE, I8, I16, I32, I64, I128, ISIZE)

_BY_NAME: dict[str, IntKind] = {kind.name: kind for kind in (*KINDS, BOOL)}

_UNSIGNED_OF: dict[str, str] = {
    'i8': 'u8',
    'i16': 'u16',
    'i32': 'u32',
    'i64': 'u64',
    'i128': 'u128',
    'isize': 'usize',
}


def kind_of(name: str) -> IntKind:
    """Look up a kind by its short name.

    Raises:
        KeyError: If no kind has that name.
    """
    try:
        return _BY_NAME[name.lower()]
    except KeyError:
        msg = f'Unknown integer kind: {name!r}'
        raise KeyError(msg) from None
