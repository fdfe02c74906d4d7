"""Unbiased uniform sampling over a half-open integer range ``[low, high)``.

Mapping a uniform ``n``-bit draw onto ``range_width`` outcomes with a plain
modulo favours the small residues whenever ``range_width`` does not divide
``2**n`` (modulo bias). ``UniformRange`` instead accepts only draws below
``acceptance_bound``, the largest multiple of ``range_width`` that fits in
the unsigned domain, and draws again otherwise.

All width arithmetic runs in the same-width unsigned kind and wraps modulo
``2**bits``. Signed bounds are reinterpreted as unsigned bit patterns, so a
range like ``[-128, 127)`` over ``i8`` has ``range_width == 255`` and the
final ``low + offset`` wraps back into the signed domain.

The retry loop has no iteration cap. Each draw is accepted with probability
``acceptance_bound / 2**bits``, which is always above one half, so the number
of draws is geometric with mean below two. Capping it would bias the output.
"""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING

import msgspec

from klaw_distributions._logging import get_logger
from klaw_distributions.api import into_distribution
from klaw_distributions.errors import InvalidRange, InvalidRangeError
from klaw_distributions.integers import BOOL, I64, IntKind, IntRange
from klaw_distributions.result import Err, Ok, Result
from klaw_distributions.uniform import draw_bits

if TYPE_CHECKING:
    from klaw_distributions.bitsource import BitSource

__all__ = ['UniformRange']

logger = get_logger(__name__)


class UniformRange(msgspec.Struct, frozen=True, gc=False):
    """Uniform distribution over ``[low, high)`` for one integer kind.

    Build it with ``UniformRange.new`` (returns a Result) or
    ``UniformRange.create`` (raises). The fields are derived entirely from
    the bounds and never change after construction.

    Attributes:
        kind: Integer kind of the bounds and of sampled values.
        low: Inclusive lower bound, in the kind's own (possibly signed) form.
        range_width: ``high - low`` computed in the unsigned kind.
        acceptance_bound: Draws at or above this are rejected.

    Example:
        ```python
        dice = UniformRange.create(1, 7, U8)
        dice.sample(src)  # 1..6
        ```
    """

    kind: IntKind
    low: int
    range_width: int
    acceptance_bound: int

    def __post_init__(self) -> None:
        # Direct construction and msgspec decoding bypass new().
        kind = self.kind
        if kind == BOOL:
            raise self._rejected('bool has no integer ranges')
        if not kind.contains(self.low):
            raise self._rejected(f'low must lie in [{kind.min_value}, {kind.max_value}]')
        u_max = kind.unsigned.max_value
        if not 1 <= self.range_width <= u_max:
            raise self._rejected(f'range_width must lie in [1, {u_max}]')
        if self.acceptance_bound != u_max - u_max % self.range_width:
            raise self._rejected(
                f'acceptance_bound must be {u_max - u_max % self.range_width}'
            )

    def _rejected(self, reason: str) -> InvalidRangeError:
        return InvalidRangeError(self.low, self.low + self.range_width, self.kind.name, reason)

    @classmethod
    def new(cls, low: int, high: int, kind: IntKind = I64) -> Result[UniformRange, InvalidRange]:
        """Validate ``[low, high)`` and precompute the acceptance zone.

        Args:
            low: Inclusive lower bound.
            high: Exclusive upper bound.
            kind: Integer kind both bounds belong to.

        Returns:
            ``Ok(UniformRange)``, or ``Err(InvalidRange)`` when ``low >= high``,
            when a bound is not representable in ``kind``, or when ``kind``
            is ``BOOL``.

        Raises:
            TypeError: If a bound is not an integer.
        """
        low = operator.index(low)
        high = operator.index(high)

        if kind == BOOL:
            return _invalid(low, high, kind, 'bool has no integer ranges')
        if not (kind.contains(low) and kind.contains(high)):
            return _invalid(low, high, kind, f'bounds must lie in [{kind.min_value}, {kind.max_value}]')
        if not low < high:
            return _invalid(low, high, kind, 'low must be less than high')

        unsigned = kind.unsigned
        range_width = unsigned.wrapping_sub(kind.to_unsigned(high), kind.to_unsigned(low))
        u_max = unsigned.max_value
        acceptance_bound = unsigned.wrapping_sub(u_max, u_max % range_width)
        return Ok(cls(kind, low, range_width, acceptance_bound))

    @classmethod
    def create(cls, low: int, high: int, kind: IntKind = I64) -> UniformRange:
        """Like ``new`` but raises ``InvalidRangeError`` instead of returning Err."""
        return cls.new(low, high, kind).unwrap()

    @property
    def high(self) -> int:
        """Exclusive upper bound, recovered from ``low`` and ``range_width``."""
        unsigned = self.kind.unsigned
        return self.kind.from_unsigned(
            unsigned.wrapping_add(self.kind.to_unsigned(self.low), self.range_width)
        )

    def sample(self, bit_source: BitSource) -> int:
        unsigned = self.kind.unsigned
        low_bits = self.kind.to_unsigned(self.low)
        while True:
            v = draw_bits(unsigned, bit_source)
            if v < self.acceptance_bound:
                return self.kind.from_unsigned(
                    unsigned.wrapping_add(low_bits, v % self.range_width)
                )


def _invalid(low: int, high: int, kind: IntKind, reason: str) -> Err[InvalidRange]:
    logger.debug('uniform_range.invalid', low=low, high=high, kind=kind.name, reason=reason)
    return Err(InvalidRange(low, high, kind.name, reason))


@into_distribution.instance(IntRange)
def _int_range_into_distribution(bounds: IntRange) -> UniformRange:
    return UniformRange.create(bounds.low, bounds.high, bounds.kind)


@into_distribution.instance(UniformRange)
def _uniform_range_into_distribution(dist: UniformRange) -> UniformRange:
    return dist
