"""Uniformly random element of a sequence."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

import msgspec

from klaw_distributions.api import into_distribution
from klaw_distributions.errors import InvalidRange
from klaw_distributions.integers import I64, USIZE
from klaw_distributions.result import Err, Ok, Result
from klaw_distributions.uniform_range import UniformRange

if TYPE_CHECKING:
    from klaw_distributions.bitsource import BitSource

__all__ = ['Choose']


class Choose(msgspec.Struct, frozen=True):
    """Pick one element of ``items`` uniformly, via a ``usize`` index range.

    Attributes:
        items: The non-empty sequence to pick from.
        index: Distribution over ``[0, len(items))``.
    """

    items: Sequence[Any]
    index: UniformRange

    @classmethod
    def new(cls, items: Sequence[Any]) -> Result[Choose, InvalidRange]:
        """Build a chooser over a snapshot of ``items``.

        Ranges, strings, bytes and tuples are kept as they are; any other
        sequence is copied into a tuple, so later changes to the caller's
        list do not reach the chooser.

        Returns:
            ``Ok(Choose)``, or ``Err(InvalidRange)`` if ``items`` is empty or
            has more elements than ``len()`` can report.
        """
        if not isinstance(items, range | str | bytes | tuple):
            items = tuple(items)
        try:
            size = len(items)
        except OverflowError:
            return Err(InvalidRange(0, 0, USIZE.name, 'sequence is too long to index'))
        if not size:
            return Err(InvalidRange(0, 0, USIZE.name, 'cannot choose from an empty sequence'))
        return UniformRange.new(0, size, USIZE).map(lambda index: cls(items, index))

    def sample(self, bit_source: BitSource) -> Any:
        return self.items[self.index.sample(bit_source)]


@into_distribution.instance(range)
def _range_into_distribution(r: range) -> UniformRange | Choose:
    # Stepped ranges are sequences; unit steps sample the bounds directly.
    if r.step == 1:
        return UniformRange.create(r.start, r.stop, I64)
    return Choose.new(r).unwrap()


@into_distribution.instance(Choose)
def _choose_into_distribution(dist: Choose) -> Choose:
    return dist
