"""Convenience sampling helpers on top of ``into_distribution``.

Every helper takes an optional bit source and falls back to the calling
thread's default source (see ``thread_bit_source``).
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING, Any

from klaw_distributions._config import thread_bit_source
from klaw_distributions.api import Distribution, into_distribution
from klaw_distributions.choose import Choose

if TYPE_CHECKING:
    from klaw_distributions.bitsource import BitSource

__all__ = ['GenIter', 'choose', 'generate', 'generate_iter']


def _resolve(bit_source: BitSource | None) -> BitSource:
    return thread_bit_source() if bit_source is None else bit_source


def generate(value: Any, bit_source: BitSource | None = None) -> Any:
    """Draw one sample from ``value`` converted into a distribution.

    Example:
        ```python
        generate(U8.range(1, 10))  # 1..9
        generate(U8)               # 0..255
        ```
    """
    return into_distribution(value).sample(_resolve(bit_source))


class GenIter[T](Iterator[T]):
    """Endless iterator of samples from one distribution.

    The value is converted once; each ``next()`` draws a fresh sample.
    """

    __slots__ = ('_bit_source', '_distribution')

    def __init__(self, distribution: Distribution[T], bit_source: BitSource) -> None:
        self._distribution = distribution
        self._bit_source = bit_source

    @property
    def distribution(self) -> Distribution[T]:
        return self._distribution

    def __iter__(self) -> GenIter[T]:
        return self

    def __next__(self) -> T:
        return self._distribution.sample(self._bit_source)


def generate_iter(value: Any, bit_source: BitSource | None = None) -> GenIter[Any]:
    """Return an endless iterator of samples; slice it with ``itertools.islice``."""
    return GenIter(into_distribution(value), _resolve(bit_source))


def choose[T](items: Sequence[T], bit_source: BitSource | None = None) -> T:
    """Return a uniformly random element of a non-empty sequence.

    Raises:
        InvalidRangeError: If ``items`` is empty.
    """
    return Choose.new(items).unwrap().sample(_resolve(bit_source))
