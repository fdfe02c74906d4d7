"""Constant distribution: every sample is the same value."""

from __future__ import annotations

import collections
import copy
from typing import TYPE_CHECKING, Any

import msgspec

from klaw_distributions.api import into_distribution

if TYPE_CHECKING:
    from klaw_distributions.bitsource import BitSource

__all__ = ['Constant']


class Constant(msgspec.Struct, frozen=True):
    """Distribution that always yields ``value`` and draws no bits.

    Mutable containers are shallow-copied per sample so callers never
    alias the stored value.

    Example:
        ```python
        Constant(42).sample(src)
        # 42
        ```
    """

    value: Any

    def sample(self, bit_source: BitSource) -> Any:  # noqa: ARG002
        return copy.copy(self.value)


@into_distribution.instance(
    int,
    bool,
    str,
    bytes,
    list,
    tuple,
    dict,
    set,
    frozenset,
    collections.deque,
    collections.OrderedDict,
)
def _value_into_distribution(value: Any) -> Constant:
    return Constant(value)


@into_distribution.instance(Constant)
def _constant_into_distribution(dist: Constant) -> Constant:
    return dist
