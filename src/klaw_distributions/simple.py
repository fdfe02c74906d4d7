"""Types that know how to build a random instance of themselves.

Decorating a class with ``@random_simple`` makes its ``random(bit_source)``
classmethod the type's default distribution:

    ```python
    @random_simple
    class Coin(msgspec.Struct, frozen=True):
        heads: bool

        @classmethod
        def random(cls, bit_source):
            return cls(Uniform(BOOL).sample(bit_source))

    random(Coin, src)  # Coin(heads=...)
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import msgspec

from klaw_distributions.api import into_distribution, register_default

if TYPE_CHECKING:
    from klaw_distributions.bitsource import BitSource

__all__ = ['RandomSimpleDistribution', 'random_simple']


class RandomSimpleDistribution(msgspec.Struct, frozen=True, gc=False):
    """Distribution delegating to ``target.random(bit_source)``."""

    target: type

    def sample(self, bit_source: BitSource) -> Any:
        return self.target.random(bit_source)


def random_simple[C: type](cls: C) -> C:
    """Class decorator registering ``cls.random`` as the default distribution.

    Subclasses inherit the registration and sample through their own
    ``random`` classmethod.

    Raises:
        TypeError: If ``cls`` has no callable ``random`` attribute.
    """
    if not callable(getattr(cls, 'random', None)):
        msg = f'{cls.__name__} must define a random(bit_source) classmethod'
        raise TypeError(msg)
    register_default(cls)(RandomSimpleDistribution)
    return cls


@into_distribution.instance(RandomSimpleDistribution)
def _simple_into_distribution(dist: RandomSimpleDistribution) -> RandomSimpleDistribution:
    return dist
