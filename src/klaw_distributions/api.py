"""Distribution and IntoDistribution: one sampling interface for every strategy.

A *distribution* is an immutable value with a single operation,
``sample(bit_source)``. ``into_distribution`` turns ordinary values into
distributions so call sites can pass a range, a kind, or a constant without
naming the concrete distribution type:

    ```python
    from klaw_distributions import U8, sample_from, XorShiftBitSource

    src = XorShiftBitSource.from_seed(7)
    sample_from(U8.range(1, 10), src)   # UniformRange over u8
    sample_from(U8, src)                # Uniform over all of u8
    sample_from('fixed', src)           # Constant
    ```

Conversion is pure: equal inputs produce equal distributions.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from klaw_distributions.errors import NoInstanceError
from klaw_distributions.typeclass import typeclass

if TYPE_CHECKING:
    from klaw_distributions.bitsource import BitSource

__all__ = [
    'Distribution',
    'default_distribution',
    'into_distribution',
    'random',
    'register_default',
    'sample_from',
]


@runtime_checkable
class Distribution[T](Protocol):
    """Protocol for a stateless strategy producing values of type T.

    Sampling never mutates the distribution; all state lives in the bit
    source, so two samples from independent draws are independent.
    """

    def sample(self, bit_source: BitSource) -> T:
        """Draw one value using ``bit_source`` for randomness."""
        ...


@typeclass
def into_distribution(value: Any) -> Distribution[Any]:
    """Convert ``value`` into a distribution.

    Objects that already satisfy the Distribution protocol convert to
    themselves.

    Raises:
        NoInstanceError: If no conversion is registered for ``type(value)``.
    """
    if isinstance(value, Distribution):
        return value
    raise NoInstanceError('into_distribution', type(value))


def sample_from(value: Any, bit_source: BitSource) -> Any:
    """Convert ``value`` into a distribution and draw one sample from it."""
    return into_distribution(value).sample(bit_source)


# --- Default distributions ---

_defaults: dict[type, Callable[[type], Distribution[Any]]] = {}


def register_default(
    tp: type,
) -> Callable[[Callable[[type], Distribution[Any]]], Callable[[type], Distribution[Any]]]:
    """Register a factory building the default distribution for ``tp`` and its subclasses.

    The factory receives the requested type.
    """

    def decorator(
        factory: Callable[[type], Distribution[Any]],
    ) -> Callable[[type], Distribution[Any]]:
        _defaults[tp] = factory
        return factory

    return decorator


@typeclass
def default_distribution(tp: Any) -> Distribution[Any]:
    """Return the default distribution for a type.

    Accepts a Python type (``bool``, ``int``, classes registered with
    ``register_default`` or ``@random_simple``) or a value with its own
    instance, such as an ``IntKind``.

    Raises:
        NoInstanceError: If the type has no default distribution.
    """
    if isinstance(tp, type):
        for base in tp.__mro__:
            factory = _defaults.get(base)
            if factory is not None:
                return factory(tp)
        raise NoInstanceError('default_distribution', tp)
    raise NoInstanceError('default_distribution', type(tp))


def random(tp: Any, bit_source: BitSource) -> Any:
    """Draw one value of ``tp`` from its default distribution."""
    return default_distribution(tp).sample(bit_source)
