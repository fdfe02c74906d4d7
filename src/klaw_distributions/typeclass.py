"""@typeclass decorator: runtime dispatch on the first argument's type.

Conversions such as ``into_distribution`` are typeclasses, so any module
(or user code) can teach them about a new value type without touching the
dispatch site.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

import wrapt

from klaw_distributions.errors import NoInstanceError

__all__ = ['NoInstanceError', 'TypeClass', 'typeclass']

F = TypeVar('F', bound=Callable[..., Any])


class TypeClass(wrapt.ObjectProxy, Generic[F]):
    """A polymorphic function with per-type instance implementations.

    Lookup order is the exact type first, then the type's MRO. When nothing
    matches, the decorated function itself runs as the fallback.

    Example:
        ```python
        @typeclass
        def describe(value) -> str:
            raise NoInstanceError('describe', type(value))

        @describe.instance(int, bool)
        def _describe_int(value) -> str:
            return f'int {value}'

        describe(3)
        # 'int 3'
        ```
    """

    def __init__(self, default_fn: F) -> None:
        super().__init__(default_fn)
        self._self_name = default_fn.__name__
        self._self_default = default_fn
        self._self_instances: dict[type, Callable[..., Any]] = {}

    def instance(self, *types: type) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register one implementation for one or more types.

        Args:
            *types: The types the implementation handles.

        Returns:
            A decorator that registers the implementation and returns it unchanged.
        """

        def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
            for type_ in types:
                self._self_instances[type_] = fn
            return fn

        return decorator

    def supports(self, type_: type) -> bool:
        """Return True if a value of ``type_`` dispatches to a registered instance."""
        return any(base in self._self_instances for base in type_.__mro__)

    def _find_instance(self, value: Any) -> Callable[..., Any] | None:
        value_type = type(value)
        if value_type in self._self_instances:
            return self._self_instances[value_type]

        # MRO lookup for inheritance
        for base in value_type.__mro__[1:]:
            if base in self._self_instances:
                return self._self_instances[base]

        return None

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        """Dispatch to the appropriate instance based on first argument."""
        if not args:
            raise TypeError(f'{self._self_name}() requires at least one argument')

        instance_fn = self._find_instance(args[0])
        if instance_fn is not None:
            return instance_fn(*args, **kwargs)
        return self._self_default(*args, **kwargs)

    def __repr__(self) -> str:
        return f'<typeclass {self._self_name} with {len(self._self_instances)} instances>'


def typeclass(fn: F) -> TypeClass[F]:
    """Decorator to create a typeclass; ``fn`` is the fallback for unregistered types."""
    return TypeClass(fn)
