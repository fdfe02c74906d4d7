"""Error types: dual struct+exception for Result and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    'InvalidRange',
    'InvalidRangeError',
    'InvalidSeed',
    'InvalidSeedError',
    'NoInstanceError',
]


# --- Range Errors ---


class InvalidRange(msgspec.Struct, frozen=True, gc=False):
    """Range bounds rejected at construction - struct variant for Result[T, InvalidRange]."""

    low: int
    high: int
    kind: str
    reason: str = 'low must be less than high'

    def to_exception(self) -> InvalidRangeError:
        """Convert to exception for raise-based code."""
        return InvalidRangeError(self.low, self.high, self.kind, self.reason)


class InvalidRangeError(ValueError):
    """Range bounds rejected at construction - exception variant."""

    def __init__(
        self,
        low: int,
        high: int,
        kind: str,
        reason: str = 'low must be less than high',
    ) -> None:
        self.low = low
        self.high = high
        self.kind = kind
        self.reason = reason
        super().__init__(f'Invalid {kind} range [{low}, {high}): {reason}')

    def to_struct(self) -> InvalidRange:
        """Convert to struct for Result-based code."""
        return InvalidRange(self.low, self.high, self.kind, self.reason)


# --- Bit Source Errors ---


class InvalidSeed(msgspec.Struct, frozen=True, gc=False):
    """Seed cannot initialize a bit source - struct variant."""

    source: str
    reason: str

    def to_exception(self) -> InvalidSeedError:
        """Convert to exception for raise-based code."""
        return InvalidSeedError(self.source, self.reason)


class InvalidSeedError(ValueError):
    """Seed cannot initialize a bit source - exception variant."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f'[{source}] {reason}')

    def to_struct(self) -> InvalidSeed:
        """Convert to struct for Result-based code."""
        return InvalidSeed(self.source, self.reason)


# --- Dispatch Errors ---


class NoInstanceError(TypeError):
    """Raised when no typeclass instance is registered for a type."""

    def __init__(self, typeclass_name: str, value_type: type) -> None:
        self.typeclass_name = typeclass_name
        self.value_type = value_type
        super().__init__(
            f"No instance of '{typeclass_name}' for type '{value_type.__name__}'"
        )
