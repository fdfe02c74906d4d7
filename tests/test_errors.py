"""Tests for struct/exception error pairs."""

import pytest
from klaw_distributions import (
    InvalidRange,
    InvalidRangeError,
    InvalidSeed,
    InvalidSeedError,
    NoInstanceError,
)


class TestInvalidRange:
    def test_struct_to_exception(self):
        exc = InvalidRange(3, 1, 'i8').to_exception()
        assert isinstance(exc, InvalidRangeError)
        assert str(exc) == 'Invalid i8 range [3, 1): low must be less than high'

    def test_exception_to_struct(self):
        exc = InvalidRangeError(0, 300, 'u8', 'out of bounds')
        assert exc.to_struct() == InvalidRange(0, 300, 'u8', 'out of bounds')

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            raise InvalidRangeError(1, 1, 'u8')

    def test_struct_is_frozen(self):
        err = InvalidRange(1, 1, 'u8')
        with pytest.raises(AttributeError):
            err.low = 0  # type: ignore[misc]


class TestInvalidSeed:
    def test_round_trip(self):
        exc = InvalidSeed('xorshift', 'state must not be all zero').to_exception()
        assert isinstance(exc, InvalidSeedError)
        assert str(exc) == '[xorshift] state must not be all zero'
        assert exc.to_struct() == InvalidSeed('xorshift', 'state must not be all zero')


class TestNoInstanceError:
    def test_message(self):
        exc = NoInstanceError('into_distribution', float)
        assert isinstance(exc, TypeError)
        assert str(exc) == "No instance of 'into_distribution' for type 'float'"
