"""Tests for sampling configuration and default bit sources."""

from __future__ import annotations

import os
import threading
from unittest.mock import patch

import pytest
from klaw_distributions import (
    BitSourceKind,
    OsBitSource,
    SamplingConfig,
    XorShiftBitSource,
    get_config,
    init,
    make_bit_source,
    thread_bit_source,
)
from klaw_distributions._config import _detect_bit_source, _detect_seed


@pytest.fixture(autouse=True)
def reset_config():
    """Forget configuration set by a test."""
    from klaw_distributions import _config

    _config._config = None
    yield
    _config._config = None


class TestBitSourceKindEnum:
    def test_values(self) -> None:
        assert BitSourceKind.XORSHIFT.value == 'xorshift'
        assert BitSourceKind.OS.value == 'os'

    def test_from_string(self) -> None:
        assert BitSourceKind('os') == BitSourceKind.OS

    def test_invalid_raises(self) -> None:
        with pytest.raises(ValueError):
            BitSourceKind('mersenne')


class TestSamplingConfig:
    def test_default_values(self) -> None:
        config = SamplingConfig()
        assert config.bit_source == BitSourceKind.XORSHIFT
        assert config.seed is None
        assert config.log_level is None

    def test_is_frozen(self) -> None:
        config = SamplingConfig()
        with pytest.raises(AttributeError):
            config.seed = 1  # type: ignore[misc]


class TestDetection:
    def test_bit_source_from_env(self) -> None:
        with patch.dict(os.environ, {'KLAW_BIT_SOURCE': 'OS'}):
            assert _detect_bit_source() == BitSourceKind.OS

    def test_bit_source_default(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _detect_bit_source() == BitSourceKind.XORSHIFT

    def test_unknown_bit_source_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        with patch.dict(os.environ, {'KLAW_BIT_SOURCE': 'dice'}):
            assert _detect_bit_source() == BitSourceKind.XORSHIFT
        assert 'Unknown KLAW_BIT_SOURCE' in caplog.text

    @pytest.mark.parametrize(('raw', 'expected'), [('42', 42), ('0x2A', 42), (' 7 ', 7)])
    def test_seed_from_env(self, raw: str, expected: int) -> None:
        with patch.dict(os.environ, {'KLAW_SEED': raw}):
            assert _detect_seed() == expected

    def test_seed_unset(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _detect_seed() is None

    def test_invalid_seed_ignored(self, caplog: pytest.LogCaptureFixture) -> None:
        with patch.dict(os.environ, {'KLAW_SEED': 'abc'}):
            assert _detect_seed() is None
        assert 'Invalid KLAW_SEED' in caplog.text


class TestInit:
    def test_explicit_values(self) -> None:
        config = init(bit_source=BitSourceKind.OS, seed=5)
        assert config == SamplingConfig(bit_source=BitSourceKind.OS, seed=5)
        assert get_config() is config

    def test_string_bit_source(self) -> None:
        assert init(bit_source='XORSHIFT').bit_source == BitSourceKind.XORSHIFT

    def test_invalid_string_raises(self) -> None:
        with pytest.raises(ValueError):
            init(bit_source='dice')

    def test_env_fallback(self) -> None:
        with patch.dict(os.environ, {'KLAW_BIT_SOURCE': 'os', 'KLAW_SEED': '9'}):
            config = init()
        assert config.bit_source == BitSourceKind.OS
        assert config.seed == 9

    def test_get_config_lazy_default(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            config = get_config()
        assert config == SamplingConfig()

    def test_log_level_configures_logging(self) -> None:
        with patch('klaw_distributions._config.configure_logging') as configure:
            init(log_level='DEBUG')
        configure.assert_called_once_with('DEBUG')


class TestBitSources:
    def test_make_os_source(self) -> None:
        source = make_bit_source(SamplingConfig(bit_source=BitSourceKind.OS))
        assert isinstance(source, OsBitSource)

    def test_make_seeded_xorshift(self) -> None:
        source = make_bit_source(SamplingConfig(seed=11))
        reference = XorShiftBitSource.from_seed(11)
        assert isinstance(source, XorShiftBitSource)
        assert source.next_u64() == reference.next_u64()

    def test_make_unseeded_xorshift(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert isinstance(make_bit_source(), XorShiftBitSource)

    def test_thread_source_is_reused(self) -> None:
        init(seed=1)
        assert thread_bit_source() is thread_bit_source()

    def test_init_replaces_thread_source(self) -> None:
        init(seed=1)
        before = thread_bit_source()
        init(seed=1)
        assert thread_bit_source() is not before

    def test_threads_get_their_own_source(self) -> None:
        init(seed=1)
        main = thread_bit_source()
        seen: list[object] = []
        worker = threading.Thread(target=lambda: seen.append(thread_bit_source()))
        worker.start()
        worker.join()
        assert seen[0] is not main
        # Same seed, same stream start.
        assert seen[0].next_u64() == main.next_u64()
