"""Sampling configuration: BitSourceKind enum, SamplingConfig, and initialization."""

from __future__ import annotations

import logging
import os
import threading
from dataclasses import dataclass
from enum import Enum

from klaw_distributions._logging import configure_logging, get_logger
from klaw_distributions.bitsource import BitSource, OsBitSource, XorShiftBitSource

__all__ = [
    'BitSourceKind',
    'SamplingConfig',
    'get_config',
    'init',
    'make_bit_source',
    'thread_bit_source',
]

logger = get_logger(__name__)


class BitSourceKind(Enum):
    """Bit source used when callers do not pass one explicitly."""

    XORSHIFT = 'xorshift'
    OS = 'os'


@dataclass(frozen=True)
class SamplingConfig:
    """Configuration for default bit sources.

    Attributes:
        bit_source: Which bit source backs ``thread_bit_source()``.
        seed: Seed for ``XORSHIFT`` sources. None = seed from OS entropy.
            Ignored by ``OS`` sources.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
    """

    bit_source: BitSourceKind = BitSourceKind.XORSHIFT
    seed: int | None = None
    log_level: str | None = None


# Global configuration (set by init())
_config: SamplingConfig | None = None

# Bumped by init() so every thread rebuilds its source under the new config.
_generation = 0

_local = threading.local()


def _detect_bit_source() -> BitSourceKind:
    """Detect bit source kind from the KLAW_BIT_SOURCE environment variable."""
    env_source = os.environ.get('KLAW_BIT_SOURCE', '').lower()
    if not env_source:
        return BitSourceKind.XORSHIFT
    try:
        return BitSourceKind(env_source)
    except ValueError:
        logging.warning("Unknown KLAW_BIT_SOURCE value '%s', defaulting to xorshift", env_source)
        return BitSourceKind.XORSHIFT


def _detect_seed() -> int | None:
    """Detect a seed from the KLAW_SEED environment variable.

    Accepts decimal or prefixed (``0x``, ``0o``, ``0b``) integers.
    """
    env_seed = os.environ.get('KLAW_SEED', '').strip()
    if not env_seed:
        return None
    try:
        return int(env_seed, 0)
    except ValueError:
        logging.warning("Invalid KLAW_SEED value '%s', ignoring", env_seed)
        return None


def init(
    bit_source: BitSourceKind | str | None = None,
    seed: int | None = None,
    log_level: str | None = None,
) -> SamplingConfig:
    """Initialize default sampling configuration.

    Args:
        bit_source: Default bit source. Detected from ``KLAW_BIT_SOURCE`` if None.
            Can be BitSourceKind enum or string ("xorshift", "os").
        seed: Seed for xorshift sources. Detected from ``KLAW_SEED`` if None.
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.

    Returns:
        The SamplingConfig that was set.

    Example:
        ```python
        from klaw_distributions import init, generate, U8

        init(seed=1234)
        generate(U8.range(1, 7))
        ```
    """
    global _config, _generation  # noqa: PLW0603

    if bit_source is None:
        resolved_source = _detect_bit_source()
    elif isinstance(bit_source, str):
        resolved_source = BitSourceKind(bit_source.lower())
    else:
        resolved_source = bit_source

    _config = SamplingConfig(
        bit_source=resolved_source,
        seed=_detect_seed() if seed is None else seed,
        log_level=log_level,
    )

    if log_level is not None:
        configure_logging(log_level)

    _generation += 1
    logger.info(
        'sampling.init',
        bit_source=resolved_source.value,
        seeded=_config.seed is not None,
    )
    return _config


def get_config() -> SamplingConfig:
    """Get the current configuration, resolving it from the environment on first use."""
    global _config  # noqa: PLW0603

    if _config is None:
        _config = SamplingConfig(bit_source=_detect_bit_source(), seed=_detect_seed())
    return _config


def make_bit_source(config: SamplingConfig | None = None) -> BitSource:
    """Build a fresh bit source for ``config`` (the active config if None)."""
    config = config or get_config()
    if config.bit_source is BitSourceKind.OS:
        return OsBitSource()
    if config.seed is not None:
        return XorShiftBitSource.from_seed(config.seed)
    return XorShiftBitSource.from_entropy()


def thread_bit_source() -> BitSource:
    """Return the calling thread's default bit source, creating it on first use.

    With a configured seed every thread starts from the same stream.
    """
    source = getattr(_local, 'source', None)
    if source is None or getattr(_local, 'generation', None) != _generation:
        source = make_bit_source()
        _local.source = source
        _local.generation = _generation
        logger.debug('bit_source.created', thread=threading.current_thread().name)
    return source
