"""klaw-distributions: typed random distributions for Python 3.13+.

Any value-producing strategy is sampled through one interface,
``sample(bit_source)``, and ``into_distribution`` turns bare values
(ranges, integer kinds, constants) into distributions. The centrepiece is
``UniformRange``, an unbiased rejection sampler over ``[low, high)`` for every
fixed-width integer kind.

Flat imports (preferred):
    from klaw_distributions import UniformRange, Uniform, U8, I64, XorShiftBitSource
    from klaw_distributions import into_distribution, sample_from, generate

Submodule imports (for organization):
    from klaw_distributions.uniform_range import UniformRange
    from klaw_distributions.integers import IntKind, kind_of
    from klaw_distributions.bitsource import BitSource
"""

# Configuration
from klaw_distributions._config import (
    BitSourceKind,
    SamplingConfig,
    get_config,
    init,
    make_bit_source,
    thread_bit_source,
)

# Logging
from klaw_distributions._logging import configure_logging, get_logger

# Core abstractions
from klaw_distributions.api import (
    Distribution,
    default_distribution,
    into_distribution,
    random,
    register_default,
    sample_from,
)

# Bit sources
from klaw_distributions.bitsource import BitSource, OsBitSource, XorShiftBitSource

# Distributions
from klaw_distributions.choose import Choose
from klaw_distributions.constant import Constant

# Errors
from klaw_distributions.errors import (
    InvalidRange,
    InvalidRangeError,
    InvalidSeed,
    InvalidSeedError,
    NoInstanceError,
)

# Integer kinds
from klaw_distributions.integers import (
    BOOL,
    I8,
    I16,
    I32,
    I64,
    I128,
    ISIZE,
    KINDS,
    U8,
    U16,
    U32,
    U64,
    U128,
    USIZE,
    IntKind,
    IntRange,
    kind_of,
)

# Result types
from klaw_distributions.result import Err, Ok, Result

# Convenience helpers
from klaw_distributions.rng_ext import GenIter, choose, generate, generate_iter
from klaw_distributions.simple import RandomSimpleDistribution, random_simple
from klaw_distributions.typeclass import TypeClass, typeclass
from klaw_distributions.uniform import Uniform
from klaw_distributions.uniform_range import UniformRange

__all__ = [
    # Integer kinds
    'BOOL',
    'I8',
    'I16',
    'I32',
    'I64',
    'I128',
    'ISIZE',
    'KINDS',
    'U8',
    'U16',
    'U32',
    'U64',
    'U128',
    'USIZE',
    # Bit sources
    'BitSource',
    'BitSourceKind',
    # Distributions
    'Choose',
    'Constant',
    'Distribution',
    # Result types
    'Err',
    'GenIter',
    'IntKind',
    'IntRange',
    # Errors
    'InvalidRange',
    'InvalidRangeError',
    'InvalidSeed',
    'InvalidSeedError',
    'NoInstanceError',
    'Ok',
    'OsBitSource',
    'RandomSimpleDistribution',
    'Result',
    # Configuration
    'SamplingConfig',
    'TypeClass',
    'Uniform',
    'UniformRange',
    'XorShiftBitSource',
    # Helpers
    'choose',
    'configure_logging',
    'default_distribution',
    'generate',
    'generate_iter',
    'get_config',
    'get_logger',
    'init',
    'into_distribution',
    'kind_of',
    'make_bit_source',
    'random',
    'random_simple',
    'register_default',
    'sample_from',
    'thread_bit_source',
    'typeclass',
]
