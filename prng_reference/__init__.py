"""
PRNG Reference Vectors v1.0.0

Bit-exact golden vectors for cross-language PRNG parity checks:
- Generators: xorshift32/64/128, xorshift128+, xoshiro128++/256++,
  splitmix64, mulberry32
- Bounded sampling: Lemire divisionless (modulo and O'Neill variants)
- Conversions: multiplicative, bit-cast, Doornik randbl32/randbl52

Usage:
    from prng_reference import create_generator, generate_vector

    vector = generate_vector(create_generator('xorshift32', [1]), 10)
    vector.ints[0]                    # 0x00042021
    vector.doubles['randbl32'][0]     # 0.5000629501882941
"""

__version__ = "1.0.0"

from .exceptions import (
    ConfigError,
    InvalidRangeError,
    InvalidSeedError,
    ReferenceVectorError,
    SamplerMismatchError,
    UnknownAlgorithmError,
)
from .conversions import (
    to_double_bitcast,
    to_double_doornik32,
    to_double_doornik32_no_zero,
    to_double_doornik52,
    to_double_multiplicative,
)
from .generators import Algorithm, Generator, create_generator, list_algorithms
from .bounded import BoundedSampler, ModuloBoundedSampler, cross_validate_samplers
from .assembler import ReferenceVector, generate_suite, generate_vector

__all__ = [
    'ConfigError',
    'InvalidRangeError',
    'InvalidSeedError',
    'ReferenceVectorError',
    'SamplerMismatchError',
    'UnknownAlgorithmError',
    'to_double_bitcast',
    'to_double_doornik32',
    'to_double_doornik32_no_zero',
    'to_double_doornik52',
    'to_double_multiplicative',
    'Algorithm',
    'Generator',
    'create_generator',
    'list_algorithms',
    'BoundedSampler',
    'ModuloBoundedSampler',
    'cross_validate_samplers',
    'ReferenceVector',
    'generate_suite',
    'generate_vector',
]
