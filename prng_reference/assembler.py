"""
Reference vector assembly.

Drives a generator (or bounded sampler) for a fixed number of steps and
pairs the raw outputs with their derived doubles.

Derived sequences per source width:

    32-bit generator: randbl32, randbl32_no_zero      (one per output)
                      randbl52, double_mul, double_bitcast
                                                      (one per disjoint pair
                                                       ints[2k], ints[2k+1],
                                                       high word first)
    64-bit generator: double_mul, double_bitcast      (one per output)
    bounded sampler:  none (ints only, range recorded)
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Protocol, Tuple, runtime_checkable

from .bounded import cross_validate_samplers
from .conversions import (
    combine_words,
    to_double_bitcast,
    to_double_doornik32,
    to_double_doornik32_no_zero,
    to_double_doornik52,
    to_double_multiplicative,
)
from .generators import create_generator

logger = logging.getLogger(__name__)


@runtime_checkable
class RawSource(Protocol):
    """Anything generate_vector() can drive: generators and bounded samplers."""

    @property
    def algorithm(self) -> str:
        ...

    @property
    def output_bits(self) -> int:
        ...

    @property
    def seed_descriptor(self) -> str:
        ...

    def next(self) -> int:
        ...


@dataclass(frozen=True)
class ReferenceVector:
    """One golden vector. Immutable once assembled, but not hashable."""
    algorithm: str
    seed_descriptor: str
    output_bits: int
    ints: Tuple[int, ...]
    doubles: Mapping[str, Tuple[float, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    range: Optional[int] = None

    # doubles is a mapping
    __hash__ = None

    @property
    def count(self) -> int:
        return len(self.ints)

    @property
    def is_bounded(self) -> bool:
        return self.range is not None


def _pairs(values: List[int]) -> List[Tuple[int, int]]:
    return list(zip(values[0::2], values[1::2]))


def derive_doubles(ints: List[int], output_bits: int) -> Mapping[str, Tuple[float, ...]]:
    """Apply every conversion that fits the output width, in a fixed order."""
    if output_bits == 64:
        return MappingProxyType({
            'double_mul': tuple(to_double_multiplicative(x) for x in ints),
            'double_bitcast': tuple(to_double_bitcast(x) for x in ints),
        })

    pairs = _pairs(ints)
    combined = [combine_words(high, low) for high, low in pairs]
    return MappingProxyType({
        'randbl32': tuple(to_double_doornik32(x) for x in ints),
        'randbl32_no_zero': tuple(to_double_doornik32_no_zero(x) for x in ints),
        'randbl52': tuple(to_double_doornik52(a, b) for a, b in pairs),
        'double_mul': tuple(to_double_multiplicative(x) for x in combined),
        'double_bitcast': tuple(to_double_bitcast(x) for x in combined),
    })


def _assemble(algorithm, seed_descriptor: str, output_bits: int, ints: List[int],
              range_: Optional[int] = None) -> ReferenceVector:
    algorithm = getattr(algorithm, 'value', algorithm)
    if range_ is not None:
        doubles = MappingProxyType({})
    else:
        doubles = derive_doubles(ints, output_bits)

    vector = ReferenceVector(
        algorithm=algorithm,
        seed_descriptor=seed_descriptor,
        output_bits=output_bits,
        ints=tuple(ints),
        doubles=doubles,
        range=range_,
    )
    logger.debug(
        f"Assembled {algorithm} [{seed_descriptor}] count={len(ints)}"
        + (f" range={range_:#x}" if range_ is not None else "")
    )
    return vector


def generate_vector(source: RawSource, count: int) -> ReferenceVector:
    """
    Pull count raw outputs from source and assemble a ReferenceVector.

    Index 0 is the first next() call. The source's state advances by
    exactly count outputs (plus any rejected draws for bounded samplers).

    Raises:
        ValueError: If count is not a non-negative int
    """
    if isinstance(count, bool) or not isinstance(count, int) or count < 0:
        raise ValueError(f"count must be a non-negative int, got {count!r}")

    ints = [source.next() for _ in range(count)]
    return _assemble(source.algorithm, source.seed_descriptor, source.output_bits,
                     ints, getattr(source, 'range', None))


def generate_suite(requests: Iterable) -> List[ReferenceVector]:
    """
    Build one vector per request (prng_reference.schemas.VectorRequest).

    Bounded requests cross-validate the modulo and O'Neill samplers over
    the full count, and the stream that passed validation is the one
    emitted.
    """
    vectors = []
    for request in requests:
        seed = request.seed_words()
        if request.range is not None:
            values = cross_validate_samplers(request.algorithm, seed, request.range,
                                             request.count)
            generator = create_generator(request.algorithm, seed)
            vectors.append(_assemble(request.algorithm, generator.seed_descriptor,
                                     32, values, request.range))
        else:
            source = create_generator(request.algorithm, seed)
            vectors.append(generate_vector(source, request.count))

    logger.info(f"Generated {len(vectors)} reference vector(s)")
    return vectors
