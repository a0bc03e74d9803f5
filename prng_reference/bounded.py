"""
Bounded integer sampling - Lemire's divisionless rejection method.

Maps a stream of raw 32-bit outputs onto a uniform integer in [0, range)
without bias. Two variants are kept:

- ModuloBoundedSampler: Lemire (2019), threshold = (2**32 - range) % range
- BoundedSampler:       O'Neill's tweak, which replaces the modulo with
                        one or two subtractions in the common case

They must emit identical streams for identical generators.
cross_validate_samplers() checks this before a bounded vector is trusted.

References:
    Daniel Lemire. 2019. Fast Random Integer Generation in an Interval.
    ACM Trans. Model. Comput. Simul. 29, 1, Article 3.
    Melissa O'Neill. 2018. Efficiently Generating a Number in a Range.
    https://www.pcg-random.org/posts/bounded-rands.html
"""

import logging
from typing import List, Sequence

from .exceptions import InvalidRangeError, InvalidSeedError, SamplerMismatchError
from .generators import Generator, create_generator

logger = logging.getLogger(__name__)

MASK32 = 0xFFFFFFFF
MAX_RANGE = 0xFFFFFFFF


class _DivisionlessSampler:
    """Shared construction and accept path for both variants."""

    variant = "base"

    def __init__(self, generator: Generator, range_: int):
        if getattr(generator, 'output_bits', None) != 32:
            raise InvalidSeedError(
                f"Bounded sampling needs a 32-bit generator, got {generator!r}"
            )
        if isinstance(range_, bool) or not isinstance(range_, int):
            raise InvalidRangeError(f"range must be an int, got {type(range_).__name__}")
        if not 1 <= range_ <= MAX_RANGE:
            raise InvalidRangeError(f"range={range_} outside [1, {MAX_RANGE:#x}]")
        self.generator = generator
        self.range = range_
        self.rejections = 0

    @property
    def algorithm(self):
        return self.generator.algorithm

    @property
    def seed_descriptor(self) -> str:
        return self.generator.seed_descriptor

    @property
    def output_bits(self) -> int:
        return 32

    def _threshold(self) -> int:
        raise NotImplementedError

    def next_bounded(self) -> int:
        """Uniform value in [0, range)."""
        r = self.range
        m = self.generator.next() * r
        low = m & MASK32
        if low < r:
            t = self._threshold()
            while low < t:
                self.rejections += 1
                m = self.generator.next() * r
                low = m & MASK32
        return m >> 32

    # Samplers plug into generate_vector() the same way generators do
    next = next_bounded

    def take(self, n: int) -> List[int]:
        return [self.next_bounded() for _ in range(n)]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.generator!r}, range={self.range:#x})"


class ModuloBoundedSampler(_DivisionlessSampler):
    """Straightforward Lemire variant: one true modulo on the rejection path."""

    variant = "modulo"

    def _threshold(self) -> int:
        return ((1 << 32) - self.range) % self.range


class BoundedSampler(_DivisionlessSampler):
    """
    O'Neill-tweaked Lemire sampler.

    t = -range mod 2**32 may itself be >= range (for range = 2**31 it
    equals range exactly), so it is reduced by subtraction first. The
    modulo is only reached when 2**32 - range >= 2 * range, that is for
    range <= 0x55555555.
    """

    variant = "oneill"

    def _threshold(self) -> int:
        r = self.range
        t = (-r) & MASK32
        if t >= r:
            t -= r
            if t >= r:
                t %= r
        return t


def cross_validate_samplers(algorithm, seed: Sequence[int], range_: int,
                            count: int) -> List[int]:
    """
    Run both sampler variants from identically seeded generators.

    Returns:
        The validated bounded stream (length count)

    Raises:
        SamplerMismatchError: At the first index where the variants differ
    """
    reference = ModuloBoundedSampler(create_generator(algorithm, seed), range_)
    tweaked = BoundedSampler(create_generator(algorithm, seed), range_)

    values = []
    for index in range(count):
        expected = reference.next_bounded()
        actual = tweaked.next_bounded()
        if expected != actual:
            raise SamplerMismatchError(
                tweaked.algorithm.value, range_, index, expected, actual
            )
        values.append(actual)

    if tweaked.rejections:
        logger.debug(
            f"{tweaked!r}: {tweaked.rejections} rejection(s) over {count} draws"
        )
    return values
