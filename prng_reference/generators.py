"""
PRNG state machines - CPU reference implementations.

Each generator is a fixed-width integer state advanced by pure bit
operations. Python ints are unbounded, so every shift-left, add and
multiply is masked back to the native width (32 or 64 bits) to get
C unsigned wrap-around semantics.

The algorithm set is closed: Algorithm enumerates it and
GENERATOR_REGISTRY maps every tag to its class and default seed.

Usage:
    from prng_reference.generators import create_generator

    gen = create_generator('xorshift32', [1])
    gen.next()   # 0x00042021
"""

import logging
from enum import Enum
from typing import Any, Dict, Iterable, List, Sequence, Tuple, Type

from .exceptions import InvalidSeedError, UnknownAlgorithmError

logger = logging.getLogger(__name__)

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF


def rotl32(x: int, k: int) -> int:
    return ((x << k) | (x >> (32 - k))) & MASK32


def rotl64(x: int, k: int) -> int:
    return ((x << k) | (x >> (64 - k))) & MASK64


class Algorithm(str, Enum):
    """Algorithm tags as they appear in serialized vectors."""
    XORSHIFT32 = "xorshift32"
    XORSHIFT64 = "xorshift64"
    XORSHIFT128 = "xorshift128"
    XORSHIFT128_PLUS = "xorshift128+"
    XOSHIRO128_PLUS_PLUS = "xoshiro128++"
    XOSHIRO256_PLUS_PLUS = "xoshiro256++"
    SPLITMIX64 = "splitmix64"
    MULBERRY32 = "mulberry32"


class Generator:
    """
    Common seed handling for every state machine.

    Subclasses set the class attributes below and implement next().
    The seed is validated once at construction; an all-zero seed is
    rejected for every family (xorshift/xoshiro get stuck at zero, and
    the counter-based ones are kept to the same contract).
    """

    algorithm: Algorithm
    output_bits: int = 32
    word_bits: int = 32
    seed_names: Tuple[str, ...] = ("a",)

    def __init__(self, *seed: int):
        self._seed = self._validate_seed(seed)

    @classmethod
    def _validate_seed(cls, seed: Sequence[int]) -> Tuple[int, ...]:
        name = cls.algorithm.value
        if len(seed) != len(cls.seed_names):
            raise InvalidSeedError(
                f"{name} takes {len(cls.seed_names)} seed word(s) "
                f"({', '.join(cls.seed_names)}), got {len(seed)}"
            )
        limit = 1 << cls.word_bits
        for word_name, word in zip(cls.seed_names, seed):
            if isinstance(word, bool) or not isinstance(word, int):
                raise InvalidSeedError(
                    f"{name} seed word {word_name} must be an int, got {type(word).__name__}"
                )
            if not 0 <= word < limit:
                raise InvalidSeedError(
                    f"{name} seed word {word_name}={word} outside [0, 2**{cls.word_bits})"
                )
        if not any(seed):
            raise InvalidSeedError(f"{name} seed must not be all zero")
        return tuple(seed)

    @property
    def seed(self) -> Tuple[int, ...]:
        return self._seed

    @property
    def seed_descriptor(self) -> str:
        """Human-readable seed, e.g. 'a=0x00000001'."""
        digits = self.word_bits // 4
        return ", ".join(
            f"{word_name}=0x{word:0{digits}x}"
            for word_name, word in zip(self.seed_names, self._seed)
        )

    @property
    def state(self) -> Tuple[int, ...]:
        raise NotImplementedError

    def next(self) -> int:
        raise NotImplementedError

    def take(self, n: int) -> List[int]:
        return [self.next() for _ in range(n)]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.seed_descriptor})"


class Xorshift32(Generator):
    # Algorithm "xor" from p. 4 of Marsaglia, "Xorshift RNGs"
    algorithm = Algorithm.XORSHIFT32
    seed_names = ("a",)

    def __init__(self, a: int):
        super().__init__(a)
        self.a = a

    @property
    def state(self) -> Tuple[int, ...]:
        return (self.a,)

    def next(self) -> int:
        x = self.a
        x ^= (x << 13) & MASK32
        x ^= x >> 17
        x ^= (x << 5) & MASK32
        self.a = x
        return x


class Xorshift64(Generator):
    algorithm = Algorithm.XORSHIFT64
    output_bits = 64
    word_bits = 64
    seed_names = ("x",)

    def __init__(self, x: int):
        super().__init__(x)
        self.x = x

    @property
    def state(self) -> Tuple[int, ...]:
        return (self.x,)

    def next(self) -> int:
        x = self.x
        x ^= (x << 13) & MASK64
        x ^= x >> 7
        x ^= (x << 17) & MASK64
        self.x = x
        return x


class Xorshift128(Generator):
    """Marsaglia xor128: four 32-bit words, output is the newest word."""
    algorithm = Algorithm.XORSHIFT128
    seed_names = ("x", "y", "z", "w")

    def __init__(self, x: int, y: int, z: int, w: int):
        super().__init__(x, y, z, w)
        self.x, self.y, self.z, self.w = x, y, z, w

    @property
    def state(self) -> Tuple[int, ...]:
        return (self.x, self.y, self.z, self.w)

    def next(self) -> int:
        t = self.x ^ ((self.x << 11) & MASK32)
        self.x, self.y, self.z = self.y, self.z, self.w
        w = self.w
        self.w = w ^ (w >> 19) ^ (t ^ (t >> 8))
        return self.w


class Xorshift128Plus(Generator):
    """
    Vigna's xorshift128+ with shift triple (23, 18, 5).

    The output is s0 + s1 taken after the state update (the Wikipedia
    form). Vigna's xorshift128plus.c returns s0 + s1 before updating, so
    from the same seed it first emits s0 + s1 of the seed itself and then
    continues with this stream, one output behind.
    """
    algorithm = Algorithm.XORSHIFT128_PLUS
    output_bits = 64
    word_bits = 64
    seed_names = ("s0", "s1")

    def __init__(self, s0: int, s1: int):
        super().__init__(s0, s1)
        self.s = [s0, s1]

    @property
    def state(self) -> Tuple[int, ...]:
        return tuple(self.s)

    def next(self) -> int:
        t = self.s[0]
        s = self.s[1]
        self.s[0] = s
        t ^= (t << 23) & MASK64
        t ^= t >> 18
        t ^= s ^ (s >> 5)
        self.s[1] = t
        return (t + s) & MASK64


class Xoshiro128PlusPlus(Generator):
    algorithm = Algorithm.XOSHIRO128_PLUS_PLUS
    seed_names = ("s0", "s1", "s2", "s3")

    def __init__(self, s0: int, s1: int, s2: int, s3: int):
        super().__init__(s0, s1, s2, s3)
        self.s = [s0, s1, s2, s3]

    @property
    def state(self) -> Tuple[int, ...]:
        return tuple(self.s)

    def next(self) -> int:
        s0, s1, s2, s3 = self.s
        result = (rotl32((s0 + s3) & MASK32, 7) + s0) & MASK32
        t = (s1 << 9) & MASK32
        s2 ^= s0
        s3 ^= s1
        s1 ^= s2
        s0 ^= s3
        s2 ^= t
        s3 = rotl32(s3, 11)
        self.s = [s0, s1, s2, s3]
        return result


class Xoshiro256PlusPlus(Generator):
    algorithm = Algorithm.XOSHIRO256_PLUS_PLUS
    output_bits = 64
    word_bits = 64
    seed_names = ("s0", "s1", "s2", "s3")

    def __init__(self, s0: int, s1: int, s2: int, s3: int):
        super().__init__(s0, s1, s2, s3)
        self.s = [s0, s1, s2, s3]

    @property
    def state(self) -> Tuple[int, ...]:
        return tuple(self.s)

    def next(self) -> int:
        s0, s1, s2, s3 = self.s
        result = (rotl64((s0 + s3) & MASK64, 23) + s0) & MASK64
        t = (s1 << 17) & MASK64
        s2 ^= s0
        s3 ^= s1
        s1 ^= s2
        s0 ^= s3
        s2 ^= t
        s3 = rotl64(s3, 45)
        self.s = [s0, s1, s2, s3]
        return result


class SplitMix64(Generator):
    algorithm = Algorithm.SPLITMIX64
    output_bits = 64
    word_bits = 64
    seed_names = ("x",)

    GOLDEN_GAMMA = 0x9E3779B97F4A7C15

    def __init__(self, x: int):
        super().__init__(x)
        self.x = x

    @property
    def state(self) -> Tuple[int, ...]:
        return (self.x,)

    def next(self) -> int:
        self.x = (self.x + self.GOLDEN_GAMMA) & MASK64
        z = self.x
        z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & MASK64
        z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & MASK64
        return z ^ (z >> 31)


class Mulberry32(Generator):
    """
    Tommy Ettinger's mulberry32.

    The counter lives in a 64-bit word; only its low 32 bits feed the
    output, so carries out of bit 31 never change the sequence.
    """
    algorithm = Algorithm.MULBERRY32
    seed_names = ("a",)

    INCREMENT = 0x6D2B79F5

    def __init__(self, a: int):
        super().__init__(a)
        self.a = a

    @property
    def state(self) -> Tuple[int, ...]:
        return (self.a,)

    def next(self) -> int:
        self.a = (self.a + self.INCREMENT) & MASK64
        z = self.a & MASK32
        z = ((z ^ (z >> 15)) * (z | 1)) & MASK32
        z ^= (z + ((z ^ (z >> 7)) * (z | 61))) & MASK32
        return z ^ (z >> 14)


# ============================================================================
# GENERATOR REGISTRY
# ============================================================================

GENERATOR_REGISTRY: Dict[Algorithm, Dict[str, Any]] = {
    Algorithm.XORSHIFT32: {
        'class': Xorshift32,
        'default_seed': (1,),
        'description': 'Marsaglia xorshift32 (13, 17, 5)',
    },
    Algorithm.XORSHIFT64: {
        'class': Xorshift64,
        'default_seed': (1,),
        'description': 'Marsaglia xorshift64 (13, 7, 17)',
    },
    Algorithm.XORSHIFT128: {
        'class': Xorshift128,
        'default_seed': (123456789, 362436069, 521288629, 88675123),
        'description': 'Marsaglia xor128, four 32-bit words',
    },
    Algorithm.XORSHIFT128_PLUS: {
        'class': Xorshift128Plus,
        'default_seed': (1, 2),
        'description': 'Vigna xorshift128+ (23, 18, 5)',
    },
    Algorithm.XOSHIRO128_PLUS_PLUS: {
        'class': Xoshiro128PlusPlus,
        'default_seed': (1, 2, 3, 4),
        'description': 'Blackman/Vigna xoshiro128++ (7, 9, 11)',
    },
    Algorithm.XOSHIRO256_PLUS_PLUS: {
        'class': Xoshiro256PlusPlus,
        'default_seed': (1, 2, 3, 4),
        'description': 'Blackman/Vigna xoshiro256++ (23, 17, 45)',
    },
    Algorithm.SPLITMIX64: {
        'class': SplitMix64,
        'default_seed': (1,),
        'description': 'Steele/Lea/Flood splitmix64',
    },
    Algorithm.MULBERRY32: {
        'class': Mulberry32,
        'default_seed': (1,),
        'description': 'Ettinger mulberry32',
    },
}


def resolve_algorithm(name) -> Algorithm:
    """Map a tag (or Algorithm) onto the registry key."""
    try:
        return Algorithm(name)
    except ValueError:
        raise UnknownAlgorithmError(
            f"Unknown PRNG algorithm: {name}. Available: {list_algorithms()}"
        ) from None


def get_generator_info(name) -> Dict[str, Any]:
    """Get registry entry for an algorithm tag."""
    return GENERATOR_REGISTRY[resolve_algorithm(name)]


def get_generator_class(name) -> Type[Generator]:
    return get_generator_info(name)['class']


def list_algorithms() -> List[str]:
    """List all algorithm tags in registry order."""
    return [algorithm.value for algorithm in GENERATOR_REGISTRY]


def create_generator(name, seed: Iterable[int] = None) -> Generator:
    """
    Construct a freshly seeded generator.

    Args:
        name: Algorithm tag, e.g. 'xoshiro256++'
        seed: Seed words; the registry default seed when omitted

    Raises:
        UnknownAlgorithmError: If the tag is not registered
        InvalidSeedError: If the seed does not fit the algorithm
    """
    info = get_generator_info(name)
    words = tuple(info['default_seed'] if seed is None else seed)
    generator = info['class'](*_check_arity(info['class'], words))
    logger.debug(f"Created {generator!r}")
    return generator


def _check_arity(cls: Type[Generator], words: Tuple[int, ...]) -> Tuple[int, ...]:
    # Surface arity errors as InvalidSeedError instead of a TypeError from __init__
    if len(words) != len(cls.seed_names):
        cls._validate_seed(words)
    return words
