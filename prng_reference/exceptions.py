"""
Exception hierarchy for reference vector generation.

Validation problems (bad seeds, bad ranges, unknown algorithm tags,
malformed suite files) subclass ValueError. Broken invariants that
should never happen for a correct build subclass RuntimeError.
"""


class ReferenceVectorError(Exception):
    """Base class for every error raised by prng_reference."""
    pass


class InvalidSeedError(ReferenceVectorError, ValueError):
    """
    Raised when a generator is constructed with an unusable seed.

    Use cases:
    - Wrong number of seed words for the algorithm
    - Negative seed word or word wider than the state width
    - All-zero seed (degenerate state for every family here)
    """
    pass


class InvalidRangeError(ReferenceVectorError, ValueError):
    """Raised when a bounded sampler range is outside [1, 0xFFFFFFFF]."""
    pass


class UnknownAlgorithmError(ReferenceVectorError, ValueError):
    """Raised when an algorithm tag is not in the registry."""
    pass


class ConfigError(ReferenceVectorError, ValueError):
    """
    Raised when a suite configuration file fails schema validation.

    Wraps the pydantic ValidationError so callers only need to handle
    ValueError.
    """
    pass


class SamplerMismatchError(ReferenceVectorError, RuntimeError):
    """
    Raised when the modulo and O'Neill bounded samplers disagree.

    Neither stream can be trusted as an oracle when this happens.
    """

    def __init__(self, algorithm: str, range_: int, index: int,
                 expected: int, actual: int):
        self.algorithm = algorithm
        self.range = range_
        self.index = index
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Bounded sampler variants diverged for {algorithm} "
            f"range={range_:#x} at index {index}: "
            f"modulo={expected} oneill={actual}"
        )
