"""
Suite configuration schema.

A suite is a list of vector requests (algorithm, seed, count, optional
bounded range). The default suite reproduces the published golden set;
a JSON file with the same shape can replace it:

    {
      "vectors": [
        {"algorithm": "xorshift32", "seed": [1], "count": 10},
        {"algorithm": "xorshift32", "seed": ["0x1"], "count": 1000, "range": 100}
      ]
    }

Seed words may be ints or strings in any base int(x, 0) accepts.
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Tuple, Union

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from .exceptions import ConfigError
from .generators import Algorithm, get_generator_class, list_algorithms, resolve_algorithm

logger = logging.getLogger(__name__)

SMOKE_COUNT = 10
GOLDEN_COUNT = 1000
BOUNDED_COUNT = 100
BOUNDED_RANGES = (1, 100, 169834, 0x7FFFFFFF, 0x80000000, 0xFFFFFFFF)


class VectorRequest(BaseModel):
    """One vector to generate."""
    algorithm: Algorithm
    seed: Optional[List[int]] = Field(
        None,
        description="Seed words; the algorithm's registry default when omitted"
    )
    count: int = Field(SMOKE_COUNT, ge=0, description="Number of next() calls")
    range: Optional[int] = Field(
        None,
        ge=1,
        le=0xFFFFFFFF,
        description="Bounded sampler range; 32-bit algorithms only"
    )

    @field_validator('seed', mode='before')
    @classmethod
    def parse_seed_words(cls, value: Any) -> Any:
        if value is None:
            return value
        if isinstance(value, (int, str)):
            value = [value]
        return [int(word, 0) if isinstance(word, str) else word for word in value]

    @model_validator(mode='after')
    def validate_against_algorithm(self):
        generator_class = get_generator_class(self.algorithm)
        if self.seed is not None:
            # Raises InvalidSeedError (a ValueError) for wrong arity/width/zero
            generator_class._validate_seed(tuple(self.seed))
        if self.range is not None and generator_class.output_bits != 32:
            raise ValueError(
                f"range requires a 32-bit generator; {self.algorithm.value} "
                f"outputs {generator_class.output_bits} bits"
            )
        return self

    def seed_words(self) -> Optional[Tuple[int, ...]]:
        return tuple(self.seed) if self.seed is not None else None


class SuiteConfig(BaseModel):
    """Ordered list of vector requests."""
    vectors: List[VectorRequest] = Field(..., min_length=1)

    def select(self, algorithms: List[str]) -> 'SuiteConfig':
        """Keep only requests whose algorithm is in algorithms."""
        wanted = {resolve_algorithm(name) for name in algorithms}
        kept = [request for request in self.vectors if request.algorithm in wanted]
        if not kept:
            raise ConfigError(f"No vectors left after selecting {sorted(algorithms)}")
        return SuiteConfig(vectors=kept)

    def with_count(self, count: int) -> 'SuiteConfig':
        return SuiteConfig(
            vectors=[request.model_copy(update={'count': count}) for request in self.vectors]
        )


def default_suite() -> SuiteConfig:
    """
    Smoke vectors for every algorithm, one long xorshift32 vector and
    bounded xorshift32 vectors across the range edge cases.
    """
    requests = [VectorRequest(algorithm=name, count=SMOKE_COUNT) for name in list_algorithms()]
    requests.append(VectorRequest(algorithm=Algorithm.XORSHIFT32, count=GOLDEN_COUNT))
    requests.extend(
        VectorRequest(algorithm=Algorithm.XORSHIFT32, count=BOUNDED_COUNT, range=bound)
        for bound in BOUNDED_RANGES
    )
    return SuiteConfig(vectors=requests)


def load_suite_config(path: Union[str, Path]) -> SuiteConfig:
    """
    Load and validate a suite file.

    Raises:
        FileNotFoundError: If path doesn't exist
        ConfigError: If the file is not valid JSON or fails validation
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Suite config not found: {path}")

    try:
        data = json.loads(path.read_text(encoding='utf-8'))
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e

    try:
        suite = SuiteConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid suite config {path}:\n{e}") from e

    logger.info(f"Loaded {len(suite.vectors)} vector request(s) from {path}")
    return suite
