"""
Text rendering of reference vectors.

Integers are zero-padded lowercase hex (%08x for 32-bit outputs, %016x for
64-bit) and doubles are %.20e, both as JSON strings, so every consumer
compares exact text instead of re-parsing numbers through its own float
reader.
"""

import json
from typing import Any, Dict, Iterable, TextIO

from . import __version__
from .assembler import ReferenceVector

DOUBLE_FORMAT = "%.20e"


def format_int(value: int, bits: int) -> str:
    return f"{value:0{bits // 4}x}"


def format_double(value: float) -> str:
    return DOUBLE_FORMAT % value


def vector_to_dict(vector: ReferenceVector) -> Dict[str, Any]:
    """Serialise one vector into plain JSON-ready types."""
    data: Dict[str, Any] = {
        "algorithm": vector.algorithm,
        "seed": vector.seed_descriptor,
        "count": vector.count,
    }
    if vector.range is not None:
        data["range"] = format_int(vector.range, 32)
    data["ints"] = [format_int(x, vector.output_bits) for x in vector.ints]
    for name, values in vector.doubles.items():
        data[name] = [format_double(v) for v in values]
    return data


def vectors_to_document(vectors: Iterable[ReferenceVector]) -> Dict[str, Any]:
    return {
        "generator": "prng_reference",
        "version": __version__,
        "vectors": [vector_to_dict(v) for v in vectors],
    }


def dump_vectors(vectors: Iterable[ReferenceVector], stream: TextIO, indent: int = 2) -> None:
    """Write the full document to stream, newline terminated."""
    json.dump(vectors_to_document(vectors), stream, indent=indent)
    stream.write("\n")
