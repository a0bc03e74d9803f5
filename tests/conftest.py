"""Shared fixtures for the reference vector tests."""

import json
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def golden_vectors():
    """
    Default suite rendered by an independent C build of the same formulas
    (gcc, -ffp-contract=off, glibc printf %08x / %016x / %.20e).
    """
    with open(FIXTURES_DIR / "golden_vectors.json", encoding="utf-8") as f:
        return json.load(f)
