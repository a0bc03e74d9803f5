"""Bounded sampler tests: range law, variant equivalence, edge ranges."""

import pytest

from prng_reference import InvalidRangeError, InvalidSeedError, SamplerMismatchError
from prng_reference.bounded import (
    BoundedSampler,
    ModuloBoundedSampler,
    cross_validate_samplers,
)
from prng_reference.generators import SplitMix64, Xorshift32, create_generator

RANGES = [1, 100, 169834, 0x7FFFFFFF, 0x80000000, 0xFFFFFFFF]

# First five bounded draws from xorshift32(a=1), C reference build
FIRST_BOUNDED = {
    1: [0, 0, 0, 0, 0],
    100: [0, 1, 61, 7, 55],
    169834: [10, 2674, 104686, 12163, 94850],
    0x7FFFFFFF: [135184, 33817344, 1323717729, 153799847, 1199344615],
    0x80000000: [135184, 33817344, 1323717730, 153799847, 1199344616],
    0xFFFFFFFF: [270368, 67634688, 2647435460, 307599694, 2398689232],
}


class TestRangeLaw:

    @pytest.mark.parametrize("range_", RANGES)
    def test_values_inside_range(self, range_):
        sampler = BoundedSampler(Xorshift32(1), range_)
        assert all(0 <= v < range_ for v in sampler.take(10_000))

    def test_range_one_is_always_zero(self):
        sampler = BoundedSampler(Xorshift32(1), 1)
        assert set(sampler.take(1000)) == {0}
        assert sampler.rejections == 0

    @pytest.mark.parametrize("range_", sorted(FIRST_BOUNDED))
    def test_known_draws(self, range_):
        assert BoundedSampler(Xorshift32(1), range_).take(5) == FIRST_BOUNDED[range_]


class TestThreshold:

    def test_power_of_two_threshold_is_zero(self):
        # -2**31 mod 2**32 == 2**31 == range, must reduce to 0
        assert BoundedSampler(Xorshift32(1), 0x80000000)._threshold() == 0
        assert ModuloBoundedSampler(Xorshift32(1), 0x80000000)._threshold() == 0

    @pytest.mark.parametrize("range_", RANGES + [
        3, 0x80000001, 0xC0000000, 1 << 16, 0x55555554, 0x55555555, 0x55555556,
    ])
    def test_variants_agree_on_threshold(self, range_):
        tweaked = BoundedSampler(Xorshift32(1), range_)._threshold()
        modulo = ModuloBoundedSampler(Xorshift32(1), range_)._threshold()
        assert tweaked == modulo
        assert tweaked < range_

    def test_max_range_threshold(self):
        assert BoundedSampler(Xorshift32(1), 0xFFFFFFFF)._threshold() == 1


class TestVariantEquivalence:

    @pytest.mark.parametrize("range_", RANGES)
    def test_identical_streams(self, range_):
        tweaked = BoundedSampler(Xorshift32(1), range_).take(10_000)
        modulo = ModuloBoundedSampler(Xorshift32(1), range_).take(10_000)
        assert tweaked == modulo

    @pytest.mark.parametrize("range_", RANGES)
    def test_cross_validate_returns_stream(self, range_):
        values = cross_validate_samplers('xorshift32', [1], range_, 1000)
        assert values == BoundedSampler(Xorshift32(1), range_).take(1000)

    def test_cross_validate_other_32bit_generator(self):
        values = cross_validate_samplers('mulberry32', None, 0x80000001, 2000)
        assert len(values) == 2000

    def test_mismatch_reported_with_index(self, monkeypatch):
        original = BoundedSampler.next_bounded
        calls = []

        def off_by_one_at_third_draw(self):
            calls.append(None)
            value = original(self)
            return value + 1 if len(calls) == 3 else value

        monkeypatch.setattr(BoundedSampler, 'next_bounded', off_by_one_at_third_draw)
        with pytest.raises(SamplerMismatchError) as excinfo:
            cross_validate_samplers('xorshift32', [1], 100, 100)
        assert excinfo.value.index == 2
        assert excinfo.value.range == 100
        assert excinfo.value.expected == 61
        assert excinfo.value.actual == 62


class TestReconstruction:

    @pytest.mark.parametrize("range_", RANGES)
    def test_independent_identically_seeded_samplers(self, range_):
        first = BoundedSampler(create_generator('xorshift32', [7]), range_)
        second = BoundedSampler(create_generator('xorshift32', [7]), range_)
        assert first.take(500) == second.take(500)

    def test_sampler_advances_shared_generator(self):
        gen = Xorshift32(1)
        sampler = BoundedSampler(gen, 0xFFFFFFFF)
        sampler.next_bounded()
        assert gen.state == (0x00042021,)
        assert sampler.next() == BoundedSampler(Xorshift32(0x00042021), 0xFFFFFFFF).next()


class TestPreconditions:

    @pytest.mark.parametrize("range_", [0, -1, 1 << 32])
    def test_range_outside_domain(self, range_):
        with pytest.raises(InvalidRangeError):
            BoundedSampler(Xorshift32(1), range_)

    def test_range_must_be_int(self):
        with pytest.raises(InvalidRangeError):
            ModuloBoundedSampler(Xorshift32(1), 10.0)

    def test_needs_32_bit_generator(self):
        with pytest.raises(InvalidSeedError, match="32-bit"):
            BoundedSampler(SplitMix64(1), 100)
