"""
Test suite for eye field generation.

Tests cover:
- Pair count and initial state
- Margin bounds for both eyes
- Minimum separation between pairs
- Retry bound and overlap fallback
- Canvas validation
"""

import itertools
import math
import random

import pytest

from eyegrid.config import FieldConfig, BlinkConfig, ConfigError
from eyegrid.field.eye_pair import Side
from eyegrid.field.generator import FieldGenerator


def make_generator(seed=7, **overrides):
    return FieldGenerator(FieldConfig(**overrides), BlinkConfig(), random.Random(seed))


class TestGeneratedField:
    """Test the shape and initial state of a fresh field."""

    def test_exact_pair_count(self):
        field = make_generator(num_pairs=12).generate(1920, 1080, now=0.0)
        assert len(field) == 12

    def test_nothing_eaten_and_eyes_open(self):
        field = make_generator(num_pairs=10).generate(1920, 1080, now=5.0)
        for pair in field:
            assert not pair.is_eaten(Side.LEFT)
            assert not pair.is_eaten(Side.RIGHT)
            assert pair.blink_phase == 0.0

    def test_sizes_within_range(self):
        field = make_generator(num_pairs=10).generate(1920, 1080, now=0.0)
        for pair in field:
            assert 40.0 <= pair.eye_size <= 80.0
            assert pair.pupil_size == pytest.approx(pair.eye_size * 0.4)

    def test_blink_timers_offset_around_now(self):
        field = make_generator(num_pairs=15).generate(1920, 1080, now=100.0)
        times = [pair.last_blink_time for pair in field]
        assert all(97.0 <= t <= 103.0 for t in times)
        # Pairs must not blink in lockstep
        assert len(set(times)) == len(times)

    def test_right_eye_offset_by_spacing(self):
        field = make_generator(num_pairs=3).generate(1920, 1080, now=0.0)
        for pair in field:
            lx, ly = pair.eye_position(Side.LEFT)
            rx, ry = pair.eye_position(Side.RIGHT)
            assert rx - lx == pytest.approx(90.0)
            assert ly == ry


class TestPlacement:
    """Test bounds and separation invariants."""

    @pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
    def test_both_eyes_within_margins(self, seed):
        width, height = 800, 600
        field = make_generator(seed=seed, num_pairs=20).generate(width, height, now=0.0)
        for pair in field:
            for side in (Side.LEFT, Side.RIGHT):
                x, y = pair.eye_position(side)
                assert 40.0 <= x <= width - 40.0
                assert 40.0 <= y <= height - 40.0

    @pytest.mark.parametrize("seed", [1, 2, 3])
    def test_minimum_separation(self, seed):
        gen = make_generator(seed=seed, num_pairs=20)
        field = gen.generate(1920, 1080, now=0.0)
        assert gen.fallbacks == 0
        for a, b in itertools.combinations(field, 2):
            d = math.hypot(a.x - b.x, a.y - b.y)
            assert d >= 160.0

    def test_infeasible_layout_terminates_with_fallback(self):
        gen = make_generator(num_pairs=50, max_placement_attempts=10)
        field = gen.generate(300, 200, now=0.0)
        assert len(field) == 50
        assert gen.fallbacks > 0

    def test_fallback_counter_resets_each_generation(self):
        gen = make_generator(num_pairs=50, max_placement_attempts=5)
        gen.generate(300, 200, now=0.0)
        gen._cfg.num_pairs = 1
        gen.generate(300, 200, now=0.0)
        assert gen.fallbacks == 0

    def test_too_small_canvas_rejected(self):
        with pytest.raises(ConfigError):
            make_generator().generate(100, 600, now=0.0)

    def test_same_seed_same_field(self):
        a = make_generator(seed=42, num_pairs=5).generate(1024, 768, now=0.0)
        b = make_generator(seed=42, num_pairs=5).generate(1024, 768, now=0.0)
        assert [(p.x, p.y, p.eye_size) for p in a] == [(p.x, p.y, p.eye_size) for p in b]
