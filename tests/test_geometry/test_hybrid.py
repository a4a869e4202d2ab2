"""Tests for the seeded generator and hybrid shape generation."""

import numpy as np
import pytest

from wirespin.geometry import (
    BASE_SHAPES,
    generate_hybrid,
    hybrid_indices,
    is_valid_seed,
    lcg,
    mix_ratio,
    random_seed,
)

MODULUS = 2147483647


class TestLcg:
    def test_first_steps_from_one(self):
        # Park-Miller reference values.
        assert lcg(1) == 16807
        assert lcg(16807) == 282475249
        assert lcg(282475249) == 1622650073

    def test_stays_in_range(self):
        seed = MODULUS - 1
        for _ in range(1000):
            seed = lcg(seed)
            assert 1 <= seed < MODULUS

    def test_reproducible(self):
        a = b = 42
        for _ in range(50):
            a, b = lcg(a), lcg(b)
        assert a == b


class TestSeeds:
    def test_valid_range(self):
        assert is_valid_seed(1)
        assert is_valid_seed(MODULUS - 1)
        assert not is_valid_seed(0)
        assert not is_valid_seed(MODULUS)
        assert not is_valid_seed(-5)

    def test_rejects_non_integers(self):
        assert not is_valid_seed(3.0)
        assert not is_valid_seed(True)

    def test_random_seed_in_range(self):
        for _ in range(100):
            assert is_valid_seed(random_seed())

    def test_random_seed_reproducible_with_rng(self):
        a = random_seed(np.random.default_rng(7))
        b = random_seed(np.random.default_rng(7))
        assert a == b


class TestHybridIndices:
    @pytest.mark.parametrize("seed", [0.0, 0.5, 1.0, 17.3, 23049.9128, 1e6])
    def test_distinct_and_in_range(self, seed):
        a, b = hybrid_indices(seed)
        assert a != b
        assert 0 <= a < len(BASE_SHAPES)
        assert 0 <= b < len(BASE_SHAPES)

    def test_collision_bumps_second(self):
        # floor(23049.9128 * 4.7) and floor(23049.9128 * 7.3) both end in 4.
        assert hybrid_indices(23049.9128) == (4, 5)

    def test_zero_seed_collision_bumps_second(self):
        assert hybrid_indices(0.0) == (0, 1)


class TestMixRatio:
    def test_range(self):
        seeds = np.linspace(-100, 100, 2001)
        ratios = [mix_ratio(s) for s in seeds]
        assert min(ratios) >= 0.2
        assert max(ratios) <= 0.8

    def test_zero_seed_is_midpoint(self):
        assert mix_ratio(0.0) == pytest.approx(0.5)


class TestGenerateHybrid:
    def test_twenty_vertices(self):
        assert generate_hybrid(3.7).vertices.shape == (20, 3)

    def test_pure_function_of_seed(self):
        np.testing.assert_array_equal(
            generate_hybrid(1234.5).vertices,
            generate_hybrid(1234.5).vertices,
        )

    def test_different_seeds_differ(self):
        assert not np.allclose(
            generate_hybrid(1.0).vertices, generate_hybrid(2.0).vertices,
        )

    def test_name_records_parents(self):
        hybrid = generate_hybrid(23049.9128)
        assert hybrid.name == "hybrid:gem+helix"
        assert hybrid.is_hybrid

    def test_within_wobble_of_blend(self):
        seed = 0.0
        a, b = hybrid_indices(seed)
        m = mix_ratio(seed)
        blend = BASE_SHAPES[a].vertices * (1 - m) + BASE_SHAPES[b].vertices * m
        diff = generate_hybrid(seed).vertices - blend
        assert np.max(np.abs(diff)) <= 0.12 + 1e-12

    def test_jitter_formula_at_zero_seed(self):
        seed = 0.0
        a, b = hybrid_indices(seed)
        blend = (BASE_SHAPES[a].vertices + BASE_SHAPES[b].vertices) / 2
        diff = generate_hybrid(seed).vertices - blend
        i = np.arange(20)
        np.testing.assert_allclose(diff[:, 0], np.sin(i * 2.1) * 0.12, atol=1e-12)
        np.testing.assert_allclose(diff[:, 1], np.cos(i * 1.7) * 0.12, atol=1e-12)
        np.testing.assert_allclose(diff[:, 2], np.sin(i * 3.3) * 0.12, atol=1e-12)

    def test_extent_stays_well_inside_fov(self):
        for seed in np.linspace(0, 500, 101):
            assert generate_hybrid(float(seed)).extent < 2.0
