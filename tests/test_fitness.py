"""Tests for the genome record, gene clamping and the fitness policy."""
import math

import pytest

from marblevo.evolution.fitness import fitness_from_distance
from marblevo.evolution.genome import ANGLE_DOMAIN, POWER_DOMAIN, MarbleDNA, clamp_gene


class TestFitness:
    def test_reciprocal_squared_distance(self):
        assert fitness_from_distance(10.0) == pytest.approx(0.01)
        assert fitness_from_distance(5.0) == pytest.approx(0.04)
        assert fitness_from_distance(0.5) == pytest.approx(4.0)

    def test_monotonic_in_distance(self):
        assert fitness_from_distance(3.0) > fitness_from_distance(4.0)
        assert fitness_from_distance(0.1) > fitness_from_distance(0.2)

    def test_zero_distance_is_infinite_not_nan(self):
        value = fitness_from_distance(0.0)
        assert not math.isnan(value)
        assert value == math.inf

    def test_underflowing_distance_is_infinite(self):
        assert fitness_from_distance(1e-170) == math.inf

    def test_tiny_distance_is_finite(self):
        value = fitness_from_distance(1e-154)
        assert math.isfinite(value)
        assert value > 1e300

    def test_overflowing_distance_is_zero(self):
        assert fitness_from_distance(1e200) == 0.0

    def test_negative_distance_rejected(self):
        with pytest.raises(ValueError):
            fitness_from_distance(-1.0)

    def test_individual_fitness_uses_body_distance(self, make_individual):
        individual = make_individual(10.0, 0.1, distance=20.0)
        assert individual.fitness() == pytest.approx(1 / 400)
        individual.body.distance = 0.0
        assert individual.fitness() == math.inf


class TestGenome:
    def test_domains(self):
        assert POWER_DOMAIN == (0.0, 25.0)
        assert ANGLE_DOMAIN == (0.0, math.pi)

    def test_clamp_gene(self):
        assert clamp_gene("power", 27.0) == 25.0
        assert clamp_gene("power", -1.0) == 0.0
        assert clamp_gene("angle", 4.0) == math.pi
        assert clamp_gene("angle", 1.0) == 1.0

    def test_copy_is_independent(self):
        dna = MarbleDNA(power=3.0, angle=0.3)
        copy = dna.copy_genes()
        copy.power = 7.0
        assert dna.power == 3.0

    def test_unknown_gene(self):
        with pytest.raises(KeyError):
            MarbleDNA(power=1.0, angle=1.0).gene("speed")
