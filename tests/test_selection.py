"""Tests for fitness proportionate (roulette wheel) selection."""
from collections import Counter
import math
import random

import pytest

from marblevo.evolution.fitness import fitness_from_distance
from marblevo.evolution.selection import RouletteWheelSelector, cumulative_cut_offs
from marblevo.exceptions import EmptyPopulationError, EvolutionError

from .conftest import ScriptedRandom

TRIALS = 10_000


@pytest.fixture
def selector():
    return RouletteWheelSelector()


def _frequencies(selector, fitness_values, seed=7):
    rng = random.Random(seed)
    counts = Counter(selector.select_index(fitness_values, rng) for _ in range(TRIALS))
    return [counts[i] / TRIALS for i in range(len(fitness_values))]


class TestCutOffs:
    def test_proportional_steps(self):
        cut_offs = cumulative_cut_offs([1.0, 3.0])
        assert cut_offs == pytest.approx([0.25, 1.0])

    def test_last_cut_off_is_one(self):
        assert cumulative_cut_offs([0.01, 0.04, 0.0004, 0.0001])[-1] == pytest.approx(1.0)

    def test_infinite_fitness_restricts_wheel(self):
        cut_offs = cumulative_cut_offs([0.5, math.inf, 0.2, math.inf])
        assert cut_offs == pytest.approx([0.0, 0.5, 0.5, 1.0])
        assert not any(math.isnan(c) for c in cut_offs)

    def test_zero_total_is_uniform(self):
        assert cumulative_cut_offs([0.0, 0.0]) == pytest.approx([0.5, 1.0])

    def test_huge_finite_fitness_does_not_overflow(self):
        cut_offs = cumulative_cut_offs([1e308, 1e308, 1e-6])
        assert cut_offs == pytest.approx([0.5, 1.0, 1.0])
        assert not any(math.isnan(c) for c in cut_offs)


class TestRouletteWheelSelector:
    def test_uniform_distribution(self, selector):
        for frequency in _frequencies(selector, [1.0, 1.0, 1.0, 1.0]):
            assert frequency == pytest.approx(0.25, abs=0.03)

    def test_skewed_distribution(self, selector):
        frequencies = _frequencies(selector, [100.0, 1.0, 1.0, 1.0])
        assert frequencies[0] > 0.9

    def test_zero_fitness_never_selected(self, selector):
        frequencies = _frequencies(selector, [1.0, 0.0, 1.0])
        assert frequencies[1] == 0.0

    def test_near_goal_individuals_dominate(self, selector):
        near = fitness_from_distance(1e-154)
        frequencies = _frequencies(selector, [near, near, 1e-6])
        assert frequencies[0] == pytest.approx(0.5, abs=0.03)
        assert frequencies[1] == pytest.approx(0.5, abs=0.03)
        assert frequencies[2] == 0.0

    def test_first_cut_off_above_draw_wins(self, selector):
        # cut-offs [0.25, 0.5, 0.75, 1.0]
        assert selector.select_index([1, 1, 1, 1], ScriptedRandom([0.0])) == 0
        assert selector.select_index([1, 1, 1, 1], ScriptedRandom([0.25])) == 1
        assert selector.select_index([1, 1, 1, 1], ScriptedRandom([0.74])) == 2

    def test_falls_back_to_last_individual(self, selector):
        assert selector.select_index([1.0, 2.0, 3.0], ScriptedRandom([1.0])) == 2

    def test_select_returns_individual(self, selector, fixed_population):
        fitness = [i.fitness() for i in fixed_population]
        chosen = selector.select(fixed_population, fitness, ScriptedRandom([0.5]))
        # cut-offs ~ [0.198, 0.990, 0.998, 1.0]
        assert chosen is fixed_population[1]

    def test_self_fertilization_allowed(self, selector, fixed_population):
        fitness = [1.0, 0.0, 0.0, 0.0]
        rng = ScriptedRandom([0.1, 0.9])
        father = selector.select(fixed_population, fitness, rng)
        mother = selector.select(fixed_population, fitness, rng)
        assert father is mother is fixed_population[0]

    def test_empty_population(self, selector):
        with pytest.raises(EmptyPopulationError):
            selector.select([], [], ScriptedRandom([0.5]))

    def test_fitness_length_mismatch(self, selector, fixed_population):
        with pytest.raises(EvolutionError):
            selector.select(fixed_population, [1.0], ScriptedRandom([0.5]))
