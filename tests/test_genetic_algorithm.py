"""Unit tests for the genetic algorithm and its operators."""
from __future__ import annotations

import unittest
from collections import Counter
import numpy as np

from shorelark.chromosome import Chromosome
from shorelark.crossover import UniformCrossover
from shorelark.genetic_algorithm import GeneticAlgorithm
from shorelark.individual import Individual
from shorelark.mutation import GaussianMutation
from shorelark.selection import RouletteWheelSelection
from shorelark.statistics import Statistics


class TestIndividual(Individual):
    """Individual whose fitness is either fixed or the sum of its genes."""

    __test__ = False

    def __init__(self, genes: Chromosome, score: float | None = None):
        self.genes = genes
        self.score = score

    @classmethod
    def create(cls, chromosome: Chromosome) -> "TestIndividual":
        return cls(chromosome)

    @classmethod
    def with_fitness(cls, fitness: float) -> "TestIndividual":
        return cls(Chromosome(), fitness)

    def chromosome(self) -> Chromosome:
        return self.genes

    def fitness(self) -> float:
        if self.score is not None:
            return self.score
        return float(sum(abs(gene) for gene in self.genes))


def _individual(genes):
    return TestIndividual.create(Chromosome(genes))


class TestChromosome(unittest.TestCase):
    def setUp(self):
        self.chromosome = Chromosome([3.0, 1.0, 2.0])

    def test_len(self):
        self.assertEqual(len(self.chromosome), 3)
        self.assertEqual(len(Chromosome()), 0)

    def test_index_and_iter(self):
        self.assertEqual(self.chromosome[0], 3.0)
        self.assertEqual(self.chromosome[2], 2.0)
        self.assertEqual(list(self.chromosome), [3.0, 1.0, 2.0])

    def test_setitem(self):
        self.chromosome[1] += 10.0
        self.assertEqual(list(self.chromosome), [3.0, 11.0, 2.0])

    def test_from_iterator(self):
        chromosome = Chromosome(x * 0.5 for x in range(4))
        self.assertEqual(list(chromosome), [0.0, 0.5, 1.0, 1.5])

    def test_copy_is_independent(self):
        clone = self.chromosome.copy()
        clone[0] = -1.0
        self.assertEqual(self.chromosome[0], 3.0)
        self.assertEqual(clone, Chromosome([-1.0, 1.0, 2.0]))
        self.assertNotEqual(clone, self.chromosome)


class TestRouletteWheelSelection(unittest.TestCase):
    def test_fitness_proportionate(self):
        population = [TestIndividual.with_fitness(f) for f in (2.0, 1.0, 4.0, 3.0)]
        rng = np.random.default_rng(0)
        method = RouletteWheelSelection()

        counts = Counter(
            population.index(method.select(rng, population)) for _ in range(10000)
        )
        for idx, expected in enumerate((0.2, 0.1, 0.4, 0.3)):
            self.assertAlmostEqual(counts[idx] / 10000, expected, delta=0.03)

    def test_zero_fitness_never_picked(self):
        population = [TestIndividual.with_fitness(f) for f in (0.0, 1.0, 0.0, 2.0)]
        rng = np.random.default_rng(1)
        method = RouletteWheelSelection()
        for _ in range(500):
            self.assertGreater(method.select(rng, population).fitness(), 0.0)

    def test_all_zero_fitness_still_selects(self):
        population = [TestIndividual.with_fitness(0.0) for _ in range(5)]
        rng = np.random.default_rng(2)
        method = RouletteWheelSelection()
        picked = {id(method.select(rng, population)) for _ in range(200)}
        self.assertTrue(picked <= {id(ind) for ind in population})
        self.assertGreater(len(picked), 1)

    def test_invalid_input(self):
        rng = np.random.default_rng(0)
        with self.assertRaises(ValueError):
            RouletteWheelSelection().select(rng, [])
        with self.assertRaises(ValueError):
            RouletteWheelSelection().select(rng, [TestIndividual.with_fitness(-1.0)])


class TestUniformCrossover(unittest.TestCase):
    def setUp(self):
        self.parent_a = Chromosome(range(1, 101))
        self.parent_b = Chromosome(-x for x in range(1, 101))

    def test_child_genes_come_from_parents(self):
        child = UniformCrossover().crossover(
            np.random.default_rng(0), self.parent_a, self.parent_b
        )
        self.assertEqual(len(child), 100)
        from_a = 0
        for a, b, c in zip(self.parent_a, self.parent_b, child):
            self.assertIn(c, (a, b))
            from_a += c == a
        self.assertTrue(25 < from_a < 75)

    def test_one_draw_per_gene(self):
        rng = np.random.default_rng(3)
        child = UniformCrossover().crossover(rng, self.parent_a, self.parent_b)

        replay = np.random.default_rng(3)
        coins = [replay.random() < 0.5 for _ in range(100)]
        expected = [a if coin else b for a, b, coin in zip(self.parent_a, self.parent_b, coins)]
        self.assertEqual(list(child), expected)
        self.assertEqual(rng.random(), replay.random())

    def test_parents_untouched(self):
        before = self.parent_a.copy()
        UniformCrossover().crossover(np.random.default_rng(0), self.parent_a, self.parent_b)
        self.assertEqual(self.parent_a, before)

    def test_length_mismatch(self):
        with self.assertRaises(ValueError):
            UniformCrossover().crossover(
                np.random.default_rng(0), Chromosome([1.0]), Chromosome([1.0, 2.0])
            )


class TestGaussianMutation(unittest.TestCase):
    def _mutate(self, chance, coeff, seed=0):
        rng = np.random.default_rng(seed)
        chromosome = Chromosome([1.0, 2.0, 3.0, 4.0, 5.0])
        GaussianMutation(chance, coeff).mutate(rng, chromosome)
        return chromosome, rng

    def test_zero_chance_leaves_genes_and_draws_once_per_gene(self):
        chromosome, rng = self._mutate(0.0, 0.5)
        self.assertEqual(list(chromosome), [1.0, 2.0, 3.0, 4.0, 5.0])

        replay = np.random.default_rng(0)
        for _ in range(5):
            replay.random()
        self.assertEqual(rng.random(), replay.random())

    def test_zero_coeff_leaves_genes_and_draws_twice_per_gene(self):
        chromosome, rng = self._mutate(1.0, 0.0)
        self.assertEqual(list(chromosome), [1.0, 2.0, 3.0, 4.0, 5.0])

        replay = np.random.default_rng(0)
        for _ in range(10):
            replay.random()
        self.assertEqual(rng.random(), replay.random())

    def test_full_chance_changes_every_gene_within_coeff(self):
        chromosome, _ = self._mutate(1.0, 0.5)
        for original, mutated in zip([1.0, 2.0, 3.0, 4.0, 5.0], chromosome):
            self.assertNotEqual(original, mutated)
            self.assertLessEqual(abs(original - mutated), 0.5)

    def test_half_chance_matches_replay(self):
        chromosome, _ = self._mutate(0.5, 0.5, seed=11)

        replay = np.random.default_rng(11)
        expected = [1.0, 2.0, 3.0, 4.0, 5.0]
        for i in range(5):
            if replay.random() < 0.5:
                expected[i] += 0.5 * float(replay.uniform(-1.0, 1.0))
        self.assertEqual(list(chromosome), expected)

    def test_invalid_chance(self):
        with self.assertRaises(ValueError):
            GaussianMutation(1.5, 0.1)
        with self.assertRaises(ValueError):
            GaussianMutation(-0.1, 0.1)


class TestStatistics(unittest.TestCase):
    def test_min_max_avg(self):
        population = [TestIndividual.with_fitness(f) for f in (0.0, 1.0, 1.0, 4.0)]
        stats = Statistics.from_population(population)
        self.assertEqual(stats, Statistics(min_fitness=0.0, max_fitness=4.0, avg_fitness=1.5))

    def test_empty_population(self):
        with self.assertRaises(ValueError):
            Statistics.from_population([])

    def test_str(self):
        stats = Statistics(0.0, 4.0, 1.5)
        self.assertEqual(str(stats), "min=0.000 max=4.000 avg=1.500")


class TestGeneticAlgorithm(unittest.TestCase):
    def setUp(self):
        self.ga = GeneticAlgorithm(
            RouletteWheelSelection(),
            UniformCrossover(),
            GaussianMutation(0.5, 0.5),
        )

    def _population(self):
        return [
            _individual([0.0, 0.0, 0.0]),
            _individual([1.0, 1.0, 1.0]),
            _individual([1.0, 2.0, 1.0]),
            _individual([1.0, 2.0, 4.0]),
        ]

    def _run(self, seed, generations=10):
        rng = np.random.default_rng(seed)
        population = self._population()
        for _ in range(generations):
            population, _ = self.ga.evolve(rng, population)
        return [list(ind.chromosome()) for ind in population]

    def test_evolve_is_reproducible(self):
        first = self._run(seed=0)
        second = self._run(seed=0)
        self.assertEqual(first, second)
        self.assertEqual(len(first), 4)
        for genes in first:
            self.assertEqual(len(genes), 3)
            self.assertTrue(np.all(np.isfinite(genes)))

    def test_evolve_draw_order_matches_replay(self):
        for seed in (0, 5, 42):
            population = self._population()
            new_population, _ = self.ga.evolve(np.random.default_rng(seed), population)

            replay = np.random.default_rng(seed)
            expected = []
            for _ in range(len(population)):
                parent_a = self.ga.selection_method.select(replay, population).chromosome()
                parent_b = self.ga.selection_method.select(replay, population).chromosome()
                child = self.ga.crossover_method.crossover(replay, parent_a, parent_b)
                self.ga.mutation_method.mutate(replay, child)
                expected.append(list(child))

            self.assertEqual([list(ind.chromosome()) for ind in new_population], expected)

    def test_ten_generations_golden(self):
        population = self._run(seed=0)
        np.testing.assert_allclose(
            population[0],
            [1.7598783257355295, 1.4113387293173674, 4.888565261623518],
            rtol=1e-12,
        )

    def test_different_seeds_diverge(self):
        self.assertNotEqual(self._run(seed=0), self._run(seed=1))

    def test_population_size_preserved(self):
        rng = np.random.default_rng(4)
        for size in (1, 2, 7):
            population = [_individual([float(i), 1.0]) for i in range(size)]
            new_population, _ = self.ga.evolve(rng, population)
            self.assertEqual(len(new_population), size)
            self.assertTrue(all(isinstance(ind, TestIndividual) for ind in new_population))

    def test_statistics_describe_input_population(self):
        population = self._population()
        _, stats = self.ga.evolve(np.random.default_rng(0), population)
        self.assertEqual(stats, Statistics.from_population(population))
        self.assertEqual(stats.min_fitness, 0.0)
        self.assertEqual(stats.max_fitness, 7.0)

    def test_input_population_untouched(self):
        population = self._population()
        self.ga.evolve(np.random.default_rng(0), population)
        self.assertEqual([list(ind.chromosome()) for ind in population],
                         [list(ind.chromosome()) for ind in self._population()])

    def test_custom_create(self):
        created = []

        def create(chromosome):
            created.append(chromosome)
            return TestIndividual(chromosome, 1.0)

        new_population, _ = self.ga.evolve(np.random.default_rng(0), self._population(), create)
        self.assertEqual(len(created), 4)
        self.assertEqual([ind.fitness() for ind in new_population], [1.0] * 4)

    def test_empty_population(self):
        with self.assertRaises(ValueError):
            self.ga.evolve(np.random.default_rng(0), [])


if __name__ == "__main__":
    unittest.main()
