"""Generational genetic algorithm over flat chromosomes."""
from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Tuple
import numpy as np

from .chromosome import Chromosome
from .crossover import CrossoverMethod
from .individual import Individual
from .mutation import MutationMethod
from .selection import SelectionMethod
from .statistics import Statistics


class GeneticAlgorithm:
    """Select, cross over and mutate a whole population in one step.

    The strategies are fixed at construction. ``evolve`` draws from the
    given generator in a fixed order (parent A, parent B, crossover,
    mutation, slot by slot), so the same seed and population always give
    the same offspring.
    """

    def __init__(self,
                 selection_method: SelectionMethod,
                 crossover_method: CrossoverMethod,
                 mutation_method: MutationMethod):
        self.selection_method = selection_method
        self.crossover_method = crossover_method
        self.mutation_method = mutation_method

    def evolve(self,
               rng: np.random.Generator,
               population: Sequence[Individual],
               create: Optional[Callable[[Chromosome], Individual]] = None,
               ) -> Tuple[List[Individual], Statistics]:
        """Return the next generation and statistics of ``population``.

        ``create`` turns an offspring chromosome into an individual and
        defaults to the ``create`` classmethod of the first individual.
        """
        if len(population) == 0:
            raise ValueError("Cannot evolve an empty population")

        if create is None:
            create = type(population[0]).create

        new_population = []
        for _ in range(len(population)):
            parent_a = self.selection_method.select(rng, population).chromosome()
            parent_b = self.selection_method.select(rng, population).chromosome()

            child = self.crossover_method.crossover(rng, parent_a, parent_b)
            self.mutation_method.mutate(rng, child)

            new_population.append(create(child))

        return new_population, Statistics.from_population(population)
