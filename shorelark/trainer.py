"""Driver that evolves network weights against a labelled dataset.

Each ``Agent`` only carries its chromosome and the score it was last given.
The network is decoded from the genes when the agent is evaluated, so the
genetic algorithm itself never needs to know about networks.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence
import numpy as np

from . import config
from .chromosome import Chromosome
from .crossover import UniformCrossover
from .genetic_algorithm import GeneticAlgorithm
from .individual import Individual
from .mutation import GaussianMutation
from .network import Network
from .selection import RouletteWheelSelection
from .statistics import Statistics


@dataclass
class Agent(Individual):
    genes: Chromosome
    score: float = 0.0

    @classmethod
    def create(cls, chromosome: Chromosome) -> "Agent":
        return cls(chromosome)

    def chromosome(self) -> Chromosome:
        return self.genes

    def fitness(self) -> float:
        return self.score


@dataclass
class TrainingHistory:
    generations: List[int] = field(default_factory=list)
    min_fitness: List[float] = field(default_factory=list)
    max_fitness: List[float] = field(default_factory=list)
    avg_fitness: List[float] = field(default_factory=list)

    def append(self, generation: int, stats: Statistics) -> None:
        self.generations.append(generation)
        self.min_fitness.append(stats.min_fitness)
        self.max_fitness.append(stats.max_fitness)
        self.avg_fitness.append(stats.avg_fitness)


class Trainer:
    """Evolves a population of fixed-topology networks on a classification task."""

    def __init__(self,
                 layer_sizes: Sequence[int],
                 population_size: int = config.POPULATION_SIZE,
                 mutation_chance: float = config.MUTATION_CHANCE,
                 mutation_coeff: float = config.MUTATION_COEFF,
                 random_seed: Optional[int] = None):
        if population_size < 1:
            raise ValueError(f"Population size must be positive, got {population_size}")

        self.layer_sizes = list(layer_sizes)
        self.genome_size = Network.weight_count(self.layer_sizes)
        self.rng = np.random.default_rng(random_seed)
        self.ga = GeneticAlgorithm(
            RouletteWheelSelection(),
            UniformCrossover(),
            GaussianMutation(mutation_chance, mutation_coeff),
        )

        self.population: List[Agent] = [
            Agent(Chromosome(Network.random(self.rng, self.layer_sizes).weights()))
            for _ in range(population_size)
        ]
        self.generation = 0

        self.best_individual_history: List[np.ndarray] = []
        self.population_history: List[np.ndarray] = []
        self.history = TrainingHistory()

    def decode(self, agent: Individual) -> Network:
        return Network.from_weights(self.layer_sizes, agent.chromosome())

    def evaluate_fitness(self, X: np.ndarray, y: np.ndarray) -> None:
        for agent in self.population:
            preds = self.decode(agent).predict(X)
            agent.score = float(np.mean(preds == y))

    def _record_history(self, population: Sequence[Agent], stats: Statistics) -> None:
        best = max(population, key=lambda agent: agent.fitness())
        self.best_individual_history.append(best.chromosome().to_array())
        self.population_history.append(
            np.vstack([agent.chromosome().to_array() for agent in population])
        )
        self.history.append(self.generation, stats)

    def evolve_one_generation(self) -> Statistics:
        """Replace the (already evaluated) population with its offspring."""
        previous = self.population
        self.population, stats = self.ga.evolve(self.rng, previous)
        self._record_history(previous, stats)
        self.generation += 1
        return stats

    def _report(self, generation: int, stats: Statistics) -> None:
        print(f"Gen {generation:03d} | {stats}")

    def run(self,
            X: np.ndarray,
            y: np.ndarray,
            generations: int = config.GENERATIONS,
            verbose: bool = True) -> TrainingHistory:
        for _ in range(generations):
            self.evaluate_fitness(X, y)
            stats = self.evolve_one_generation()
            if verbose:
                self._report(self.generation - 1, stats)

        self.evaluate_fitness(X, y)
        stats = Statistics.from_population(self.population)
        self._record_history(self.population, stats)
        if verbose:
            self._report(self.generation, stats)

        return self.history

    def get_best_individual(self) -> Dict[str, np.ndarray | float]:
        best = max(self.population, key=lambda agent: agent.fitness())
        return {
            "weights": best.chromosome().to_array(),
            "fitness": best.fitness(),
        }

    def best_network(self) -> Network:
        return self.decode(max(self.population, key=lambda agent: agent.fitness()))
