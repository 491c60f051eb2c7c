"""Fitness summary of a population."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .individual import Individual


@dataclass(frozen=True)
class Statistics:
    min_fitness: float
    max_fitness: float
    avg_fitness: float

    @classmethod
    def from_population(cls, population: Sequence[Individual]) -> "Statistics":
        if len(population) == 0:
            raise ValueError("Cannot compute statistics of an empty population")

        min_fitness = max_fitness = population[0].fitness()
        total = 0.0
        for individual in population:
            fitness = individual.fitness()
            min_fitness = min(min_fitness, fitness)
            max_fitness = max(max_fitness, fitness)
            total += fitness

        return cls(
            min_fitness=float(min_fitness),
            max_fitness=float(max_fitness),
            avg_fitness=total / len(population),
        )

    def __str__(self) -> str:
        return (f"min={self.min_fitness:.3f} "
                f"max={self.max_fitness:.3f} "
                f"avg={self.avg_fitness:.3f}")
