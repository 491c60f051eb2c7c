"""Parent selection strategies."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence
import math
import numpy as np

from .individual import Individual


class SelectionMethod(ABC):
    @abstractmethod
    def select(self, rng: np.random.Generator, population: Sequence[Individual]) -> Individual:
        """Pick one parent from a scored, non-empty population."""


class RouletteWheelSelection(SelectionMethod):
    """Fitness-proportionate selection.

    Each call spins the wheel once. When every fitness is zero there is no
    wheel to spin, so an individual is picked uniformly instead.
    """

    def select(self, rng: np.random.Generator, population: Sequence[Individual]) -> Individual:
        if len(population) == 0:
            raise ValueError("Cannot select from an empty population")

        total = 0.0
        for individual in population:
            fitness = individual.fitness()
            if not math.isfinite(fitness) or fitness < 0.0:
                raise ValueError(f"Fitness must be finite and non-negative, got {fitness}")
            total += fitness

        if total == 0.0:
            return population[int(rng.integers(len(population)))]

        spin = rng.random() * total
        cumulative = 0.0
        chosen = None
        for individual in population:
            fitness = individual.fitness()
            if fitness == 0.0:
                continue
            chosen = individual
            cumulative += fitness
            if spin < cumulative:
                break
        return chosen

    def __repr__(self) -> str:
        return "RouletteWheelSelection()"
