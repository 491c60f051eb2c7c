"""Crossover strategies combining two parents into one child."""
from __future__ import annotations

from abc import ABC, abstractmethod
import numpy as np

from .chromosome import Chromosome


class CrossoverMethod(ABC):
    @abstractmethod
    def crossover(self,
                  rng: np.random.Generator,
                  parent_a: Chromosome,
                  parent_b: Chromosome) -> Chromosome:
        """Return a new child; the parents are left untouched."""


class UniformCrossover(CrossoverMethod):
    """Each gene comes from parent A or B on a fair coin toss."""

    def crossover(self,
                  rng: np.random.Generator,
                  parent_a: Chromosome,
                  parent_b: Chromosome) -> Chromosome:
        if len(parent_a) != len(parent_b):
            raise ValueError(
                f"Parents must have the same length, got {len(parent_a)} and {len(parent_b)}"
            )

        # One coin per gene, in gene order.
        return Chromosome(
            a if rng.random() < 0.5 else b
            for a, b in zip(parent_a, parent_b)
        )

    def __repr__(self) -> str:
        return "UniformCrossover()"
