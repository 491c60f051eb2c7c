"""Mutation strategies perturbing a chromosome in place."""
from __future__ import annotations

from abc import ABC, abstractmethod
import numpy as np

from .chromosome import Chromosome


class MutationMethod(ABC):
    @abstractmethod
    def mutate(self, rng: np.random.Generator, chromosome: Chromosome) -> None:
        ...


class GaussianMutation(MutationMethod):
    """Nudge genes by a scaled uniform offset.

    Args:
        chance: probability that a given gene is touched, in [0, 1]
        coeff: magnitude of the offset; a touched gene moves by at most this
    """

    def __init__(self, chance: float, coeff: float):
        chance = float(chance)
        if not 0.0 <= chance <= 1.0:
            raise ValueError(f"Mutation chance {chance} out of range [0, 1]")

        self.chance = chance
        self.coeff = float(coeff)

    def mutate(self, rng: np.random.Generator, chromosome: Chromosome) -> None:
        for i in range(len(chromosome)):
            if rng.random() < self.chance:
                chromosome[i] += self.coeff * float(rng.uniform(-1.0, 1.0))

    def __repr__(self) -> str:
        return f"GaussianMutation(chance={self.chance}, coeff={self.coeff})"
