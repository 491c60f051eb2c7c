"""Interface between the genetic algorithm and whatever it is evolving."""
from __future__ import annotations

from abc import ABC, abstractmethod

from .chromosome import Chromosome


class Individual(ABC):
    """Something that carries a chromosome and has been given a fitness.

    Fitness must be a finite, non-negative number for roulette-wheel
    selection to work with it.
    """

    @classmethod
    @abstractmethod
    def create(cls, chromosome: Chromosome) -> "Individual":
        """Build a fresh individual around an offspring chromosome."""

    @abstractmethod
    def chromosome(self) -> Chromosome:
        ...

    @abstractmethod
    def fitness(self) -> float:
        ...
