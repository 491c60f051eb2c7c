"""Flat real-valued genome that crossover and mutation operate on."""
from __future__ import annotations

from typing import Iterable, Iterator
import numpy as np


class Chromosome:
    """Ordered sequence of float genes backed by a numpy array."""

    def __init__(self, genes: Iterable[float] = ()):
        self.genes = np.fromiter(genes, dtype=float)

    def __len__(self) -> int:
        return len(self.genes)

    def __getitem__(self, index: int) -> float:
        return float(self.genes[index])

    def __setitem__(self, index: int, value: float) -> None:
        self.genes[index] = value

    def __iter__(self) -> Iterator[float]:
        return (float(gene) for gene in self.genes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chromosome):
            return NotImplemented
        return np.array_equal(self.genes, other.genes)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Chromosome({self.genes.tolist()!r})"

    def copy(self) -> "Chromosome":
        return Chromosome(self.genes)

    def to_array(self) -> np.ndarray:
        return self.genes.copy()
