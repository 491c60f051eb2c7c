"""Project-wide configuration constants."""
from __future__ import annotations

from typing import Final, Tuple
import os

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
RESULTS_DIR: Final[str] = os.path.join(ROOT, 'results')
RANDOM_SEED: Final[int] = 42

POPULATION_SIZE: Final[int] = 40
GENERATIONS: Final[int] = 30
MUTATION_CHANCE: Final[float] = 0.01
MUTATION_COEFF: Final[float] = 0.3
HIDDEN_LAYERS: Final[Tuple[int, ...]] = (8,)
