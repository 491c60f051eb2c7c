"""Genetic algorithm and minimal neural network for evolving small controllers."""

from .chromosome import Chromosome  # noqa: F401
from .network import Neuron, Layer, Network  # noqa: F401
from .individual import Individual  # noqa: F401
from .selection import SelectionMethod, RouletteWheelSelection  # noqa: F401
from .crossover import CrossoverMethod, UniformCrossover  # noqa: F401
from .mutation import MutationMethod, GaussianMutation  # noqa: F401
from .statistics import Statistics  # noqa: F401
from .genetic_algorithm import GeneticAlgorithm  # noqa: F401
