"""Feed-forward network of weighted-sum ReLU neurons.

Networks are built either from a random source or by decoding a flat stream
of weights. Both paths walk the topology in the same order (layer, then
neuron, then bias followed by weights), and ``Network.weights`` flattens a
network back along that same walk, so a chromosome's genes always address
the same parameters.
"""
from __future__ import annotations

from typing import Callable, Iterable, Iterator, List, Sequence, Tuple
import numpy as np


def _next_weight(weights: Iterator[float]) -> float:
    try:
        return float(next(weights))
    except StopIteration:
        raise ValueError("got not enough weights") from None


def _topology(layer_sizes: Sequence[int]) -> List[Tuple[int, int]]:
    if len(layer_sizes) < 2:
        raise ValueError(
            f"Need at least an input and an output size, got {list(layer_sizes)}"
        )
    return list(zip(layer_sizes[:-1], layer_sizes[1:]))


class Neuron:
    def __init__(self, bias: float, weights: Iterable[float]):
        weights = np.fromiter(weights, dtype=float)
        if len(weights) == 0:
            raise ValueError("Neuron needs at least one weight")

        self.bias = float(bias)
        self.weights = weights

    @classmethod
    def _build(cls, input_size: int, draw: Callable[[], float]) -> "Neuron":
        bias = draw()
        weights = [draw() for _ in range(input_size)]
        return cls(bias, weights)

    @classmethod
    def random(cls, rng: np.random.Generator, input_size: int) -> "Neuron":
        """Draw the bias, then each weight, uniformly from [-1, 1)."""
        return cls._build(input_size, lambda: float(rng.uniform(-1.0, 1.0)))

    @classmethod
    def from_weights(cls, input_size: int, weights: Iterable[float]) -> "Neuron":
        weights = iter(weights)
        return cls._build(input_size, lambda: _next_weight(weights))

    def parameters(self) -> Iterator[float]:
        yield self.bias
        yield from (float(w) for w in self.weights)

    def propagate(self, inputs: Sequence[float]) -> float:
        if len(inputs) != len(self.weights):
            raise ValueError(
                f"Expected {len(self.weights)} inputs, got {len(inputs)}"
            )

        # Accumulate left to right; results must be reproducible bit for bit.
        output = 0.0
        for value, weight in zip(inputs, self.weights):
            output += float(value) * float(weight)

        return max(0.0, self.bias + output)

    def __repr__(self) -> str:
        return f"Neuron(bias={self.bias!r}, weights={self.weights.tolist()!r})"


class Layer:
    def __init__(self, neurons: Sequence[Neuron]):
        neurons = list(neurons)
        if not neurons:
            raise ValueError("Layer needs at least one neuron")

        input_size = len(neurons[0].weights)
        if any(len(neuron.weights) != input_size for neuron in neurons):
            raise ValueError("All neurons in a layer must share the same input size")

        self.neurons = neurons

    @property
    def input_size(self) -> int:
        return len(self.neurons[0].weights)

    @property
    def output_size(self) -> int:
        return len(self.neurons)

    @classmethod
    def random(cls, rng: np.random.Generator, input_size: int, output_size: int) -> "Layer":
        return cls([Neuron.random(rng, input_size) for _ in range(output_size)])

    @classmethod
    def from_weights(cls,
                     input_size: int,
                     output_size: int,
                     weights: Iterable[float]) -> "Layer":
        weights = iter(weights)
        return cls([Neuron.from_weights(input_size, weights) for _ in range(output_size)])

    def propagate(self, inputs: Sequence[float]) -> List[float]:
        return [neuron.propagate(inputs) for neuron in self.neurons]


class Network:
    """Ordered stack of layers; each layer feeds the next."""

    def __init__(self, layers: Sequence[Layer]):
        layers = list(layers)
        if not layers:
            raise ValueError("Network needs at least one layer")
        for prev, layer in zip(layers[:-1], layers[1:]):
            if prev.output_size != layer.input_size:
                raise ValueError(
                    f"Layer with {prev.output_size} outputs cannot feed "
                    f"a layer expecting {layer.input_size} inputs"
                )
        self.layers = layers

    @classmethod
    def _build(cls,
               layer_sizes: Sequence[int],
               make_layer: Callable[[int, int], Layer]) -> "Network":
        return cls([make_layer(n_in, n_out) for n_in, n_out in _topology(layer_sizes)])

    @classmethod
    def random(cls, rng: np.random.Generator, layer_sizes: Sequence[int]) -> "Network":
        return cls._build(layer_sizes, lambda n_in, n_out: Layer.random(rng, n_in, n_out))

    @classmethod
    def from_weights(cls, layer_sizes: Sequence[int], weights: Iterable[float]) -> "Network":
        weights = iter(weights)
        return cls._build(
            layer_sizes, lambda n_in, n_out: Layer.from_weights(n_in, n_out, weights)
        )

    @staticmethod
    def weight_count(layer_sizes: Sequence[int]) -> int:
        """Number of floats ``from_weights`` consumes for this topology."""
        return sum((n_in + 1) * n_out for n_in, n_out in _topology(layer_sizes))

    @property
    def layer_sizes(self) -> List[int]:
        return [self.layers[0].input_size] + [layer.output_size for layer in self.layers]

    def weights(self) -> List[float]:
        return [
            value
            for layer in self.layers
            for neuron in layer.neurons
            for value in neuron.parameters()
        ]

    def propagate(self, inputs: Sequence[float]) -> List[float]:
        outputs = list(inputs)
        for layer in self.layers:
            outputs = layer.propagate(outputs)
        return outputs

    def predict(self, X) -> np.ndarray:
        """Class index (argmax of the outputs) for each row of ``X``."""
        X = np.asarray(X, dtype=float)
        if X.ndim == 1:
            X = X.reshape(1, -1)
        return np.array([int(np.argmax(self.propagate(row))) for row in X], dtype=int)
