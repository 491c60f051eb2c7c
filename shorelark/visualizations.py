"""Plots summarizing a training run."""
from __future__ import annotations

from typing import List
import os
import numpy as np
import matplotlib.pyplot as plt

from .network import Network
from .trainer import TrainingHistory


def _ensure_dir(path: str) -> None:
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)


def _save(fig, save_path: str) -> None:
    plt.tight_layout()
    _ensure_dir(save_path)
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close(fig)


def plot_fitness_history(history: TrainingHistory, save_path: str) -> None:
    """Min / average / max fitness per generation."""
    if not history.generations:
        raise ValueError("history is empty.")

    gens = np.asarray(history.generations)
    fig, ax = plt.subplots(figsize=(8, 4.5))
    ax.fill_between(gens, history.min_fitness, history.max_fitness,
                    color="#3b65ff", alpha=0.15, label="Min-max range")
    ax.plot(gens, history.avg_fitness, color="#3b65ff", linewidth=2.0, label="Average")
    ax.plot(gens, history.max_fitness, color="#d62728", linewidth=1.2, label="Best")
    ax.set_xlabel("Generation")
    ax.set_ylabel("Fitness")
    ax.set_title("Fitness over generations")
    ax.grid(alpha=0.25, linestyle="--", linewidth=0.6)
    ax.legend(frameon=False)
    _save(fig, save_path)


def parameter_matrices(network: Network) -> List[np.ndarray]:
    """One ``(neurons, 1 + inputs)`` array per layer; column 0 holds the biases.

    Rows follow neuron order and columns follow ``Neuron.parameters``, so
    reading the arrays layer by layer, row by row gives ``network.weights()``.
    """
    return [
        np.array([list(neuron.parameters()) for neuron in layer.neurons])
        for layer in network.layers
    ]


def plot_network_weights(network: Network, save_path: str) -> None:
    """Heatmap of every layer's biases and weights, one panel per layer."""
    matrices = parameter_matrices(network)
    limit = max(float(np.abs(m).max()) for m in matrices) or 1.0

    fig, axes = plt.subplots(1, len(matrices), figsize=(4 * len(matrices), 4),
                             squeeze=False)
    for idx, (ax, matrix) in enumerate(zip(axes[0], matrices)):
        im = ax.imshow(matrix, aspect="auto", cmap="coolwarm",
                       vmin=-limit, vmax=limit, interpolation="nearest")
        ax.axvline(0.5, color="black", linewidth=1.0)
        n_out, n_cols = matrix.shape
        ax.set_xticks(range(n_cols))
        ax.set_xticklabels(["b"] + [f"in{i}" for i in range(n_cols - 1)], fontsize=7)
        ax.set_yticks(range(n_out))
        ax.set_ylabel("Neuron")
        ax.set_title(f"Layer {idx}: {n_cols - 1} -> {n_out}")

    fig.colorbar(im, ax=list(axes[0]), label="Parameter value")
    fig.suptitle(f"Network {network.layer_sizes}")
    _ensure_dir(save_path)
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close(fig)
