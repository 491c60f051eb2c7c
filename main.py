#!/usr/bin/env python3
"""Entry point for evolving a small network on a toy dataset."""
from __future__ import annotations

import os
import argparse
import numpy as np

from shorelark import config
from shorelark.datasets import DATASETS, make_dataset
from shorelark.trainer import Trainer
from shorelark.visualizations import (
    plot_fitness_history,
    plot_network_weights,
)


def run_experiment(args: argparse.Namespace) -> None:
    os.makedirs(args.results_dir, exist_ok=True)
    X_train, X_test, y_train, y_test = make_dataset(
        kind=args.dataset,
        n_samples=args.samples,
        noise=args.noise,
        seed=args.seed,
    )

    layer_sizes = [X_train.shape[1], *args.hidden, int(y_train.max()) + 1]
    print(f"Dataset: {args.dataset} | {X_train.shape[0]} train / {X_test.shape[0]} test")
    print(f"Network architecture: {layer_sizes}")

    trainer = Trainer(
        layer_sizes=layer_sizes,
        population_size=args.population_size,
        mutation_chance=args.mutation_chance,
        mutation_coeff=args.mutation_coeff,
        random_seed=args.seed,
    )
    print(f"Genome size: {trainer.genome_size} genes")

    history = trainer.run(X_train, y_train, generations=args.generations, verbose=True)

    best = trainer.get_best_individual()
    test_accuracy = np.mean(trainer.best_network().predict(X_test) == y_test)
    print(f"\nBest train accuracy: {best['fitness']:.3f}")
    print(f"Test accuracy:       {test_accuracy:.3f}")

    print("\nGenerating visualizations...")
    plot_fitness_history(history, os.path.join(args.results_dir, "fitness_history.png"))
    plot_network_weights(
        trainer.best_network(),
        os.path.join(args.results_dir, "best_network.png")
    )
    print(f"Artifacts saved to {args.results_dir}")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Evolve network weights with a genetic algorithm")
    parser.add_argument("--dataset", choices=DATASETS, default="moons")
    parser.add_argument("--samples", type=int, default=400)
    parser.add_argument("--noise", type=float, default=0.2)
    parser.add_argument("--hidden", type=int, nargs="*", default=list(config.HIDDEN_LAYERS))
    parser.add_argument("--generations", type=int, default=config.GENERATIONS)
    parser.add_argument("--population-size", type=int, default=config.POPULATION_SIZE)
    parser.add_argument("--mutation-chance", type=float, default=config.MUTATION_CHANCE)
    parser.add_argument("--mutation-coeff", type=float, default=config.MUTATION_COEFF)
    parser.add_argument("--seed", type=int, default=config.RANDOM_SEED)
    parser.add_argument("--results-dir", default=config.RESULTS_DIR)
    return parser.parse_args()


if __name__ == "__main__":
    run_experiment(parse_args())
