"""Small classification problems used to score evolved networks."""
from __future__ import annotations

import numpy as np
from sklearn.model_selection import train_test_split
from sklearn.preprocessing import StandardScaler
from sklearn.datasets import make_moons, make_circles, make_blobs

DATASETS = ("moons", "circles", "blobs")


def make_dataset(kind: str = "moons",
                 n_samples: int = 400,
                 noise: float = 0.2,
                 seed: int = 0):
    """Create a standardized 2-D toy dataset split into train and test.

    ``blobs`` yields three classes, the others two. Returns
    ``X_train, X_test, y_train, y_test``.
    """
    if kind == "moons":
        X, y = make_moons(n_samples=n_samples, noise=noise, random_state=seed)
    elif kind == "circles":
        X, y = make_circles(n_samples=n_samples, noise=noise, factor=0.4,
                            random_state=seed)
    elif kind == "blobs":
        X, y = make_blobs(n_samples=n_samples, centers=3,
                          cluster_std=1.0 + 4.0 * noise, random_state=seed)
    else:
        raise ValueError(f"Unknown dataset {kind!r}, expected one of {DATASETS}")

    X_train, X_test, y_train, y_test = train_test_split(
        X, y, test_size=0.25, random_state=seed, stratify=y
    )
    scaler = StandardScaler()
    X_train = scaler.fit_transform(X_train)
    X_test = scaler.transform(X_test)
    return X_train.astype(np.float32), X_test.astype(np.float32), y_train.astype(int), y_test.astype(int)
