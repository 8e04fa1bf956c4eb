import numpy as np


def min_max(dataset):
    """
    Rescale every feature column of `dataset` to [0, 1]. The last column
    (the class label) is left untouched.

    Parameters
    ----------
    dataset: ndarray, shape=(n_rows, n_features+1)

    Returns
    -------
    normalized: ndarray, shape=(n_rows, n_features+1)
        A rescaled copy of `dataset`.

    bounds: ndarray, shape=(2, n_features)
        The per-feature minimums and maximums, for use with
        :func:`apply_min_max` on other data (e.g., a testing set).
    """
    dataset = np.asarray(dataset, dtype=float)

    if dataset.ndim != 2 or dataset.shape[0] == 0:
        raise ValueError("`dataset` must be a non-empty 2d array.")

    features = dataset[:, :-1]
    bounds = np.vstack([features.min(axis=0), features.max(axis=0)])

    return apply_min_max(dataset, bounds), bounds


def apply_min_max(dataset, bounds):
    """
    Rescale the feature columns of `dataset` using `bounds` as returned by
    :func:`min_max`. Constant features are mapped to 0.
    """
    dataset = np.array(dataset, dtype=float)

    if bounds.shape != (2, dataset.shape[1]-1):
        msg = "`bounds` was shape {} but should be shape {}"
        raise ValueError(msg.format(bounds.shape, (2, dataset.shape[1]-1)))

    low, high = bounds
    spread = high - low
    constant = spread == 0

    scaled = (dataset[:, :-1] - low) / np.where(constant, 1, spread)
    dataset[:, :-1] = np.where(constant, 0.0, scaled)

    return dataset
