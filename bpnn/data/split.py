import numpy as np


TRAINING_KEY = 'training'
TESTING_KEY = 'testing'


def split(dataset, p=(0.8, 0.2), subset_size=None, random_state=None):
    """
    Split the rows of `dataset` randomly into training and testing sets.

    Parameters
    ----------
    dataset: ndarray, shape=(n_rows, n_columns)
        The rows to split.

    p: 2-tuple of fractions, default=(0.8, 0.2)
        The probability of a row being placed in the training or testing
        set.

    subset_size: int, default=None
        If supplied, then should be less than or equal to `len(dataset)`.
        If given, then the rows are first subsampled by `subset_size`
        before splitting.

    random_state: numpy.random.RandomState, default=None
        For reproducible results.

    Returns
    -------
    datasets: dict
        datasets['training'] = ndarray of training rows
        datasets['testing'] = ndarray of testing rows

    Both arrays keep the relative order of the rows in `dataset`.
    """
    dataset = np.asarray(dataset, dtype=float)

    if len(p) != 2:
        raise ValueError("`p` must hold two probabilities.")
    if any(pi < 0 for pi in p) or abs(sum(p) - 1.0) > 1e-8:
        raise ValueError("`p` must be non-negative and sum to 1.")
    if subset_size is not None and subset_size > len(dataset):
        raise ValueError("`subset_size` must be <= `len(dataset)`.")
    if subset_size is None:
        subset_size = len(dataset)

    rs = np.random.RandomState() if random_state is None else random_state

    indices = np.sort(
        rs.choice(len(dataset), replace=False, size=subset_size))
    mn = rs.multinomial(1, pvals=p, size=len(indices))

    datasets = {}

    for j, key in enumerate([TRAINING_KEY, TESTING_KEY]):
        datasets[key] = dataset[indices[mn[:, j] == 1]]

    return datasets
