import numpy as np


# Two features per row followed by the class label. The classes are
# linearly separable (class 1 has the larger first feature).
TOY_ROWS = [
    [2.7810836, 2.550537003, 0],
    [1.465489372, 2.362125076, 0],
    [3.396561688, 4.400293529, 0],
    [1.38807019, 1.850220317, 0],
    [3.06407332, 3.005305973, 0],
    [7.627531214, 2.759262235, 1],
    [5.332441248, 2.088626775, 1],
    [6.922596716, 1.77106367, 1],
    [8.675418651, -0.242068655, 1],
    [7.673756466, 3.508563011, 1],
]


def make_dataset():
    """
    Make the small two-feature, two-class dataset used by the examples
    and the tests.

    Returns
    -------
    dataset: ndarray, shape=(10, 3)
        Each row is `(feature_1, feature_2, label)`.
    """
    return np.array(TOY_ROWS, dtype=float)
