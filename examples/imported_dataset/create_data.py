import numpy as np

from bpnn.data.csv_io import save_dataset
from bpnn.data.normalize import apply_min_max, min_max
from bpnn.data.split import split


# Create the random number generator.
seed = 1234
rs = np.random.RandomState(seed)

n_samples = 400
n_features = 4

# Two Gaussian blobs, one per class, with different centers.
labels = rs.randint(0, 2, size=n_samples)
centers = np.array([np.zeros(n_features), 2.5*np.ones(n_features)])
features = centers[labels] + rs.randn(n_samples, n_features)

dataset = np.c_[features, labels]

# Split the rows, then rescale both sets with the training set bounds.
datasets = split(dataset, p=(0.8, 0.2), random_state=rs)
training, bounds = min_max(datasets['training'])
testing = apply_min_max(datasets['testing'], bounds)

save_dataset('dataset.csv', training)
save_dataset('dataset-test.csv', testing)
