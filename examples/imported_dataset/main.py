import numpy as np

from bpnn import Network
from bpnn.core.logger import setup_logging
from bpnn.data.csv_io import export_weights, load_dataset
from bpnn.score_functions import accuracy
from bpnn.util.on_epoch import plot_errors


setup_logging(filename='train-log.txt')

random_state = np.random.RandomState(1234)

# Run `create_data.py` first to create these files.
dataset = load_dataset('dataset.csv')
test_dataset = load_dataset('dataset-test.csv')

n_inputs = dataset.shape[1] - 1

network = Network(n_inputs=n_inputs, n_hidden=2*n_inputs, n_outputs=2,
                  random_state=random_state)

network.train(dataset, learning_rate=0.2, epochs=1000, n_outputs=2,
              on_epoch=plot_errors(every=25))

print("Training accuracy: {:.2%}".format(accuracy(network, dataset)))
print("Testing accuracy: {:.2%}".format(accuracy(network, test_dataset)))

# Writes `hidden_layer.csv` and `output_layer.csv`
export_weights(network)
