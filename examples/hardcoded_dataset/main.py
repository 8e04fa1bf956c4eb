import numpy as np

from bpnn import Network
from bpnn.core.logger import setup_logging
from bpnn.data.toy import make_dataset


setup_logging()

random_state = np.random.RandomState(1234)

# The toy dataset: two features and a label per row ###########################

dataset = make_dataset()

# Set up the network and train it #############################################

network = Network(n_inputs=2, n_hidden=4, n_outputs=2,
                  random_state=random_state)
print("Network: {}".format(network.get_weights()))

network.train(dataset, learning_rate=0.2, epochs=10000, n_outputs=2)
print("Network after training: {}".format(network.get_weights()))

# Score it on the training data ###############################################

score = 0
for row in dataset:
    prediction = network.predict(row)
    print(">>Expected: {:d}, Predicted: {:d}".format(int(row[-1]), prediction))
    score += prediction == int(row[-1])

print("Accuracy: {:.2%}".format(score / len(dataset)))
