import logging

from bpnn.core.logger import setup_logging
from bpnn.data.csv_io import import_weights, load_dataset


# DEBUG shows the raw output vector of every prediction.
setup_logging(level=logging.DEBUG)

# Run `../imported_dataset/main.py` first to create these files.
network = import_weights('../imported_dataset/hidden_layer.csv',
                         '../imported_dataset/output_layer.csv')
print("Network: {}".format(network))

test_dataset = load_dataset('../imported_dataset/dataset-test.csv')

score = 0
for row in test_dataset:
    prediction = network.predict(row)
    print(">>Expected: {:d}, Predicted: {:d}".format(int(row[-1]), prediction))
    score += prediction == int(row[-1])

print("Correct prediction: {:d} out of {:d}".format(score, len(test_dataset)))
print("Accuracy: {:.2%}".format(score / len(test_dataset)))
