"""
This is a simple neural network class for classification.

A general number of inputs, hidden units and outputs is supported,
but there is exactly one hidden layer:

    Input (R^n) => Hidden (R^h) => Output (R^m)

Every unit computes the sigmoid of a weighted sum of its inputs plus a
bias. The network is trained online: the weights are updated after every
row of the dataset, for a fixed number of epochs.

Note that the hidden layer error signals computed in `back_propagate`
are *not* the textbook gradient. See the method documentation.
"""
import logging
import math

import numpy

from .exception import InvalidConfiguration, NumericInstability
from .layer import Layer
from .neuron import transfer, transfer_derivative


logger = logging.getLogger(__name__)


class Network:
    """
    Single hidden layer network with sigmoid hidden and output units.
    The predicted class of a row is the index of the largest output.
    """
    def __init__(self, n_inputs, n_hidden, n_outputs, random_state=None):
        """
        Parameters
        ----------
        n_inputs: int
            Number of input features.

        n_hidden: int
            Number of hidden units.

        n_outputs: int
            Number of output units, i.e., the number of classes.

        random_state: numpy.random.RandomState, default=None
            Provide a RandomState object for reproducible results.
        """
        self._initialize(n_inputs, n_hidden, n_outputs, random_state)

    def __repr__(self):
        return "<Network n_inputs=%d, n_hidden=%d, n_outputs=%d>" % (
            self.n_inputs, self.n_hidden, self.n_outputs)

    def _initialize(self, n_inputs, n_hidden, n_outputs, random_state):
        """
        Create both layers with weights drawn uniformly from [0, 1). Only
        called on construction; the topology never changes afterwards.
        """
        if n_inputs < 0 or n_hidden < 1 or n_outputs < 1:
            msg = ("Need n_inputs >= 0, n_hidden >= 1 and n_outputs >= 1 "
                   "(got {}, {}, {})")
            raise InvalidConfiguration(
                msg.format(n_inputs, n_hidden, n_outputs))

        if random_state is None:
            random_state = numpy.random.RandomState()

        self._set_layers(
            hidden_layer=Layer.initialize(
                n_hidden, n_inputs, random_state=random_state),
            output_layer=Layer.initialize(
                n_outputs, n_hidden, random_state=random_state))

    @classmethod
    def from_layers(cls, hidden_layer, output_layer):
        """
        Build a network around existing layers, e.g., layers whose
        weights were read from disk.
        """
        network = cls.__new__(cls)
        network._set_layers(hidden_layer, output_layer)
        return network

    def _set_layers(self, hidden_layer, output_layer):
        if len(hidden_layer) == 0 or len(output_layer) == 0:
            raise InvalidConfiguration("Both layers need at least one neuron")

        if output_layer.input_width != len(hidden_layer):
            msg = ("Output layer input width ({}) doesn't match the "
                   "number of hidden units ({})")
            raise InvalidConfiguration(
                msg.format(output_layer.input_width, len(hidden_layer)))

        self.hidden_layer = hidden_layer
        self.output_layer = output_layer

    @property
    def n_inputs(self):
        return self.hidden_layer.input_width

    @property
    def n_hidden(self):
        return len(self.hidden_layer)

    @property
    def n_outputs(self):
        return len(self.output_layer)

    def get_weights(self):
        """
        Returns
        -------
        hidden, output: list of lists
            The per-neuron weights of the hidden and output layers.
        """
        return self.hidden_layer.get_weights(), self.output_layer.get_weights()

    def forward_propagate(self, row):
        """
        Parameters
        ----------
        row: sequence of float
            The input features. Values past the first `n_inputs` (e.g., a
            class label) are not used.

        Returns
        -------
        outputs: list of float, length=n_outputs
            The output layer's outputs. The output of every neuron in the
            network is stored on the neuron as a side effect.
        """
        if len(row) < self.n_inputs:
            msg = "Row has {} values but the network has {} inputs"
            raise InvalidConfiguration(msg.format(len(row), self.n_inputs))

        inputs = row

        for layer in (self.hidden_layer, self.output_layer):
            outputs = []
            for neuron in layer:
                neuron.output = transfer(neuron.activate(inputs))
                outputs.append(neuron.output)
            inputs = outputs

        return outputs

    def back_propagate(self, expected):
        """
        Assign the error signal `delta` of every neuron, given the expected
        outputs for the row most recently passed to `forward_propagate`.

        Output unit `i` gets `(expected[i] - output_i) * output_i *
        (1 - output_i)`.

        The hidden units follow a different rule. A sequence of error
        signals is built by looping over the output units, then over the
        hidden units, then over the weights of each hidden unit, appending the
        running sum of `weight * output_delta` after every term (the sum
        restarts at zero for each output unit). Hidden unit `j` then gets
        `signals[j] * h_j * (1 - h_j)`. The hidden unit's own weights are
        used instead of the weights connecting it to the output layer, so
        this is not the gradient of the squared error.
        """
        if len(expected) != self.n_outputs:
            msg = "Expected vector has length {} but there are {} outputs"
            raise InvalidConfiguration(
                msg.format(len(expected), self.n_outputs))

        for target, neuron in zip(expected, self.output_layer):
            neuron.delta = (
                (target - neuron.output) * transfer_derivative(neuron.output))

        signals = []
        for output_neuron in self.output_layer:
            error = 0.0
            for hidden_neuron in self.hidden_layer:
                for weight in hidden_neuron.weights:
                    error += weight * output_neuron.delta
                    signals.append(error)

        # There are always at least n_hidden signals.
        for error, neuron in zip(signals, self.hidden_layer):
            neuron.delta = error * transfer_derivative(neuron.output)

    def update_weights(self, row, learning_rate):
        """
        Move every weight by `learning_rate * delta * input`, where the
        inputs of the hidden layer are the row's features and the inputs
        of the output layer are the hidden layer outputs. Bias weights see
        a constant input of 1.
        """
        features = [float(value) for value in row[:self.n_inputs]]

        for layer, inputs in ((self.hidden_layer, features),
                              (self.output_layer, self.hidden_layer.outputs)):
            for neuron in layer:
                step = learning_rate * neuron.delta
                for j, value in enumerate(inputs):
                    neuron.weights[j] += step * value
                neuron.weights[-1] += step

    def _validate_dataset(self, dataset, n_outputs):
        if n_outputs != self.n_outputs:
            msg = "`n_outputs` ({}) doesn't match the output layer size ({})"
            raise InvalidConfiguration(msg.format(n_outputs, self.n_outputs))

        for i, row in enumerate(dataset):
            if len(row) != self.n_inputs + 1:
                msg = ("Row {} has {} values but should have {} "
                       "(features followed by a label)")
                raise InvalidConfiguration(
                    msg.format(i, len(row), self.n_inputs + 1))

            label = row[-1]
            if not 0 <= label < n_outputs or label != int(label):
                msg = "Row {} has label {} outside of [0, {})"
                raise InvalidConfiguration(msg.format(i, label, n_outputs))

    def _check_finite(self, epoch, error):
        weights = self.get_weights()
        finite = math.isfinite(error) and all(
            math.isfinite(weight)
            for layer_weights in weights
            for neuron_weights in layer_weights
            for weight in neuron_weights)

        if not finite:
            msg = "Non-finite error or weights encountered at epoch {}"
            raise NumericInstability(msg.format(epoch))

    def train(self, dataset, learning_rate, epochs, n_outputs,
              on_epoch=None):
        """
        Train the network with online gradient descent.

        Parameters
        ----------
        dataset: sequence of rows
            Each row holds the features followed by the integer class
            label (stored as a float). Rows are visited in order; there
            is no shuffling.

        learning_rate: float
            The step size of the weight updates.

        epochs: int
            The number of passes over the dataset.

        n_outputs: int
            The number of classes, used to one-hot encode the labels. Must
            equal the number of output units.

        on_epoch: callable or list of callables, default=None
            Called after each epoch as :code:`on_epoch(epoch, error)`.

        Returns
        -------
        errors: list of float, length=epochs
            The summed squared error over the dataset for each epoch,
            accumulated while the weights are being updated.
        """
        if on_epoch:
            if not isinstance(on_epoch, list):
                on_epoch = [on_epoch]

            if not all([callable(func) for func in on_epoch]):
                msg = "All on_epoch items must be callable"
                raise TypeError(msg)

        self._validate_dataset(dataset, n_outputs)

        errors = []

        for epoch in range(epochs):
            sum_error = 0.0

            for row in dataset:
                outputs = self.forward_propagate(row)

                expected = [0.0] * n_outputs
                expected[int(row[-1])] = 1.0

                sum_error += sum((target - output)**2
                                 for target, output in zip(expected, outputs))

                self.back_propagate(expected)
                self.update_weights(row, learning_rate)

            logger.info("Epoch: %d, Learning rate: %.2f, Error: %.5f",
                        epoch, learning_rate, sum_error)

            self._check_finite(epoch, sum_error)
            errors.append(sum_error)

            if on_epoch:
                for func in on_epoch:
                    func(epoch, sum_error)

        return errors

    def predict(self, row):
        """
        Returns
        -------
        index: int
            The index of the largest output. Ties go to the lowest index.
        """
        outputs = self.forward_propagate(row)
        logger.debug("Predicted outputs: %s", outputs)

        index = 0
        maximum = 0.0

        for i, output in enumerate(outputs):
            if output > maximum:
                index = i
                maximum = output

        return index
