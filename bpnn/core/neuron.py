import math


def transfer(activation):
    """ The sigmoid function, `1 / (1 + exp(-activation))`
    """
    # Split on the sign so `exp` never overflows for large |activation|
    if activation >= 0:
        return 1.0 / (1.0 + math.exp(-activation))
    else:
        z = math.exp(activation)
        return z / (1.0 + z)


def transfer_derivative(output):
    """ Derivative of the sigmoid expressed in terms of its output
    """
    return output * (1.0 - output)


class Neuron:
    """ A single sigmoid unit

    Attributes
    ----------
    weights: list of float
        One weight per input followed by the bias weight. The bias is
        always the last entry and multiplies an implicit constant input
        of 1.

    output: float
        The output computed during the most recent forward propagation.

    delta: float
        The error signal computed during the most recent backward
        propagation, which scales the weight updates.
    """

    def __init__(self, weights):
        self.weights = [float(weight) for weight in weights]
        self.output = 0.0
        self.delta = 0.0

    def __repr__(self):
        return "<Neuron weights={}, output={:g}, delta={:g}>".format(
            self.weights, self.output, self.delta)

    @property
    def input_width(self):
        return len(self.weights) - 1

    def activate(self, inputs):
        """ Compute the weighted sum of `inputs` plus the bias

        Note
        ----
        Only the first `min(input_width, len(inputs))` inputs take part in
        the sum. If fewer inputs than weights are given, the unmatched
        weights are ignored; extra inputs (e.g., a trailing class label)
        are ignored likewise.
        """
        activation = self.weights[-1]

        for weight, value in zip(self.weights[:-1], inputs):
            activation += weight * value

        return activation
