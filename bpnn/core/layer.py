import numpy

from .exception import InvalidConfiguration
from .neuron import Neuron


class Layer:
    """ An ordered, fixed-size collection of neurons sharing the same
    number of inputs. The hidden and output layers of a network are both
    instances of this class.
    """

    def __init__(self, neurons):
        self.neurons = list(neurons)

        widths = set(neuron.input_width for neuron in self.neurons)
        if len(widths) > 1:
            msg = "All neurons in a layer need the same input width, got {}"
            raise InvalidConfiguration(msg.format(sorted(widths)))

    def __repr__(self):
        return "<Layer neurons={:d}, input_width={}>".format(
            len(self), self.input_width)

    def __len__(self):
        return len(self.neurons)

    def __iter__(self):
        return iter(self.neurons)

    def __getitem__(self, index):
        return self.neurons[index]

    @property
    def input_width(self):
        """ The number of inputs each neuron expects (None when empty)
        """
        if not self.neurons:
            return None
        return self.neurons[0].input_width

    @property
    def outputs(self):
        return [neuron.output for neuron in self.neurons]

    @classmethod
    def initialize(cls, n_neurons, input_width, random_state=None):
        """ Create a layer with randomly initialized weights

        Parameters
        ----------
        n_neurons: int
            The number of neurons in the layer.

        input_width: int
            The number of inputs to each neuron. Each neuron receives
            `input_width + 1` weights, the last being the bias.

        random_state: numpy.random.RandomState, default=None
            Provide a RandomState object for reproducible results. Each
            weight is drawn uniformly from [0, 1).

        Returns
        -------
        layer: Layer
        """
        if n_neurons < 0 or input_width < 0:
            msg = ("`n_neurons` ({}) and `input_width` ({}) "
                   "must be non-negative")
            raise InvalidConfiguration(msg.format(n_neurons, input_width))

        if random_state is None:
            random_state = numpy.random.RandomState()

        neurons = [
            Neuron(random_state.random_sample(input_width + 1).tolist())
            for _ in range(n_neurons)
        ]

        return cls(neurons)

    @classmethod
    def from_weights(cls, weights):
        """ Create a layer from a list of per-neuron weight lists, where
        the last weight of each neuron is its bias
        """
        return cls([Neuron(neuron_weights) for neuron_weights in weights])

    def get_weights(self):
        """ Returns a list holding a copy of each neuron's weights
        """
        return [list(neuron.weights) for neuron in self.neurons]
