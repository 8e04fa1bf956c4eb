import unittest

from bpnn.core.layer import Layer
from bpnn.core.network import Network
from bpnn.util.on_epoch import collect_errors, plot_errors


class TestOnEpoch(unittest.TestCase):

    def test_collect_errors(self):
        network = Network.from_layers(
            hidden_layer=Layer.from_weights([[0.1, 0.2, 0.3]]),
            output_layer=Layer.from_weights([[0.4, 0.5], [0.6, 0.7]]))

        errors = []
        returned = network.train(
            [[1.0, 2.0, 0.0], [2.0, 1.0, 1.0]], 0.5, 5, 2,
            on_epoch=collect_errors(errors))

        self.assertEqual(errors, returned)

    def test_plot_errors(self):
        import matplotlib
        matplotlib.use('Agg')
        import matplotlib.pyplot as plt

        try:
            on_epoch = plot_errors(every=2)
            for epoch, error in enumerate([3.0, 2.0, 1.5]):
                on_epoch(epoch, error)

            line = plt.gca().get_lines()[0]
            self.assertEqual(list(line.get_ydata()), [3.0, 2.0, 1.5])
        finally:
            plt.close('all')
