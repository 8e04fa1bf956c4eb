import unittest

from bpnn.data.toy import make_dataset


class TestToy(unittest.TestCase):

    def test_make_dataset(self):
        dataset = make_dataset()

        self.assertEqual(dataset.shape, (10, 3))
        self.assertEqual(dataset[:, -1].tolist(), [0.0]*5 + [1.0]*5)

        # Linearly separable on the first feature
        self.assertLess(dataset[:5, 0].max(), dataset[5:, 0].min())
