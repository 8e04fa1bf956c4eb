import unittest

import numpy as np

from bpnn.data.split import split


class TestSplit(unittest.TestCase):

    def setUp(self):
        self.dataset = np.c_[np.arange(100.0), np.arange(100) % 2]

    def test_partition(self):
        random_state = np.random.RandomState(1234)

        datasets = split(self.dataset, p=(0.7, 0.3),
                         random_state=random_state)

        training = datasets['training']
        testing = datasets['testing']

        self.assertEqual(len(training) + len(testing), 100)

        # Every row lands in exactly one set, order is preserved
        ids = sorted(training[:, 0].tolist() + testing[:, 0].tolist())
        self.assertEqual(ids, list(range(100)))
        self.assertTrue((np.diff(training[:, 0]) > 0).all())
        self.assertTrue((np.diff(testing[:, 0]) > 0).all())

    def test_reproducible(self):
        datasets1 = split(self.dataset, random_state=np.random.RandomState(1))
        datasets2 = split(self.dataset, random_state=np.random.RandomState(1))

        for key in ('training', 'testing'):
            self.assertTrue((datasets1[key] == datasets2[key]).all())

    def test_subset_size(self):
        datasets = split(self.dataset, subset_size=10,
                         random_state=np.random.RandomState(1234))

        self.assertEqual(
            len(datasets['training']) + len(datasets['testing']), 10)

        with self.assertRaises(ValueError):
            split(self.dataset, subset_size=101)

    def test_bad_probabilities(self):
        with self.assertRaises(ValueError):
            split(self.dataset, p=(0.5, 0.6))

        with self.assertRaises(ValueError):
            split(self.dataset, p=(0.6, 0.2, 0.2))
