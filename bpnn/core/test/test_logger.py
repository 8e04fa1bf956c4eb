import logging
import os
import shutil
import tempfile
import unittest

from bpnn.core.logger import LOGGER_NAME, progress, setup_logging


class TestLogger(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp()

    def tearDown(self):
        setup_logging(stdout=False)
        shutil.rmtree(self.tmp_dir)

    def test_setup_logging_file(self):
        filename = os.path.join(self.tmp_dir, 'log.txt')

        logger = setup_logging(filename=filename, stdout=False)
        self.assertIs(logger, logging.getLogger(LOGGER_NAME))
        self.assertEqual(len(logger.handlers), 1)

        progress(logging.getLogger('bpnn.core.network'), "Epoch done", 7, 100)

        for handler in logger.handlers:
            handler.flush()

        with open(filename) as f:
            contents = f.read()

        self.assertIn("INFO", contents)
        self.assertIn("(007 / 100) Epoch done", contents)

    def test_setup_logging_twice(self):
        setup_logging(stdout=True)
        logger = setup_logging(stdout=True)

        self.assertEqual(len(logger.handlers), 1)
