""" Reading and writing datasets and layer weights as comma separated
files. Numbers are written with 17 significant digits, so values read
back are identical to the values written.

Weights are stored as one file per layer, one line per neuron, with the
bias as the last value on each line.
"""
import logging
import warnings

import numpy

from bpnn.core.exception import DatasetError, WeightFileError
from bpnn.core.layer import Layer
from bpnn.core.network import Network


logger = logging.getLogger(__name__)

DEFAULT_HIDDEN_FILENAME = 'hidden_layer.csv'
DEFAULT_OUTPUT_FILENAME = 'output_layer.csv'
# Enough significant digits for every float64 to be read back unchanged
NUMBER_FORMAT = '%.17g'


def _read_table(filename, error_class):
    """ Read a rectangular table of floats, raising `error_class` with a
    descriptive message on any failure
    """
    try:
        with warnings.catch_warnings():
            # An empty file is handled below
            warnings.simplefilter('ignore', UserWarning)
            table = numpy.loadtxt(
                filename, delimiter=',', dtype=float, ndmin=2)
    except OSError as e:
        msg = "Couldn't open {}: {}"
        raise error_class(msg.format(filename, e)) from e
    except ValueError as e:
        msg = "Couldn't parse {}: {}"
        raise error_class(msg.format(filename, e)) from e

    if table.size == 0:
        msg = "{} contains no data"
        raise error_class(msg.format(filename))

    return table


def load_dataset(filename):
    """ Load a dataset from a comma separated file

    Parameters
    ----------
    filename: str
        Path to a file where each line is `feature_1, ..., feature_n, label`.

    Returns
    -------
    dataset: ndarray, shape=(n_rows, n_columns)
        The parsed values, one row per line.
    """
    dataset = _read_table(filename, DatasetError)

    msg = "Loaded dataset {} with shape {}"
    logger.debug(msg.format(filename, dataset.shape))

    return dataset


def save_dataset(filename, dataset):
    """ Write the rows of `dataset` to a comma separated file
    """
    numpy.savetxt(filename, numpy.asarray(dataset, dtype=float),
                  fmt=NUMBER_FORMAT, delimiter=',')


def _write_layer(filename, layer):
    numpy.savetxt(filename, numpy.array(layer.get_weights(), dtype=float),
                  fmt=NUMBER_FORMAT, delimiter=',')


def _read_layer(filename):
    return Layer.from_weights(_read_table(filename, WeightFileError).tolist())


def export_weights(network, hidden_filename=DEFAULT_HIDDEN_FILENAME,
                   output_filename=DEFAULT_OUTPUT_FILENAME):
    """ Write the weights of the hidden and output layers of `network` to
    `hidden_filename` and `output_filename`, respectively
    """
    _write_layer(hidden_filename, network.hidden_layer)
    _write_layer(output_filename, network.output_layer)

    msg = "Exported weights to {} and {}"
    logger.info(msg.format(hidden_filename, output_filename))


def import_weights(hidden_filename=DEFAULT_HIDDEN_FILENAME,
                   output_filename=DEFAULT_OUTPUT_FILENAME):
    """ Build a network from weight files written by `export_weights`

    The topology is taken from the files: the number of lines gives the
    number of neurons and the number of values per line gives the input
    width plus one.

    Returns
    -------
    network: Network
    """
    hidden_layer = _read_layer(hidden_filename)
    output_layer = _read_layer(output_filename)

    network = Network.from_layers(
        hidden_layer=hidden_layer, output_layer=output_layer)

    msg = "Imported {} from {} and {}"
    logger.info(msg.format(network, hidden_filename, output_filename))

    return network
