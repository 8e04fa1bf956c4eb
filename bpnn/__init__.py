# flake8: noqa

from .core.exception import (
    DatasetError,
    InvalidConfiguration,
    NumericInstability,
    WeightFileError,
)
from .core.layer import Layer
from .core.network import Network
from .core.neuron import Neuron
