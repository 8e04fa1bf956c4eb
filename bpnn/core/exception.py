class InvalidConfiguration(ValueError):
    """ Raised when the network topology, a row width, a class label or
    the number of outputs passed to training disagree with each other
    """


class NumericInstability(ArithmeticError):
    """ Raised when training produces non-finite weights or error
    """


class DatasetError(ValueError):
    """ Raised when a dataset file is missing, empty or malformed
    """


class WeightFileError(DatasetError):
    """ Raised when a layer weight file is missing, empty or malformed
    """
