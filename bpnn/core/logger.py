import logging


LOGGER_NAME = 'bpnn'
LINE_FORMAT = '[%(asctime)s] %(levelname)-8s %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(filename=None, stdout=True, level=logging.INFO):
    """ Sets up logging formatting and handlers for the package logger

    Parameters
    ----------
    filename: str, default=None
        If given, log records are also written to this file (which is
        overwritten).

    stdout: bool, default=True
        If True, log records are written to the console.

    level: int, default=logging.INFO
        The level of the package logger. Use `logging.DEBUG` to see
        the raw output vectors computed during prediction.

    Returns
    -------
    logger: logging.Logger
        The configured package logger.
    """
    formatter = logging.Formatter(fmt=LINE_FORMAT, datefmt=DATE_FORMAT)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Re-running the setup replaces the handlers rather than duplicating them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if filename is not None:
        fhandler = logging.FileHandler(filename, mode='w')
        fhandler.setFormatter(formatter)
        logger.addHandler(fhandler)

    if stdout:
        shandler = logging.StreamHandler()
        shandler.setFormatter(formatter)
        logger.addHandler(shandler)

    return logger


def progress(logger, msg, i, n):
    """ Log `msg` prefixed with a zero-padded `(i / n)` counter
    """
    msg = "(%%0%dd / %d) %s" % (len(str(n)), n, msg)
    logger.info(msg % i)
