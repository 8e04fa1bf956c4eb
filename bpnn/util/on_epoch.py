""" This module provides a few simple `on_epoch` functions that can be
used with the `Network.train` member function
"""


def collect_errors(error_list):
    """ Collects the training error of every epoch. Errors are appended to
    :code:`error_list` and so an empty list should be provided. Usage::

        errors = []
        network.train(dataset, 0.2, 100, 2,
                      on_epoch=[collect_errors(errors), ...])
    """

    def on_epoch(epoch, error):
        error_list.append(error)

    return on_epoch


def plot_errors(line_kwargs=None, every=1):
    """ Plot the learning curve (summed squared error per epoch) on the
    current matplotlib axis, redrawing every :code:`every` epochs.
    :code:`line_kwargs` is a dictionary of keyword arguments that, if
    provided, is supplied to the `plot` function
    """

    import matplotlib.pyplot as plt
    kwargs = line_kwargs or {'color': 'red'}
    epochs = []
    errors = []
    line = plt.plot(epochs, errors, **kwargs)[0]
    plt.xlabel('Epoch')
    plt.ylabel('Summed squared error')

    def on_epoch(epoch, error):
        epochs.append(epoch)
        errors.append(error)

        if epoch % every == 0:
            line.set_data(epochs, errors)
            axis = line.axes
            axis.relim()
            axis.autoscale_view()
            plt.pause(0.001)

    return on_epoch
