def accuracy(network, dataset):
    """ Compute the fraction of rows in `dataset` whose trailing label
    equals the class predicted by `network`
    """
    if len(dataset) == 0:
        msg = "Can't compute the accuracy of an empty dataset"
        raise ValueError(msg)

    correct = sum(
        network.predict(row) == int(row[-1])
        for row in dataset)

    return correct / float(len(dataset))
