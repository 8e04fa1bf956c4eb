# flake8: noqa

from .csv_io import (
    export_weights,
    import_weights,
    load_dataset,
    save_dataset,
)
