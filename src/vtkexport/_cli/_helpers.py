import pathlib

import numpy as np

from .._common import DEFAULT_EXPORT_FILENAME
from .._helpers import write
from .._viewer import launch_paraview


def load_array(filename):
    """Reads an array from a .npy file, or from a whitespace-delimited text file
    for any other extension.
    """
    path = pathlib.Path(filename)
    if path.suffix.lower() == ".npy":
        return np.load(path)
    return np.loadtxt(path, ndmin=1)


def add_view_arg(parser):
    parser.add_argument(
        "--view",
        action="store_true",
        help="open the written file in ParaView",
    )


def write_and_view(outfile, dataset, view: bool):
    filename = write(outfile, dataset)
    # writing to the default export file opens ParaView anyway
    if view and str(filename).lower() != DEFAULT_EXPORT_FILENAME:
        launch_paraview(str(filename))
    return 0
