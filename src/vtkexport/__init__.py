from . import _cli, grid, polydata, structured_points
from .__about__ import __version__
from ._common import DEFAULT_EXPORT_FILENAME
from ._dataset import (
    Polydata,
    Scalars,
    StructuredGrid,
    StructuredPoints,
    UnstructuredGrid,
    Vectors,
)
from ._exceptions import (
    InsufficientArgumentsError,
    InvalidPrecisionError,
    ShapeMismatchError,
    UnsupportedDatasetKindError,
    WriteError,
)
from ._helpers import deregister_writer, register_writer, vtkwrite, write
from ._viewer import launch_paraview

__all__ = [
    "_cli",
    "grid",
    "polydata",
    "structured_points",
    "write",
    "vtkwrite",
    "register_writer",
    "deregister_writer",
    "launch_paraview",
    "StructuredPoints",
    "StructuredGrid",
    "UnstructuredGrid",
    "Polydata",
    "Vectors",
    "Scalars",
    "WriteError",
    "InsufficientArgumentsError",
    "ShapeMismatchError",
    "InvalidPrecisionError",
    "UnsupportedDatasetKindError",
    "DEFAULT_EXPORT_FILENAME",
    "__version__",
]
