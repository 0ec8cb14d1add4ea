import math

import numpy as np
from rich.console import Console

# Writing to this file name opens the result in ParaView afterwards.
DEFAULT_EXPORT_FILENAME = "matlab_export.vtk"
EXECUTE_SENTINEL = "execute"


def header(mode: str, dataset_type: str) -> bytes:
    return (
        "# vtk DataFile Version 2.0\n"
        "VTK from Matlab\n"
        f"{mode}\n"
        f"DATASET {dataset_type}\n"
    ).encode()


def tofile(f, *arrays):
    """Writes the arrays interleaved, one value of each per point, as big endian
    float32 without separators. Arrays are flattened in column-major order.
    """
    data = np.column_stack([np.asarray(a).ravel(order="F") for a in arrays])
    # Binary data must be big endian, see
    # <https://vtk.org/Wiki/VTK/Writing_VTK_files_using_python#.22legacy.22>.
    # only f.write, wrapping streams (gzip, buffered writers) must see the bytes
    f.write(data.astype(np.dtype(">f4")).tobytes())


def short_number(value) -> str:
    """Compact decimal rendering for header values: integers as they are, other
    values with at least five significant digits.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Inf" if value > 0 else "-Inf"
    if value.is_integer():
        return str(int(value))
    digits = math.floor(math.log10(abs(value)))
    digits = min(max(digits + 5, 5), 16)
    return f"{value:.{digits}g}"


def warn(string, highlight: bool = True) -> None:
    Console(stderr=True).print(
        f"[yellow][bold]Warning:[/bold] {string}[/yellow]", highlight=highlight
    )


def error(string, highlight: bool = True) -> None:
    Console(stderr=True).print(
        f"[red][bold]Error:[/bold] {string}[/red]", highlight=highlight
    )
