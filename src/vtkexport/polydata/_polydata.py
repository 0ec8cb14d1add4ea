"""
Polydata, points joined by lines, triangles or tetrahedra. Always written in ASCII.
"""
import numpy as np

from .._common import header, warn
from .._dataset import Polydata
from .._files import open_file
from .._helpers import register_writer


def _pad(points):
    # Coordinates are written three points to a line.
    num_extra = -len(points) % 3
    if num_extra == 0:
        return points
    warn(
        f"Polydata with {len(points)} points. "
        f"Appending {num_extra} zero point(s) to fill the last line."
    )
    return np.pad(points, ((0, num_extra), (0, 0)), "constant")


def _format(value, precision: int) -> str:
    if np.isnan(value):
        return "NaN"
    if np.isinf(value):
        return "Inf" if value > 0 else "-Inf"
    return f"{value:.{precision}f}"


def line_connectivity(num_points: int):
    """Segments k -> k+1 followed by the reversed segments k+1 -> k."""
    k = np.arange(num_points - 1)
    forward = np.column_stack([k, k + 1])
    return np.concatenate([forward, forward[:, ::-1]])


def write(filename, dataset: Polydata):
    points = _pad(dataset.points)

    if dataset.primitive == "LINES":
        cells = line_connectivity(dataset.num_points)
        section = "LINES"
    else:
        cells = dataset.cells - 1
        section = "POLYGONS"
    num_cells, n = cells.shape

    with open_file(filename, "wb") as f:
        f.write(header("ASCII", "POLYDATA"))
        f.write(f"POINTS {len(points)} float\n".encode())
        for row in points.reshape(-1, 9):
            line = "".join(_format(v, dataset.precision) + " " for v in row)
            f.write(f"{line}\n".encode())

        f.write(f"\n{section} {num_cells} {(n + 1) * num_cells}\n".encode())
        # prepend a column with the value n
        np.savetxt(
            f,
            np.column_stack([np.full(num_cells, n, dtype=cells.dtype), cells]),
            fmt="%d",
        )


register_writer("POLYDATA", write)
