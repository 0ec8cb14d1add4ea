from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from ._exceptions import (
    InsufficientArgumentsError,
    InvalidPrecisionError,
    ShapeMismatchError,
    UnsupportedDatasetKindError,
    WriteError,
)

# number of point indices per row of a polydata index matrix
polydata_cell_width = {
    "TRIANGLE": 3,
    "TETRAHEDRON": 4,
}
polydata_primitives = ["LINES", "TRIANGLE", "TETRAHEDRON"]


def _triple(values, name: str) -> tuple:
    values = tuple(float(v) for v in np.asarray(values, dtype=float).ravel())
    if len(values) != 3:
        raise ShapeMismatchError(
            f"{name} needs exactly 3 components, got {len(values)}."
        )
    return values


def _dimensions(shape: tuple, what: str) -> tuple:
    if len(shape) > 3:
        raise ShapeMismatchError(
            f"{what} must have at most 3 dimensions, got shape {shape}."
        )
    # missing trailing dimensions count as 1
    return tuple(shape) + (1,) * (3 - len(shape))


def validate_precision(precision) -> int:
    if isinstance(precision, (bool, np.bool_)):
        raise InvalidPrecisionError(f"Invalid precision spec {precision!r}.")
    try:
        value = float(precision)
    except (TypeError, ValueError):
        raise InvalidPrecisionError(f"Invalid precision spec {precision!r}.")
    if not value.is_integer() or value < 0:
        raise InvalidPrecisionError(
            f"Invalid precision spec {precision!r}. "
            "Precision must be a non-negative integer."
        )
    return int(value)


class Vectors:
    def __init__(self, title: str, u: ArrayLike, v: ArrayLike, w: ArrayLike):
        self.title = str(title)
        self.u = np.asarray(u)
        self.v = np.asarray(v)
        self.w = np.asarray(w)

    @property
    def components(self):
        return self.u, self.v, self.w

    def __repr__(self):
        return f"<vtkexport Vectors, title: {self.title}, size: {self.u.size}>"


class Scalars:
    def __init__(self, title: str, data: ArrayLike):
        self.title = str(title)
        self.data = np.asarray(data)

    @property
    def components(self):
        return (self.data,)

    def __repr__(self):
        return f"<vtkexport Scalars, title: {self.title}, size: {self.data.size}>"


class StructuredPoints:
    """Regular lattice of scalar samples.

    :param title: Name of the scalar field.
    :param data: 1D, 2D or 3D array of samples.
    :param spacing: Aspect ratio of a single voxel (default: 1, 1, 1).
    :param origin: Origin of the lattice (default: 0, 0, 0).
    """

    kind = "STRUCTURED_POINTS"

    def __init__(
        self,
        title: str,
        data: ArrayLike,
        spacing: ArrayLike = (1, 1, 1),
        origin: ArrayLike = (0, 0, 0),
    ):
        self.title = str(title)
        self.data = np.asarray(data)
        self.dimensions = _dimensions(self.data.shape, "Structured points data")
        self.spacing = _triple(spacing, "spacing")
        self.origin = _triple(origin, "origin")

    @property
    def num_points(self) -> int:
        return int(np.prod(self.dimensions))

    def __repr__(self):
        lines = [
            "<vtkexport structured points>",
            f"  Title: {self.title}",
            "  Dimensions: {} {} {}".format(*self.dimensions),
            "  Spacing: {} {} {}".format(*self.spacing),
            "  Origin: {} {} {}".format(*self.origin),
        ]
        return "\n".join(lines)


class _PointSet:
    kind = None

    def __init__(
        self,
        x: ArrayLike,
        y: ArrayLike,
        z: ArrayLike,
        vectors: list[Vectors] | None = None,
        scalars: list[Scalars] | None = None,
    ):
        self.x = np.asarray(x)
        self.y = np.asarray(y)
        self.z = np.asarray(z)
        if not (self.x.shape == self.y.shape == self.z.shape):
            raise ShapeMismatchError(
                "Input dimensions do not match: "
                f"x {self.x.shape}, y {self.y.shape}, z {self.z.shape}."
            )

        self.vectors = [] if vectors is None else list(vectors)
        self.scalars = [] if scalars is None else list(scalars)

        n = self.num_points
        for attribute in self.vectors + self.scalars:
            for values in attribute.components:
                if values.size != n:
                    raise ShapeMismatchError(
                        f"Attribute '{attribute.title}' has {values.size} values, "
                        f"but there are {n} points."
                    )

    @property
    def num_points(self) -> int:
        return self.x.size

    def __repr__(self):
        lines = [
            f"<vtkexport {self.kind.lower().replace('_', ' ')}>",
            f"  Number of points: {self.num_points}",
        ]
        if self.vectors:
            names = ", ".join(v.title for v in self.vectors)
            lines.append(f"  Vectors: {names}")
        if self.scalars:
            names = ", ".join(s.title for s in self.scalars)
            lines.append(f"  Scalars: {names}")
        return "\n".join(lines)


class StructuredGrid(_PointSet):
    kind = "STRUCTURED_GRID"

    def __init__(self, x, y, z, vectors=None, scalars=None):
        super().__init__(x, y, z, vectors, scalars)
        self.dimensions = _dimensions(self.x.shape, "Structured grid coordinates")


class UnstructuredGrid(_PointSet):
    kind = "UNSTRUCTURED_GRID"


class Polydata:
    """Points connected by lines, triangles or tetrahedra.

    :param primitive: One of "lines", "triangle", "tetrahedron".
    :param x, y, z: Point coordinates.
    :param cells: For triangles and tetrahedra, the m×3 (m×4) matrix of 1-based
        point indices. Lines connect the points in the given order.
    :param precision: Number of digits after the decimal point (default: 3).
    """

    kind = "POLYDATA"

    def __init__(
        self,
        primitive: str,
        x: ArrayLike,
        y: ArrayLike,
        z: ArrayLike,
        cells: ArrayLike | None = None,
        precision: int = 3,
    ):
        self.primitive = str(primitive).upper()
        if self.primitive not in polydata_primitives:
            raise UnsupportedDatasetKindError(
                f"Unknown polydata primitive '{primitive}'. "
                f"Pick one of {[p.lower() for p in polydata_primitives]}."
            )
        self.precision = validate_precision(precision)

        x = np.asarray(x).ravel(order="F")
        y = np.asarray(y).ravel(order="F")
        z = np.asarray(z).ravel(order="F")
        if not (x.shape == y.shape == z.shape):
            raise ShapeMismatchError(
                "Input dimensions do not match: "
                f"{x.size} x, {y.size} y and {z.size} z values."
            )
        if x.size == 0:
            raise ShapeMismatchError("Polydata needs at least one point.")
        self.points = np.column_stack([x, y, z])

        if self.primitive == "LINES":
            self.cells = None
        else:
            self.cells = self._validate_cells(cells)

    def _validate_cells(self, cells):
        width = polydata_cell_width[self.primitive]
        if cells is None:
            raise InsufficientArgumentsError(
                f"Polydata {self.primitive.lower()} needs an index matrix."
            )
        cells = np.asarray(cells)
        if cells.ndim == 1 and cells.size == width:
            cells = cells.reshape(1, width)
        if cells.ndim != 2 or cells.shape[1] != width:
            raise ShapeMismatchError(
                f"Unexpected index matrix shape {cells.shape} for "
                f"{self.primitive.lower()}. Expected shape [:, {width}]."
            )
        if not np.all(np.mod(cells, 1) == 0):
            raise WriteError("Index matrix must only contain integers.")
        return cells.astype(np.int64)

    @property
    def num_points(self) -> int:
        return len(self.points)

    def __repr__(self):
        lines = [
            "<vtkexport polydata>",
            f"  Primitive: {self.primitive.lower()}",
            f"  Number of points: {self.num_points}",
        ]
        if self.cells is not None:
            lines.append(f"  Number of cells: {len(self.cells)}")
        return "\n".join(lines)
