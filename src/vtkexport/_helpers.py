from __future__ import annotations

from typing import Callable

from ._common import DEFAULT_EXPORT_FILENAME, EXECUTE_SENTINEL
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
    UnsupportedDatasetKindError,
    WriteError,
)
from ._files import is_buffer
from ._viewer import launch_paraview

writer_map = {}


def register_writer(dataset_kind: str, writer) -> None:
    writer_map[dataset_kind.upper()] = writer


def deregister_writer(dataset_kind: str) -> None:
    writer_map.pop(dataset_kind.upper(), None)


def write(filename, dataset, viewer: Callable | None = None):
    """Writes a dataset to a legacy VTK file.

    :param filename: File or writable binary buffer to write to. The name
        "execute" stands for "matlab_export.vtk".
    :param dataset: One of StructuredPoints, StructuredGrid, UnstructuredGrid,
        Polydata.
    :param viewer: Called with the file name after writing to "matlab_export.vtk"
        (default: open it in ParaView).

    :returns: The file name or buffer written to.
    """
    is_path = not is_buffer(filename, "w")
    if is_path and str(filename).lower() == EXECUTE_SENTINEL:
        filename = DEFAULT_EXPORT_FILENAME

    kind = getattr(dataset, "kind", None)
    try:
        writer = writer_map[kind]
    except KeyError:
        kinds = sorted(k.lower() for k in writer_map)
        raise UnsupportedDatasetKindError(
            f"Unknown dataset {dataset!r}. Pick one of {kinds}"
        )

    writer(filename, dataset)

    if is_path and str(filename).lower() == DEFAULT_EXPORT_FILENAME:
        (launch_paraview if viewer is None else viewer)(str(filename))

    return filename


def vtkwrite(filename, dataset_type: str, *args, viewer: Callable | None = None):
    """Writes VTK files from a keyword-annotated argument list, e.g.,

        vtkwrite("out.vtk", "structured_points", "T", m, "spacing", 1, 1, 2)
        vtkwrite("out.vtk", "structured_grid", x, y, z, "vectors", "v", u, v, w)
        vtkwrite("out.vtk", "polydata", "triangle", x, y, z, tri, "precision", 5)

    Dataset types and keywords are case-insensitive.
    """
    dataset = parse_args(dataset_type, args)
    return write(filename, dataset, viewer=viewer)


def parse_args(dataset_type: str, args):
    kind = str(dataset_type).upper()
    if kind == "STRUCTURED_POINTS":
        return _parse_structured_points(args)
    if kind in ["STRUCTURED_GRID", "UNSTRUCTURED_GRID"]:
        return _parse_grid(kind, args)
    if kind == "POLYDATA":
        return _parse_polydata(args)
    raise UnsupportedDatasetKindError(
        f"Unknown dataset type '{dataset_type}'. Pick one of "
        "['structured_points', 'structured_grid', 'unstructured_grid', 'polydata']"
    )


def _is_keyword(arg, keyword: str) -> bool:
    return isinstance(arg, str) and arg.lower() == keyword


def _take(args, start: int, count: int, keyword: str):
    values = args[start : start + count]
    if len(values) < count:
        raise InsufficientArgumentsError(
            f"'{keyword}' needs {count} values, got {len(values)}."
        )
    return values


def _require(args, count: int, what: str):
    if len(args) < count:
        raise InsufficientArgumentsError(
            f"Not enough input arguments for {what}: "
            f"expected at least {count}, got {len(args)}."
        )


def _unexpected(arg):
    return WriteError(f"Unexpected argument {arg!r}.")


def _parse_structured_points(args):
    _require(args, 2, "structured points (title, data)")
    title, data = args[:2]
    options = {}
    k = 2
    while k < len(args):
        arg = args[k]
        if _is_keyword(arg, "spacing") or _is_keyword(arg, "origin"):
            options[arg.lower()] = _take(args, k + 1, 3, arg)
            k += 4
        else:
            raise _unexpected(arg)
    return StructuredPoints(title, data, **options)


def _parse_grid(kind: str, args):
    _require(args, 3, f"{kind.lower()} (x, y, z)")
    x, y, z = args[:3]
    vectors = []
    scalars = []
    k = 3
    while k < len(args):
        arg = args[k]
        if _is_keyword(arg, "vectors"):
            title, u, v, w = _take(args, k + 1, 4, arg)
            vectors.append(Vectors(title, u, v, w))
            k += 5
        elif _is_keyword(arg, "scalars"):
            title, r = _take(args, k + 1, 2, arg)
            scalars.append(Scalars(title, r))
            k += 3
        else:
            raise _unexpected(arg)

    cls = StructuredGrid if kind == "STRUCTURED_GRID" else UnstructuredGrid
    return cls(x, y, z, vectors=vectors, scalars=scalars)


def _parse_polydata(args):
    _require(args, 4, "polydata (primitive, x, y, z)")
    primitive, x, y, z = args[:4]
    cells = None
    options = {}
    k = 4
    # lines take an index matrix too, but ignore it
    if k < len(args) and not _is_keyword(args[k], "precision"):
        cells = args[k]
        k += 1
    while k < len(args):
        arg = args[k]
        if _is_keyword(arg, "precision"):
            (options["precision"],) = _take(args, k + 1, 1, arg)
            k += 2
        else:
            raise _unexpected(arg)
    return Polydata(primitive, x, y, z, cells=cells, **options)
