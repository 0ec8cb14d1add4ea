"""
Structured and unstructured grids given by point coordinates, with any number of
vector and scalar point attributes.
"""
from __future__ import annotations

from .._common import header, tofile
from .._dataset import StructuredGrid, UnstructuredGrid
from .._files import open_file
from .._helpers import register_writer


def write(filename, dataset: StructuredGrid | UnstructuredGrid):
    num_points = dataset.num_points

    with open_file(filename, "wb") as f:
        f.write(header("BINARY", dataset.kind))
        if isinstance(dataset, StructuredGrid):
            f.write("DIMENSIONS {} {} {}\n".format(*dataset.dimensions).encode())

        f.write(f"POINTS {num_points} float\n".encode())
        tofile(f, dataset.x, dataset.y, dataset.z)

        # The attribute headers start with the line break, so the last binary block
        # isn't followed by one.
        f.write(f"\nPOINT_DATA {num_points}".encode())
        for vectors in dataset.vectors:
            f.write(f"\nVECTORS {vectors.title} float\n".encode())
            tofile(f, *vectors.components)
        for scalars in dataset.scalars:
            f.write(f"\nSCALARS {scalars.title} float\n".encode())
            f.write(b"LOOKUP_TABLE default\n")
            tofile(f, scalars.data)


register_writer("STRUCTURED_GRID", write)
register_writer("UNSTRUCTURED_GRID", write)
