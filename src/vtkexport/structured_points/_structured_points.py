"""
Structured points, a regular lattice of scalar samples. See
<https://vtk.org/wp-content/uploads/2015/04/file-formats.pdf>.
"""
from .._common import header, short_number, tofile
from .._dataset import StructuredPoints
from .._files import open_file
from .._helpers import register_writer


def write(filename, dataset: StructuredPoints):
    nx, ny, nz = dataset.dimensions
    spacing = " ".join(short_number(s) for s in dataset.spacing)
    origin = " ".join(short_number(o) for o in dataset.origin)

    with open_file(filename, "wb") as f:
        f.write(header("BINARY", "STRUCTURED_POINTS"))
        f.write(f"DIMENSIONS {nx} {ny} {nz}\n".encode())
        f.write(f"SPACING {spacing}\n".encode())
        f.write(f"ORIGIN {origin}\n".encode())
        f.write(f"POINT_DATA {nx * ny * nz}\n".encode())
        f.write(f"SCALARS {dataset.title} float 1\n".encode())
        f.write(b"LOOKUP_TABLE default\n")
        tofile(f, dataset.data)


register_writer("STRUCTURED_POINTS", write)
