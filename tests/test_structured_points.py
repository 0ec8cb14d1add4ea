import gzip
import io

import numpy as np
import pytest

import helpers
import vtkexport

header = [
    "# vtk DataFile Version 2.0",
    "VTK from Matlab",
    "BINARY",
    "DATASET STRUCTURED_POINTS",
]


@pytest.mark.parametrize("shape", [(2, 3, 4), (5, 1, 2), (1, 1, 1)])
def test_dimensions_and_payload(shape, tmp_path):
    m = np.random.default_rng(0).random(shape)
    filename = tmp_path / "points.vtk"
    vtkexport.write(filename, vtkexport.StructuredPoints("T", m))

    lines, payload = helpers.split_lines(filename.read_bytes(), 10)
    n = int(np.prod(shape))
    assert lines == header + [
        "DIMENSIONS {} {} {}".format(*shape),
        "SPACING 1 1 1",
        "ORIGIN 0 0 0",
        f"POINT_DATA {n}",
        "SCALARS T float 1",
        "LOOKUP_TABLE default",
    ]
    assert len(payload) == 4 * n
    values = helpers.decode_floats(payload)
    # column-major order
    assert np.allclose(values, m.astype(np.float32).ravel(order="F"), atol=0.0)


@pytest.mark.parametrize(
    "data, dimensions",
    [
        (np.arange(5.0), "DIMENSIONS 5 1 1"),
        (np.ones((3, 2)), "DIMENSIONS 3 2 1"),
        (7.0, "DIMENSIONS 1 1 1"),
    ],
)
def test_missing_dimensions(data, dimensions, tmp_path):
    filename = tmp_path / "points.vtk"
    vtkexport.write(filename, vtkexport.StructuredPoints("T", data))
    lines, _ = helpers.split_lines(filename.read_bytes(), 10)
    assert lines[4] == dimensions


def test_spacing_origin(tmp_path):
    filename = tmp_path / "points.vtk"
    dataset = vtkexport.StructuredPoints(
        "density",
        np.ones((2, 2, 2)),
        spacing=(0.5, 1, 2.25),
        origin=(-1, 0, 123.456789),
    )
    vtkexport.write(filename, dataset)
    lines, _ = helpers.split_lines(filename.read_bytes(), 10)
    assert lines[5] == "SPACING 0.5 1 2.25"
    assert lines[6] == "ORIGIN -1 0 123.4568"
    assert lines[8] == "SCALARS density float 1"


def test_reproducible(tmp_path):
    m = np.linspace(0.0, 1.0, 24).reshape(2, 3, 4)
    dataset = vtkexport.StructuredPoints("T", m, spacing=(1, 2, 3))
    vtkexport.write(tmp_path / "a.vtk", dataset)
    vtkexport.write(tmp_path / "b.vtk", dataset)
    assert (tmp_path / "a.vtk").read_bytes() == (tmp_path / "b.vtk").read_bytes()


def test_buffer(tmp_path):
    m = np.arange(12.0).reshape(3, 4)
    dataset = vtkexport.StructuredPoints("T", m)

    buf = io.BytesIO()
    assert vtkexport.write(buf, dataset) is buf
    vtkexport.write(tmp_path / "points.vtk", dataset)
    assert buf.getvalue() == (tmp_path / "points.vtk").read_bytes()


def test_gzip_buffer(tmp_path):
    dataset = vtkexport.StructuredPoints("T", np.arange(4.0))
    vtkexport.write(tmp_path / "points.vtk", dataset)

    with gzip.open(tmp_path / "points.vtk.gz", "wb") as f:
        vtkexport.write(f, dataset)
    with gzip.open(tmp_path / "points.vtk.gz", "rb") as f:
        content = f.read()
    assert content == (tmp_path / "points.vtk").read_bytes()


def test_buffered_writer():
    x, y, z = helpers.x_grid, helpers.y_grid, helpers.z_grid
    dataset = vtkexport.StructuredGrid(x, y, z)

    raw = io.BytesIO()
    buffered = io.BufferedWriter(raw)
    vtkexport.write(buffered, dataset)
    buffered.flush()

    ref = io.BytesIO()
    vtkexport.write(ref, dataset)
    assert raw.getvalue() == ref.getvalue()


def test_too_many_dimensions():
    with pytest.raises(vtkexport.ShapeMismatchError):
        vtkexport.StructuredPoints("T", np.ones((2, 2, 2, 2)))


def test_bad_spacing():
    with pytest.raises(vtkexport.ShapeMismatchError):
        vtkexport.StructuredPoints("T", np.ones(3), spacing=(1, 1))
