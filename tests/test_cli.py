import numpy as np
import pytest

import helpers
import vtkexport


def test_points(tmp_path):
    m = np.arange(24.0).reshape(2, 3, 4)
    infile = tmp_path / "m.npy"
    outfile = tmp_path / "out.vtk"
    np.save(infile, m)

    ret = vtkexport._cli.main(
        [
            "points",
            str(infile),
            str(outfile),
            "--title",
            "T",
            "--spacing",
            "1",
            "2",
            "3",
        ]
    )
    assert ret == 0

    lines, payload = helpers.split_lines(outfile.read_bytes(), 10)
    assert lines[4] == "DIMENSIONS 2 3 4"
    assert lines[5] == "SPACING 1 2 3"
    assert lines[8] == "SCALARS T float 1"
    assert np.array_equal(helpers.decode_floats(payload), m.ravel(order="F"))


def test_grid(tmp_path):
    names = {}
    for name, values in [
        ("x", helpers.x_grid),
        ("y", helpers.y_grid),
        ("z", helpers.z_grid),
    ]:
        names[name] = str(tmp_path / f"{name}.npy")
        np.save(names[name], values)

    outfile = tmp_path / "out.vtk"
    ret = vtkexport._cli.main(
        [
            "grid",
            names["x"],
            names["y"],
            names["z"],
            str(outfile),
            "--unstructured",
            "--scalars",
            "s",
            names["x"],
            "--vectors",
            "v",
            names["x"],
            names["y"],
            names["z"],
        ]
    )
    assert ret == 0

    x, y, z = helpers.x_grid, helpers.y_grid, helpers.z_grid
    ref_file = tmp_path / "ref.vtk"
    vtkexport.write(
        ref_file,
        vtkexport.UnstructuredGrid(
            x,
            y,
            z,
            vectors=[vtkexport.Vectors("v", x, y, z)],
            scalars=[vtkexport.Scalars("s", x)],
        ),
    )
    assert outfile.read_bytes() == ref_file.read_bytes()


def test_polydata(tmp_path):
    coordinates = tmp_path / "xyz.txt"
    np.savetxt(coordinates, helpers.tri_x)
    cells = tmp_path / "tri.txt"
    np.savetxt(cells, [[1, 2, 3]], fmt="%d")

    outfile = tmp_path / "out.vtk"
    ret = vtkexport._cli.main(
        [
            "polydata",
            "Triangle",
            str(coordinates),
            str(coordinates),
            str(coordinates),
            str(outfile),
            "--cells",
            str(cells),
            "--precision",
            "2",
        ]
    )
    assert ret == 0
    content = outfile.read_text()
    assert "POINTS 3 float\n0.00 0.00 0.00 1.00 1.00 1.00 0.00 0.00 0.00 \n" in content
    assert content.endswith("\nPOLYGONS 1 4\n3 0 1 2\n")


def test_error(tmp_path):
    for name, shape in [("x", (2, 2)), ("y", (2, 2)), ("z", (2, 3))]:
        np.save(tmp_path / f"{name}.npy", np.zeros(shape))
    outfile = tmp_path / "out.vtk"
    ret = vtkexport._cli.main(
        [
            "grid",
            str(tmp_path / "x.npy"),
            str(tmp_path / "y.npy"),
            str(tmp_path / "z.npy"),
            str(outfile),
        ]
    )
    assert ret == 1
    assert not outfile.exists()


def test_version(capsys):
    with pytest.raises(SystemExit):
        vtkexport._cli.main(["--version"])
    assert "vtkexport" in capsys.readouterr().out
