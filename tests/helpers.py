import numpy as np

# Distinct values per coordinate so that misplaced values are easy to spot.
x_grid = np.arange(8, dtype=float).reshape(2, 2, 2)
y_grid = x_grid + 100.0
z_grid = x_grid + 200.0

# points on a line, not a multiple of three
line_x = [0.0, 1.0, 2.0, 3.0]
line_y = [0.0, 0.5, 1.0, 1.5]
line_z = [0.0, 0.0, 0.0, -1.0]

tri_x = [0.0, 1.0, 0.0]
tri_y = [0.0, 0.0, 1.0]
tri_z = [0.0, 0.0, 0.0]

tet_x = [0.0, 1.0, 0.0, 0.0, 1.0]
tet_y = [0.0, 0.0, 1.0, 0.0, 1.0]
tet_z = [0.0, 0.0, 0.0, 1.0, 1.0]
tet_cells = [[1, 2, 3, 4], [2, 3, 4, 5]]


def split_lines(content: bytes, num_lines: int):
    """Splits off the first `num_lines` text lines and returns them together with
    the remaining (possibly binary) content.
    """
    parts = content.split(b"\n", num_lines)
    assert len(parts) == num_lines + 1
    return [line.decode() for line in parts[:-1]], parts[-1]


def big_endian(*arrays):
    """Expected binary payload for the arrays, interleaved point by point."""
    data = np.column_stack([np.asarray(a).ravel(order="F") for a in arrays])
    return data.astype(">f4").tobytes()


def decode_floats(payload: bytes):
    return np.frombuffer(payload, dtype=">f4")
