from .._dataset import Polydata, polydata_primitives
from ._helpers import add_view_arg, load_array, write_and_view


def add_args(parser):
    parser.add_argument(
        "primitive",
        type=str.lower,
        choices=[p.lower() for p in polydata_primitives],
        help="how the points are connected",
    )
    parser.add_argument("x", type=str, help="x coordinates (.npy or text)")
    parser.add_argument("y", type=str, help="y coordinates (.npy or text)")
    parser.add_argument("z", type=str, help="z coordinates (.npy or text)")
    parser.add_argument("outfile", type=str, help="VTK file to be written to")
    parser.add_argument(
        "--cells",
        "-c",
        type=str,
        default=None,
        help="1-based index matrix for triangles and tetrahedra (.npy or text)",
    )
    parser.add_argument(
        "--precision",
        "-p",
        type=int,
        default=3,
        help="digits after the decimal point (default: 3)",
    )
    add_view_arg(parser)


def polydata(args):
    x, y, z = (load_array(filename) for filename in [args.x, args.y, args.z])
    cells = None if args.cells is None else load_array(args.cells)
    dataset = Polydata(
        args.primitive, x, y, z, cells=cells, precision=args.precision
    )
    return write_and_view(args.outfile, dataset, args.view)
