from .._dataset import StructuredPoints
from ._helpers import add_view_arg, load_array, write_and_view


def add_args(parser):
    parser.add_argument("infile", type=str, help="array file (.npy or text)")
    parser.add_argument("outfile", type=str, help="VTK file to be written to")
    parser.add_argument(
        "--title", "-t", type=str, default="data", help="scalar field name"
    )
    parser.add_argument(
        "--spacing",
        "-s",
        type=float,
        nargs=3,
        metavar=("SX", "SY", "SZ"),
        default=(1, 1, 1),
        help="voxel spacing (default: 1 1 1)",
    )
    parser.add_argument(
        "--origin",
        "-o",
        type=float,
        nargs=3,
        metavar=("OX", "OY", "OZ"),
        default=(0, 0, 0),
        help="lattice origin (default: 0 0 0)",
    )
    add_view_arg(parser)


def points(args):
    data = load_array(args.infile)
    dataset = StructuredPoints(
        args.title, data, spacing=args.spacing, origin=args.origin
    )
    return write_and_view(args.outfile, dataset, args.view)
