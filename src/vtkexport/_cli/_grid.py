from .._dataset import Scalars, StructuredGrid, UnstructuredGrid, Vectors
from ._helpers import add_view_arg, load_array, write_and_view


def add_args(parser):
    parser.add_argument("x", type=str, help="x coordinates (.npy or text)")
    parser.add_argument("y", type=str, help="y coordinates (.npy or text)")
    parser.add_argument("z", type=str, help="z coordinates (.npy or text)")
    parser.add_argument("outfile", type=str, help="VTK file to be written to")
    parser.add_argument(
        "--unstructured",
        "-u",
        action="store_true",
        help="write an unstructured grid (default: structured)",
    )
    parser.add_argument(
        "--vectors",
        nargs=4,
        action="append",
        default=[],
        metavar=("NAME", "U", "V", "W"),
        help="vector point data, may be repeated",
    )
    parser.add_argument(
        "--scalars",
        nargs=2,
        action="append",
        default=[],
        metavar=("NAME", "R"),
        help="scalar point data, may be repeated",
    )
    add_view_arg(parser)


def grid(args):
    x, y, z = (load_array(filename) for filename in [args.x, args.y, args.z])
    vectors = [
        Vectors(name, *(load_array(filename) for filename in files))
        for name, *files in args.vectors
    ]
    scalars = [Scalars(name, load_array(filename)) for name, filename in args.scalars]

    cls = UnstructuredGrid if args.unstructured else StructuredGrid
    dataset = cls(x, y, z, vectors=vectors, scalars=scalars)
    return write_and_view(args.outfile, dataset, args.view)
