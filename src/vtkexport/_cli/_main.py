import argparse
from sys import version_info

from ..__about__ import __version__
from .._common import error
from .._exceptions import WriteError
from . import _grid, _points, _polydata


def main(argv=None):
    parent_parser = argparse.ArgumentParser(
        description="Export numpy arrays to legacy VTK files.",
        formatter_class=argparse.RawTextHelpFormatter,
    )

    parent_parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=_get_version_text(),
        help="display version information",
    )

    subparsers = parent_parser.add_subparsers(
        title="subcommands", dest="command", required=True
    )

    parser = subparsers.add_parser(
        "points", help="Write structured points", aliases=["p"]
    )
    _points.add_args(parser)
    parser.set_defaults(func=_points.points)

    parser = subparsers.add_parser(
        "grid", help="Write a structured or unstructured grid", aliases=["g"]
    )
    _grid.add_args(parser)
    parser.set_defaults(func=_grid.grid)

    parser = subparsers.add_parser("polydata", help="Write polydata")
    _polydata.add_args(parser)
    parser.set_defaults(func=_polydata.polydata)

    args = parent_parser.parse_args(argv)

    try:
        return args.func(args)
    except (OSError, WriteError) as e:
        error(str(e))
        return 1


def _get_version_text():
    python_version = f"{version_info.major}.{version_info.minor}.{version_info.micro}"
    return f"vtkexport {__version__} [Python {python_version}]"
