from ._grid import grid
from ._main import main
from ._points import points
from ._polydata import polydata

__all__ = ["grid", "main", "points", "polydata"]
