from ._grid import write

__all__ = ["write"]
