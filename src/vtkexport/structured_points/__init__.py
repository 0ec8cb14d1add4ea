from ._structured_points import write

__all__ = ["write"]
