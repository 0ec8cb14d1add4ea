from ._polydata import write

__all__ = ["write"]
