from importlib import metadata

try:
    __version__ = metadata.version("vtkexport")
except Exception:
    __version__ = "unknown"
