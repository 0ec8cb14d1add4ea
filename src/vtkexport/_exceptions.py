class WriteError(Exception):
    pass


class InsufficientArgumentsError(WriteError):
    pass


class ShapeMismatchError(WriteError):
    pass


class InvalidPrecisionError(WriteError):
    pass


class UnsupportedDatasetKindError(WriteError):
    pass
