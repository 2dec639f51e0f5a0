class NBodyError(Exception):
    pass


class InvalidArgument(NBodyError, ValueError):
    """Bad caller input, rejected before any simulation state is built."""
