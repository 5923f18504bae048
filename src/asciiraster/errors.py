class AsciiRasterError(Exception):
    """Base class for errors reported to the user with a plain message."""


class InputNotFoundError(AsciiRasterError):
    pass


class WidthError(AsciiRasterError, ValueError):
    pass


class ImageDecodeError(AsciiRasterError):
    pass


class OutputWriteError(AsciiRasterError):
    pass
