class I2AError(Exception):
    """Base class for errors that end a conversion."""


class ArgumentError(I2AError):
    """Malformed or missing command line input."""


class DecodeError(I2AError):
    """The image file could not be read or decoded."""

    def __init__(self, path, reason: str = "couldn't load image"):
        self.path = path
        super().__init__(f"{reason} '{path}'")


class RenderInitError(I2AError):
    """The ASCII renderer could not be initialised for the requested size."""
