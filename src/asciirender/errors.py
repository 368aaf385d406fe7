class RenderError(Exception):
    """Base class for failures that abort a render run."""


class MissingArgument(RenderError):
    def __init__(self, message: str = "Please provide path to the original image."):
        super().__init__(message)


class ScaleOutOfBound(RenderError, ValueError):
    def __init__(self, message: str = "The scaling factor should be between 0 and 1."):
        super().__init__(message)


class FontLoadError(RenderError):
    pass
