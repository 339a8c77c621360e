"""Error hierarchy for the ffmpeg wrapper."""


class FfpbError(Exception):
    """Base error for all ffpb errors."""

    def __init__(self, message: str, component: str = "", details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.component = component
        self.details = details or {}


class LaunchError(FfpbError):
    """The child process could not be started."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, component="launcher", details=details)


class StreamCaptureError(FfpbError):
    """The child's diagnostic stream is not available."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, component="launcher", details=details)


class ReadError(FfpbError):
    """I/O failure while reading the diagnostic stream."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, component="reader", details=details)


class MalformedMetricError(FfpbError):
    """A recognized metric carried a value that cannot be trusted."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, component="classifier", details=details)


class UnexpectedEndOfStreamError(FfpbError):
    """The child closed its stream before the expected marker."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, component="interpreter", details=details)
