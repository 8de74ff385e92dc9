"""Exception hierarchy for ghfeed."""


class GhFeedError(Exception):
    """Base class for all errors raised by ghfeed."""


class FetchError(GhFeedError):
    """Raised when a feed cannot be downloaded or parsed."""

    def __init__(self, message: str, url: str):
        super().__init__(message)
        self.url = url


class FileError(GhFeedError):
    """Raised when an output file cannot be created or truncated."""

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


class WriteError(FileError):
    """Raised when writing to an already open output file fails."""
