"""
Custom exception hierarchy for file info.

Every failure surfaces to the caller of the function that hit it; nothing
here is retried.
"""


class FileInfoError(Exception):
    """Base exception for all file info errors."""
    pass


class InvalidPathError(FileInfoError, ValueError):
    """Raised when extraction is called without a usable path."""
    pass


class NotFoundError(FileInfoError):
    """Raised when the file to stat does not exist."""
    pass


class FileAccessError(FileInfoError):
    """Raised when stat fails for any reason other than a missing file."""
    pass


class FileUnavailableError(FileInfoError):
    """Raised when the file content cannot be re-read after extraction."""
    pass


class ImageFormatError(FileInfoError):
    """Raised when an image header cannot be parsed."""
    pass


class InvalidTimestampError(FileInfoError, ValueError):
    """Raised when a record timestamp is not valid ISO-8601."""
    pass
