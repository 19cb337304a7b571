"""Custom Exceptions for the assexport package."""

class AssExportError(Exception):
    """Base class for exceptions in this module."""
    pass

class ValidationError(AssExportError):
    """Exception raised when a subtitle, style or event breaks a format constraint."""
    pass

class WriteError(AssExportError):
    """Exception raised when the output sink rejects a write or flush."""

    def __init__(self, message: str, bytes_written: int = 0):
        super().__init__(message)
        # A failed flush never reports a partial count.
        self.bytes_written = bytes_written

class ConfigurationError(AssExportError):
    """Exception raised for errors in loading a subtitle document."""
    pass

class FileSystemError(AssExportError):
    """Exception raised for file system related errors (permissions, not found etc)."""
    pass
