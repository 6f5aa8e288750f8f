"""Typed failures raised by the virtual file system."""
from typing import Optional


class VFSError(Exception):
    """Base class for store failures.

    Every subclass carries a ``kind`` tag so a host can branch on the cause
    without importing each class.
    """

    kind = "VFSError"

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class PathNotFoundError(VFSError):
    kind = "NotFound"


class NotAFileError(VFSError):
    kind = "NotAFile"


class NotADirError(VFSError):
    kind = "NotADirectory"


class AlreadyExistsError(VFSError):
    kind = "AlreadyExists"


class RootProtectedError(VFSError):
    kind = "RootProtected"


class InvalidArgumentError(VFSError):
    kind = "InvalidArgument"


class InvalidCommandError(VFSError):
    kind = "InvalidCommand"


class FileTooLargeError(VFSError):
    kind = "FileTooLarge"


class InvalidSnapshotError(VFSError):
    kind = "InvalidSnapshot"
