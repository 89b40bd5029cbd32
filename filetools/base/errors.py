"""
filetools.base.errors

Exception types raised by filetools.

 - PreconditionError: the root argument is unusable (missing, wrong type);
   raised before any traversal or creation I/O happens.
 - FtIOError: an operating-system failure in the middle of an operation,
   wrapping the original OSError with the operation being performed.
"""

from __future__ import annotations

import os
from typing import Optional, Union


class FiletoolsError(Exception):
    """Base class for every error filetools raises on purpose."""


class PreconditionError(FiletoolsError, ValueError):
    """Invalid root argument detected before any filesystem I/O."""

    def __init__(self, message: str, path: Optional[Union[str, os.PathLike]] = None):
        super().__init__(message)
        self.path = path


class FtIOError(FiletoolsError, OSError):
    """
    OSError raised while performing a filetools operation.

    Carries the operation description (e.g. "reading directory entries") and
    the path being processed. ``errno``/``strerror`` are copied from the cause
    so callers can keep treating it like any other OSError.
    """

    def __init__(
        self,
        operation: str,
        path: Optional[Union[str, os.PathLike]] = None,
        cause: Optional[OSError] = None,
    ):
        parts = [operation]
        if path is not None:
            parts.append(os.fspath(path) if not isinstance(path, bytes) else repr(path))
        if cause is not None:
            parts.append(str(cause))
        super().__init__(": ".join(parts))
        self.operation = operation
        self.path = path
        self.cause = cause
        if cause is not None:
            self.errno = cause.errno
            self.strerror = cause.strerror

    def __str__(self) -> str:
        return self.args[0] if self.args else self.operation


__all__ = ["FiletoolsError", "PreconditionError", "FtIOError"]
