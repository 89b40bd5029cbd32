"""Low-level shared utilities for filetools."""

from .errors import FiletoolsError, FtIOError, PreconditionError
from .logging import get_logger, setup_logging, FiletoolsLogger

__all__ = [
    "FiletoolsError",
    "FtIOError",
    "PreconditionError",
    "get_logger",
    "setup_logging",
    "FiletoolsLogger",
]
