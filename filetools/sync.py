"""
filetools.sync

Blocking directory creation and listing helpers.

Every function has an ``async`` twin with the same name and behaviour in
`filetools.aio`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

from filetools.base.errors import FtIOError, PreconditionError
from filetools.base.logging import get_logger
from filetools.filters import FtFilter
from filetools.naming import generate_n_digit_name
from filetools.shared.utils import Progress
from filetools.traversal import ItemKind, PathArg, check_root, run_walk, walk

log = get_logger(__name__)


# ----------------------------------------------------------------------
# DIRECTORY CREATION
# ----------------------------------------------------------------------

def ensure_directory(path: PathArg) -> Path:
    """
    Create ``path`` (and any missing parents) if it does not exist yet.

    Existing directories are left alone, so calling this twice is safe.

    Raises:
        PreconditionError: If ``path`` exists but is not a directory.
        FtIOError: If the directory cannot be created.
    """
    target = Path(path)
    if target.exists():
        if not target.is_dir():
            raise PreconditionError(f"path exists and is not a directory: {target}", target)
        return target

    try:
        target.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        log.debug("Failed to create directory %s: %s", target, exc)
        raise FtIOError("unable to create directory", target, exc) from exc
    log.debug("Created directory: %s", target)
    return target


def create_multiple_directories(root: PathArg, names: Iterable[PathArg]) -> List[Path]:
    """
    Create ``root / name`` for every name, in order.

    Stops at the first failure; directories created before it are kept.
    """
    base = Path(root)
    return [ensure_directory(base / name) for name in names]


def create_numeric_directories(
    root: PathArg,
    start: int,
    end: int,
    width: int,
    *,
    progress: bool = False,
) -> List[Path]:
    """
    Create zero-padded numeric directories ``start`` .. ``end - 1`` under ``root``.

    ``create_numeric_directories("out", 0, 100, 4)`` creates ``out/0000`` up to
    ``out/0099``.

    Args:
        root: Parent directory (created if missing).
        start: First number (inclusive).
        end: Last number (exclusive).
        width: Minimum number of digits.
        progress: Show a progress bar while creating.
    """
    base = Path(root)
    created: List[Path] = []
    numbers = Progress(range(start, end), desc="Creating directories", disable=not progress)
    for number in numbers:
        target = base / generate_n_digit_name(number, width, "")
        try:
            created.append(ensure_directory(target))
        except FtIOError as exc:
            raise FtIOError("creating numeric directories", target, exc.cause) from exc
    log.debug("Ensured %d numeric directories under %s", len(created), base)
    return created


# ----------------------------------------------------------------------
# LISTING
# ----------------------------------------------------------------------

def list_items(path: PathArg, kind: ItemKind, ftfilter: Optional[FtFilter] = None) -> List[Path]:
    """
    List the entries of ``path`` selected by ``kind`` and ``ftfilter``.

    Raises:
        PreconditionError: If ``path`` does not exist or is not a directory.
        FtIOError: If any directory in the walk cannot be read. No partial
            results are returned.
    """
    root = check_root(path)
    log.debug("Listing %s under %s (filter=%r)", kind.value, root, ftfilter)
    items = run_walk(walk(root, kind, ftfilter))
    log.debug("Listed %d %s entries under %s", len(items), kind.value, root)
    return items


def list_files(path: PathArg, ftfilter: Optional[FtFilter] = None) -> List[Path]:
    """Files directly inside ``path`` (no subdirectories)."""
    return list_items(path, ItemKind.FILE, ftfilter)


def list_nested_files(path: PathArg, ftfilter: Optional[FtFilter] = None) -> List[Path]:
    """Files inside ``path`` and all of its subdirectories. Use responsibly."""
    return list_items(path, ItemKind.NESTED_FILE, ftfilter)


def list_directories(path: PathArg, ftfilter: Optional[FtFilter] = None) -> List[Path]:
    """Directories directly inside ``path``."""
    return list_items(path, ItemKind.DIRECTORY, ftfilter)


def list_nested_directories(path: PathArg, ftfilter: Optional[FtFilter] = None) -> List[Path]:
    """
    Directories inside ``path`` at every depth, each listed before its children.

    The filter decides which directories are returned; every directory is
    still descended into.
    """
    return list_items(path, ItemKind.NESTED_DIRECTORY, ftfilter)


def list_files_with_filter(path: PathArg, ftfilter: FtFilter) -> List[Path]:
    return list_files(path, ftfilter)


def list_nested_files_with_filter(path: PathArg, ftfilter: FtFilter) -> List[Path]:
    return list_nested_files(path, ftfilter)


def list_directories_with_filter(path: PathArg, ftfilter: FtFilter) -> List[Path]:
    return list_directories(path, ftfilter)


def list_nested_directories_with_filter(path: PathArg, ftfilter: FtFilter) -> List[Path]:
    return list_nested_directories(path, ftfilter)


__all__ = [
    "ensure_directory",
    "create_multiple_directories",
    "create_numeric_directories",
    "list_items",
    "list_files",
    "list_nested_files",
    "list_directories",
    "list_nested_directories",
    "list_files_with_filter",
    "list_nested_files_with_filter",
    "list_directories_with_filter",
    "list_nested_directories_with_filter",
]
