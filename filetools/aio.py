"""
filetools.aio

``async`` versions of the `filetools.sync` helpers.

Each directory read and each directory creation runs in a worker thread via
``asyncio.to_thread`` and is awaited, so the event loop stays free while the
filesystem blocks. Nothing runs concurrently inside one call: subdirectories
are still visited one at a time, in the same order as the blocking surface.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Iterable, List, Optional

from filetools import sync
from filetools.base.errors import FtIOError
from filetools.base.logging import get_logger
from filetools.filters import FtFilter
from filetools.naming import generate_n_digit_name
from filetools.traversal import ItemKind, PathArg, Walker, check_root, read_entries, walk

log = get_logger(__name__)


async def _run_walk(walker: Walker) -> List[Path]:
    try:
        directory = next(walker)
        while True:
            entries = await asyncio.to_thread(read_entries, directory)
            directory = walker.send(entries)
    except StopIteration as done:
        return done.value


# ----------------------------------------------------------------------
# DIRECTORY CREATION
# ----------------------------------------------------------------------

async def ensure_directory(path: PathArg) -> Path:
    """Async `filetools.sync.ensure_directory`."""
    return await asyncio.to_thread(sync.ensure_directory, path)


async def create_multiple_directories(root: PathArg, names: Iterable[PathArg]) -> List[Path]:
    """Async `filetools.sync.create_multiple_directories`."""
    base = Path(root)
    created: List[Path] = []
    for name in names:
        created.append(await ensure_directory(base / name))
    return created


async def create_numeric_directories(root: PathArg, start: int, end: int, width: int) -> List[Path]:
    """Async `filetools.sync.create_numeric_directories` (without the progress bar)."""
    base = Path(root)
    created: List[Path] = []
    for number in range(start, end):
        target = base / generate_n_digit_name(number, width, "")
        try:
            created.append(await ensure_directory(target))
        except FtIOError as exc:
            raise FtIOError("creating numeric directories", target, exc.cause) from exc
    log.debug("Ensured %d numeric directories under %s", len(created), base)
    return created


# ----------------------------------------------------------------------
# LISTING
# ----------------------------------------------------------------------

async def list_items(path: PathArg, kind: ItemKind, ftfilter: Optional[FtFilter] = None) -> List[Path]:
    """Async `filetools.sync.list_items`."""
    root = check_root(path)
    log.debug("Listing %s under %s (filter=%r)", kind.value, root, ftfilter)
    items = await _run_walk(walk(root, kind, ftfilter))
    log.debug("Listed %d %s entries under %s", len(items), kind.value, root)
    return items


async def list_files(path: PathArg, ftfilter: Optional[FtFilter] = None) -> List[Path]:
    return await list_items(path, ItemKind.FILE, ftfilter)


async def list_nested_files(path: PathArg, ftfilter: Optional[FtFilter] = None) -> List[Path]:
    return await list_items(path, ItemKind.NESTED_FILE, ftfilter)


async def list_directories(path: PathArg, ftfilter: Optional[FtFilter] = None) -> List[Path]:
    return await list_items(path, ItemKind.DIRECTORY, ftfilter)


async def list_nested_directories(path: PathArg, ftfilter: Optional[FtFilter] = None) -> List[Path]:
    return await list_items(path, ItemKind.NESTED_DIRECTORY, ftfilter)


async def list_files_with_filter(path: PathArg, ftfilter: FtFilter) -> List[Path]:
    return await list_files(path, ftfilter)


async def list_nested_files_with_filter(path: PathArg, ftfilter: FtFilter) -> List[Path]:
    return await list_nested_files(path, ftfilter)


async def list_directories_with_filter(path: PathArg, ftfilter: FtFilter) -> List[Path]:
    return await list_directories(path, ftfilter)


async def list_nested_directories_with_filter(path: PathArg, ftfilter: FtFilter) -> List[Path]:
    return await list_nested_directories(path, ftfilter)


__all__ = sync.__all__
