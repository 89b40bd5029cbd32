"""
filetools.traversal

Directory walking shared by the blocking (`filetools.sync`) and asyncio
(`filetools.aio`) surfaces.

The walk itself is a generator that never touches the filesystem: it yields
each directory it needs read and is sent back that directory's entries. The
sync surface answers with ``read_entries`` directly, the async surface with
``asyncio.to_thread(read_entries, ...)``, so both produce the same results in
the same order.
"""

from __future__ import annotations

import enum
import os
from pathlib import Path
from typing import Generator, Iterator, List, NamedTuple, Optional, Tuple, Union

from filetools.base.errors import FtIOError, PreconditionError
from filetools.base.logging import get_logger
from filetools.filters import FtFilter, matches_filter

log = get_logger(__name__)

PathArg = Union[str, "os.PathLike[str]"]


class ItemKind(enum.Enum):
    """Which entries a listing collects, and whether it descends."""

    FILE = "file"
    NESTED_FILE = "nested_file"
    DIRECTORY = "directory"
    NESTED_DIRECTORY = "nested_directory"

    @property
    def recursive(self) -> bool:
        return self in (ItemKind.NESTED_FILE, ItemKind.NESTED_DIRECTORY)


class Entry(NamedTuple):
    path: Path
    is_dir: bool
    is_file: bool


# (directory to read) out, (its entries) in, (collected paths) returned
Walker = Generator[Path, List[Entry], List[Path]]


def check_root(path: PathArg) -> Path:
    """
    Validate a listing root before any traversal I/O.

    Raises:
        PreconditionError: If the path does not exist or is not a directory.
    """
    root = Path(path)
    if not root.exists():
        log.debug("Listing root missing: %s", root)
        raise PreconditionError(f"path does not exist: {root}", root)
    if not root.is_dir():
        log.debug("Listing root is not a directory: %s", root)
        raise PreconditionError(f"path should be a directory, not a file: {root}", root)
    return root


def read_entries(directory: Path) -> List[Entry]:
    """Read one directory level, classifying each entry (symlinks followed)."""
    try:
        with os.scandir(directory) as it:
            return [
                Entry(directory / entry.name, entry.is_dir(), entry.is_file())
                for entry in it
            ]
    except OSError as exc:
        raise FtIOError("reading directory entries", directory, exc) from exc


def classify_entry(entry: Entry, kind: ItemKind, ftfilter: Optional[FtFilter]) -> Tuple[bool, bool]:
    """
    Decide what to do with one entry: ``(collect, descend)``.

    Nested listings always descend into directories; the filter only decides
    membership of the result, it never prunes the walk.
    """
    if kind is ItemKind.FILE:
        return entry.is_file and matches_filter(entry.path, ftfilter), False
    if kind is ItemKind.NESTED_FILE:
        if entry.is_file:
            return matches_filter(entry.path, ftfilter), False
        return False, entry.is_dir
    if kind is ItemKind.DIRECTORY:
        return entry.is_dir and matches_filter(entry.path, ftfilter), False
    if kind is ItemKind.NESTED_DIRECTORY:
        if entry.is_dir:
            return matches_filter(entry.path, ftfilter), True
        return False, False
    raise ValueError(f"Unknown item kind: {kind!r}")


def walk(root: Path, kind: ItemKind, ftfilter: Optional[FtFilter] = None) -> Walker:
    """
    Depth-first, pre-order walk in native directory order.

    An explicit stack of entry iterators replaces recursion, so a directory's
    children are visited before its next sibling.
    """
    items: List[Path] = []
    stack: List[Iterator[Entry]] = [iter((yield root))]
    while stack:
        entry = next(stack[-1], None)
        if entry is None:
            stack.pop()
            continue
        collect, descend = classify_entry(entry, kind, ftfilter)
        if collect:
            items.append(entry.path)
        if descend:
            stack.append(iter((yield entry.path)))
    return items


def run_walk(walker: Walker) -> List[Path]:
    """Drive a walker with blocking directory reads."""
    try:
        directory = next(walker)
        while True:
            directory = walker.send(read_entries(directory))
    except StopIteration as done:
        return done.value


__all__ = [
    "ItemKind",
    "Entry",
    "check_root",
    "read_entries",
    "classify_entry",
    "walk",
    "run_walk",
]
