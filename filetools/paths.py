"""
filetools.paths

Path predicates working on the textual form of paths.
"""

from __future__ import annotations

import os
from pathlib import PurePath
from typing import Optional, Union

PathLike = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


def path_text(path: PathLike) -> Optional[str]:
    """
    Return ``path`` as valid text, or None when it cannot be represented as text.

    Undecodable ``bytes`` and ``str`` values carrying surrogate escapes (how
    Python surfaces undecodable file names) are both "not text".
    """
    raw = os.fspath(path)
    if isinstance(raw, bytes):
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError:
            return None
    try:
        raw.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return raw


def path_contains(path: PathLike, pattern: PathLike) -> bool:
    """
    Determine if ``path`` contains ``pattern`` as a plain substring.

    Both sides are converted to text first, so ``"a/path"`` and
    ``Path("a/path")`` behave the same. Anything that is not valid text
    yields False.
    """
    text = path_text(path)
    needle = path_text(pattern)
    if text is None or needle is None:
        return False
    return needle in text


def has_component(path: PathLike, component: PathLike) -> bool:
    """
    Return True if any normal component of ``path`` equals ``component``.

    This is a component-equality test, not an ancestor check: the root,
    ``.`` and ``..`` are skipped, and every other segment is compared,
    including the final file name. ``has_component("a/log/x.txt", "log")``
    and ``has_component("a/b/log", "log")`` are both True.
    """
    text = path_text(path)
    wanted = path_text(component)
    if text is None or wanted is None:
        return False

    pure = PurePath(text)
    for part in pure.parts:
        if part == pure.anchor or part == "..":
            continue
        if part == wanted:
            return True
    return False


# Name kept from the original API; see has_component for the semantics.
is_subdir = has_component


__all__ = ["path_text", "path_contains", "has_component", "is_subdir"]
