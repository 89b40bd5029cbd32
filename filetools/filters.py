"""
filetools.filters

Filter types accepted by the listing functions.

    Raw(".log")                    entries whose path contains ".log"
    PathSegment("sub/path/match")  entries whose path contains that segment
    Pattern(r".*\\.rs$")            entries whose path matches the regex

A filter is built once by the caller and only read during a listing.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Optional, Union

from filetools.paths import PathLike, path_contains, path_text


@dataclass(frozen=True)
class Raw:
    """Match paths containing ``text``."""

    text: str


@dataclass(frozen=True)
class PathSegment:
    """Match paths containing ``path`` (a str or path-like value)."""

    path: Union[str, "os.PathLike[str]"]


@dataclass(frozen=True)
class Pattern:
    """Match paths for which ``regex.search`` succeeds; strings are compiled here."""

    regex: "re.Pattern[str]"

    def __post_init__(self) -> None:
        if isinstance(self.regex, str):
            object.__setattr__(self, "regex", re.compile(self.regex))
        elif not isinstance(self.regex, re.Pattern):
            raise TypeError(f"Pattern expects a str or compiled regex, got {type(self.regex).__name__}")


FtFilter = Union[Raw, PathSegment, Pattern]


def matches_filter(path: PathLike, ftfilter: Optional[FtFilter]) -> bool:
    """Evaluate ``ftfilter`` against ``path``; ``None`` matches everything."""
    if ftfilter is None:
        return True
    if isinstance(ftfilter, Raw):
        return path_contains(path, ftfilter.text)
    if isinstance(ftfilter, PathSegment):
        return path_contains(path, ftfilter.path)
    if isinstance(ftfilter, Pattern):
        text = path_text(path)
        if text is None:
            return False
        return ftfilter.regex.search(text) is not None
    raise TypeError(f"Unsupported filter type: {type(ftfilter).__name__}")


__all__ = ["Raw", "PathSegment", "Pattern", "FtFilter", "matches_filter"]
