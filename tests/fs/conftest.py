from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable

import pytest


def _touch_all(root: Path, names: Iterable[str]) -> None:
    for name in names:
        target = root / name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.touch()


def _mkdir_all(root: Path, names: Iterable[str]) -> None:
    for name in names:
        (root / name).mkdir(parents=True, exist_ok=True)


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[..., Path]:
    """Build a directory under tmp_path from lists of relative file and folder names."""

    def _make(name: str = "tree", files: Iterable[str] = (), folders: Iterable[str] = ()) -> Path:
        root = tmp_path / name
        root.mkdir(parents=True, exist_ok=True)
        _mkdir_all(root, folders)
        _touch_all(root, files)
        return root

    return _make


@pytest.fixture
def nested_tree(make_tree: Callable[..., Path]) -> Path:
    """
    root/
      initial.pdf
      folder1/first.rs
      folder1/sub1/
      folder1/sub2/deep1/
      folder1/sub2/deep2/second.txt
      folder1/sub3/third.php
      folder2/fourth.cpp
    """
    return make_tree(
        "nested",
        files=[
            "initial.pdf",
            "folder1/first.rs",
            "folder1/sub2/deep2/second.txt",
            "folder1/sub3/third.php",
            "folder2/fourth.cpp",
        ],
        folders=[
            "folder1/sub1",
            "folder1/sub2/deep1",
            "folder1/sub2/deep2",
            "folder1/sub3",
            "folder2",
        ],
    )
