from __future__ import annotations

import os
from pathlib import Path
from typing import Callable

import pytest

from filetools import (
    FtIOError,
    ItemKind,
    PathSegment,
    Pattern,
    PreconditionError,
    Raw,
    list_directories,
    list_directories_with_filter,
    list_files,
    list_files_with_filter,
    list_items,
    list_nested_directories,
    list_nested_directories_with_filter,
    list_nested_files,
    list_nested_files_with_filter,
)

MISSING = "IDoNotExistAsADirectoryOrShouldntAtLeAst"


def test_list_files_returns_only_direct_files(make_tree: Callable[..., Path]) -> None:
    root = make_tree(
        "lf_test",
        files=["first.rs", "second.c", "third.js", "fourth.rb"],
        folders=["child"],
    )
    (root / "child" / "hidden.rs").touch()

    result = list_files(root)

    assert len(result) == 4
    assert set(result) == {root / n for n in ["first.rs", "second.c", "third.js", "fourth.rb"]}


def test_list_directories_returns_only_direct_directories(make_tree: Callable[..., Path]) -> None:
    root = make_tree(
        "lfolder_test",
        files=["note.txt"],
        folders=["folder1", "folder2", "folder3", "folder4/inner"],
    )

    result = list_directories(root)

    assert set(result) == {root / f"folder{i}" for i in range(1, 5)}


def test_list_nested_files(nested_tree: Path) -> None:
    result = list_nested_files(nested_tree)

    assert len(result) == 5
    assert set(result) == {
        nested_tree / "initial.pdf",
        nested_tree / "folder1" / "first.rs",
        nested_tree / "folder1" / "sub2" / "deep2" / "second.txt",
        nested_tree / "folder1" / "sub3" / "third.php",
        nested_tree / "folder2" / "fourth.cpp",
    }


def test_list_nested_directories(nested_tree: Path) -> None:
    result = list_nested_directories(nested_tree)

    assert len(result) == 7
    assert len(set(result)) == 7
    assert nested_tree / "folder1" / "sub2" / "deep2" in result


def test_list_nested_directories_lists_parents_before_children(nested_tree: Path) -> None:
    result = list_nested_directories(nested_tree)

    for path in result:
        if path.parent != nested_tree:
            assert result.index(path.parent) < result.index(path)


def test_list_nested_directories_chain(make_tree: Callable[..., Path]) -> None:
    root = make_tree("chain", folders=["A/B/C"])

    assert list_nested_directories(root) == [root / "A", root / "A" / "B", root / "A" / "B" / "C"]


def test_files_filter(make_tree: Callable[..., Path]) -> None:
    root = make_tree("filter_files", files=["first.rs", "second.rs", "third.js", "fourth.rb"])

    result = list_files_with_filter(root, Raw("fourth"))
    assert result == [root / "fourth.rb"]

    result = list_files_with_filter(root, PathSegment(Path("third.js")))
    assert result == [root / "third.js"]

    result = list_files_with_filter(root, Pattern(r"(.*)\.rs$"))
    assert set(result) == {root / "first.rs", root / "second.rs"}


def test_nested_files_filter_still_descends(nested_tree: Path) -> None:
    result = list_nested_files_with_filter(nested_tree, Pattern(r"\.(rs|txt)$"))

    assert set(result) == {
        nested_tree / "folder1" / "first.rs",
        nested_tree / "folder1" / "sub2" / "deep2" / "second.txt",
    }

    segment = list_nested_files(nested_tree, PathSegment(Path("folder1") / "sub3"))
    assert segment == [nested_tree / "folder1" / "sub3" / "third.php"]


def test_directories_filter(nested_tree: Path) -> None:
    assert list_directories_with_filter(nested_tree, Raw("folder2")) == [nested_tree / "folder2"]
    assert list_directories(nested_tree, Raw("sub")) == []


def test_nested_directories_filter_does_not_prune(nested_tree: Path) -> None:
    result = list_nested_directories_with_filter(nested_tree, Pattern(r"deep\d$"))

    assert set(result) == {
        nested_tree / "folder1" / "sub2" / "deep1",
        nested_tree / "folder1" / "sub2" / "deep2",
    }


def test_list_items_matches_named_helpers(nested_tree: Path) -> None:
    assert set(list_items(nested_tree, ItemKind.NESTED_FILE)) == set(list_nested_files(nested_tree))
    assert set(list_items(nested_tree, ItemKind.DIRECTORY)) == set(list_directories(nested_tree))


def test_empty_directory_lists_nothing(make_tree: Callable[..., Path]) -> None:
    root = make_tree("empty")

    assert list_files(root) == []
    assert list_nested_files(root) == []
    assert list_directories(root) == []
    assert list_nested_directories(root) == []


def test_accepts_string_roots(make_tree: Callable[..., Path]) -> None:
    root = make_tree("strings", files=["a.txt"])

    assert list_files(str(root)) == [root / "a.txt"]


@pytest.mark.parametrize(
    "lister",
    [list_files, list_nested_files, list_directories, list_nested_directories],
)
def test_missing_root_is_a_precondition_error(lister: Callable[..., list]) -> None:
    with pytest.raises(PreconditionError, match="does not exist"):
        lister(MISSING)
    with pytest.raises(PreconditionError, match="does not exist"):
        lister(MISSING, Raw("x"))


@pytest.mark.parametrize(
    "lister",
    [
        list_files_with_filter,
        list_nested_files_with_filter,
        list_directories_with_filter,
        list_nested_directories_with_filter,
    ],
)
def test_missing_root_with_filter_is_a_precondition_error(lister: Callable[..., list]) -> None:
    with pytest.raises(PreconditionError):
        lister(MISSING, Pattern(".*"))


@pytest.mark.parametrize(
    "kind",
    list(ItemKind),
)
def test_file_root_is_a_precondition_error(make_tree: Callable[..., Path], kind: ItemKind) -> None:
    root = make_tree("file_root", files=["plain.txt"])

    with pytest.raises(PreconditionError, match="not a file"):
        list_items(root / "plain.txt", kind)


def test_precondition_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        list_files(MISSING)


@pytest.mark.skipif(
    not hasattr(os, "geteuid") or os.geteuid() == 0,
    reason="permission bits are not enforced for root",
)
def test_unreadable_subdirectory_aborts_walk(make_tree: Callable[..., Path]) -> None:
    root = make_tree("locked", files=["visible.txt", "locked/secret.txt"])
    locked = root / "locked"
    locked.chmod(0)
    try:
        with pytest.raises(FtIOError) as excinfo:
            list_nested_files(root)
    finally:
        locked.chmod(0o755)

    assert excinfo.value.operation == "reading directory entries"
    assert excinfo.value.path == locked
    assert isinstance(excinfo.value, OSError)
    assert isinstance(excinfo.value.__cause__, PermissionError)
