"""
Depth-first walk over any fsspec filesystem, for backends without a native
`iter_walk` (e.g. `memory://`).
"""

from __future__ import annotations

from typing import Any, Iterator

from fsspec import AbstractFileSystem

from whereis.exceptions import TraversalError
from whereis.model.entry import DIRECTORY, FILE, OTHER, DirEntry, EntryKind
from whereis.types import WalkGenerator


def _kind(info: dict[str, Any]) -> EntryKind:
    if info.get("type") == "directory":
        return DIRECTORY
    if info.get("type") == "file":
        return FILE
    return OTHER


def entry_from_info(info: dict[str, Any], depth: int) -> DirEntry:
    return DirEntry.make(
        info["name"], depth, _kind(info), is_symlink=bool(info.get("islink"))
    )


def _listdir(
    fs: AbstractFileSystem, path: str, sort: bool
) -> Iterator[dict[str, Any]]:
    infos = fs.ls(path, detail=True)
    if sort:
        infos = sorted(infos, key=lambda i: i["name"].rstrip("/").rsplit("/", 1)[-1])
    return iter(infos)


def iter_walk(
    fs: AbstractFileSystem,
    path: str,
    min_depth: int = 0,
    max_depth: int | None = None,
    sort: bool = False,
) -> WalkGenerator:
    """
    Walk *path* on *fs* depth-first, yielding `DirEntry` or `TraversalError`.

    Same ordering and error semantics as
    [WhereIsLocalFileSystem.iter_walk][whereis.fs.local.WhereIsLocalFileSystem.iter_walk],
    without symlink handling.
    """
    try:
        root = entry_from_info(fs.info(path), 0)
    except OSError as e:
        yield TraversalError(path, 0, cause=e)
        return

    if min_depth <= 0:
        yield root
    if not root.is_dir or max_depth == 0:
        return

    try:
        stack = [(root.path, _listdir(fs, root.path, sort), 1)]
    except OSError as e:
        yield TraversalError(root.path, 0, cause=e)
        return

    while stack:
        parent, infos, depth = stack[-1]
        info = next(infos, None)
        if info is None:
            stack.pop()
            continue
        entry = entry_from_info(info, depth)
        # some backends list a directory itself among its children
        if entry.path.rstrip("/") == parent.rstrip("/"):
            continue
        if depth >= min_depth:
            yield entry
        if not entry.is_dir or (max_depth is not None and depth >= max_depth):
            continue
        try:
            stack.append((entry.path, _listdir(fs, entry.path, sort), depth + 1))
        except OSError as e:
            yield TraversalError(entry.path, depth, cause=e)
