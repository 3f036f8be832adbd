"""
fsspec-compatible local filesystem with a lazy, depth-first walk.
"""

from __future__ import annotations

import os
import re
from typing import Any, Iterator, NamedTuple

from fsspec.implementations.local import LocalFileSystem

from whereis.exceptions import TraversalError
from whereis.logging import get_logger
from whereis.model.entry import DIRECTORY, FILE, OTHER, DirEntry, kind_from_mode
from whereis.types import WalkGenerator

log = get_logger(__name__)

URI_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")


def is_uri(path: str) -> bool:
    """Check if *path* starts with a uri scheme like `file://` or `memory://`"""
    return URI_SCHEME.match(path) is not None


class _Frame(NamedTuple):
    path: str
    handle: Any
    entries: Iterator[os.DirEntry]
    depth: int
    ident: tuple[int, int] | None


def _opendir(path: str, sort: bool) -> tuple[Any, Iterator[os.DirEntry]]:
    handle = os.scandir(path)
    if sort:
        with handle:
            return None, iter(sorted(handle, key=lambda e: e.name))
    return handle, handle


class WhereIsLocalFileSystem(LocalFileSystem):
    """LocalFileSystem subclass that adds a lazy iter_walk via os.scandir."""

    protocol = ("file", "local")

    def iter_walk(
        self,
        path: str,
        follow_links: bool = False,
        min_depth: int = 0,
        max_depth: int | None = None,
        sort: bool = False,
    ) -> WalkGenerator:
        """Walk the tree under *path* depth-first, yielding entries lazily.

        The root is yielded first (depth 0). A directory is yielded before it
        is opened; if opening fails, a `TraversalError` for it follows. Errors
        are yielded in place of entries, never raised. Open directory handles
        are released when the generator finishes or is closed.

        Args:
            path: Root path, kept as given (not made absolute) unless it is
                a `file://` uri
            follow_links: Follow symbolic links (the root is always followed)
            min_depth: Only yield entries at this depth or deeper
            max_depth: Don't descend below this depth
            sort: Visit siblings ordered by file name
        """
        if is_uri(path):
            path = self._strip_protocol(path)

        try:
            st = os.stat(path)
            root = DirEntry.from_stat(path, 0, st, is_symlink=os.path.islink(path))
        except OSError as e:
            yield TraversalError(path, 0, cause=e)
            return

        if min_depth <= 0:
            yield root
        if not root.is_dir or max_depth == 0:
            return

        stack: list[_Frame] = []
        try:
            try:
                handle, entries = _opendir(path, sort)
            except OSError as e:
                yield TraversalError(path, 0, cause=e)
                return
            ident = (st.st_dev, st.st_ino) if follow_links else None
            stack.append(_Frame(path, handle, entries, 1, ident))

            while stack:
                frame = stack[-1]
                try:
                    child = next(frame.entries, None)
                except OSError as e:
                    yield TraversalError(frame.path, frame.depth - 1, cause=e)
                    child = None
                if child is None:
                    stack.pop()
                    if frame.handle is not None:
                        frame.handle.close()
                    continue

                depth = frame.depth
                try:
                    entry, ident = self._make_entry(child, depth, follow_links)
                except OSError as e:
                    yield TraversalError(child.path, depth, cause=e)
                    continue

                if ident is not None and entry.is_dir:
                    ancestor = _find_ancestor(stack, ident)
                    if ancestor is not None:
                        log.debug(
                            f"File system loop: `{entry.path}`", ancestor=ancestor
                        )
                        yield TraversalError(entry.path, depth, loop_ancestor=ancestor)
                        continue

                if depth >= min_depth:
                    yield entry
                if not entry.is_dir or (max_depth is not None and depth >= max_depth):
                    continue
                try:
                    handle, entries = _opendir(entry.path, sort)
                except OSError as e:
                    yield TraversalError(entry.path, depth, cause=e)
                    continue
                stack.append(_Frame(entry.path, handle, entries, depth + 1, ident))
        finally:
            for frame in stack:
                if frame.handle is not None:
                    frame.handle.close()

    @staticmethod
    def _make_entry(
        child: os.DirEntry, depth: int, follow_links: bool
    ) -> tuple[DirEntry, tuple[int, int] | None]:
        is_symlink = child.is_symlink()
        if follow_links:
            st = child.stat()
            entry = DirEntry.from_stat(child.path, depth, st, is_symlink=is_symlink)
            return entry, (st.st_dev, st.st_ino)
        if child.is_dir(follow_symlinks=False):
            kind = DIRECTORY
        elif child.is_file(follow_symlinks=False):
            kind = FILE
        else:
            kind = OTHER
        entry = DirEntry.make(child.path, depth, kind, is_symlink)
        return entry, None


def _find_ancestor(stack: list[_Frame], ident: tuple[int, int]) -> str | None:
    for frame in stack:
        if frame.ident == ident:
            return frame.path
    return None
