import os
import stat
from functools import cached_property
from pathlib import PurePath
from typing import Literal

from whereis.model.base import BaseModel

EntryKind = Literal["file", "directory", "other"]

FILE = "file"
DIRECTORY = "directory"
OTHER = "other"


def lossy_name(path: str) -> str | None:
    """
    Get the base name of a path as text.

    Undecodable bytes (kept by python as surrogate escapes) are replaced with
    U+FFFD, so the result is always valid text.

    Examples:
        >>> lossy_name("/tmp/foo/bar.txt")
        "bar.txt"
        >>> lossy_name("/")
        None

    Args:
        path: Full path

    Returns:
        The final path component or `None` if the path has none
    """
    name = PurePath(path).name
    if not name or name == "..":
        return None
    return os.fsencode(name).decode("utf-8", errors="replace")


class DirEntry(BaseModel):
    """A file system entry visited during a walk"""

    path: str
    """Full path: the walk root joined with the names leading to this entry"""

    depth: int
    """Depth relative to the walk root, the root itself has depth 0"""

    kind: EntryKind
    """File type, symlinks are resolved if the walk follows them"""

    is_symlink: bool = False
    """The path itself is a symbolic link"""

    def __str__(self) -> str:
        return self.path

    def __fspath__(self) -> str:
        return self.path

    @cached_property
    def name(self) -> str | None:
        """Base name (lossy text), `None` for paths like `/` or `..`"""
        return lossy_name(self.path)

    @property
    def is_dir(self) -> bool:
        return self.kind == DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.kind == FILE

    @classmethod
    def make(
        cls, path: str, depth: int, kind: EntryKind, is_symlink: bool = False
    ) -> "DirEntry":
        """Build an entry from trusted walk data, skipping validation"""
        return cls.model_construct(
            path=path, depth=depth, kind=kind, is_symlink=is_symlink
        )

    @classmethod
    def from_stat(
        cls, path: str, depth: int, st: os.stat_result, is_symlink: bool = False
    ) -> "DirEntry":
        return cls.make(path, depth, kind_from_mode(st.st_mode), is_symlink)


def kind_from_mode(mode: int) -> EntryKind:
    if stat.S_ISDIR(mode):
        return DIRECTORY
    if stat.S_ISREG(mode):
        return FILE
    return OTHER
