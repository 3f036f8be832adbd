import os
from pathlib import Path

import pytest


@pytest.fixture
def tree(tmp_path):
    """Create a small directory tree for walk tests.

    tree/
      a/
        b/
          c/
            a/
        x.txt
      m/
        a
      z.txt
    """
    (tmp_path / "a" / "b" / "c" / "a").mkdir(parents=True)
    (tmp_path / "a" / "x.txt").write_text("x")
    (tmp_path / "m").mkdir()
    (tmp_path / "m" / "a").write_text("file named a")
    (tmp_path / "z.txt").write_text("z")
    return tmp_path


def relpaths(results, root: Path) -> list[str]:
    """Paths of walk results relative to root, `.` for the root itself"""
    return [os.path.relpath(r.path, root) for r in results]


class BlockingScandir:
    """Replacement for `os.scandir` that fails for the given directories and
    records every handle it opens."""

    def __init__(self, *blocked: Path) -> None:
        self.blocked = {str(p) for p in blocked}
        self.handles: list[TrackedHandle] = []
        self._scandir = os.scandir

    def __call__(self, path="."):
        if os.fspath(path) in self.blocked:
            raise PermissionError(13, "Permission denied", os.fspath(path))
        handle = TrackedHandle(self._scandir(path))
        self.handles.append(handle)
        return handle


class TrackedHandle:
    def __init__(self, it) -> None:
        self._it = it
        self.closed = False

    def __iter__(self):
        return self

    def __next__(self):
        return next(self._it)

    def close(self) -> None:
        self.closed = True
        self._it.close()

    def __enter__(self):
        return self

    def __exit__(self, *args) -> None:
        self.close()


@pytest.fixture
def blocking_scandir(monkeypatch):
    def _block(*paths: Path) -> BlockingScandir:
        scandir = BlockingScandir(*paths)
        monkeypatch.setattr(os, "scandir", scandir)
        return scandir

    return _block
