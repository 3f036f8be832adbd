import os
import types

import fsspec

from whereis.fs.local import WhereIsLocalFileSystem
from whereis.model import DirEntry


def test_fs_local_registration():
    fs, path = fsspec.url_to_fs("file:///tmp")
    assert isinstance(fs, WhereIsLocalFileSystem)
    assert path == "/tmp"
    fs, _ = fsspec.url_to_fs("local:///tmp")
    assert isinstance(fs, WhereIsLocalFileSystem)


def test_iter_walk_is_generator(tree):
    fs = WhereIsLocalFileSystem()
    gen = fs.iter_walk(str(tree))
    assert isinstance(gen, types.GeneratorType)


def test_iter_walk_yields_all_entries(tree):
    fs = WhereIsLocalFileSystem()
    results = list(fs.iter_walk(str(tree)))
    assert len(results) == 9
    assert all(isinstance(r, DirEntry) for r in results)
    assert all(os.path.isabs(r.path) for r in results)


def test_iter_walk_empty_dir(tmp_path):
    fs = WhereIsLocalFileSystem()
    results = list(fs.iter_walk(str(tmp_path)))
    assert [r.path for r in results] == [str(tmp_path)]


def test_iter_walk_strips_protocol(tree):
    fs = WhereIsLocalFileSystem()
    results = list(fs.iter_walk(f"file://{tree}", max_depth=0))
    assert [r.path for r in results] == [str(tree)]


def test_iter_walk_keeps_path_form(tree):
    fs = WhereIsLocalFileSystem()
    root = str(tree / "m") + os.sep
    results = list(fs.iter_walk(root))
    assert results[0].path == root
    assert results[0].name == "m"
    assert results[1].path == root + "a"
