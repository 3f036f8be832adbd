import fsspec

from whereis.fs.local import WhereIsLocalFileSystem, is_uri
from whereis.fs.walk import iter_walk

fsspec.register_implementation("file", WhereIsLocalFileSystem, clobber=True)
fsspec.register_implementation("local", WhereIsLocalFileSystem, clobber=True)

__all__ = ["WhereIsLocalFileSystem", "is_uri", "iter_walk"]
