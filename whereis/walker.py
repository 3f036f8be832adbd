"""
# Directory walker

A walk configuration bound to a root path. Nothing touches the filesystem
until [Walker.walk][whereis.walker.Walker.walk] is iterated.
"""

import os
from functools import cached_property
from typing import Any, Self

import fsspec
from pydantic import ValidationError, field_validator, model_validator

from whereis.exceptions import ImproperlyConfigured, TraversalError
from whereis.fs import WhereIsLocalFileSystem, is_uri, iter_walk
from whereis.model.base import BaseModel
from whereis.settings import Settings
from whereis.types import WalkGenerator

settings = Settings()


class Walker(BaseModel):
    """
    Depth-first walk configuration.

    Example:
        ```python
        from whereis import Walker

        for result in Walker(root="/tmp", max_depth=2).walk():
            print(result)
        ```
    """

    root: str
    """Root path or uri (`file://`, `memory://`, ...), `~` is expanded for paths"""
    follow_links: bool = settings.follow_links
    """Follow symbolic links, the root itself is always followed"""
    min_depth: int = settings.min_depth
    """Only yield entries at this depth or deeper"""
    max_depth: int | None = settings.max_depth
    """Don't descend below this depth"""
    sort: bool = settings.sort
    """Visit siblings ordered by file name"""

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise ImproperlyConfigured(f"Invalid walk options: {e}") from e

    def __str__(self) -> str:
        return self.root

    @field_validator("root", mode="before")
    @classmethod
    def ensure_root(cls, v: Any) -> str:
        root = os.fsdecode(os.fspath(v))
        if is_uri(root):
            return root
        return os.path.expanduser(root)

    @model_validator(mode="after")
    def check_depths(self) -> Self:
        if self.min_depth < 0:
            raise ValueError(f"min_depth must not be negative: `{self.min_depth}`")
        if self.max_depth is not None:
            if self.max_depth < 0:
                raise ValueError(f"max_depth must not be negative: `{self.max_depth}`")
            if self.min_depth > self.max_depth:
                raise ValueError(
                    f"min_depth `{self.min_depth}` is greater than max_depth "
                    f"`{self.max_depth}`"
                )
        return self

    @cached_property
    def _fs(self) -> tuple[fsspec.AbstractFileSystem, str]:
        if is_uri(self.root):
            return fsspec.url_to_fs(self.root)
        # plain paths are walked as given, relative ones stay relative
        return WhereIsLocalFileSystem(), self.root

    def walk(self) -> WalkGenerator:
        """
        Walk the tree lazily.

        Yields:
            `DirEntry` for each visited entry (root first) or `TraversalError`
                in place of entries that couldn't be read
        """
        try:
            fs, path = self._fs
        except (ValueError, ImportError) as e:
            # unknown protocol or missing fsspec backend
            yield TraversalError(self.root, 0, cause=e)
            return
        if isinstance(fs, WhereIsLocalFileSystem):
            yield from fs.iter_walk(
                path,
                follow_links=self.follow_links,
                min_depth=self.min_depth,
                max_depth=self.max_depth,
                sort=self.sort,
            )
        else:
            yield from iter_walk(
                fs,
                path,
                min_depth=self.min_depth,
                max_depth=self.max_depth,
                sort=self.sort,
            )
