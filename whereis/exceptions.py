class WhereIsError(Exception):
    """Base class for all errors of this library"""


class ImproperlyConfigured(WhereIsError, ValueError):
    """Invalid walk options"""


class TraversalError(WhereIsError):
    """
    An error encountered while walking a directory tree.

    The walker doesn't raise these, it yields them in place of an entry, so
    that a consumer can decide whether to stop, skip or raise.

    Args:
        path: The path that could not be read
        depth: Depth of `path` relative to the walk root
        cause: The underlying error, if any (`OSError` while reading, or the
            error of resolving the root filesystem)
        loop_ancestor: For symlink loops, the ancestor the link points to
    """

    def __init__(
        self,
        path: str,
        depth: int,
        cause: Exception | None = None,
        loop_ancestor: str | None = None,
    ) -> None:
        self.path = path
        self.depth = depth
        self.cause = cause
        self.loop_ancestor = loop_ancestor
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.loop_ancestor is not None:
            return (
                f"File system loop found: `{self.path}` points to an ancestor "
                f"`{self.loop_ancestor}`"
            )
        if self.cause is not None:
            return f"IO error for `{self.path}`: {self.cause}"
        return f"Traversal error for `{self.path}`"

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}({self.path}, depth={self.depth})>"

    @property
    def is_loop(self) -> bool:
        return self.loop_ancestor is not None
