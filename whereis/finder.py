"""
# Finder

Find every entry below a root whose base name equals a target name.

Example:
    ```python
    from whereis import Finder

    for entry in Finder("~/projects", "pyproject.toml"):
        print(entry.path)
    ```
"""

from typing import Any, Callable, Iterator, Self

from whereis.exceptions import TraversalError
from whereis.logging import get_logger
from whereis.model import DirEntry
from whereis.settings import Settings
from whereis.types import EntryGenerator, Uri, WalkResult
from whereis.walker import Walker

settings = Settings()
log = get_logger(__name__)


class Finder:
    """
    Pairs a [Walker][whereis.walker.Walker] with a target name.

    Constructing a finder doesn't touch the filesystem: a missing root just
    results in an empty search.

    Args:
        root: Directory to search in (path-like or uri)
        target: Exact base name to look for
        strict: Raise `TraversalError` when the walk fails instead of silently
            ending the search (defaults to `WHEREIS_STRICT`)
        **kwargs: Walk options (`follow_links`, `min_depth`, `max_depth`,
            `sort`)
    """

    def __init__(
        self, root: Uri, target: str, strict: bool | None = None, **kwargs: Any
    ) -> None:
        self.walker = Walker(root=root, **kwargs)
        self._target = str(target)
        self.strict = settings.strict if strict is None else strict

    def __repr__(self) -> str:
        return f"<Finder({self.walker}, {self._target!r})>"

    @property
    def target(self) -> str:
        return self._target

    def matches(self, entry: DirEntry) -> bool:
        """Compare the base name only, never the full path"""
        return entry.name == self._target

    def __iter__(self) -> "MatchIterator":
        return MatchIterator(self.walker.walk(), self.matches, strict=self.strict)


class MatchIterator:
    """
    Iterator over the walk results that satisfy `predicate`.

    The first traversal error ends the iteration for good, even if unvisited
    siblings remain. In strict mode that error is raised once, otherwise it is
    only logged.
    """

    def __init__(
        self,
        results: Iterator[WalkResult],
        predicate: Callable[[DirEntry], bool],
        strict: bool = False,
    ) -> None:
        self._results = results
        self._predicate = predicate
        self.strict = strict
        self.exhausted = False

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> DirEntry:
        while not self.exhausted:
            result = next(self._results, None)
            if result is None:
                self.close()
                break
            if isinstance(result, TraversalError):
                self.close()
                if self.strict:
                    log.debug(f"Traversal failed: `{result.path}`", error=str(result))
                    raise result
                log.debug(f"Traversal stopped: `{result.path}`", error=str(result))
                break
            if self._predicate(result):
                return result
        raise StopIteration

    def close(self) -> None:
        """Stop iterating and release open directory handles"""
        self.exhausted = True
        close = getattr(self._results, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *args, **kwargs) -> None:
        self.close()


def find(root: Uri, target: str, **kwargs: Any) -> EntryGenerator:
    """
    Shorthand to iterate over a [Finder][whereis.finder.Finder].

    Example:
        ```python
        from whereis import find

        paths = [e.path for e in find("/etc", "hosts", max_depth=1)]
        ```

    Args:
        root: Directory to search in
        target: Exact base name to look for
        **kwargs: Passed through to `Finder`

    Yields:
        Matching entries in walk order
    """
    with iter(Finder(root, target, **kwargs)) as matches:
        yield from matches
