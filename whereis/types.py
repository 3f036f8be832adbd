from os import PathLike
from pathlib import Path
from typing import TYPE_CHECKING, Generator, TypeAlias

if TYPE_CHECKING:
    from whereis.exceptions import TraversalError
    from whereis.model import DirEntry

Uri: TypeAlias = PathLike | Path | str | bytes
WalkResult: TypeAlias = "DirEntry | TraversalError"

EntryGenerator: TypeAlias = Generator["DirEntry", None, None]
WalkGenerator: TypeAlias = Generator[WalkResult, None, None]
