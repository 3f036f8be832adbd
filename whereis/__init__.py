from whereis.exceptions import ImproperlyConfigured, TraversalError, WhereIsError
from whereis.finder import Finder, MatchIterator, find
from whereis.logging import configure_logging, get_logger
from whereis.model import DirEntry
from whereis.settings import Settings
from whereis.walker import Walker

__version__ = "1.0.0"

__all__ = [
    "DirEntry",
    "Finder",
    "ImproperlyConfigured",
    "MatchIterator",
    "Settings",
    "TraversalError",
    "Walker",
    "WhereIsError",
    "configure_logging",
    "find",
    "get_logger",
]
