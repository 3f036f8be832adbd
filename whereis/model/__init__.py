from whereis.model.entry import DirEntry, EntryKind, lossy_name

__all__ = ["DirEntry", "EntryKind", "lossy_name"]
