"""
Domain layer for seafileclient.

Contains immutable value objects describing remote state:
- Library: A remote repository, bound to the client that listed it
- DirectoryEntry: A file or subdirectory inside a library
- LibraryCommit: One point in a library's history

Objects are snapshots taken at call time and are never mutated.
"""

from .library import Library, LibraryType
from .directory import DirectoryEntry, EntryType
from .commit import LibraryCommit

__all__ = [
    'Library',
    'LibraryType',
    'DirectoryEntry',
    'EntryType',
    'LibraryCommit',
]
