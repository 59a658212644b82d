"""
Service layer for seafileclient.

Services combine the dispatcher with the decoder to provide typed
operations:
- LibraryService: Library listing, default-library resolution, upload links
- DirectoryService: Directory listings and directory creation
- HistoryService: Library commit history

Each service takes its dispatcher explicitly; there is no global client.
"""

from .library_service import LibraryService
from .directory_service import DirectoryService
from .history_service import HistoryService

__all__ = [
    'LibraryService',
    'DirectoryService',
    'HistoryService',
]
