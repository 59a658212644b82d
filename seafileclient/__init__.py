"""
seafileclient - A typed client for the Seafile web API.

seafileclient exposes remote libraries, their directory trees and their
commit history as immutable Python objects.

Quick Start:
    from seafileclient import SeafileTransport, LibraryService, DirectoryService

    transport = SeafileTransport("https://cloud.example.com", token="...")

    # List libraries you own
    for library in LibraryService(transport).list_owned_libraries():
        print(library.name, library.id)

    # Resolve the default library and browse it
    library = LibraryService(transport).get_default_library()
    for entry in DirectoryService(transport).list_file_entries(library.id, "/"):
        print(entry.name, entry.size)

    # Libraries stay bound to the transport that listed them
    for commit in library.history():
        print(commit.id, commit.desc)

Domain Objects:
    Library - Remote repository, bound to its dispatcher
    DirectoryEntry - File or subdirectory inside a library
    LibraryCommit - One point in a library's history

Services:
    LibraryService - Listing, default-library resolution, upload links
    DirectoryService - Directory listings and creation
    HistoryService - Commit history

Errors:
    TransportError, DecodeError, NotFoundError, OperationFailedError
"""

__version__ = "0.1.0"

# Domain objects
from .domain import (
    Library,
    LibraryType,
    DirectoryEntry,
    EntryType,
    LibraryCommit,
)

# Services
from .services import (
    LibraryService,
    DirectoryService,
    HistoryService,
)

# Transport
from .infra import Dispatcher, SeafileTransport, obtain_token

# Errors
from .errors import (
    SeafileError,
    TransportError,
    DecodeError,
    NotFoundError,
    OperationFailedError,
)

# Configuration
from .config import load_config, save_config, create_transport

__all__ = [
    # Version
    "__version__",
    # Domain objects
    "Library",
    "LibraryType",
    "DirectoryEntry",
    "EntryType",
    "LibraryCommit",
    # Services
    "LibraryService",
    "DirectoryService",
    "HistoryService",
    # Transport
    "Dispatcher",
    "SeafileTransport",
    "obtain_token",
    # Errors
    "SeafileError",
    "TransportError",
    "DecodeError",
    "NotFoundError",
    "OperationFailedError",
    # Configuration
    "load_config",
    "save_config",
    "create_transport",
]
