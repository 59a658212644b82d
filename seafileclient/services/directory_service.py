"""
Directory service for seafileclient.

Lists and creates directories inside a library. All listing variants are
specialisations of `list_entries`, which composes the query string and
decodes the bare-array response.
"""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

from ..decoder import decode_array
from ..domain import DirectoryEntry, EntryType
from ..errors import OperationFailedError
from ..infra.transport import Dispatcher

logger = logging.getLogger(__name__)

# Status the server answers a successful mkdir with
HTTP_CREATED = 201

FORM_HEADERS = {'Content-Type': 'application/x-www-form-urlencoded'}


def build_query(params: Dict[str, Any]) -> str:
    """URL-encode query parameters with keys in sorted order."""
    return urlencode(sorted(params.items()))


def dir_path(library_id: str, params: Dict[str, Any]) -> str:
    """Relative API path of a library's directory endpoint."""
    return f"/repos/{library_id}/dir/?{build_query(params)}"


class DirectoryService:
    """
    Service for directory listings and directory creation.

    Example:
        service = DirectoryService(transport)
        for entry in service.list_file_entries(library_id, "/docs"):
            print(entry.name, entry.size)
    """

    def __init__(self, dispatcher: Dispatcher):
        """
        Initialize DirectoryService.

        Args:
            dispatcher: Authenticated request dispatcher
        """
        self.dispatcher = dispatcher

    def list_entries(
        self,
        library_id: str,
        path: Optional[str] = "/",
        entry_type: EntryType = EntryType.NONE,
        recursive: bool = False,
    ) -> List[DirectoryEntry]:
        """
        List the entries of one directory.

        Args:
            library_id: Library to look in
            path: Directory path; empty or None means the root
            entry_type: Restrict the listing to files or directories
            recursive: Return the whole directory subtree; only valid
                together with EntryType.DIR

        Returns:
            Entries in the order the server returned them

        Raises:
            ValueError: recursive requested without the directory filter
            DecodeError: response was not a JSON array of entries
            TransportError: request failed below HTTP
        """
        if recursive and entry_type is not EntryType.DIR:
            raise ValueError("recursive listing requires entry_type=EntryType.DIR")

        params: Dict[str, Any] = {'p': path or "/"}
        if entry_type is not EntryType.NONE:
            params['t'] = entry_type.value
        if recursive:
            params['recursive'] = 1

        response = self.dispatcher.dispatch("GET", dir_path(library_id, params))
        return decode_array(response, DirectoryEntry.from_api_response)

    def list_all_entries(self, library_id: str, path: Optional[str] = "/") -> List[DirectoryEntry]:
        """List files and subdirectories of a directory."""
        return self.list_entries(library_id, path)

    def list_file_entries(self, library_id: str, path: Optional[str] = "/") -> List[DirectoryEntry]:
        """List only the files of a directory."""
        return self.list_entries(library_id, path, entry_type=EntryType.FILE)

    def list_dir_entries(self, library_id: str, path: Optional[str] = "/") -> List[DirectoryEntry]:
        """List only the subdirectories of a directory."""
        return self.list_entries(library_id, path, entry_type=EntryType.DIR)

    def list_entries_recursive(self, library_id: str, path: Optional[str] = "/") -> List[DirectoryEntry]:
        """List every directory below `path`, descending into subdirectories."""
        return self.list_entries(library_id, path, entry_type=EntryType.DIR, recursive=True)

    def create_directory(self, library_id: str, path: str) -> None:
        """
        Create a directory.

        If `path` already exists the server creates a renamed directory
        instead of failing, and the response does not say which happened.

        Raises:
            OperationFailedError: server answered anything but 201 Created
            TransportError: request failed below HTTP
        """
        response = self.dispatcher.dispatch(
            "POST",
            dir_path(library_id, {'p': path}),
            headers=dict(FORM_HEADERS),
            data="operation=mkdir",
        )
        with response:
            status = response.status_code
            body = response.text

        if status != HTTP_CREATED:
            raise OperationFailedError(f"mkdir {path} failed", status, body)
        logger.debug(f"Created directory {path} in library {library_id}")
