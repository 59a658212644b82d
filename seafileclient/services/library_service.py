"""
Library service for seafileclient.

Lists libraries, resolves the default library and fetches upload links.

The server has no "get library by id or name" endpoint, so `get_library`
lists every visible library and scans the result. Each lookup therefore
costs one listing request plus an O(n) scan.
"""

import logging
from typing import List, Optional

from ..decoder import decode_array, decode_envelope, decode_string
from ..domain import Library, LibraryType
from ..errors import NotFoundError, DecodeError
from ..infra.transport import Dispatcher

logger = logging.getLogger(__name__)


class LibraryService:
    """
    Service for finding libraries.

    Every Library returned is bound to this service's dispatcher so it can
    issue further calls scoped to itself.

    Example:
        service = LibraryService(transport)
        for library in service.list_owned_libraries():
            print(library.name, library.size_formatted)
    """

    def __init__(self, dispatcher: Dispatcher):
        """
        Initialize LibraryService.

        Args:
            dispatcher: Authenticated request dispatcher
        """
        self.dispatcher = dispatcher

    def list_libraries(self, type_filter: Optional[str] = None) -> List[Library]:
        """
        List the libraries visible to the caller.

        Args:
            type_filter: One of LibraryType.ALL, or None for all libraries

        Raises:
            ValueError: unknown type filter
            DecodeError: response was not a JSON array of libraries
            TransportError: request failed below HTTP
        """
        path = "/repos/"
        if type_filter:
            if type_filter not in LibraryType.ALL:
                raise ValueError(
                    f"unknown library type {type_filter!r}, expected one of {', '.join(LibraryType.ALL)}"
                )
            path += f"?type={type_filter}"

        response = self.dispatcher.dispatch("GET", path)
        return decode_array(
            response,
            lambda data: Library.from_api_response(data, client=self.dispatcher),
        )

    def list_all_libraries(self) -> List[Library]:
        return self.list_libraries(None)

    def list_owned_libraries(self) -> List[Library]:
        return self.list_libraries(LibraryType.MINE)

    def list_shared_libraries(self) -> List[Library]:
        return self.list_libraries(LibraryType.SHARED)

    def list_group_libraries(self) -> List[Library]:
        return self.list_libraries(LibraryType.GROUP)

    def list_org_libraries(self) -> List[Library]:
        return self.list_libraries(LibraryType.ORG)

    def resolve_default_library_id(self) -> str:
        """
        Look up the id of the caller's default library.

        Raises:
            NotFoundError: the server reports no default library
            DecodeError: response was not the expected object
        """
        response = self.dispatcher.dispatch("GET", "/default-repo/")
        data = decode_envelope(response)

        if not data.get('exists'):
            raise NotFoundError("default library does not exist")

        repo_id = data.get('repo_id')
        if not isinstance(repo_id, str) or not repo_id:
            raise DecodeError("default library id missing", response.status_code, response.text)
        return repo_id

    def get_library(self, name: str = "") -> Library:
        """
        Find a library by name, or the default library when name is empty.

        Lists all libraries and returns the first one whose name matches
        (or whose id equals the default library id).

        Raises:
            NotFoundError: no library matched, or no default library is set
        """
        default_id = None
        if not name:
            default_id = self.resolve_default_library_id()

        libraries = self.list_all_libraries()

        for library in libraries:
            if default_id is not None:
                if library.id == default_id:
                    return library
            elif library.name == name:
                return library

        logger.debug(f"No library matched {name or default_id!r} among {len(libraries)} libraries")
        raise NotFoundError("library not found")

    def get_default_library(self) -> Library:
        return self.get_library("")

    def upload_link(self, library: Library) -> str:
        """
        Fetch a one-time upload URL for a library.

        The server answers with a quoted JSON string, which is decoded
        rather than returned raw. A bound library is fetched through its
        own client.
        """
        if library.client is None:
            library = library.bind(self.dispatcher)
        response = library.request("GET", "/upload-link/")
        return decode_string(response)
