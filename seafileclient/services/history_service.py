"""
History service for seafileclient.

Fetches a library's commit log. Only the first page is returned: the
server's `page_next` flag is logged but no further pages are requested.
"""

import logging
from typing import Any, Dict, List

from ..decoder import decode_envelope
from ..domain import Library, LibraryCommit
from ..errors import DecodeError
from ..infra.transport import Dispatcher

logger = logging.getLogger(__name__)


def _commits_field(data: Dict[str, Any]) -> Any:
    """Return the commit array of the envelope, whatever the key's case."""
    for key, value in data.items():
        if key.lower() == 'commits':
            return [] if value is None else value
    return []


class HistoryService:
    """
    Service for library commit history.

    Example:
        for commit in HistoryService(transport).history(library):
            print(commit.ctime, commit.creator_name, commit.desc)
    """

    def __init__(self, dispatcher: Dispatcher):
        self.dispatcher = dispatcher

    def history(self, library: Library) -> List[LibraryCommit]:
        """
        Fetch the commits of a library, newest first as sent by the server.

        Each commit keeps a reference to `library`. A bound library is
        fetched through its own client; an unbound one through this
        service's dispatcher.

        Raises:
            DecodeError: response was not an envelope with a commit array
            TransportError: request failed below HTTP
        """
        if library.client is None:
            library = library.bind(self.dispatcher)
        response = library.request("GET", "/history")
        data = decode_envelope(response)

        commits = _commits_field(data)
        if not isinstance(commits, list) or not all(isinstance(c, dict) for c in commits):
            raise DecodeError("commits is not an array of objects", response.status_code, response.text)

        if data.get('page_next'):
            logger.debug(f"History of {library.id} has more pages; only the first is returned")

        return [LibraryCommit.from_api_response(c, library=library) for c in commits]
