"""
Library domain object for seafileclient.

A Library is a remote Seafile repository. Instances are snapshots of the
server's state at listing time and are only built by LibraryService.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List, TYPE_CHECKING

if TYPE_CHECKING:
    import requests
    from ..infra.transport import Dispatcher
    from .commit import LibraryCommit
    from .directory import DirectoryEntry


class LibraryType:
    """Ownership classes accepted by the library listing endpoint."""
    MINE = "mine"      # Owned by the caller
    SHARED = "shared"  # Shared privately with the caller
    GROUP = "group"    # Shared with one of the caller's groups
    ORG = "org"        # Public to the organisation

    ALL = (MINE, SHARED, GROUP, ORG)


@dataclass(frozen=True)
class Library:
    """
    Immutable snapshot of a remote library.

    `client` is the dispatcher the library was listed with. It lets the
    library issue calls scoped to itself (history, upload link, directory
    operations) without re-threading credentials. The library does not own
    that dispatcher and never closes it.

    Example:
        library = LibraryService(transport).get_library("Notes")
        for commit in library.history():
            print(commit.id, commit.desc)
    """
    id: str
    name: str = ""
    type: str = ""
    root: str = ""
    owner: str = ""
    permission: str = ""
    encrypted: bool = False
    virtual: bool = False
    version: int = 0
    mtime: int = 0
    size: int = 0
    mtime_relative: str = ""
    head_commit_id: str = ""
    size_formatted: str = ""

    client: Optional['Dispatcher'] = field(default=None, repr=False, compare=False)

    @classmethod
    def from_api_response(cls, data: Dict[str, Any], client: Optional['Dispatcher'] = None) -> 'Library':
        """Create from one object of the `/repos/` listing."""
        return cls(
            id=data.get('id') or '',
            name=data.get('name') or '',
            type=data.get('type') or '',
            root=data.get('root') or '',
            owner=data.get('owner') or '',
            permission=data.get('permission') or '',
            encrypted=bool(data.get('encrypted', False)),
            virtual=bool(data.get('virtual', False)),
            version=data.get('version') or 0,
            mtime=data.get('mtime') or 0,
            size=data.get('size') or 0,
            mtime_relative=data.get('mtime_relative') or '',
            head_commit_id=data.get('head_commit_id') or '',
            size_formatted=data.get('size_formatted') or '',
            client=client,
        )

    def bind(self, client: 'Dispatcher') -> 'Library':
        """Create a new Library bound to another dispatcher."""
        from dataclasses import replace
        return replace(self, client=client)

    def _require_client(self) -> 'Dispatcher':
        if self.client is None:
            raise ValueError(f"library {self.id!r} is not bound to a client")
        return self.client

    def request(
        self,
        method: str,
        path: str,
        headers: Optional[Dict[str, str]] = None,
        data: Any = None,
    ) -> 'requests.Response':
        """
        Dispatch a request scoped to this library.

        Relative paths are prefixed with `/repos/<id>`; absolute URLs are
        sent unchanged.
        """
        client = self._require_client()
        if not path.startswith("http://") and not path.startswith("https://"):
            path = f"/repos/{self.id}{path}"
        return client.dispatch(method, path, headers=headers, data=data)

    def history(self) -> List['LibraryCommit']:
        """Fetch the first page of this library's commit history."""
        from ..services.history_service import HistoryService
        return HistoryService(self._require_client()).history(self)

    def upload_link(self) -> str:
        """Fetch an upload URL for this library."""
        from ..services.library_service import LibraryService
        return LibraryService(self._require_client()).upload_link(self)

    def list_entries(self, path: str = "/") -> List['DirectoryEntry']:
        """List one directory level of this library."""
        from ..services.directory_service import DirectoryService
        return DirectoryService(self._require_client()).list_entries(self.id, path)

    def create_directory(self, path: str) -> None:
        """Create a directory in this library."""
        from ..services.directory_service import DirectoryService
        DirectoryService(self._require_client()).create_directory(self.id, path)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary using the server's field names."""
        return {
            'id': self.id,
            'name': self.name,
            'type': self.type,
            'root': self.root,
            'owner': self.owner,
            'permission': self.permission,
            'encrypted': self.encrypted,
            'virtual': self.virtual,
            'version': self.version,
            'mtime': self.mtime,
            'size': self.size,
            'mtime_relative': self.mtime_relative,
            'head_commit_id': self.head_commit_id,
            'size_formatted': self.size_formatted,
        }

    def __str__(self) -> str:
        return f"{self.name} ({self.id})"
