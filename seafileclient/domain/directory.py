"""
Directory entry domain object for seafileclient.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Dict, Any


class EntryType(Enum):
    """Entry-type filter for directory listings, valued by its `t` parameter."""
    NONE = None
    FILE = "f"
    DIR = "d"


@dataclass(frozen=True)
class DirectoryEntry:
    """
    A file or subdirectory inside a library.

    `parent_dir` is the directory the entry lives in. In a plain listing
    every entry shares the requested path; in a recursive listing it holds
    the full ancestry. The owning library is not recorded here.
    """
    id: str
    type: str = ""
    name: str = ""
    size: int = 0
    permission: str = ""
    mtime: int = 0
    parent_dir: Optional[str] = None

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> 'DirectoryEntry':
        """Create from one object of the `/repos/<id>/dir/` listing."""
        return cls(
            id=data.get('id') or '',
            type=data.get('type') or '',
            name=data.get('name') or '',
            size=data.get('size') or 0,
            permission=data.get('permission') or '',
            mtime=data.get('mtime') or 0,
            parent_dir=data.get('parent_dir'),
        )

    @property
    def is_dir(self) -> bool:
        return self.type == "dir"

    @property
    def is_file(self) -> bool:
        return self.type == "file"

    def path(self, directory: str = "/") -> str:
        """
        Full path of the entry inside its library.

        Args:
            directory: Directory that was listed, used when the server
                did not report `parent_dir`
        """
        parent = self.parent_dir if self.parent_dir is not None else directory
        return parent.rstrip("/") + "/" + self.name

    def to_dict(self) -> Dict[str, Any]:
        result = {
            'id': self.id,
            'type': self.type,
            'name': self.name,
            'size': self.size,
            'permission': self.permission,
            'mtime': self.mtime,
            'parent_dir': self.parent_dir,
        }
        return {k: v for k, v in result.items() if v is not None}
