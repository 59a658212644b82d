"""
Library commit domain object for seafileclient.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any, TYPE_CHECKING

if TYPE_CHECKING:
    from .library import Library


@dataclass(frozen=True)
class LibraryCommit:
    """
    One point in a library's history.

    Merge commits carry both `parent_id` and `second_parent_id`. The
    `rev_*` fields are only filled in when the server describes a
    single-file change. `library` points back at the library the history
    was fetched for and is informational only.
    """
    id: str
    desc: str = ""
    ctime: int = 0
    creator: str = ""
    creator_name: str = ""
    conflict: bool = False
    new_merge: bool = False
    root_id: str = ""
    repo_id: str = ""
    parent_id: Optional[str] = None
    second_parent_id: Optional[str] = None
    rev_file_size: int = 0
    rev_file_id: Optional[str] = None
    rev_renamed_old_path: Optional[str] = None

    library: Optional['Library'] = field(default=None, repr=False, compare=False)

    @classmethod
    def from_api_response(cls, data: Dict[str, Any], library: Optional['Library'] = None) -> 'LibraryCommit':
        """Create from one object of the `/repos/<id>/history` envelope."""
        return cls(
            id=data.get('id') or '',
            desc=data.get('desc') or '',
            ctime=data.get('ctime') or 0,
            creator=data.get('creator') or '',
            creator_name=data.get('creator_name') or '',
            conflict=bool(data.get('conflict', False)),
            new_merge=bool(data.get('new_merge', False)),
            root_id=data.get('root_id') or '',
            repo_id=data.get('repo_id') or '',
            parent_id=data.get('parent_id'),
            second_parent_id=data.get('second_parent_id'),
            rev_file_size=data.get('rev_file_size') or 0,
            rev_file_id=data.get('rev_file_id'),
            rev_renamed_old_path=data.get('rev_renamed_old_path'),
            library=library,
        )

    @property
    def is_merge(self) -> bool:
        return bool(self.second_parent_id)

    def to_dict(self) -> Dict[str, Any]:
        result = {
            'id': self.id,
            'desc': self.desc,
            'ctime': self.ctime,
            'creator': self.creator,
            'creator_name': self.creator_name,
            'conflict': self.conflict,
            'new_merge': self.new_merge,
            'root_id': self.root_id,
            'repo_id': self.repo_id,
            'parent_id': self.parent_id,
            'second_parent_id': self.second_parent_id,
            'rev_file_size': self.rev_file_size,
            'rev_file_id': self.rev_file_id,
            'rev_renamed_old_path': self.rev_renamed_old_path,
        }

        # Remove None values for cleaner output
        return {k: v for k, v in result.items() if v is not None}
