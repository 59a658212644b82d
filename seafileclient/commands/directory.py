"""
Directory commands for seafileclient.
"""

import click

from ..cli_utils import standard_command, add_common_options
from ..domain import EntryType
from ..output import emit
from ..services import DirectoryService
from .libraries import resolve_library

ENTRY_COLUMNS = ['type', 'name', 'size', 'mtime', 'parent_dir']


@click.command('ls')
@click.argument('library')
@click.argument('path', default='/')
@click.option('--files', 'only_files', is_flag=True, help='List files only')
@click.option('--dirs', 'only_dirs', is_flag=True, help='List directories only')
@click.option('--recursive', '-r', is_flag=True,
              help='List all directories below PATH (implies --dirs)')
@add_common_options('verbose', 'pretty')
@standard_command
def ls_handler(library: str, path: str, only_files: bool, only_dirs: bool,
               recursive: bool, pretty: bool, config, transport):
    """
    List the entries of PATH in LIBRARY.

    \b
    Examples:
        seafile ls Notes
        seafile ls Notes /projects --files
        seafile ls Notes / --recursive --pretty
    """
    if only_files and (only_dirs or recursive):
        raise click.UsageError("--files cannot be combined with --dirs or --recursive")

    entry_type = EntryType.NONE
    if only_files:
        entry_type = EntryType.FILE
    elif only_dirs or recursive:
        entry_type = EntryType.DIR

    lib = resolve_library(transport, library)
    entries = DirectoryService(transport).list_entries(
        lib.id, path, entry_type=entry_type, recursive=recursive
    )
    emit(entries, pretty=pretty, columns=ENTRY_COLUMNS, title=f"{lib.name}:{path}")


@click.command('mkdir')
@click.argument('library')
@click.argument('path')
@add_common_options('verbose')
@standard_command
def mkdir_handler(library: str, path: str, config, transport):
    """
    Create directory PATH in LIBRARY.

    If PATH already exists the server creates a renamed directory instead
    of failing.
    """
    lib = resolve_library(transport, library)
    lib.create_directory(path)
    emit([{'library': lib.name, 'path': path, 'created': True}])
