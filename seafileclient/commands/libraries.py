"""
Library commands for seafileclient.

Commands that list and resolve libraries, and those that act on a single
library (history, upload link).
"""

from typing import Optional

import click

from ..cli_utils import standard_command, add_common_options
from ..domain import LibraryType
from ..output import emit
from ..services import LibraryService

LIBRARY_COLUMNS = ['name', 'id', 'type', 'owner', 'permission', 'size_formatted', 'encrypted']
COMMIT_COLUMNS = ['id', 'ctime', 'creator_name', 'desc']


def resolve_library(transport, name: Optional[str]):
    """Find a library by name, falling back to the default library."""
    return LibraryService(transport).get_library(name or "")


@click.command('libraries')
@click.option('--type', '-t', 'library_type', type=click.Choice(LibraryType.ALL),
              help='Only list libraries of this ownership class')
@add_common_options('verbose', 'pretty')
@standard_command
def libraries_handler(library_type: Optional[str], pretty: bool, config, transport):
    """
    List the libraries you can access.

    \b
    Examples:
        seafile libraries
        seafile libraries --type mine --pretty
        seafile libraries | jq -r '.name'
    """
    libraries = LibraryService(transport).list_libraries(library_type)
    emit(libraries, pretty=pretty, columns=LIBRARY_COLUMNS, title=f"Libraries ({len(libraries)})")


@click.command('library')
@click.argument('name', required=False)
@add_common_options('verbose', 'pretty')
@standard_command
def library_handler(name: Optional[str], pretty: bool, config, transport):
    """
    Show one library by NAME, or the default library when NAME is omitted.

    Looking a library up lists every library and scans the result, since
    the server offers no direct lookup.
    """
    library = resolve_library(transport, name)
    emit([library], pretty=pretty, columns=LIBRARY_COLUMNS)


@click.command('default-id')
@add_common_options('verbose')
@standard_command
def default_id_handler(config, transport):
    """Print the id of your default library."""
    click.echo(LibraryService(transport).resolve_default_library_id())


@click.command('history')
@click.argument('name', required=False)
@add_common_options('verbose', 'pretty')
@standard_command
def history_handler(name: Optional[str], pretty: bool, config, transport):
    """
    Show the latest commits of library NAME (default library if omitted).

    Only the first page of history returned by the server is shown.
    """
    library = resolve_library(transport, name)
    commits = library.history()
    emit(commits, pretty=pretty, columns=COMMIT_COLUMNS, title=f"History of {library.name}")


@click.command('upload-link')
@click.argument('name', required=False)
@add_common_options('verbose')
@standard_command
def upload_link_handler(name: Optional[str], config, transport):
    """Print an upload URL for library NAME (default library if omitted)."""
    library = resolve_library(transport, name)
    click.echo(library.upload_link())
