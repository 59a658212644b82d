#!/usr/bin/env python3

import click

from seafileclient.commands.libraries import (
    libraries_handler,
    library_handler,
    default_id_handler,
    history_handler,
    upload_link_handler,
)
from seafileclient.commands.directory import ls_handler, mkdir_handler
from seafileclient.commands.account import login_handler, ping_handler
from seafileclient.commands.config import config_cmd


@click.group()
@click.version_option(package_name='seafileclient')
def cli():
    """seafile - Command-line client for Seafile libraries.

    Lists libraries, browses their directories and reads their history
    through the server's web API. Output is JSONL unless --pretty is given.
    """
    pass


# Library commands
cli.add_command(libraries_handler, name='libraries')
cli.add_command(library_handler, name='library')
cli.add_command(default_id_handler, name='default-id')
cli.add_command(history_handler, name='history')
cli.add_command(upload_link_handler, name='upload-link')

# Directory commands
cli.add_command(ls_handler, name='ls')
cli.add_command(mkdir_handler, name='mkdir')

# Account and configuration
cli.add_command(login_handler, name='login')
cli.add_command(ping_handler, name='ping')
cli.add_command(config_cmd)


def main():
    cli()

if __name__ == "__main__":
    main()
