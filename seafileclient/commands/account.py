"""
Account commands for seafileclient: login and connectivity checks.
"""

import sys

import click

from ..cli_utils import standard_command, add_common_options, configure_logging
from ..config import load_config, save_config
from ..exit_codes import CommandError
from ..infra import obtain_token
from ..output import emit, emit_error


@click.command('login')
@click.option('--server', '-s', help='Server URL, e.g. https://cloud.example.com')
@click.option('--username', '-u', prompt=True, help='Account login (e-mail)')
@click.option('--password', prompt=True, hide_input=True, help='Account password')
@add_common_options('verbose')
def login_handler(server, username, password, verbose):
    """
    Obtain an API token and store it in the configuration file.

    The password is only sent to the server, never stored.
    """
    try:
        config = load_config()
        configure_logging(config, verbose=verbose)

        server = server or config['server'].get('url')
        if not server:
            raise click.UsageError("No server configured; pass --server")

        token = obtain_token(
            server,
            username,
            password,
            timeout=config['server'].get('timeout_seconds', 30),
            verify_tls=config['server'].get('verify_tls', True),
        )
    except CommandError as e:
        emit_error(e, e.exit_code)
        sys.exit(e.exit_code)

    config['server']['url'] = server
    config['server']['token'] = token
    path = save_config(config)
    emit([{'server': server, 'username': username, 'config': str(path)}])


@click.command('ping')
@add_common_options('verbose')
@standard_command
def ping_handler(config, transport):
    """Check that the server is reachable and accepts the API token."""
    result = {
        'server': transport.server_url,
        'reachable': transport.ping(),
        'authenticated': transport.auth_ping(),
    }
    emit([result])
    if not result['authenticated']:
        sys.exit(1)
