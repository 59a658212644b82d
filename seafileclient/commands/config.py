"""
Configuration commands for seafileclient.
"""

import json
import sys

import click

from ..config import load_config, get_config_path
from ..exit_codes import ConfigError


def _mask(token: str) -> str:
    if not token:
        return ''
    return token[:4] + '...' if len(token) > 8 else '***'


@click.group('config')
def config_cmd():
    """Show seafile configuration."""
    pass


@config_cmd.command('show')
@click.option('--show-token', is_flag=True, help='Print the API token unmasked')
def show_config(show_token):
    """Show the effective configuration as JSON."""
    try:
        config = load_config()
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(e.exit_code)

    if not show_token:
        config['server']['token'] = _mask(config['server'].get('token', ''))
    click.echo(json.dumps(config, indent=2))


@config_cmd.command('path')
def config_path():
    """Print the configuration file location."""
    click.echo(str(get_config_path()))
