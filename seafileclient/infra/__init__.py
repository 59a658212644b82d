"""
Infrastructure layer for seafileclient.

Contains the abstraction over the remote HTTP API:
- Dispatcher: Protocol the services depend on
- SeafileTransport: requests-based Dispatcher for one server
- obtain_token: Exchange credentials for an API token

Services only see the Dispatcher protocol, so tests can inject fakes.
"""

from .transport import Dispatcher, SeafileTransport, obtain_token, api_url

__all__ = [
    'Dispatcher',
    'SeafileTransport',
    'obtain_token',
    'api_url',
]
