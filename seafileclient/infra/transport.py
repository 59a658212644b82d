"""
HTTP transport infrastructure for seafileclient.

Provides the single request-dispatch primitive every service builds on:
- Joins relative API paths onto the server's /api2 root
- Injects the `Authorization: Token ...` header
- Turns failures below the HTTP layer into TransportError

Anything with a compatible `dispatch` method can stand in for
SeafileTransport, which keeps the services easy to test.
"""

import logging
from typing import Optional, Dict, Any, Protocol

import requests

from ..errors import TransportError, DecodeError, OperationFailedError

logger = logging.getLogger(__name__)

# Path prefix of the Seafile web API
API_ROOT = "/api2"

# Default HTTP timeout in seconds
DEFAULT_TIMEOUT = 30


class Dispatcher(Protocol):
    """Anything able to perform one authenticated round trip."""

    def dispatch(
        self,
        method: str,
        path: str,
        headers: Optional[Dict[str, str]] = None,
        data: Any = None,
    ) -> requests.Response:
        ...


def api_url(server_url: str, path: str) -> str:
    """
    Build the absolute URL for an API path.

    Absolute http(s) URLs are returned unchanged so that links handed out
    by the server can be followed as-is.
    """
    if path.startswith("http://") or path.startswith("https://"):
        return path
    if not path.startswith("/"):
        path = "/" + path
    return server_url.rstrip("/") + API_ROOT + path


class SeafileTransport:
    """
    Authenticated HTTP transport for one Seafile server.

    Example:
        transport = SeafileTransport("https://cloud.example.com", token="...")
        with transport.dispatch("GET", "/repos/") as response:
            print(response.json())
    """

    def __init__(
        self,
        server_url: str,
        token: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        verify_tls: bool = True,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize SeafileTransport.

        Args:
            server_url: Server base URL, e.g. https://cloud.example.com
            token: API token (from `obtain_token` or the web UI)
            timeout: HTTP request timeout in seconds
            verify_tls: Verify the server's TLS certificate
            session: Optional pre-built requests session
        """
        self.server_url = server_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.verify = verify_tls
        self.session.headers.update({
            'Accept': 'application/json',
        })
        if token:
            self.session.headers['Authorization'] = f'Token {token}'

    def dispatch(
        self,
        method: str,
        path: str,
        headers: Optional[Dict[str, str]] = None,
        data: Any = None,
    ) -> requests.Response:
        """
        Perform one request and return the response unread.

        Callers own the response and must close it, typically with
        `with transport.dispatch(...) as response:`.

        Raises:
            TransportError: on network, TLS or DNS failures
        """
        url = api_url(self.server_url, path)
        logger.debug(f"{method} {url}")
        try:
            return self.session.request(
                method,
                url,
                headers=headers,
                data=data,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise TransportError(f"{method} {path} failed: {e}") from e

    def ping(self) -> bool:
        """Check that the server answers (no authentication needed)."""
        return self._pong("/ping/")

    def auth_ping(self) -> bool:
        """Check that the server answers and accepts our token."""
        return self._pong("/auth/ping/")

    def _pong(self, path: str) -> bool:
        with self.dispatch("GET", path) as response:
            if response.status_code != 200:
                return False
            try:
                return response.json() == "pong"
            except ValueError:
                return False


def obtain_token(
    server_url: str,
    username: str,
    password: str,
    timeout: float = DEFAULT_TIMEOUT,
    verify_tls: bool = True,
) -> str:
    """
    Exchange account credentials for an API token.

    Args:
        server_url: Server base URL
        username: Account login (usually an e-mail address)
        password: Account password
        timeout: HTTP request timeout in seconds
        verify_tls: Verify the server's TLS certificate

    Returns:
        The API token string

    Raises:
        TransportError: the request never got an HTTP answer
        OperationFailedError: the server refused the credentials
        DecodeError: the answer carried no token
    """
    transport = SeafileTransport(server_url, timeout=timeout, verify_tls=verify_tls)
    with transport.dispatch(
        "POST",
        "/auth-token/",
        data={'username': username, 'password': password},
    ) as response:
        if response.status_code != 200:
            raise OperationFailedError(
                "authentication failed", response.status_code, response.text
            )
        try:
            token = response.json().get('token')
        except (ValueError, AttributeError) as e:
            raise DecodeError(
                f"invalid token response: {e}", response.status_code, response.text
            ) from e

    if not token:
        raise DecodeError("token missing from response", response.status_code, response.text)
    return token
