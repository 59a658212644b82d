"""
Response decoding for seafileclient.

The server answers in three shapes, and each endpoint has exactly one:
- bare JSON arrays (directory listings, library listings)
- envelope objects wrapping the payload in named fields (history,
  default-repo)
- a bare JSON string literal (upload links)

The shape is picked by the caller per endpoint, never guessed from the
payload. Every helper reads the body fully and closes the response, also
when decoding fails.
"""

import logging
from typing import Any, Callable, Dict, List, TypeVar

import requests

from .errors import DecodeError

logger = logging.getLogger(__name__)

T = TypeVar('T')


def read_json(response: requests.Response) -> Any:
    """
    Read and parse the response body, closing the response.

    Raises:
        DecodeError: body is not valid JSON
    """
    with response:
        try:
            return response.json()
        except ValueError as e:
            logger.warning(f"Invalid JSON in response (HTTP {response.status_code}): {e}")
            raise DecodeError(
                f"invalid JSON: {e}", response.status_code, response.text
            ) from e


def decode_array(response: requests.Response, factory: Callable[[Dict[str, Any]], T]) -> List[T]:
    """
    Decode a bare JSON array of objects, keeping the server's order.

    Args:
        response: Response whose body is `[{...}, {...}]`
        factory: Builds one entity from one wire object

    Raises:
        DecodeError: body is not a JSON array of objects
    """
    data = read_json(response)
    if not isinstance(data, list):
        raise DecodeError(
            f"expected a JSON array, got {type(data).__name__}",
            response.status_code, response.text,
        )

    items = []
    for item in data:
        if not isinstance(item, dict):
            raise DecodeError(
                f"expected JSON objects in array, got {type(item).__name__}",
                response.status_code, response.text,
            )
        items.append(factory(item))
    return items


def decode_envelope(response: requests.Response) -> Dict[str, Any]:
    """
    Decode an envelope object.

    Raises:
        DecodeError: body is not a JSON object
    """
    data = read_json(response)
    if not isinstance(data, dict):
        raise DecodeError(
            f"expected a JSON object, got {type(data).__name__}",
            response.status_code, response.text,
        )
    return data


def decode_string(response: requests.Response) -> str:
    """
    Decode a JSON string literal such as `"https://host/upload/xyz"`.

    The JSON decoder strips the surrounding quotes and resolves escapes.

    Raises:
        DecodeError: body is valid JSON but not a string
    """
    data = read_json(response)
    if not isinstance(data, str):
        raise DecodeError(
            f"expected a JSON string, got {type(data).__name__}",
            response.status_code, response.text,
        )
    return data
