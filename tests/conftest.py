"""
Shared fixtures for seafileclient tests.

FakeDispatcher stands in for SeafileTransport: it records every request
and answers from a table of canned responses, which are real
requests.Response objects so decoding runs exactly as in production.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
from urllib.parse import urlsplit, parse_qs

import pytest
import requests


class FakeResponse(requests.Response):
    """A requests.Response with a canned body that records close()."""

    def __init__(self, status: int = 200, body: Any = b''):
        super().__init__()
        if not isinstance(body, (bytes, str)):
            body = json.dumps(body)
        if isinstance(body, str):
            body = body.encode('utf-8')
        self.status_code = status
        self._content = body
        self._content_consumed = True
        self.encoding = 'utf-8'
        self.closed = False

    def close(self):
        self.closed = True


@dataclass
class Call:
    method: str
    path: str
    headers: Optional[Dict[str, str]] = None
    data: Any = None

    @property
    def query(self) -> Dict[str, List[str]]:
        return parse_qs(urlsplit(self.path).query)

    @property
    def endpoint(self) -> str:
        return urlsplit(self.path).path


class FakeDispatcher:
    """Dispatcher that answers from canned responses keyed by method and path."""

    def __init__(self):
        self.routes: Dict[tuple, FakeResponse] = {}
        self.calls: List[Call] = []

    def add(self, method: str, path: str, status: int = 200, body: Any = b'') -> FakeResponse:
        response = FakeResponse(status, body)
        self.routes[(method, path)] = response
        return response

    def dispatch(self, method, path, headers=None, data=None):
        self.calls.append(Call(method, path, headers, data))
        try:
            return self.routes[(method, path)]
        except KeyError:
            raise AssertionError(f"unexpected request {method} {path}") from None


SAMPLE_LIBRARIES = [
    {
        "permission": "rw",
        "encrypted": False,
        "mtime_relative": "<time datetime=\"2024-03-01T10:00:00\">3 days ago</time>",
        "mtime": 1709287200,
        "owner": "alice@example.com",
        "root": "",
        "id": "aaaa-1111",
        "size": 104857,
        "name": "Notes",
        "type": "repo",
        "virtual": False,
        "version": 1,
        "head_commit_id": "c0ffee01",
        "size_formatted": "102.4 KB",
    },
    {
        "permission": "r",
        "encrypted": True,
        "mtime": 1709200800,
        "owner": "bob@example.com",
        "id": "bbbb-2222",
        "size": 0,
        "name": "Shared Photos",
        "type": "srepo",
        "virtual": False,
        "version": 1,
        "head_commit_id": "deadbeef",
    },
]

SAMPLE_ENTRIES = [
    {
        "id": "0000000000000000000000000000000000000000",
        "type": "dir",
        "name": "projects",
        "mtime": 1709287200,
        "permission": "rw",
        "parent_dir": "/",
    },
    {
        "id": "e4fe14c8cda2206bb9606907cf4fca6b30221cf9",
        "type": "file",
        "name": "todo.md",
        "size": 1024,
        "mtime": 1709287100,
        "permission": "rw",
        "parent_dir": "/",
    },
]


@pytest.fixture
def dispatcher():
    return FakeDispatcher()
