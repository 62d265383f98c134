"""
Shared fixtures: an in-process fake Nimiq node behind httpx.MockTransport.

The fake node answers every JSON-RPC request with the configured result
for its method, echoing the request ID, and records what it received.
"""

from __future__ import annotations

import json
import threading
from typing import Any, Callable

import httpx
import pytest

from nimiqrpc.api import NimiqClient

NODE_URL = "http://node.test:8648"


class FakeNode:
    def __init__(self) -> None:
        self.results: dict[str, Any] = {}
        self.errors: dict[str, dict[str, Any]] = {}
        self.requests: list[dict[str, Any]] = []
        self.http_requests: list[httpx.Request] = []
        self._lock = threading.Lock()

    def respond(self, method: str, result: Any) -> None:
        """Answer ``method`` with ``result`` (a value or a callable of the params)."""
        self.results[method] = result

    def fail(self, method: str, code: int, message: str = "", data: Any = None) -> None:
        error: dict[str, Any] = {"code": code, "message": message}
        if data is not None:
            error["data"] = data
        self.errors[method] = error

    def last_request(self) -> dict[str, Any]:
        return self.requests[-1]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        with self._lock:
            self.requests.append(payload)
            self.http_requests.append(request)

        method = payload["method"]
        body: dict[str, Any] = {"jsonrpc": "2.0", "id": payload["id"]}
        if method in self.errors:
            body["error"] = self.errors[method]
        else:
            result = self.results.get(method)
            if callable(result):
                result = result(payload.get("params"))
            body["result"] = result
        return httpx.Response(200, json=body)


def make_transport(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.MockTransport:
    return httpx.MockTransport(handler)


@pytest.fixture()
def node() -> FakeNode:
    return FakeNode()


@pytest.fixture()
def client(node: FakeNode):
    with NimiqClient(NODE_URL, transport=make_transport(node)) as rpc:
        yield rpc
