"""
Shared fixtures for adaptor metadata tests.
"""

import asyncio
import itertools
from typing import Any

import pytest

from adaptor_metadata.config import get_settings


class FakeHostContext:
    """
    In-memory host event channel.

    When ``payload`` is set, answers every ``request_metadata`` by emitting
    ``metadata_ready`` on a later loop turn.
    """

    _NO_RESPONSE = object()

    def __init__(self, payload: Any = _NO_RESPONSE):
        self.target = "metadata-explorer"
        self.payload = payload
        self.handlers: dict[int, tuple[str, Any]] = {}
        self.sent: list[tuple[Any, str, dict]] = []
        self.deregistered: list[int] = []
        self._refs = itertools.count(1)

    def register_once(self, event, handler):
        ref = next(self._refs)
        self.handlers[ref] = (event, handler)
        return ref

    def deregister(self, handler_ref):
        self.deregistered.append(handler_ref)
        self.handlers.pop(handler_ref, None)

    def send(self, target, event, payload):
        self.sent.append((target, event, payload))
        if event == "request_metadata" and self.payload is not self._NO_RESPONSE:
            asyncio.get_running_loop().call_soon(self.emit, "metadata_ready", self.payload)

    def emit(self, event, payload):
        for _, (name, handler) in list(self.handlers.items()):
            if name == event:
                handler(payload)


@pytest.fixture
def host_factory():
    """Build fake host contexts; pass a payload to make the host respond."""
    return FakeHostContext


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset cached settings around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
