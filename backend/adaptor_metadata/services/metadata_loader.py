"""
Metadata Loader Service.

Requests adaptor metadata from the host environment. The host owns the event
channel: the loader asks for metadata with a ``request_metadata`` event and
waits for a single ``metadata_ready`` event carrying the tree.
"""

import asyncio
import logging
from collections.abc import Callable
from typing import Any, Protocol

from adaptor_metadata.config import Settings, get_settings
from adaptor_metadata.utils.tree_sort import normalize_metadata

logger = logging.getLogger(__name__)


class HostContext(Protocol):
    """
    Event channel provided by the host environment.

    These three operations and ``target`` are all the loader relies on.
    """

    target: Any

    def register_once(self, event: str, handler: Callable[[Any], None]) -> Any:
        """Register a handler for the next occurrence of ``event``."""
        ...

    def deregister(self, handler_ref: Any) -> None:
        """Remove a handler returned by ``register_once``."""
        ...

    def send(self, target: Any, event: str, payload: dict[str, Any]) -> None:
        """Dispatch an outbound event to ``target``."""
        ...


class MetadataLoaderService:
    """
    Service for requesting metadata trees from a host context.

    Features:
    - One request event and one response handler per call
    - Payload resolved verbatim, no automatic normalization
    - No timeout: an unanswered request stays pending

    Requests against the same context are not coordinated. Callers must
    wait for one request to resolve before issuing the next.
    """

    def __init__(self, settings: Settings | None = None):
        settings = settings or get_settings()
        self.request_event = settings.request_event
        self.ready_event = settings.ready_event

    def request_metadata(self, ctx: HostContext) -> "asyncio.Future[Any]":
        """
        Ask the host for metadata.

        The handler is registered and the request sent before this returns,
        so the host always sees the request before any response can arrive.
        Must be called from a running event loop.

        Args:
            ctx: Host context providing the event channel

        Returns:
            Future resolved with the ``metadata_ready`` payload
        """
        future = asyncio.get_running_loop().create_future()
        handler_ref = None
        answered = False

        def on_metadata_ready(payload: Any) -> None:
            nonlocal answered
            # Only the first delivery counts, even if the host repeats it
            if answered:
                logger.debug(f"Ignoring repeated '{self.ready_event}' from host")
                return
            answered = True

            ctx.deregister(handler_ref)
            if future.cancelled():
                logger.debug("Metadata arrived after the request was cancelled")
                return
            logger.debug(f"Received '{self.ready_event}' from host")
            future.set_result(payload)

        handler_ref = ctx.register_once(self.ready_event, on_metadata_ready)

        logger.info(f"Sending '{self.request_event}' to host")
        ctx.send(ctx.target, self.request_event, {})

        return future

    async def load_sorted_metadata(self, ctx: HostContext) -> Any:
        """
        Request metadata and return it in deterministic order.

        Args:
            ctx: Host context providing the event channel

        Returns:
            Normalized metadata tree, or None if the host sent none
        """
        metadata = await self.request_metadata(ctx)
        return normalize_metadata(metadata)


def load_metadata(ctx: HostContext) -> "asyncio.Future[Any]":
    """Request metadata using the default event names."""
    return MetadataLoaderService().request_metadata(ctx)
