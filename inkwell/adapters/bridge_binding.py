"""Bridge binding: the single remote-call primitive above the transport.

``BridgeBinding`` receives a resolver strategy at construction and invokes it
on first use only. The resolved transport is cached for the binding's
lifetime; every later call reuses it. ``resolve_transport`` is the production
strategy: an ``HttpBridge`` when a host URL is configured, otherwise a
``NullBridge`` that performs no I/O.

Failures raised by the bound transport pass through untouched.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional

from inkwell.adapters.bridge_http import HttpBridge
from inkwell.adapters.headless import NullBridge
from inkwell.domain.ports import BridgePort, OperationName

TransportResolver = Callable[[], BridgePort]

log = logging.getLogger(__name__)


class BridgeBinding(BridgePort):
    """Lazily bound, reusable remote-call primitive."""

    def __init__(self, resolver: TransportResolver) -> None:
        self._resolver = resolver
        self._transport: Optional[BridgePort] = None

    @property
    def is_bound(self) -> bool:
        return self._transport is not None

    @property
    def transport(self) -> BridgePort:
        """Return the bound transport, resolving it on first access."""
        if self._transport is None:
            transport = self._resolver()
            # A re-entrant resolve may have bound already; keep the first.
            if self._transport is None:
                self._transport = transport
                log.debug("Bridge bound to %s", type(transport).__name__)
        return self._transport

    async def call(self, operation: OperationName, args: Mapping[str, Any]) -> Any:
        return await self.transport.call(operation, dict(args or {}))


def resolve_transport(
    host_url: Optional[str],
    *,
    api_key: Optional[str] = None,
    request_timeout_s: int = 10,
) -> BridgePort:
    """Pick the host transport, or the no-op stub when no host is attached."""
    url = (host_url or "").strip()
    if not url:
        log.info("No host URL configured; using headless bridge")
        return NullBridge()
    return HttpBridge(url, api_key=api_key, request_timeout_s=request_timeout_s)


__all__ = ["BridgeBinding", "TransportResolver", "resolve_transport"]
