"""Errors raised across the host bridge.

The host reports a failed operation as a single string (for example
``"Path outside workspace"``), sent as the JSON body of a 4xx/5xx reply.
The exceptions below carry that text unchanged plus the HTTP status and the
operation name.
"""

from __future__ import annotations

from typing import Any, Optional

_MAX_BODY_CHARS = 400


class BridgeError(RuntimeError):
    """Base class for failures reported across the host bridge."""

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.context = context


class HostCallError(BridgeError):
    """HTTP 4xx: the host rejected the operation (bad path, permission, ...)."""

    def __init__(self, message: str, *, status: int, context: Optional[str] = None) -> None:
        super().__init__(message, status=status, context=context)


class HostServerError(BridgeError):
    """HTTP 5xx from the host process."""

    def __init__(self, message: str, *, status: int, context: Optional[str] = None) -> None:
        super().__init__(message, status=status, context=context)


class HostUnavailableError(BridgeError):
    """Transport level timeout or connectivity failure."""

    def __init__(self, message: str, *, context: Optional[str] = None) -> None:
        super().__init__(message, context=context)


def read_host_message(resp: Any) -> Optional[str]:
    """Return the host's error string from ``resp`` without raising.

    A JSON string body is returned as sent; any other body falls back to
    the (truncated) raw text, and an empty body gives ``None``.
    """
    try:
        payload = resp.json()
    except ValueError:
        payload = None
    if isinstance(payload, str):
        return payload.strip() or None
    text = (getattr(resp, "text", "") or "").strip()
    return text[:_MAX_BODY_CHARS] or None
