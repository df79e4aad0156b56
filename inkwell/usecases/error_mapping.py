"""Translate bridge errors into user-facing UseCaseError instances."""

from __future__ import annotations

from typing import Optional

from inkwell.adapters.bridge_errors import (
    BridgeError,
    HostCallError,
    HostServerError,
    HostUnavailableError,
)
from inkwell.domain.ports import UseCaseError


def map_bridge_error(
    exc: Exception,
    *,
    default_code: str,
    default_message: Optional[str] = None,
) -> UseCaseError:
    """Map bridge exceptions to stable UseCaseError codes.

    Args:
        exc: Exception raised by the gateway or the bridge below it.
        default_code: Code used for errors outside the bridge taxonomy.
        default_message: Message used when ``exc`` carries none.

    Returns:
        A ``UseCaseError``; an incoming ``UseCaseError`` is returned as is.
    """
    if isinstance(exc, UseCaseError):
        return exc
    if isinstance(exc, HostUnavailableError):
        return UseCaseError("HOST_UNAVAILABLE", "Host not reachable. Is the editor host running?")
    if isinstance(exc, HostCallError):
        return UseCaseError(
            "HOST_REJECTED",
            str(exc) or "Operation rejected.",
            meta={"status": exc.status, "context": exc.context},
        )
    if isinstance(exc, HostServerError):
        return UseCaseError("HOST_ERROR", "Host error, try again.")
    if isinstance(exc, BridgeError):
        return UseCaseError("BRIDGE_ERROR", str(exc))

    message = default_message or str(exc) or "Unexpected error."
    return UseCaseError(default_code, message)


__all__ = ["map_bridge_error"]
