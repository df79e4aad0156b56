"""HTTP transport to the host process.

Each remote call is one ``POST {base_url}/invoke/{operation}`` with the
argument record as JSON body. The host answers 2xx with the JSON result
(``null`` for operations without output) or 4xx/5xx with an error payload,
usually a bare JSON string such as ``"Path outside workspace"``.

Dependencies:
    - ``requests`` for network I/O.
    - ``asyncio.to_thread`` so the blocking request never stalls the UI loop.

Failure semantics:
    Calls are attempted exactly once. Transport failures raise
    ``HostUnavailableError``; host-reported failures raise ``HostCallError`` or
    ``HostServerError``. Nothing is retried or reinterpreted here.
"""

from __future__ import annotations

import asyncio
import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import requests
from requests import exceptions as req_exc

from inkwell.adapters.bridge_errors import (
    HostCallError,
    HostServerError,
    HostUnavailableError,
    read_host_message,
)
from inkwell.domain.ports import BridgePort, OperationName

_OPERATION_RE = re.compile(r"^[a-z][a-z_]*$")


@dataclass
class HttpConfig:
    """Timeout configuration for host calls.

    Attributes:
        request_timeout_s: Timeout in seconds for a single call.
    """
    request_timeout_s: int = 10


class HostSession:
    """Thin ``requests.Session`` wrapper with API-key headers, no retries."""

    def __init__(self, api_key: Optional[str], cfg: HttpConfig) -> None:
        self.session = requests.Session()
        self.api_key = api_key
        self.cfg = cfg

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json", "Content-Type": "application/json"}
        if self.api_key:
            headers["X-API-Key"] = self.api_key
        return headers

    def post(
        self,
        url: str,
        *,
        json_body: Mapping[str, Any],
        timeout: Optional[int] = None,
    ) -> requests.Response:
        """Send a JSON POST request once.

        Raises:
            HostUnavailableError: On timeout or connection failure.
        """
        context = f"POST {url}"
        try:
            return self.session.post(
                url,
                data=json.dumps(dict(json_body)),
                headers=self._headers(),
                timeout=timeout or self.cfg.request_timeout_s,
            )
        except (req_exc.Timeout, req_exc.ConnectionError) as exc:
            raise HostUnavailableError(f"Host not reachable at {url}", context=context) from exc


class HttpBridge(BridgePort):
    """Bridge transport that invokes named host operations over HTTP."""

    def __init__(
        self,
        base_url: str,
        *,
        api_key: Optional[str] = None,
        request_timeout_s: int = 10,
    ) -> None:
        if not base_url:
            raise ValueError("HttpBridge requires a host base URL")
        self.base_url = base_url.rstrip("/")
        self.cfg = HttpConfig(request_timeout_s=request_timeout_s)
        self.session = HostSession(api_key or None, self.cfg)
        self._log = logging.getLogger(__name__)

    async def call(self, operation: OperationName, args: Mapping[str, Any]) -> Any:
        url = self._make_url(operation)
        self._log.debug("invoke %s", operation)
        resp = await asyncio.to_thread(self.session.post, url, json_body=args)
        self._ensure_ok(resp, operation)
        return self._json_any(resp)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _make_url(self, operation: OperationName) -> str:
        if not isinstance(operation, str) or not _OPERATION_RE.match(operation):
            raise ValueError(f"Invalid host operation name: {operation!r}")
        return f"{self.base_url}/invoke/{operation}"

    @staticmethod
    def _ensure_ok(resp: requests.Response, ctx: str) -> None:
        status = resp.status_code
        if 200 <= status < 300:
            return
        message = read_host_message(resp)
        if 400 <= status < 500:
            raise HostCallError(message or f"{ctx}: HTTP {status}", status=status, context=ctx)
        detail = f": {message}" if message else ""
        raise HostServerError(f"{ctx}{detail} (HTTP {status})", status=status, context=ctx)

    @staticmethod
    def _json_any(resp: requests.Response) -> Any:
        content = getattr(resp, "content", None)
        if content is not None and not content:
            return None
        return resp.json()


__all__ = ["HostSession", "HttpBridge", "HttpConfig"]
