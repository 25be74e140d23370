# ra_strapi/adapters/rest_adapter.py
import asyncio
import json
import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from ..exceptions import HttpError

logger = logging.getLogger(__name__)


@dataclass
class Response:
    status: int
    headers: Dict[str, str]
    body: str
    json: Any = None


class RESTAdapter:
    """
    JSON-aware HTTP transport used by the provider when none is injected.
    Sends JSON, parses JSON answers and raises HttpError on non-2xx statuses.

    Requests run in worker threads; each thread gets its own requests.Session.
    """

    def __init__(self, config: Dict = None):
        self.config = {
            "timeout": 30,
            "headers": {},
            **(config or {})
        }

        self._local = threading.local()
        self._sessions = []
        self._sessions_lock = threading.Lock()

    @property
    def session(self) -> requests.Session:
        """Session bound to the calling thread"""
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            session.headers.update(self.config["headers"])
            self._local.session = session
            with self._sessions_lock:
                self._sessions.append(session)
        return session

    def _prepare(self, options: Dict) -> Dict:
        method = options.get("method", "GET").upper()
        headers = {"Accept": "application/json", **(options.get("headers") or {})}
        body = options.get("body")

        if method != "GET" and not any(k.lower() == "content-type" for k in headers):
            headers["Content-Type"] = "application/json"

        if isinstance(body, (dict, list)):
            body = json.dumps(body)

        return {"method": method, "headers": headers, "data": body}

    def _send(self, url: str, options: Dict) -> Response:
        prepared = self._prepare(options)
        resp = self.session.request(
            prepared["method"],
            url,
            headers=prepared["headers"],
            data=prepared["data"],
            timeout=self.config["timeout"],
        )
        logger.debug("%s %s -> %s", prepared["method"], url, resp.status_code)

        try:
            payload = resp.json()
        except ValueError:
            payload = None

        if resp.status_code < 200 or resp.status_code >= 300:
            message = _error_message(payload) or resp.reason or f"HTTP {resp.status_code}"
            logger.warning("Request failed: %s %s -> %s %s", prepared["method"], url, resp.status_code, message)
            raise HttpError(message, resp.status_code, payload if payload is not None else resp.text)

        return Response(
            status=resp.status_code,
            headers=dict(resp.headers),
            body=resp.text,
            json=payload,
        )

    async def request(self, url: str, options: Optional[Dict] = None) -> Response:
        """
        Issue a request without blocking the event loop.
        options: {"method": ..., "body": ..., "headers": {...}}
        """
        return await asyncio.to_thread(self._send, url, options or {})

    def close(self):
        """Close every session opened by the worker threads"""
        with self._sessions_lock:
            sessions, self._sessions = self._sessions, []
            self._local = threading.local()
        for session in sessions:
            session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


def _error_message(payload: Any) -> Optional[str]:
    # Strapi answers {"data": null, "error": {"status", "name", "message"}}
    if not isinstance(payload, dict):
        return None
    error = payload.get("error")
    if isinstance(error, dict) and error.get("message"):
        return error["message"]
    return payload.get("message")
