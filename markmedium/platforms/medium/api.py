"""Medium REST API helpers."""

from __future__ import annotations

from typing import Any, Mapping

import requests

from markmedium.errors import ProtocolMismatchError, TransportError
from markmedium.utils.logging import get_logger

from .envelope import decode_envelope, unwrap
from .models import MediumUser, PublishedPost

LOGGER = get_logger(__name__)

DEFAULT_API_BASE = "https://api.medium.com/v1"


class MediumApiClient:
    """Minimal client for the two Medium endpoints the publisher needs."""

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_API_BASE,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()

    def fetch_me(self, token: str) -> MediumUser:
        """Resolve the author behind ``token``."""
        body = self._request("GET", "/me", token)
        return unwrap(decode_envelope(body, MediumUser.from_data))

    def create_post(self, token: str, author_id: str, payload: Mapping[str, Any]) -> PublishedPost:
        """Create a post for ``author_id`` and return its public URL."""
        body = self._request("POST", f"/users/{author_id}/posts", token, payload=payload)
        return unwrap(decode_envelope(body, PublishedPost.from_data))

    def close(self) -> None:
        self._session.close()

    def _request(
        self,
        method: str,
        path: str,
        token: str,
        *,
        payload: Mapping[str, Any] | None = None,
    ) -> Any:
        url = f"{self._base_url}{path}"
        headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/json",
            "Accept-Charset": "utf-8",
        }
        LOGGER.info(
            "Calling Medium API",
            extra={"event": "medium.request", "method": method, "url": url},
        )
        try:
            response = self._session.request(
                method,
                url,
                headers=headers,
                json=dict(payload) if payload is not None else None,
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(
                f"Could not reach Medium: {exc}",
                details={"url": url, "reason": str(exc)},
            ) from exc

        LOGGER.info(
            "Medium API responded",
            extra={"event": "medium.response", "url": url, "status": response.status_code},
        )

        # Error envelopes arrive with 4xx statuses, so the body is decoded regardless.
        try:
            return response.json()
        except ValueError as exc:
            raise ProtocolMismatchError(
                f"Medium returned a non-JSON response (HTTP {response.status_code})",
                details={"status": response.status_code, "response": response.text[:200]},
            ) from exc


__all__ = ["DEFAULT_API_BASE", "MediumApiClient"]
