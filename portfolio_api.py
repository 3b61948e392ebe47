"""Portfolio site API client.

This module defines a small client wrapper around the portfolio site's
JSON API.  It is used by ``manage_cards.py`` and can be imported by
other scripts that need to seed or edit the catalog without going
through the admin page.

The client exposes high‑level methods for each endpoint:

* :meth:`login` – exchange the admin credentials for a token.
* :meth:`list_cards` / :meth:`highlights` – read the catalog.
* :meth:`create_card`, :meth:`update_card`, :meth:`delete_card` – edit it.
* :meth:`get_settings` / :meth:`update_settings` – the highlight count.
* :meth:`upload_image` – store an image and get its ``imagePath``.

Every method returns a tuple ``(data, error)``.  On success ``error`` is
``None``; on failure ``data`` is empty and ``error`` is a dictionary
with ``status_code`` and ``message``.  Methods never raise for HTTP or
network errors.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class PortfolioAPI:
    """Client for the portfolio site API.

    Args:
        base_url: Root URL of the site, e.g. ``http://localhost:8000``.
        api_prefix: Prefix the JSON API is mounted under.
        api_key: Optional admin token.  Set automatically by
            :meth:`login`; sent as ``Authorization: Bearer <token>``.
        session: Optional requests session.  If not supplied a session
            will be created automatically.
    """

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api",
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        self.base_url = base_url.rstrip("/") + "/" + api_prefix.strip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Dict[str, Any] | None = None,
        json_body: Any | None = None,
        files: Dict[str, Any] | None = None,
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success and ``error`` is ``None``. On failure,
            ``data`` is ``None`` and ``error`` is a dictionary with keys
            ``status_code`` and ``message`` describing the issue.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                files=files,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not isinstance(message, str):
                # FastAPI validation errors carry a list of problems
                message = str(message)
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Auth
    # ------------------------------------------------------------------
    def login(self, username: str, password: str) -> Tuple[bool, Optional[Error]]:
        """Log in as the admin and remember the returned token."""
        data, error = self._request("POST", "/auth", json_body={"username": username, "password": password})
        if error:
            return False, error
        self.api_key = data.get("access_token") if isinstance(data, dict) else None
        return bool(self.api_key), None

    # ------------------------------------------------------------------
    # Cards
    # ------------------------------------------------------------------
    def list_cards(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/cards")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def highlights(self, n: Optional[int] = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Most recent cards; ``n`` defaults to the server setting."""
        params = {"n": n} if n is not None else None
        data, error = self._request("GET", "/cards/highlights", params=params)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def create_card(self, card: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a card from ``title``, ``description``, ``category`` and optional fields."""
        return self._request("POST", "/cards", json_body=card)

    def update_card(self, card: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace a card; ``card`` must be the full record including ``id``."""
        return self._request("PUT", "/cards", json_body=card)

    def delete_card(self, card_id: str) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", "/cards", json_body={"id": card_id})
        return error is None, error

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------
    def get_settings(self) -> Tuple[Dict[str, Any], Optional[Error]]:
        data, error = self._request("GET", "/settings")
        if error:
            return {}, error
        return data or {}, None

    def update_settings(self, number_of_highlights: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PUT", "/settings", json_body={"numberOfHighlights": number_of_highlights})

    # ------------------------------------------------------------------
    # Uploads
    # ------------------------------------------------------------------
    def upload_image(self, path: str) -> Tuple[Optional[str], Optional[Error]]:
        """Upload the file at ``path`` and return its ``imagePath``."""
        try:
            with open(path, "rb") as f:
                data, error = self._request("POST", "/upload", files={"file": (os.path.basename(path), f)})
        except OSError as exc:
            logger.error("Cannot read %s: %s", path, exc)
            return None, {"status_code": None, "message": str(exc)}
        if error:
            return None, error
        return (data or {}).get("imagePath"), None
