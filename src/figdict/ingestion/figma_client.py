"""Thin client for the Figma REST API."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable

import requests

from figdict.config import DEFAULT_API_BASE
from figdict.errors import FetchError

LOGGER = logging.getLogger(__name__)


class FigmaClient:
    """Fetches file documents using a personal access token."""

    def __init__(
        self,
        token: str,
        *,
        base_url: str = DEFAULT_API_BASE,
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"X-Figma-Token": token})

    def fetch_file(self, file_key: str) -> Dict[str, Any]:
        """Return the full document JSON of a file."""
        return self._get(f"{self.base_url}/files/{file_key}")

    def fetch_nodes(self, file_key: str, ids: Iterable[str]) -> Dict[str, Any]:
        """Return the JSON of specific nodes, keyed by node id under ``nodes``."""
        return self._get(
            f"{self.base_url}/files/{file_key}/nodes",
            params={"ids": ",".join(ids)},
        )

    def _get(self, url: str, params: Dict[str, str] | None = None) -> Dict[str, Any]:
        LOGGER.info("Fetching %s", url)
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            raise FetchError(f"Request to Figma failed: {exc}") from exc

        if not response.ok:
            raise FetchError(
                f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
            )
        try:
            data = response.json()
        except ValueError as exc:
            raise FetchError("Figma returned a response that is not valid JSON") from exc
        if not isinstance(data, dict):
            raise FetchError("Figma returned an unexpected JSON payload")
        LOGGER.debug("Fetched %s", url)
        return data
