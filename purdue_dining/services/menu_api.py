"""Client for the Purdue dining menus JSON API."""

from __future__ import annotations

from datetime import date
import logging
from urllib.parse import quote

import requests

from purdue_dining.config import Config
from purdue_dining.errors import ParseError
from purdue_dining.services.http import compact_get

LOGGER = logging.getLogger(__name__)

DATE_LAYOUT = "%Y-%m-%d"
DEFAULT_HEADERS = {"Accept": "application/json"}


def format_date(target_date: date) -> str:
    return target_date.strftime(DATE_LAYOUT)


class MenuAPIClient:
    """Client for the public menus endpoints.

    Fan-out retrieval calls this client from several worker threads. By default
    every request goes through ``requests.get`` and shares nothing; a caller
    passing ``session`` takes responsibility for that session being safe to
    use from those threads.
    """

    def __init__(
        self,
        base_url: str = Config.MENU_API_URL,
        timeout: float | None = Config.REQUEST_TIMEOUT,
        session: requests.Session | None = None,
    ):
        self.locations_url = f"{base_url.rstrip('/')}/locations"
        self.timeout = timeout
        self.session = session

    def _get_json(self, url: str):
        response = compact_get(url, headers=DEFAULT_HEADERS, timeout=self.timeout, session=self.session)
        try:
            return response.json()
        except ValueError as exc:
            raise ParseError(f"invalid json from {url}") from exc

    def day_url(self, location: str, target_date: date) -> str:
        return f"{self.locations_url}/{quote(location, safe='')}/{format_date(target_date)}"

    def get_locations(self) -> list[str]:
        """Return location names in upstream order, case preserved."""
        payload = self._get_json(self.locations_url)
        if not isinstance(payload, dict) or not isinstance(payload.get("Location"), list):
            raise ParseError("locations payload has no Location list")
        names = []
        for loc in payload["Location"]:
            if not isinstance(loc, dict):
                raise ParseError("locations payload entry is not an object")
            if loc.get("Name"):
                names.append(loc["Name"])
        return names

    def get_day(self, location: str, target_date: date) -> dict:
        """Return the raw day payload for one location."""
        url = self.day_url(location, target_date)
        payload = self._get_json(url)
        if not isinstance(payload, dict):
            raise ParseError(f"day payload from {url} is not an object")
        return payload
