"""Single GET helper on top of requests."""

from __future__ import annotations

import logging

import requests

from purdue_dining.errors import RequestError

LOGGER = logging.getLogger(__name__)


def compact_get(
    url: str,
    headers: dict[str, str] | None = None,
    timeout: float | None = None,
    session: requests.Session | None = None,
) -> requests.Response:
    """Perform one GET and return the response.

    Without ``session`` the module-level ``requests.get`` is used, which opens
    a fresh session per call. ``timeout`` of None waits indefinitely.
    Connection failures and non-2xx answers both raise RequestError.
    """
    LOGGER.debug("GET %s", url)
    get = session.get if session is not None else requests.get
    try:
        response = get(url, headers=headers or {}, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise RequestError(f"error performing request to {url}: {exc}") from exc
    return response
