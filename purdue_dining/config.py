"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os

from dotenv import load_dotenv

from purdue_dining.errors import InvalidConcurrencyError

load_dotenv()

LOGGER = logging.getLogger(__name__)


def _optional_float(value: str) -> float | None:
    return float(value) if value.strip() else None


class Config:
    """Environment defaults."""

    MENU_API_URL = os.getenv("MENU_API_URL", "https://api.hfs.purdue.edu/menus/v2").rstrip("/")
    DINING_CONCURRENCY = int(os.getenv("DINING_CONCURRENCY", "4"))
    REQUEST_TIMEOUT = _optional_float(os.getenv("DINING_REQUEST_TIMEOUT", ""))


@dataclass(frozen=True)
class DiningConfig:
    """Concurrency limit plus the location registry resolved at construction.

    Instances are immutable and may be shared between threads. ``api`` is the
    upstream collaborator used for every retrieval made with this config.
    """

    concurrent: int
    locations: tuple[str, ...]
    api: object

    def has_location(self, location: str) -> bool:
        return location in self.locations


def new_config(concurrent: int | None = None, api=None) -> DiningConfig:
    """Fetch the location registry and return a ready config.

    Raises InvalidConcurrencyError for a non-positive limit, RequestError when
    the registry cannot be fetched and ParseError when it cannot be decoded.
    """
    if concurrent is None:
        concurrent = Config.DINING_CONCURRENCY
    if isinstance(concurrent, bool) or not isinstance(concurrent, int) or concurrent < 1:
        raise InvalidConcurrencyError(f"concurrency must be a positive integer, got {concurrent!r}")

    if api is None:
        # menu_api imports this module
        from purdue_dining.services.menu_api import MenuAPIClient

        api = MenuAPIClient()

    locations = tuple(api.get_locations())
    LOGGER.info("Loaded %d dining locations", len(locations))
    return DiningConfig(concurrent=concurrent, locations=locations, api=api)
