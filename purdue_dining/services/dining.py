"""Single-day and fan-out menu retrieval."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from datetime import date, datetime, timedelta
import logging

from purdue_dining.config import DiningConfig
from purdue_dining.errors import (
    InvalidDateError,
    InvalidDayRangeError,
    InvalidLocationError,
    ParseError,
    UninitializedConfigError,
    UnknownLocationError,
)
from purdue_dining.models import DiningInfo
from purdue_dining.services.mapper import map_dining_info

LOGGER = logging.getLogger(__name__)


def _check_config(config: DiningConfig) -> None:
    if config is None or not config.locations:
        raise UninitializedConfigError("config has an empty location registry")


def _check_location(config: DiningConfig, location: str) -> None:
    if not config.has_location(location):
        raise InvalidLocationError(f"invalid location: {location!r}")


def _as_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise InvalidDateError(f"expected a date, got {type(value).__name__}")


def get_dining(config: DiningConfig, location: str, target_date: date) -> DiningInfo:
    """Return the menu for one location on one date.

    ``location`` must match a registry entry exactly, case included; that check
    happens before any request is made.
    """
    _check_config(config)
    _check_location(config, location)
    target_date = _as_date(target_date)

    payload = config.api.get_day(location, target_date)
    info = map_dining_info(payload, target_date)
    if not info.location:
        raise UnknownLocationError(f"upstream does not know location {location!r}")
    return info


def _fan_out(config: DiningConfig, jobs: list[tuple], key_for, label: str = "dining days") -> dict:
    """Run ``get_dining`` for every ``(tag, location, date)`` job.

    At most ``config.concurrent`` retrievals are in flight at once. Every job
    runs to completion; if any failed, the error of the earliest job in
    ``jobs`` order is raised and the others are logged.
    """
    results = {}
    errors = []
    with ThreadPoolExecutor(max_workers=config.concurrent) as pool:
        futures = [
            (tag, pool.submit(get_dining, config, location, target_date))
            for tag, location, target_date in jobs
        ]
        for tag, future in futures:
            exc = future.exception()
            if exc is not None:
                errors.append((tag, exc))
                continue
            info = future.result()
            key = key_for(tag, info)
            if key in results:
                errors.append((tag, ParseError(f"duplicate result key {key!r}")))
                continue
            results[key] = info

    if errors:
        for tag, exc in errors[1:]:
            LOGGER.warning("Retrieval for %r also failed: %s", tag, exc)
        raise errors[0][1]

    LOGGER.info("Retrieved %d %s", len(results), label)
    return results


def _day_offsets(target_date: date, day_start: int, day_end: int) -> list[tuple[int, date]]:
    try:
        return [
            (offset, target_date + timedelta(days=offset))
            for offset in range(day_start, day_end + 1)
        ]
    except OverflowError as exc:
        raise InvalidDayRangeError(
            f"days {day_start}..{day_end} from {target_date} leave the supported date range"
        ) from exc


def _until_unavailable(infos: dict[int, DiningInfo]) -> dict[int, DiningInfo]:
    """Keep offsets in ascending order up to the first unavailable day."""
    kept = {}
    for offset in sorted(infos):
        if not infos[offset].available:
            break
        kept[offset] = infos[offset]
    return kept


def get_dining_days(
    config: DiningConfig, location: str, target_date: date, day_start: int, day_end: int
) -> dict[int, DiningInfo]:
    """Return menus for ``target_date + i`` for every ``i`` in ``[day_start, day_end]``.

    Keys are the day offsets; negative offsets are past days.
    """
    _check_config(config)
    if day_end < day_start:
        raise InvalidDayRangeError(f"day range end {day_end} precedes start {day_start}")
    _check_location(config, location)
    target_date = _as_date(target_date)

    jobs = [
        (offset, location, day)
        for offset, day in _day_offsets(target_date, day_start, day_end)
    ]
    return _fan_out(config, jobs, lambda offset, info: offset)


def get_dining_locations(config: DiningConfig, target_date: date) -> dict[str, DiningInfo]:
    """Return menus for every registry location on one date, keyed by the
    location name each response reports."""
    _check_config(config)
    target_date = _as_date(target_date)

    jobs = [(location, location, target_date) for location in config.locations]
    return _fan_out(config, jobs, lambda location, info: info.location, label="dining locations")


def get_dining_range(
    config: DiningConfig, location: str, target_date: date, max_days: int
) -> dict[int, DiningInfo]:
    """Return menus from ``target_date`` onwards, stopping before the first
    unavailable day.

    Upstream marks days it has no menus for yet as unavailable, so the result
    holds offsets ``0..k-1`` for some ``k <= max_days``. All ``max_days`` days
    are requested; the cut happens afterwards.
    """
    if max_days < 1:
        raise InvalidDayRangeError(f"max_days must be positive, got {max_days}")
    return _until_unavailable(get_dining_days(config, location, target_date, 0, max_days - 1))


def get_dining_full(
    config: DiningConfig, target_date: date, max_days: int
) -> dict[str, dict[int, DiningInfo]]:
    """Return ``get_dining_range`` for every registry location.

    Keyed by registry name. All ``len(locations) * max_days`` requests share
    one pool capped at ``config.concurrent``, and any failure fails the call.
    """
    _check_config(config)
    if max_days < 1:
        raise InvalidDayRangeError(f"max_days must be positive, got {max_days}")
    target_date = _as_date(target_date)

    days = _day_offsets(target_date, 0, max_days - 1)
    jobs = [
        ((location, offset), location, day)
        for location in config.locations
        for offset, day in days
    ]
    infos = _fan_out(config, jobs, lambda tag, info: tag, label="location days")

    full = {}
    for location in config.locations:
        by_offset = {offset: infos[(location, offset)] for offset, _ in days}
        full[location] = _until_unavailable(by_offset)
    return full
