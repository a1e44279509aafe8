"""Map raw upstream day payloads onto the menu model.

Upstream endpoints disagree on key casing (``IconUrl`` vs ``IconURL``,
``IsVegetarian`` vs ``isVegetarian``), so every field is looked up without
regard to case. Missing collections become empty ones and ``null`` scalars
become empty strings or False. A collection of the wrong type raises
ParseError.
"""

from __future__ import annotations

from datetime import date

from purdue_dining.errors import ParseError
from purdue_dining.models import DiningInfo, Item, Meal, Station


def _field(obj: dict, name: str, default=None):
    if name in obj:
        value = obj[name]
    else:
        lowered = name.lower()
        value = next((v for k, v in obj.items() if k.lower() == lowered), None)
    return default if value is None else value


def _text(obj: dict, name: str) -> str:
    return str(_field(obj, name, ""))


def _objects(obj: dict, name: str) -> list[dict]:
    values = _field(obj, name, [])
    if not isinstance(values, list) or not all(isinstance(v, dict) for v in values):
        raise ParseError(f"{name} is not a list of objects")
    return values


def _optional_id(obj: dict) -> str | None:
    value = _field(obj, "ID")
    return str(value) if value else None


def map_allergens(raw_allergens: list[dict]) -> tuple[str, ...]:
    """Keep names whose flag is true, in source order."""
    return tuple(
        _text(allergen, "Name") for allergen in raw_allergens if _field(allergen, "Value") is True
    )


def map_item(raw: dict) -> Item:
    return Item(
        name=_text(raw, "Name"),
        vegetarian=bool(_field(raw, "IsVegetarian", False)),
        allergens=map_allergens(_objects(raw, "Allergens")),
        id=_optional_id(raw),
    )


def map_station(raw: dict) -> Station:
    return Station(
        name=_text(raw, "Name"),
        icon_url=_text(raw, "IconUrl"),
        items=tuple(map_item(item) for item in _objects(raw, "Items")),
    )


def map_meal(raw: dict) -> Meal:
    hours = _field(raw, "Hours", {})
    if not isinstance(hours, dict):
        raise ParseError("Hours is not an object")
    order = _field(raw, "Order", 0)
    if isinstance(order, bool) or not isinstance(order, int):
        raise ParseError("Order is not an integer")

    stations = {}
    for raw_station in _objects(raw, "Stations"):
        station = map_station(raw_station)
        stations[station.name] = station

    return Meal(
        name=_text(raw, "Name"),
        status=_text(raw, "Status"),
        type=_text(raw, "Type"),
        starting_hours=_text(hours, "StartTime"),
        ending_hours=_text(hours, "EndTime"),
        stations=stations,
        id=_optional_id(raw),
        order=order,
    )


def map_dining_info(payload: dict, target_date: date | None = None) -> DiningInfo:
    """Build a DiningInfo from one decoded day payload."""
    if not isinstance(payload, dict):
        raise ParseError("day payload is not an object")

    meals = {}
    statuses = []
    for raw_meal in _objects(payload, "Meals"):
        meal = map_meal(raw_meal)
        meals[meal.name] = meal
        statuses.append(meal.status)

    return DiningInfo(
        location=_text(payload, "Location"),
        notes=_text(payload, "Notes"),
        date=target_date,
        meals=meals,
        statuses=tuple(statuses),
    )
