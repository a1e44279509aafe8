"""Menu data model.

Mapping fields are stored as read-only ``MappingProxyType`` views, so a
value cannot change after construction.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
import datetime
from types import MappingProxyType

STATUS_OPEN = "Open"
STATUS_UNAVAILABLE = "Unavailable"


def _freeze(instance, name: str) -> None:
    object.__setattr__(instance, name, MappingProxyType(dict(getattr(instance, name))))


@dataclass(frozen=True)
class Item:
    """A single served item."""

    name: str
    vegetarian: bool = False
    allergens: tuple[str, ...] = ()
    id: str | None = None

    def has_allergen(self, name: str) -> bool:
        return name in self.allergens


@dataclass(frozen=True)
class Station:
    """Serving station; items keep upstream order."""

    name: str
    icon_url: str = ""
    items: tuple[Item, ...] = ()


@dataclass(frozen=True)
class Meal:
    """One meal service. Hours stay as upstream ``HH:MM:SS`` text."""

    name: str
    status: str = ""
    type: str = ""
    starting_hours: str = ""
    ending_hours: str = ""
    stations: Mapping[str, Station] = field(default_factory=dict)
    id: str | None = None
    order: int = 0

    def __post_init__(self):
        _freeze(self, "stations")

    @property
    def open(self) -> bool:
        return self.status == STATUS_OPEN


@dataclass(frozen=True)
class DiningInfo:
    """Menu and status of one location on one date.

    ``meals`` is keyed by meal name, so meals sharing a name collapse into the
    last one. ``statuses`` keeps the status of every upstream meal in array
    order and is what availability is derived from.
    """

    location: str
    notes: str = ""
    date: datetime.date | None = None
    meals: Mapping[str, Meal] = field(default_factory=dict)
    statuses: tuple[str, ...] = ()

    def __post_init__(self):
        _freeze(self, "meals")

    @property
    def available(self) -> bool:
        """True when at least one meal is not marked Unavailable.

        Recomputed from ``statuses`` on every access, so a day with no meals
        is unavailable.
        """
        return any(status != STATUS_UNAVAILABLE for status in self.statuses)

    def open_meals(self) -> list[Meal]:
        return [meal for meal in self.meals.values() if meal.open]
