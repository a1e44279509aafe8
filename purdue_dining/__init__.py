"""Client for the Purdue dining menus API."""

from purdue_dining.config import Config, DiningConfig, new_config
from purdue_dining.errors import (
    DiningError,
    InvalidConcurrencyError,
    InvalidDateError,
    InvalidDayRangeError,
    InvalidLocationError,
    ParameterError,
    ParseError,
    RequestError,
    UninitializedConfigError,
    UnknownLocationError,
)
from purdue_dining.models import DiningInfo, Item, Meal, Station
from purdue_dining.services.dining import (
    get_dining,
    get_dining_days,
    get_dining_full,
    get_dining_locations,
    get_dining_range,
)
from purdue_dining.services.menu_api import MenuAPIClient

__version__ = "0.1.0"

__all__ = [
    "Config",
    "DiningConfig",
    "DiningError",
    "DiningInfo",
    "InvalidConcurrencyError",
    "InvalidDateError",
    "InvalidDayRangeError",
    "InvalidLocationError",
    "Item",
    "Meal",
    "MenuAPIClient",
    "ParameterError",
    "ParseError",
    "RequestError",
    "Station",
    "UninitializedConfigError",
    "UnknownLocationError",
    "get_dining",
    "get_dining_days",
    "get_dining_full",
    "get_dining_locations",
    "get_dining_range",
    "new_config",
]
