import threading
import time

import pytest

from purdue_dining import new_config
from purdue_dining.errors import RequestError

LOCATIONS = ["Earhart", "Ford", "Hillenbrand", "Pete's Za", "Windsor"]


def day_payload(location="Earhart", statuses=("Open", "Closed")):
    meals = []
    for order, (name, status) in enumerate(zip(["Breakfast", "Lunch", "Dinner"], statuses), start=1):
        meals.append(
            {
                "ID": f"meal-{order}",
                "Name": name,
                "Type": "Standard",
                "Order": order,
                "Status": status,
                "Hours": {"StartTime": "07:00:00", "EndTime": "10:00:00"},
                "Stations": [
                    {
                        "Name": "Grill",
                        "IconUrl": "https://example.test/grill.png",
                        "Items": [
                            {
                                "ID": "item-1",
                                "Name": "Scrambled Eggs",
                                "IsVegetarian": True,
                                "Allergens": [
                                    {"Name": "Egg", "Value": True},
                                    {"Name": "Soy", "Value": False},
                                ],
                            },
                            {"Name": "Bacon", "IsVegetarian": False, "Allergens": []},
                        ],
                    },
                    {"Name": "Salad Bar", "IconUrl": "", "Items": []},
                ],
            }
        )
    return {"Location": location, "Date": "2026-10-18T00:00:00", "Notes": "", "Meals": meals}


class FakeMenuAPI:
    """Stands in for MenuAPIClient and tracks concurrent calls."""

    def __init__(self, locations=LOCATIONS, delay=0.0, failures=None, payloads=None):
        self.locations = list(locations)
        self.delay = delay
        self.failures = failures or {}
        self.payloads = payloads or {}
        self.calls = []
        self.in_flight = 0
        self.max_in_flight = 0
        self._lock = threading.Lock()

    def get_locations(self):
        return list(self.locations)

    def get_day(self, location, target_date):
        with self._lock:
            self.calls.append((location, target_date))
            self.in_flight += 1
            self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.delay:
                time.sleep(self.delay)
            failure = self.failures.get((location, target_date), self.failures.get(location))
            if failure is not None:
                raise failure
            if (location, target_date) in self.payloads:
                return self.payloads[(location, target_date)]
            if location in self.payloads:
                return self.payloads[location]
            return day_payload(location)
        finally:
            with self._lock:
                self.in_flight -= 1


class FailingLocationsAPI(FakeMenuAPI):
    def get_locations(self):
        raise RequestError("connection refused")


@pytest.fixture
def fake_api():
    return FakeMenuAPI()


@pytest.fixture
def config(fake_api):
    return new_config(2, api=fake_api)
