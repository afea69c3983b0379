"""Closed vocabularies used to tag ride records."""
from enum import Enum


class RideStatus(str, Enum):
    SCHEDULED = "SCHEDULED"
    ASSIGNED = "ASSIGNED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class RideCategory(str, Enum):
    CITY_TRANSFER = "CITY_TRANSFER"
    AIRPORT_TRANSFER = "AIRPORT_TRANSFER"
    TRAIN_STATION_TRANSFER = "TRAIN_STATION_TRANSFER"
    BOOK_BY_HOUR = "BOOK_BY_HOUR"


class MilestoneType(str, Enum):
    PICKUP = "PICKUP"
    DROPOFF = "DROPOFF"


class AirportTransferSubtype(str, Enum):
    AIRPORT_PICKUP = "AIRPORT_PICKUP"
    AIRPORT_DROPOFF = "AIRPORT_DROPOFF"


MISSION_RIDE_CATEGORIES: tuple[RideCategory, ...] = tuple(RideCategory)

DEFAULT_DURATION = 12
DEFAULT_PASSENGER_COUNT = 1


def ride_options() -> dict:
    return {
        "statuses": [s.value for s in RideStatus],
        "categories": [c.value for c in RideCategory],
        "missionCategories": [c.value for c in MISSION_RIDE_CATEGORIES],
        "milestoneTypes": [m.value for m in MilestoneType],
        "airportTransferSubtypes": [t.value for t in AirportTransferSubtype],
        "defaultDuration": DEFAULT_DURATION,
        "defaultPassengerCount": DEFAULT_PASSENGER_COUNT,
    }
