from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, StrictInt
from pydantic.alias_generators import to_camel


class VehicleType(str, Enum):
    SEDAN = "SEDAN"
    SUV = "SUV"
    VAN = "VAN"
    LUXURY = "LUXURY"
    LIMOUSINE = "LIMOUSINE"


class VehicleStatus(str, Enum):
    AVAILABLE = "AVAILABLE"
    IN_USE = "IN_USE"
    MAINTENANCE = "MAINTENANCE"
    OUT_OF_SERVICE = "OUT_OF_SERVICE"


REQUIRED_VEHICLE_FIELDS = ("brand", "model", "year", "licensePlate")


class VehiclePayload(BaseModel):
    """Loosely typed vehicle body shared by create and update.

    Presence and integer coercion are checked by the route so that the error
    lists every missing field at once. Integers are strict so JSON booleans
    are rejected rather than read as 0 or 1.
    """

    brand: str | None = None
    make: str | None = None
    model: str | None = None
    year: StrictInt | str | None = None
    license_plate: str | None = None
    is_foreign_plate: bool | None = None
    color: str | None = None
    capacity: StrictInt | str | None = None
    vehicle_type: str | None = None
    status: str | None = None
    last_maintenance: str | None = None
    fuel_type: str | None = None
    registration_date: str | None = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @property
    def resolved_brand(self) -> str | None:
        return self.brand or self.make

    def missing_fields(self) -> list[str]:
        values = {
            "brand": self.resolved_brand,
            "model": self.model,
            "year": self.year,
            "licensePlate": self.license_plate,
        }
        return [name for name in REQUIRED_VEHICLE_FIELDS if not values[name]]


class VehicleResponse(BaseModel):
    id: str
    make: str
    model: str
    year: int
    license_plate: str
    is_foreign_plate: bool
    color: str | None = None
    capacity: int
    vehicle_type: VehicleType
    status: VehicleStatus
    last_maintenance: datetime | None = None
    fuel_type: str | None = None
    registration_date: str | None = None
    partner_id: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)
