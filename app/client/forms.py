"""Vehicle entry forms.

Both forms share one contract: optional default values, an async submit
callback, an optional cancel callback. ``PlateVehicleForm`` also fills in
make/model/year from the registration lookup service once the operator
stops typing a domestic plate.
"""
import asyncio
import logging
from datetime import date
from typing import Any, Awaitable, Callable

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from app.client.notifications import Notifier
from app.client.state import ViewState
from app.config import settings
from app.schemas.vehicle import VehicleStatus, VehicleType
from app.services.plate_lookup import PlateLookupClient, PlateLookupError, is_domestic_plate

logger = logging.getLogger(__name__)

SubmitCallback = Callable[[dict], Awaitable[Any]]
CancelCallback = Callable[[], Any]

MIN_YEAR = 1900


class SubmitError(Exception):
    """Raised by a submit callback that has already reported the failure."""


def _max_year() -> int:
    return date.today().year + 1


class VehicleFormValues(BaseModel):
    make: str = ""
    model: str = ""
    year: int
    license_plate: str = ""
    color: str | None = None
    capacity: int = 4
    vehicle_type: VehicleType = VehicleType.SEDAN
    status: VehicleStatus = VehicleStatus.AVAILABLE
    domestic_plate: bool = True
    fuel_type: str | None = None
    registration_date: str | None = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, str_strip_whitespace=True)

    @field_validator("make", "model", "license_plate")
    @classmethod
    def _required(cls, value: str, info) -> str:
        if not value:
            label = {"make": "Brand", "model": "Model", "license_plate": "License plate"}[info.field_name]
            raise PydanticCustomError("required", f"{label} is required")
        return value

    @field_validator("year")
    @classmethod
    def _year_in_range(cls, value: int) -> int:
        if value < MIN_YEAR:
            raise PydanticCustomError("year_range", f"Year must be at least {MIN_YEAR}")
        if value > _max_year():
            raise PydanticCustomError("year_range", f"Year must be at most {_max_year()}")
        return value

    @field_validator("capacity")
    @classmethod
    def _capacity_positive(cls, value: int) -> int:
        if value < 1:
            raise PydanticCustomError("capacity_range", "Capacity must be at least 1")
        return value

    def to_payload(self) -> dict:
        """Body for the vehicle endpoints, which expect the make as ``brand``."""
        payload = {
            "brand": self.make,
            "make": self.make,
            "model": self.model,
            "year": self.year,
            "licensePlate": self.license_plate,
            "isForeignPlate": not self.domestic_plate,
            "color": self.color or None,
            "capacity": self.capacity,
            "vehicleType": self.vehicle_type.value,
            "status": self.status.value,
        }
        if self.fuel_type:
            payload["fuelType"] = self.fuel_type
        if self.registration_date:
            payload["registrationDate"] = self.registration_date
        return payload


def initial_values(defaults: dict | None = None) -> dict:
    defaults = defaults or {}
    domestic = defaults.get("domesticPlate")
    if domestic is None:
        domestic = not defaults.get("isForeignPlate", False)
    return {
        "make": defaults.get("make") or defaults.get("brand") or "",
        "model": defaults.get("model") or "",
        "year": defaults.get("year") or date.today().year,
        "licensePlate": defaults.get("licensePlate") or "",
        "color": defaults.get("color") or "",
        "capacity": defaults.get("capacity") or 4,
        "vehicleType": defaults.get("vehicleType") or VehicleType.SEDAN.value,
        "status": defaults.get("status") or VehicleStatus.AVAILABLE.value,
        "domesticPlate": bool(domestic),
        "fuelType": defaults.get("fuelType"),
        "registrationDate": defaults.get("registrationDate"),
    }


class SimpleVehicleForm:
    def __init__(
        self,
        on_submit: SubmitCallback,
        default_values: dict | None = None,
        on_cancel: CancelCallback | None = None,
        notifier: Notifier | None = None,
    ):
        self.on_submit = on_submit
        self.on_cancel = on_cancel
        self.notifier = notifier or Notifier()
        self.values = initial_values(default_values)
        self.errors: dict[str, str] = {}
        self.state = ViewState.IDLE

    @property
    def is_submitting(self) -> bool:
        return self.state is ViewState.SUBMITTING

    def set_value(self, field: str, value: Any) -> None:
        self.values[field] = value

    def validate(self) -> VehicleFormValues | None:
        try:
            parsed = VehicleFormValues.model_validate(self.values)
        except ValidationError as e:
            self.errors = {
                str(err["loc"][0]) if err["loc"] else "__root__": err["msg"]
                for err in e.errors()
            }
            return None
        self.errors = {}
        return parsed

    async def submit(self, data: dict | None = None) -> dict | None:
        if data:
            self.values.update(data)

        parsed = self.validate()
        if parsed is None:
            self.state = ViewState.ERROR
            self.notifier.error(next(iter(self.errors.values())))
            return None

        payload = parsed.to_payload()
        self.state = ViewState.SUBMITTING
        outcome = ViewState.ERROR
        # The owner of the callback reports a successful save.
        try:
            await self.on_submit(payload)
            outcome = ViewState.SUCCESS
        except SubmitError:
            logger.info("Vehicle form submission rejected by its owner")
        except Exception:
            logger.exception("Error submitting vehicle form")
            self.notifier.error("Failed to save vehicle")
        finally:
            self.state = outcome
        return payload if outcome is ViewState.SUCCESS else None

    def cancel(self) -> None:
        if self.on_cancel is not None:
            self.on_cancel()


class PlateVehicleForm(SimpleVehicleForm):
    """Form variant driven by the license plate.

    Plate and toggle changes must happen inside a running event loop: they
    schedule the lookup as a task.
    """

    def __init__(
        self,
        on_submit: SubmitCallback,
        default_values: dict | None = None,
        on_cancel: CancelCallback | None = None,
        notifier: Notifier | None = None,
        lookup_client: PlateLookupClient | None = None,
        debounce: float | None = None,
    ):
        super().__init__(on_submit, default_values, on_cancel, notifier)
        self.lookup_client = lookup_client or PlateLookupClient()
        self.debounce = settings.plate_lookup_debounce if debounce is None else debounce
        self.checking_plate = False
        self._pending: asyncio.Task | None = None

    def set_license_plate(self, plate: str) -> None:
        self.values["licensePlate"] = plate
        self._schedule_lookup()

    def set_domestic_plate(self, domestic: bool) -> None:
        self.values["domesticPlate"] = domestic
        self._schedule_lookup()

    def set_value(self, field: str, value: Any) -> None:
        if field == "licensePlate":
            self.set_license_plate(value)
        elif field == "domesticPlate":
            self.set_domestic_plate(value)
        else:
            super().set_value(field, value)

    def _schedule_lookup(self) -> None:
        self.cancel_lookup()
        plate = self.values.get("licensePlate") or ""
        if self.values.get("domesticPlate") and is_domestic_plate(plate):
            self._pending = asyncio.create_task(self._lookup_after_quiet_period(plate))

    def cancel_lookup(self) -> None:
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        self._pending = None

    async def wait_for_lookup(self) -> None:
        task = self._pending
        if task is None:
            return
        try:
            await task
        except asyncio.CancelledError:
            # Only a superseded lookup is swallowed, never our own cancellation.
            current = asyncio.current_task()
            if not task.cancelled() or (current is not None and current.cancelling()):
                raise

    async def _lookup_after_quiet_period(self, plate: str) -> None:
        await asyncio.sleep(self.debounce)
        self.checking_plate = True
        try:
            result = await self.lookup_client.lookup(plate)
        except PlateLookupError as e:
            self.notifier.error(str(e))
            return
        finally:
            self.checking_plate = False

        if not result.success:
            self.notifier.error("Could not find vehicle information")
            return

        self.values["make"] = result.make
        self.values["model"] = result.model
        self.values["year"] = result.year
        if result.registration_date:
            self.values["registrationDate"] = result.registration_date
        self.notifier.success("Vehicle information retrieved successfully")

    def cancel(self) -> None:
        self.cancel_lookup()
        super().cancel()
