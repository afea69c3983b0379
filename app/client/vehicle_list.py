import logging
from datetime import date

from app.client.api import ApiError, FleetApiClient
from app.client.notifications import Notifier
from app.client.state import DialogMode, ViewState

logger = logging.getLogger(__name__)

REQUIRED_SUBMIT_FIELDS = ("brand", "model", "year", "licensePlate", "capacity")


def blank_vehicle_defaults() -> dict:
    return {
        "make": "",
        "model": "",
        "year": str(date.today().year),
        "licensePlate": "",
        "isForeignPlate": False,
        "color": "",
        "capacity": "4",
        "vehicleType": "SEDAN",
        "status": "AVAILABLE",
        "lastMaintenance": "",
    }


def vehicle_to_form_defaults(vehicle: dict) -> dict:
    return {
        **vehicle,
        "brand": vehicle["make"],
        "year": str(vehicle["year"]),
        "capacity": str(vehicle["capacity"]),
        "lastMaintenance": vehicle.get("lastMaintenance") or "",
    }


class VehicleListView:
    """Partner vehicle table with add, edit and delete dialogs.

    Every successful mutation closes the dialog and re-fetches the list from
    the API; rows are never patched locally.
    """

    def __init__(self, api: FleetApiClient, partner_id: str, notifier: Notifier | None = None):
        self.api = api
        self.partner_id = partner_id
        self.notifier = notifier or Notifier()
        self.state = ViewState.IDLE
        self.submit_state = ViewState.IDLE
        self.vehicles: list[dict] = []
        self.dialog = DialogMode.CLOSED
        self.current_vehicle_id: str | None = None
        self.vehicle_to_delete: dict | None = None
        self.default_values: dict = {}

    async def mount(self) -> None:
        if self.partner_id:
            await self.load()

    async def set_partner(self, partner_id: str) -> None:
        if partner_id == self.partner_id:
            return
        self.partner_id = partner_id
        await self.mount()

    async def load(self) -> None:
        self.state = ViewState.LOADING
        try:
            self.vehicles = await self.api.list_vehicles(self.partner_id)
            self.state = ViewState.SUCCESS
        except ApiError as e:
            logger.error("Error fetching partner vehicles: %s", e.message)
            self.vehicles = []
            self.state = ViewState.ERROR
            self.notifier.error(e.message)

    def open_add(self) -> None:
        self.current_vehicle_id = None
        self.default_values = blank_vehicle_defaults()
        self.dialog = DialogMode.ADD

    async def open_edit(self, vehicle_id: str) -> None:
        self.current_vehicle_id = vehicle_id
        self.submit_state = ViewState.LOADING
        try:
            vehicle = await self.api.get_vehicle(self.partner_id, vehicle_id)
        except ApiError as e:
            self.submit_state = ViewState.ERROR
            self.notifier.error(e.message)
            return
        self.default_values = vehicle_to_form_defaults(vehicle)
        self.dialog = DialogMode.EDIT
        self.submit_state = ViewState.IDLE

    def close_dialog(self) -> None:
        self.dialog = DialogMode.CLOSED

    async def submit(self, data: dict) -> bool:
        missing = [name for name in REQUIRED_SUBMIT_FIELDS if not data.get(name)]
        if missing:
            self.notifier.error(f"Missing required fields: {', '.join(missing)}")
            self.submit_state = ViewState.ERROR
            return False

        editing = self.dialog is DialogMode.EDIT and self.current_vehicle_id is not None
        self.submit_state = ViewState.SUBMITTING
        try:
            if editing:
                saved = await self.api.update_vehicle(self.partner_id, self.current_vehicle_id, data)
            else:
                saved = await self.api.create_vehicle(self.partner_id, data)
        except ApiError as e:
            self.submit_state = ViewState.ERROR
            self.notifier.error(e.message)
            return False

        self.submit_state = ViewState.SUCCESS
        verb = "updated" if editing else "added"
        self.notifier.success(f"Vehicle {saved['make']} {saved['model']} {verb} successfully")
        self.close_dialog()
        await self.load()
        return True

    def confirm_delete(self, vehicle: dict) -> None:
        self.vehicle_to_delete = vehicle
        self.dialog = DialogMode.CONFIRM_DELETE

    def cancel_delete(self) -> None:
        self.vehicle_to_delete = None
        self.close_dialog()

    async def delete(self) -> bool:
        vehicle = self.vehicle_to_delete
        if vehicle is None or self.dialog is not DialogMode.CONFIRM_DELETE:
            return False

        try:
            await self.api.delete_vehicle(self.partner_id, vehicle["id"])
        except ApiError as e:
            self.notifier.error(e.message)
            return False

        self.notifier.success(f"Vehicle {vehicle['make']} {vehicle['model']} deleted successfully")
        self.vehicle_to_delete = None
        self.close_dialog()
        await self.load()
        return True
