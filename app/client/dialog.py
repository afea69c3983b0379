import logging

from app.client.forms import PlateVehicleForm, SubmitCallback, SubmitError
from app.client.notifications import Notifier
from app.client.state import ViewState
from app.services.plate_lookup import PlateLookupClient

logger = logging.getLogger(__name__)


class VehicleDialog:
    """Modal wrapping a plate-driven form for adding or editing a vehicle."""

    def __init__(
        self,
        on_submit: SubmitCallback,
        notifier: Notifier | None = None,
        default_values: dict | None = None,
    ):
        self.on_submit = on_submit
        self.notifier = notifier or Notifier()
        self.default_values = default_values
        self.is_open = False
        self.state = ViewState.IDLE

    @property
    def is_edit(self) -> bool:
        return bool(self.default_values)

    @property
    def title(self) -> str:
        return "Edit Vehicle" if self.is_edit else "Add New Vehicle"

    @property
    def description(self) -> str:
        if self.is_edit:
            return "Edit the vehicle details below."
        return "Enter the license plate to automatically retrieve vehicle information."

    def open(self, default_values: dict | None = None) -> None:
        self.default_values = default_values
        self.state = ViewState.IDLE
        self.is_open = True

    def close(self) -> None:
        self.is_open = False

    def build_form(self, lookup_client: PlateLookupClient | None = None, debounce: float | None = None) -> PlateVehicleForm:
        return PlateVehicleForm(
            on_submit=self.handle_submit,
            default_values=self.default_values,
            on_cancel=self.close,
            notifier=self.notifier,
            lookup_client=lookup_client,
            debounce=debounce,
        )

    async def handle_submit(self, data: dict) -> None:
        """Save through the owner's callback and report the outcome.

        A failure is notified here and re-raised as ``SubmitError`` so the
        form ends in its error state without reporting it a second time.
        """
        saved = False
        self.state = ViewState.SUBMITTING
        try:
            await self.on_submit(data)
            saved = True
        except Exception as e:
            logger.exception("Error submitting vehicle dialog")
            self.notifier.error("Failed to save vehicle")
            raise SubmitError("Failed to save vehicle") from e
        finally:
            self.state = ViewState.SUCCESS if saved else ViewState.ERROR

        self.close()
        self.notifier.success(
            "Vehicle updated successfully" if self.is_edit else "Vehicle created successfully"
        )
