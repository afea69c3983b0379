from app.client.api import ApiError, FleetApiClient
from app.client.dialog import VehicleDialog
from app.client.forms import PlateVehicleForm, SimpleVehicleForm, SubmitError, VehicleFormValues
from app.client.notifications import Notification, Notifier
from app.client.state import DialogMode, ViewState
from app.client.vehicle_list import VehicleListView

__all__ = [
    "ApiError",
    "FleetApiClient",
    "VehicleDialog",
    "PlateVehicleForm",
    "SimpleVehicleForm",
    "SubmitError",
    "VehicleFormValues",
    "Notification",
    "Notifier",
    "DialogMode",
    "ViewState",
    "VehicleListView",
]
