from enum import Enum


class ViewState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


class DialogMode(str, Enum):
    CLOSED = "closed"
    ADD = "add"
    EDIT = "edit"
    CONFIRM_DELETE = "confirm_delete"
