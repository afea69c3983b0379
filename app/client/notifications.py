import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class Notification:
    level: str
    message: str


@dataclass
class Notifier:
    """Collects the toast messages a view would show to the operator."""

    notifications: list[Notification] = field(default_factory=list)

    def success(self, message: str) -> None:
        logger.info("%s", message)
        self.notifications.append(Notification("success", message))

    def error(self, message: str) -> None:
        logger.warning("%s", message)
        self.notifications.append(Notification("error", message))

    @property
    def last(self) -> Notification | None:
        return self.notifications[-1] if self.notifications else None

    @property
    def messages(self) -> list[str]:
        return [n.message for n in self.notifications]

    def clear(self) -> None:
        self.notifications.clear()
