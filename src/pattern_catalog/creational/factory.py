"""
Factory Method: notification channels.

``NotificationFactory.create`` maps a channel name to a notification object.
An unrecognized channel falls back to the default channel (email) instead of
failing.
"""

from abc import ABC, abstractmethod
import threading
from typing import Callable, Dict, List, Optional

from pattern_catalog.domain.core.exceptions import ConfigurationError
from pattern_catalog.infrastructure.logging.logger import get_logger

DEFAULT_CHANNEL = "email"


class Notification(ABC):
    """A channel capable of delivering a message."""

    channel: str = ""

    @abstractmethod
    def notify(self, message: str) -> str:
        """Deliver the message and return the delivered text."""
        pass


class EmailNotification(Notification):
    channel = "email"

    def notify(self, message: str) -> str:
        return f"Email Notification: {message}"


class SmsNotification(Notification):
    channel = "sms"

    def notify(self, message: str) -> str:
        return f"SMS Notification: {message}"


class PushNotification(Notification):
    channel = "push"

    def notify(self, message: str) -> str:
        return f"Push Notification: {message}"


NotificationCreator = Callable[[], Notification]


class NotificationFactory:
    """
    Creates notifications by channel name.

    Channel names are matched case-insensitively. New channels can be added
    with ``register_channel`` without modifying the factory.
    """

    def __init__(self, default_channel: str = DEFAULT_CHANNEL):
        self._creators: Dict[str, NotificationCreator] = {
            "email": EmailNotification,
            "sms": SmsNotification,
            "push": PushNotification,
        }
        self._lock = threading.Lock()
        self._logger = get_logger(__name__)

        default_channel = default_channel.lower()
        if default_channel not in self._creators:
            raise ConfigurationError(
                f"Default channel '{default_channel}' is not a known channel",
                ["notification.default_channel"],
            )
        self._default_channel = default_channel

    @property
    def default_channel(self) -> str:
        return self._default_channel

    @property
    def channels(self) -> List[str]:
        return sorted(self._creators)

    def register_channel(self, channel: str, creator: NotificationCreator) -> None:
        """
        Register a new channel.

        Raises:
            ConfigurationError: If the channel is already registered
        """
        key = channel.lower()
        with self._lock:
            if key in self._creators:
                raise ConfigurationError(f"Channel '{channel}' is already registered")
            self._creators[key] = creator
        self._logger.info("Registered notification channel", channel=key)

    def create(self, channel: Optional[str]) -> Notification:
        """Create a notification for ``channel``, falling back to the default."""
        key = (channel or "").lower()
        creator = self._creators.get(key)
        if creator is None:
            self._logger.warning(
                "Unknown notification channel, using default",
                requested=channel,
                default=self._default_channel,
            )
            creator = self._creators[self._default_channel]
        return creator()


def demo(default_channel: str = DEFAULT_CHANNEL) -> List[str]:
    factory = NotificationFactory(default_channel)
    return [
        factory.create("email").notify("This is an email notification."),
        factory.create("SMS").notify("This is an SMS notification."),
        factory.create("push").notify("This is a push notification."),
        factory.create("carrier-pigeon").notify("Unknown channels fall back to the default."),
    ]


def main() -> None:
    for line in demo():
        print(line)


if __name__ == "__main__":
    main()
