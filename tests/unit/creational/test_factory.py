import pytest

from pattern_catalog.creational.factory import (
    EmailNotification,
    Notification,
    NotificationFactory,
    PushNotification,
    SmsNotification,
    demo,
)
from pattern_catalog.domain.core.exceptions import ConfigurationError


@pytest.fixture
def factory():
    return NotificationFactory()


@pytest.mark.parametrize("channel,expected_type", [
    ("email", EmailNotification),
    ("sms", SmsNotification),
    ("SMS", SmsNotification),
    ("push", PushNotification),
])
def test_create_known_channels(factory, channel, expected_type):
    assert isinstance(factory.create(channel), expected_type)


@pytest.mark.parametrize("channel", ["unknown", "", None])
def test_unknown_channel_falls_back_to_email(factory, channel):
    assert isinstance(factory.create(channel), EmailNotification)


def test_configured_default_channel_is_used_for_fallback():
    factory = NotificationFactory(default_channel="push")

    assert factory.default_channel == "push"
    assert isinstance(factory.create("fax"), PushNotification)


def test_invalid_default_channel_is_rejected():
    with pytest.raises(ConfigurationError) as exc_info:
        NotificationFactory(default_channel="fax")

    assert exc_info.value.missing_fields == ["notification.default_channel"]


def test_register_channel_extends_factory(factory):
    class SlackNotification(Notification):
        channel = "slack"

        def notify(self, message):
            return f"Slack Notification: {message}"

    factory.register_channel("Slack", SlackNotification)

    assert "slack" in factory.channels
    assert factory.create("slack").notify("hi") == "Slack Notification: hi"


def test_register_existing_channel_raises(factory):
    with pytest.raises(ConfigurationError, match="already registered"):
        factory.register_channel("email", EmailNotification)


def test_notifications_format_messages():
    assert EmailNotification().notify("hello") == "Email Notification: hello"
    assert SmsNotification().notify("hello") == "SMS Notification: hello"
    assert PushNotification().notify("hello") == "Push Notification: hello"


def test_demo_output():
    lines = demo()

    assert lines[0] == "Email Notification: This is an email notification."
    assert lines[1] == "SMS Notification: This is an SMS notification."
    assert lines[2] == "Push Notification: This is a push notification."
    assert lines[3].startswith("Email Notification:")
