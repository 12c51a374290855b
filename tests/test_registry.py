"""
Tests for the notifier registry and factory.
"""

import pytest

# Import the notifier package to trigger decorator registration
# pylint: disable=unused-import
# ruff: noqa: F401
import logalerts.notifiers
from logalerts.core import Alert, Notifier
from logalerts.notifiers import ConsoleNotifier, EmailNotifier, WebhookNotifier
from logalerts.registry import NotifierRegistry, create_notifier, get_registry


class RecordingNotifier(Notifier):
    """Notifier that keeps the alerts it receives."""

    def __init__(self, config: dict) -> None:
        super().__init__(config)
        self.alerts: list[Alert] = []

    def notify(self, alert: Alert) -> bool:
        self.alerts.append(alert)
        return True


class TestNotifierRegistry:
    """Tests for NotifierRegistry class."""

    def test_register_and_get(self) -> None:
        """Test registering and retrieving a notifier."""
        registry = NotifierRegistry()
        registry.register_notifier("recording", RecordingNotifier)

        assert registry.get_notifier("recording") is RecordingNotifier
        assert registry.list_notifiers() == ["recording"]

    def test_unknown_type(self) -> None:
        """Test that an unknown type raises ValueError."""
        registry = NotifierRegistry()

        with pytest.raises(ValueError, match="Unknown notifier type: pager"):
            registry.get_notifier("pager")


class TestBuiltinNotifiers:
    """Tests for the global registry."""

    def test_builtins_registered(self) -> None:
        """Test that the built-in notifiers are available."""
        names = get_registry().list_notifiers()

        assert {"email", "console", "webhook"} <= set(names)

    @pytest.mark.parametrize("type_name,cls,config", [
        ("email", EmailNotifier, {"recipients": ["ops@example.com"]}),
        ("console", ConsoleNotifier, {}),
        ("webhook", WebhookNotifier, {"url": "https://hooks.example.com"}),
    ])
    def test_create_notifier(self, type_name: str, cls: type, config: dict) -> None:
        """Test creating each built-in notifier from config."""
        notifier = create_notifier(type_name, config)

        assert isinstance(notifier, cls)
        assert notifier.config == config

    def test_create_unknown(self) -> None:
        """Test that unknown types fail."""
        with pytest.raises(ValueError):
            create_notifier("carrier_pigeon", {})


def test_package_exports_notifier_classes() -> None:
    """Test that auto-discovery exports every built-in notifier class."""
    exported = set(logalerts.notifiers.__all__)

    assert {"ConsoleNotifier", "EmailNotifier", "WebhookNotifier"} <= exported
    for name in exported:
        assert issubclass(getattr(logalerts.notifiers, name), Notifier)
