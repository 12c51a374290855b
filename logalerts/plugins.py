"""
Plugin initialization for Log Alerts.

This module imports all built-in notifiers to register them with the registry.
Import this module to ensure all notifiers are available.
"""

# Import the notifier package to trigger registration decorators
# pylint: disable=unused-import
# ruff: noqa: F401
from logalerts import notifiers

# Re-export registry functions for convenience
from logalerts.registry import create_notifier, get_registry

__all__ = [
    "create_notifier",
    "get_registry",
]
