"""
Built-in notifiers for Log Alerts.

Importing this package imports every module in it, which registers the
notifier types ("email", "console", "webhook") with the registry, and
re-exports each module's Notifier classes listed in ``__all__``.
"""

import importlib
import inspect
import pkgutil

from logalerts.core import Notifier as BaseNotifier
from logalerts.logging_config import get_logger
from logalerts.registry import get_registry

logger = get_logger(__name__)

__all__: list[str] = []

for module_info in pkgutil.iter_modules(__path__):
    module = importlib.import_module(f"{__name__}.{module_info.name}")

    for name in getattr(module, "__all__", []):
        cls = getattr(module, name)
        if not inspect.isclass(cls) or not issubclass(cls, BaseNotifier):
            logger.warning(
                "Module 'notifiers.%s' exports '%s', which is not a Notifier - skipping",
                module_info.name,
                name
            )
            continue

        globals()[name] = cls
        __all__.append(name)

logger.debug("Notifier types available: %s", ", ".join(sorted(get_registry().list_notifiers())))
