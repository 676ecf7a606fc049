# src/generation/generator_factory.py - v1
"""Factory: instantiate the icon generator from a class path.

Generators live outside this package; FAVICONS_ICON_GENERATOR names one as
a fully qualified class path ("package.module.ClassName").
"""

from __future__ import annotations

import importlib
import inspect
import logging

from faviconcache.config.settings import Settings
from faviconcache.core.errors import ConfigError
from faviconcache.generation.base_generator import BaseIconGenerator

logger = logging.getLogger(__name__)


def create_generator(
    settings: Settings, class_path: str | None = None
) -> BaseIconGenerator:
    """Create the configured icon generator.

    Args:
        settings: Application settings (FAVICONS_ICON_GENERATOR).
        class_path: Explicit class path, overriding settings.

    Raises:
        ConfigError: If no generator is configured or it cannot be loaded.
    """
    path = class_path or settings.icon_generator
    if not path:
        raise ConfigError(
            "No icon generator configured; set FAVICONS_ICON_GENERATOR or pass --generator"
        )

    try:
        cls = _import_class(path)
    except (ImportError, AttributeError, ValueError) as e:
        raise ConfigError(f"Cannot load icon generator {path!r}: {e}") from e

    if not (isinstance(cls, type) and issubclass(cls, BaseIconGenerator)):
        raise ConfigError(f"{path!r} is not a BaseIconGenerator subclass")
    if inspect.isabstract(cls):
        raise ConfigError(f"{path!r} is abstract")

    logger.debug("Creating icon generator: %s", path)
    return cls()


def _import_class(class_path: str) -> type:
    """Dynamically import a class from its fully qualified path."""
    module_path, class_name = class_path.rsplit(".", 1)
    module = importlib.import_module(module_path)
    return getattr(module, class_name)
