# src/generation/base_generator.py - v1
"""Abstract icon generator: the expensive rendering collaborator.

Implementations resize and convert the source image, build manifests and
return HTML fragments. Nothing in faviconcache renders images itself.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from faviconcache.core.models import GeneratorOutput


class BaseIconGenerator(ABC):
    """Unified interface for icon rendering backends."""

    @abstractmethod
    async def generate(self, content: bytes, options: dict[str, Any]) -> GeneratorOutput:
        """Render icons for `content`.

        Args:
            content: Raw source image bytes.
            options: Flat generator configuration (IconConfig.to_generator_options()).

        Returns:
            GeneratorOutput with HTML fragments, images and extra files.
            File names are relative; the caller adds the output prefix.
        """

    @property
    def name(self) -> str:
        """Generator identifier used in logs."""
        return type(self).__name__
