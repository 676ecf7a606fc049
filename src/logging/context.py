# src/logging/context.py - v2
"""Contextual logging support: attach asset, fingerprint and phase to log records."""

from __future__ import annotations

import contextvars
from dataclasses import dataclass
from typing import Any

# Set per transform call; concurrent transforms each see their own values.
_asset: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "asset", default=None
)
_fingerprint: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "fingerprint", default=None
)
_phase: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "phase", default=None
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    asset: str | None = None
    fingerprint: str | None = None
    phase: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(
        asset=_asset.get(),
        fingerprint=_fingerprint.get(),
        phase=_phase.get(),
    )


def set_asset_context(asset: str, fingerprint: str | None = None) -> None:
    """Set asset-level context (called once per transform)."""
    _asset.set(asset)
    _fingerprint.set(fingerprint)


def set_phase(phase: str | None) -> None:
    """Set the current transform phase (lookup, replay, generate, persist)."""
    _phase.set(phase)


def clear_context() -> None:
    """Reset all context variables."""
    _asset.set(None)
    _fingerprint.set(None)
    _phase.set(None)
