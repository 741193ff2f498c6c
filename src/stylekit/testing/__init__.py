"""Testing utilities (headless-safe; no PyQt import)."""

from __future__ import annotations

__all__ = ["RecordingAppearanceSink"]

from .recording_sink import RecordingAppearanceSink
