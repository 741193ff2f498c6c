"""Recording appearance sink for tests and tooling."""

from __future__ import annotations

from collections import Counter
from typing import Any, List, Tuple

from stylekit.design.appearance import COMPONENT_ORDER, Component

__all__ = ["RecordingAppearanceSink"]


class RecordingAppearanceSink:
    """Records every sink call as ``(component, style)`` in call order."""

    def __init__(self) -> None:
        self.calls: List[Tuple[Component, Any]] = []
        self.counts: Counter[Component] = Counter()

    def __getattr__(self, name: str):
        if not name.startswith("apply_"):
            raise AttributeError(name)
        try:
            component = Component(name[len("apply_") :])
        except ValueError:
            raise AttributeError(name) from None

        def _record(style: Any) -> None:
            self.calls.append((component, style))
            self.counts[component] += 1

        return _record

    # Helpers -------------------------------------------------------------
    def components(self) -> List[Component]:
        return [c for c, _ in self.calls]

    def last(self, component: Component | str) -> Any:
        comp = Component(component)
        for c, style in reversed(self.calls):
            if c is comp:
                return style
        raise KeyError(f"No {comp.value} style recorded")

    @property
    def dispatch_count(self) -> int:
        """Number of complete dispatch cycles (calls to the first component)."""
        return self.counts[COMPONENT_ORDER[0]]

    def clear(self) -> None:
        self.calls.clear()
        self.counts.clear()
