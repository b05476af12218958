"""Expanded/collapsed state for one widget instance."""

from __future__ import annotations

from typing import Callable, Optional

from .models import AnimationSpec, ToggleState


class ToggleController:
    """Flips the expanded flag and notifies a single observer synchronously."""

    def __init__(
        self,
        expanded: bool = False,
        on_change: Optional[Callable[[bool], None]] = None,
        animation: Optional[AnimationSpec] = None,
    ) -> None:
        self._state = ToggleState(expanded=expanded)
        self._on_change = on_change
        self.animation = animation or AnimationSpec()

    @property
    def expanded(self) -> bool:
        return self._state.expanded

    @property
    def state(self) -> ToggleState:
        return self._state.model_copy()

    def toggle(self) -> bool:
        self._state.expanded = not self._state.expanded
        if self._on_change is not None:
            self._on_change(self._state.expanded)
        return self._state.expanded

    def expand(self) -> None:
        if not self.expanded:
            self.toggle()

    def collapse(self) -> None:
        if self.expanded:
            self.toggle()
