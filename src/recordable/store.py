from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Optional

from .actions import back, forward, toggle_recording, clear_recording
from .model import HistoryState
from .reducer import Recordable


@dataclass
class Store:
    """
    Small holder that threads a HistoryState through a recordable reducer.

    Usage:
        store = Store(recordable(counter))
        store.apply({"type": "INCREMENT"})
        store.undo(); store.redo()
    """
    step: Recordable
    state: Optional[HistoryState] = field(default=None)

    def __post_init__(self):
        if self.state is None:
            self.state = self.step(None, {})

    @property
    def present(self) -> Any:
        return self.state.present

    def apply(self, action: Any) -> HistoryState:
        self.state = self.step(self.state, action)
        return self.state

    def undo(self) -> HistoryState:
        return self.apply(back(self.step.action_types))

    def redo(self) -> HistoryState:
        return self.apply(forward(self.step.action_types))

    def toggle_recording(self) -> HistoryState:
        return self.apply(toggle_recording(self.step.action_types))

    def clear_history(self) -> HistoryState:
        return self.apply(clear_recording(self.step.action_types))
