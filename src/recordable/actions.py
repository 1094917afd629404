from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Mapping

from .action_types import ActionTypes, DEFAULT_ACTION_TYPES


@dataclass(frozen=True)
class Action:
    """A named event; payload is only meaningful to the wrapped reducer."""
    type: Hashable
    payload: Dict[str, Any] = field(default_factory=dict)


def action_type(action: Any) -> Any:
    """Type of a mapping-style ({"type": ...}) or attribute-style action; None if it has none."""
    if isinstance(action, Mapping):
        return action.get("type")
    return getattr(action, "type", None)


def back(action_types: ActionTypes = DEFAULT_ACTION_TYPES) -> Action:
    return Action(action_types.BACK)


def forward(action_types: ActionTypes = DEFAULT_ACTION_TYPES) -> Action:
    return Action(action_types.FORWARD)


def toggle_recording(action_types: ActionTypes = DEFAULT_ACTION_TYPES) -> Action:
    return Action(action_types.TOGGLE_RECORDING)


def clear_recording(action_types: ActionTypes = DEFAULT_ACTION_TYPES) -> Action:
    return Action(action_types.CLEAR_RECORDING)
