"""
Public API for the recordable package.

Import from here everywhere else, so you can refactor internals freely:
    from recordable import (
        recordable, Recordable, HistoryState, Past, Future,
        ActionTypes, DEFAULT_ACTION_TYPES, IncompleteActionTypesError,
        Action, action_type, back, forward, toggle_recording, clear_recording,
        ReducerProtocol, EqualityProtocol, load_action_types, Store
    )
"""
from .action_types import ActionTypes, DEFAULT_ACTION_TYPES, IncompleteActionTypesError
from .actions import (
    Action, action_type,
    back, forward, toggle_recording, clear_recording,
)
from .model import HistoryState, SnapshotStack, Past, Future
from .protocol import ReducerProtocol, EqualityProtocol
from .reducer import Recordable, recordable
from .loader import load_action_types
from .store import Store

__all__ = [
    # configuration
    "ActionTypes", "DEFAULT_ACTION_TYPES", "IncompleteActionTypesError",
    "load_action_types",
    # actions
    "Action", "action_type",
    "back", "forward", "toggle_recording", "clear_recording",
    # model
    "HistoryState", "SnapshotStack", "Past", "Future",
    # protocol & reducer & store
    "ReducerProtocol", "EqualityProtocol", "Recordable", "recordable", "Store",
]
