from __future__ import annotations
from dataclasses import replace
from typing import Any, Generic, Mapping, Optional, TypeVar, Union
import logging
import operator

from .action_types import ActionTypes
from .actions import action_type
from .model import HistoryState, Past, Future
from .protocol import ReducerProtocol, EqualityProtocol

logger = logging.getLogger(__name__)

S = TypeVar("S")


class Recordable(Generic[S]):
    """
    A reducer wrapped with undo/redo history and a recording switch.

    Calling it as step(state, action) returns the next HistoryState. The four
    control actions are handled here; every other action goes to the wrapped
    reducer. Never mutates its input and never raises on its own account.
    """

    def __init__(
        self,
        reducer: ReducerProtocol[S],
        action_types: Optional[Union[ActionTypes, Mapping[str, Any]]] = None,
        equals: EqualityProtocol = operator.eq,
    ):
        self.reducer = reducer
        self.action_types = ActionTypes.coerce(action_types)
        self.equals = equals

    def initial_state(self) -> HistoryState:
        return HistoryState(present=self.reducer(None, {}))

    def __call__(self, state: Optional[HistoryState] = None, action: Any = None) -> HistoryState:
        if state is None:
            state = self.initial_state()
        if action is None:
            action = {}

        kind = action_type(action)
        types = self.action_types

        # --- Undo ---
        if kind == types.BACK:
            if state.past:
                previous, past = state.past.pop()
                return replace(
                    state,
                    past=past,
                    present=previous,
                    future=state.future.push(state.present),
                )
            logger.debug("BACK with empty past; re-deriving the reducer's initial state")
            return replace(state, present=self.reducer(None, {}))

        # --- Redo ---
        if kind == types.FORWARD:
            if state.future:
                upcoming, future = state.future.pop()
                return replace(
                    state,
                    past=state.past.push(state.present),
                    present=upcoming,
                    future=future,
                )
            return state

        # --- Recording controls ---
        if kind == types.CLEAR_RECORDING:
            return replace(state, past=Past(), future=Future())

        if kind == types.TOGGLE_RECORDING:
            logger.debug("Recording %s", "disabled" if state.recording_enabled else "enabled")
            return replace(state, recording_enabled=not state.recording_enabled)

        # --- Anything else belongs to the wrapped reducer ---
        present = self.reducer(state.present, action)
        if present is state.present or self.equals(present, state.present):
            return state

        past = state.past.push(state.present) if state.recording_enabled else state.past
        return replace(state, past=past, present=present, future=Future())

    def __repr__(self) -> str:
        name = getattr(self.reducer, "__name__", type(self.reducer).__name__)
        return f"Recordable({name})"


def recordable(
    reducer: ReducerProtocol[S],
    action_types: Optional[Union[ActionTypes, Mapping[str, Any]]] = None,
    *,
    equals: EqualityProtocol = operator.eq,
) -> Recordable[S]:
    """
    Wrap reducer with past/present/future history.

    action_types overrides the control-action identifiers; it must map all four
    slots (a partial mapping raises IncompleteActionTypesError).
    """
    return Recordable(reducer, action_types, equals)
