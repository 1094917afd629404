# tests/conftest.py
import sys
from pathlib import Path
from unittest.mock import Mock
import pytest

# Make "src" importable
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from recordable import ActionTypes

WRAPPED_STATE = "wrapped-reducer-state"

CUSTOM_ACTION_TYPES = {
    "BACK": "CUSTOM_BACK",
    "FORWARD": "CUSTOM_FORWARD",
    "TOGGLE_RECORDING": "CUSTOM_TOGGLE_RECORDING",
    "CLEAR_RECORDING": "CUSTOM_CLEAR_RECORDING",
}


def counter(state, action):
    """Tiny reducer used across tests: an int that INCREMENT/DECREMENT/SET move."""
    if state is None:
        state = 0
    kind = action.get("type") if isinstance(action, dict) else getattr(action, "type", None)
    if kind == "INCREMENT":
        return state + 1
    if kind == "DECREMENT":
        return state - 1
    if kind == "SET":
        payload = action.get("payload", {}) if isinstance(action, dict) else action.payload
        return payload["value"]
    return state


@pytest.fixture
def mock_reducer():
    # Always returns the same value, whatever it is given
    return Mock(return_value=WRAPPED_STATE)


@pytest.fixture(params=[None, CUSTOM_ACTION_TYPES], ids=["default", "custom"])
def action_types(request):
    return ActionTypes.coerce(request.param)


@pytest.fixture
def counter_reducer():
    return counter
