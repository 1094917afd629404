from __future__ import annotations
from dataclasses import dataclass, asdict, fields
from typing import Any, Dict, Hashable, Mapping, Optional, Union


class IncompleteActionTypesError(ValueError):
    """Raised when an action-type configuration leaves a control action unmapped."""


@dataclass(frozen=True)
class ActionTypes:
    """
    Identifiers of the four control actions a recordable reducer intercepts.

    Every slot must be set and every identifier must be distinct; a gap or a
    collision would leave a control action unreachable.

    An incoming action's type is matched against these identifiers with ==,
    so True and 1.0 both match an identifier of 1.
    """
    BACK: Hashable = "BACK"
    FORWARD: Hashable = "FORWARD"
    TOGGLE_RECORDING: Hashable = "TOGGLE_RECORDING"
    CLEAR_RECORDING: Hashable = "CLEAR_RECORDING"

    def __post_init__(self):
        unset = [f.name for f in fields(self) if getattr(self, f.name) is None]
        if unset:
            raise IncompleteActionTypesError(
                f"Incomplete action-type configuration: no identifier for {', '.join(unset)}"
            )
        seen: Dict[Any, str] = {}
        for f in fields(self):
            ident = getattr(self, f.name)
            if ident in seen:
                raise ValueError(
                    f"Action types {seen[ident]} and {f.name} share the identifier {ident!r}"
                )
            seen[ident] = f.name

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "ActionTypes":
        slots = [f.name for f in fields(cls)]
        unknown = sorted(str(k) for k in mapping if k not in slots)
        if unknown:
            raise ValueError(f"Unknown action types: {', '.join(unknown)}")
        missing = [s for s in slots if s not in mapping]
        if missing:
            raise IncompleteActionTypesError(
                f"Incomplete action-type configuration: missing {', '.join(missing)}"
            )
        return cls(**{s: mapping[s] for s in slots})

    @classmethod
    def coerce(cls, value: Optional[Union["ActionTypes", Mapping[str, Any]]]) -> "ActionTypes":
        if value is None:
            return DEFAULT_ACTION_TYPES
        if isinstance(value, ActionTypes):
            return value
        if isinstance(value, Mapping):
            return cls.from_mapping(value)
        raise TypeError(f"Expected ActionTypes or a mapping, got {type(value).__name__}")

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


DEFAULT_ACTION_TYPES = ActionTypes()
