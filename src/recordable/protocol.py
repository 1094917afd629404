from __future__ import annotations
from typing import Any, Optional, Protocol, TypeVar

S = TypeVar("S")


class ReducerProtocol(Protocol[S]):
    """
    Contract for the wrapped reducer.

    Must be pure, and must return its initial state when called as
    reducer(None, {}). Called again for that purpose whenever BACK runs out of past.
    """
    def __call__(self, state: Optional[S], action: Any) -> S: ...


class EqualityProtocol(Protocol):
    """Value equality between two snapshots; operator.eq by default."""
    def __call__(self, a: Any, b: Any) -> bool: ...
