from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Tuple


class SnapshotStack(ABC):
    """
    Persistent singly-linked stack of snapshots.

    push/pop return new stacks that share every untouched node with the
    original, so both are O(1) and nothing is ever mutated. Subclasses decide
    which end of the exposed sequence is the top of the stack.
    """
    __slots__ = ("_head", "_size")

    def __init__(self, items: Iterable[Any] = ()):
        head: Optional[Tuple[Any, Any]] = None
        size = 0
        for item in self._push_order(list(items)):
            head = (item, head)
            size += 1
        self._head = head
        self._size = size

    @classmethod
    def _from_node(cls, head: Optional[Tuple[Any, Any]], size: int) -> "SnapshotStack":
        stack = cls.__new__(cls)
        stack._head = head
        stack._size = size
        return stack

    # ----- stack operations -----

    def push(self, item: Any) -> "SnapshotStack":
        return self._from_node((item, self._head), self._size + 1)

    def peek(self) -> Any:
        if self._head is None:
            raise IndexError(f"peek from empty {type(self).__name__}")
        return self._head[0]

    def pop(self) -> Tuple[Any, "SnapshotStack"]:
        """Return (top, rest)."""
        if self._head is None:
            raise IndexError(f"pop from empty {type(self).__name__}")
        item, rest = self._head
        return item, self._from_node(rest, self._size - 1)

    def _from_top(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node[0]
            node = node[1]

    # ----- sequence view -----

    @abstractmethod
    def _push_order(self, items: list) -> Iterable[Any]:
        raise NotImplementedError

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        raise NotImplementedError

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._head is not None

    def __getitem__(self, index):
        return tuple(self)[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SnapshotStack):
            if type(self) is not type(other):
                return NotImplemented
            if self._size != other._size:
                return False
            return self._head is other._head or tuple(self) == tuple(other)
        if isinstance(other, (list, tuple)):
            return tuple(self) == tuple(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class Past(SnapshotStack):
    """Undo stack; iterates oldest first, the top is the most recent snapshot."""
    __slots__ = ()

    def _push_order(self, items: list) -> Iterable[Any]:
        return items

    def __iter__(self) -> Iterator[Any]:
        return reversed(list(self._from_top()))


class Future(SnapshotStack):
    """Redo stack; iterates nearest first, the top is the next snapshot to restore."""
    __slots__ = ()

    def _push_order(self, items: list) -> Iterable[Any]:
        return reversed(items)

    def __iter__(self) -> Iterator[Any]:
        return self._from_top()


@dataclass(frozen=True)
class HistoryState:
    """
    Value threaded through a recordable reducer.

    past and future accept any sequence at construction and are stored as
    persistent stacks, so HistoryState(past=[0, 1], present=2, future=[3]) works.
    """
    past: Past = field(default_factory=Past)
    present: Any = None
    future: Future = field(default_factory=Future)
    recording_enabled: bool = True

    def __post_init__(self):
        if not isinstance(self.past, Past):
            object.__setattr__(self, "past", Past(self.past))
        if not isinstance(self.future, Future):
            object.__setattr__(self, "future", Future(self.future))

    @property
    def can_go_back(self) -> bool:
        return bool(self.past)

    @property
    def can_go_forward(self) -> bool:
        return bool(self.future)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "past": list(self.past),
            "present": self.present,
            "future": list(self.future),
            "recording_enabled": self.recording_enabled,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "HistoryState":
        """Missing keys take the initial defaults (empty stacks, recording on)."""
        return cls(
            past=data.get("past", ()),
            present=data.get("present"),
            future=data.get("future", ()),
            recording_enabled=bool(data.get("recording_enabled", True)),
        )
