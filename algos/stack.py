"""A bounded last-in, first-out stack."""

from __future__ import annotations

from typing import Any, List, Optional

__all__ = ["Stack"]


class Stack:
    """A stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: List[Any] = []

    def push(self, item: Any) -> bool:
        """Push ``item``; a full stack ignores it. Returns whether it was stored."""
        if len(self._items) >= self.capacity:
            return False
        self._items.append(item)
        return True

    def pop(self) -> Optional[Any]:
        """Remove and return the top item, or ``None`` when the stack is empty."""
        if not self._items:
            return None
        return self._items.pop()

    def empty(self) -> bool:
        """Return whether the stack holds no items."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)