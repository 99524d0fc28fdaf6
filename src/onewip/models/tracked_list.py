"""Ordered list with an optional cursor, shared by the Todo and Done columns."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class TrackedList(Generic[T]):
    """An ordered sequence of items plus an optional cursor.

    The cursor is ``None`` exactly when the list is empty; otherwise it
    always points at a valid index.
    """

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._items: list[T] = list(items or [])
        self._cursor: int | None = 0 if self._items else None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"TrackedList(items={self._items!r}, cursor={self._cursor!r})"

    @property
    def items(self) -> tuple[T, ...]:
        """Snapshot of the items in order."""
        return tuple(self._items)

    @property
    def cursor(self) -> int | None:
        """Index of the current item, or None when empty."""
        return self._cursor

    def current(self) -> T | None:
        """Return the item under the cursor without changing anything."""
        if self._cursor is None:
            return None
        return self._items[self._cursor]

    def push(self, item: T) -> None:
        """Append ``item`` and make it current."""
        self._items.append(item)
        self._cursor = len(self._items) - 1

    def remove_current(self) -> T | None:
        """Remove and return the current item.

        The cursor stays on the same index (now the next item), or moves to
        the new last item when the removed one was last.
        """
        if self._cursor is None:
            return None

        index = self._cursor
        item = self._items.pop(index)
        if not self._items:
            self._cursor = None
        else:
            self._cursor = min(index, len(self._items) - 1)
        return item

    def move_cursor_up(self) -> bool:
        """Move the cursor one item up. Never wraps."""
        if self._cursor is None or self._cursor == 0:
            return False
        self._cursor -= 1
        return True

    def move_cursor_down(self) -> bool:
        """Move the cursor one item down.

        With no cursor the last item becomes current. At the last item this
        is a no-op.
        """
        if not self._items:
            return False
        last = len(self._items) - 1
        if self._cursor is None:
            self._cursor = last
            return True
        if self._cursor >= last:
            return False
        self._cursor += 1
        return True

    def move_item_up(self) -> bool:
        """Swap the current item with the one above it; the cursor follows."""
        if self._cursor is None or self._cursor == 0:
            return False
        index = self._cursor
        self._items[index - 1], self._items[index] = self._items[index], self._items[index - 1]
        self._cursor = index - 1
        return True

    def move_item_down(self) -> bool:
        """Swap the current item with the one below it; the cursor follows."""
        if self._cursor is None or self._cursor >= len(self._items) - 1:
            return False
        index = self._cursor
        self._items[index + 1], self._items[index] = self._items[index], self._items[index + 1]
        self._cursor = index + 1
        return True

    def replace_at(self, index: int, value: T) -> None:
        """Overwrite the item at ``index``.

        Raises:
            IndexError: if ``index`` does not address an existing item.
        """
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range for list of {len(self._items)}")
        self._items[index] = value
