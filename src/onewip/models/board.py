"""Board state and its persisted snapshot."""

from __future__ import annotations

import logging
from typing import NamedTuple

from pydantic import BaseModel, field_validator

from .enums import Column
from .task import Task
from .tracked_list import TrackedList

logger = logging.getLogger(__name__)

COLUMN_ORDER: tuple[Column, ...] = (Column.TODO, Column.WIP, Column.DONE)


class BoardSnapshot(BaseModel):
    """Serializable projection of a board: content strings only.

    Field order (todo, wip, done) is the persisted order.
    """

    todo: tuple[str, ...] = ()
    wip: str | None = None
    done: tuple[str, ...] = ()

    model_config = {"frozen": True}

    @field_validator("todo", "done")
    @classmethod
    def validate_entries(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Reject blank task entries."""
        for entry in v:
            if not entry.strip():
                raise ValueError("task content cannot be blank")
        return v

    @field_validator("wip")
    @classmethod
    def validate_wip(cls, v: str | None) -> str | None:
        """Reject a blank WIP entry."""
        if v is not None and not v.strip():
            raise ValueError("task content cannot be blank")
        return v

    @property
    def is_empty(self) -> bool:
        """True when the snapshot holds no tasks at all."""
        return not self.todo and self.wip is None and not self.done


class EditTarget(NamedTuple):
    """Where an edit will be written: column, index at entry, and task id."""

    column: Column
    index: int
    task_id: int


class Board:
    """Three columns, the selected column, and the moves between them.

    Every operation returns True if it changed the board and False if its
    precondition did not hold. Failed preconditions are never errors.
    """

    def __init__(
        self,
        todo: TrackedList[Task] | None = None,
        wip: Task | None = None,
        done: TrackedList[Task] | None = None,
    ) -> None:
        self._todo: TrackedList[Task] = todo if todo is not None else TrackedList()
        self._wip: Task | None = wip
        self._done: TrackedList[Task] = done if done is not None else TrackedList()
        self._selected = Column.TODO

    # --- Snapshot conversion ---

    @classmethod
    def from_snapshot(cls, snapshot: BoardSnapshot) -> Board:
        """Build a board from a snapshot, giving every entry a fresh id."""
        return cls(
            todo=TrackedList(Task(content=c) for c in snapshot.todo),
            wip=Task(content=snapshot.wip) if snapshot.wip is not None else None,
            done=TrackedList(Task(content=c) for c in snapshot.done),
        )

    def snapshot(self) -> BoardSnapshot:
        """Return an immutable snapshot of the current contents."""
        return BoardSnapshot(
            todo=tuple(t.content for t in self._todo),
            wip=self._wip.content if self._wip is not None else None,
            done=tuple(t.content for t in self._done),
        )

    # --- Read-only accessors ---

    @property
    def todo(self) -> TrackedList[Task]:
        return self._todo

    @property
    def wip(self) -> Task | None:
        return self._wip

    @property
    def done(self) -> TrackedList[Task]:
        return self._done

    @property
    def selected_column(self) -> Column:
        return self._selected

    @property
    def is_empty(self) -> bool:
        """True when no column holds a task."""
        return not self._todo and self._wip is None and not self._done

    def _selected_list(self) -> TrackedList[Task] | None:
        """The tracked list behind the selected column (None for WIP)."""
        if self._selected is Column.TODO:
            return self._todo
        if self._selected is Column.DONE:
            return self._done
        return None

    def current_task(self) -> Task | None:
        """Task under the cursor of the selected column."""
        tasks = self._selected_list()
        if tasks is None:
            return self._wip
        return tasks.current()

    def find_task(self, task_id: int) -> tuple[Column, int] | None:
        """Locate a task by id. Returns (column, index) or None."""
        if self._wip is not None and self._wip.id == task_id:
            return (Column.WIP, 0)
        for column, tasks in ((Column.TODO, self._todo), (Column.DONE, self._done)):
            for index, task in enumerate(tasks):
                if task.id == task_id:
                    return (column, index)
        return None

    # --- Selection and cursor ---

    def select_left(self) -> bool:
        """Select the column to the left. No wraparound."""
        idx = COLUMN_ORDER.index(self._selected)
        if idx == 0:
            return False
        self._selected = COLUMN_ORDER[idx - 1]
        return True

    def select_right(self) -> bool:
        """Select the column to the right. No wraparound."""
        idx = COLUMN_ORDER.index(self._selected)
        if idx == len(COLUMN_ORDER) - 1:
            return False
        self._selected = COLUMN_ORDER[idx + 1]
        return True

    def select(self, column: Column) -> None:
        """Select a column directly."""
        self._selected = column

    def move_cursor_up(self) -> bool:
        tasks = self._selected_list()
        return tasks.move_cursor_up() if tasks is not None else False

    def move_cursor_down(self) -> bool:
        tasks = self._selected_list()
        return tasks.move_cursor_down() if tasks is not None else False

    def reorder_up(self) -> bool:
        """Move the current task one place up in its column."""
        tasks = self._selected_list()
        return tasks.move_item_up() if tasks is not None else False

    def reorder_down(self) -> bool:
        """Move the current task one place down in its column."""
        tasks = self._selected_list()
        return tasks.move_item_down() if tasks is not None else False

    # --- Column transitions ---

    def add_task(self, content: str) -> Task:
        """Append a new task to Todo and select Todo."""
        task = Task(content=content)
        self._todo.push(task)
        self._selected = Column.TODO
        logger.debug("Task added: %d", task.id)
        return task

    def advance_task(self) -> bool:
        """Move the current task one column to the right.

        Todo -> WIP only while WIP is empty. WIP -> Done always. Selection
        follows the task.
        """
        if self._selected is Column.TODO:
            if self._wip is not None or self._todo.current() is None:
                return False
            self._wip = self._todo.remove_current()
            self._selected = Column.WIP
            logger.debug("Task started: %d", self._wip.id)
            return True
        if self._selected is Column.WIP:
            return self.finish_wip()
        return False

    def retreat_task(self) -> bool:
        """Move the current task one column to the left.

        Done -> WIP only while WIP is empty. WIP -> end of Todo always.
        Selection follows the task.
        """
        if self._selected is Column.DONE:
            if self._wip is not None or self._done.current() is None:
                return False
            self._wip = self._done.remove_current()
            self._selected = Column.WIP
            logger.debug("Task reopened: %d", self._wip.id)
            return True
        if self._selected is Column.WIP:
            if self._wip is None:
                return False
            task, self._wip = self._wip, None
            self._todo.push(task)
            self._selected = Column.TODO
            logger.debug("Task returned to todo: %d", task.id)
            return True
        return False

    def finish_wip(self) -> bool:
        """Move the WIP task to the end of Done and select Done."""
        if self._wip is None:
            return False
        task, self._wip = self._wip, None
        self._done.push(task)
        self._selected = Column.DONE
        logger.debug("Task finished: %d", task.id)
        return True

    def delete_current(self) -> bool:
        """Delete the current task of the selected column."""
        tasks = self._selected_list()
        if tasks is None:
            if self._wip is None:
                return False
            self._wip = None
            return True
        return tasks.remove_current() is not None

    # --- Editing ---

    def edit_target(self) -> EditTarget | None:
        """Describe the current task as an edit target, if there is one."""
        task = self.current_task()
        if task is None:
            return None
        tasks = self._selected_list()
        index = 0 if tasks is None else tasks.cursor
        return EditTarget(self._selected, index, task.id)

    def replace_content(self, target: EditTarget, content: str) -> bool:
        """Write ``content`` into the task described by ``target``.

        The index is trusted only if the task there still carries the
        recorded id; otherwise the task is looked up by id. Returns False
        if the task no longer exists.
        """
        column, index = target.column, target.index
        if not self._holds(column, index, target.task_id):
            position = self.find_task(target.task_id)
            if position is None:
                logger.debug("Edit target gone: %d", target.task_id)
                return False
            column, index = position

        if column is Column.WIP:
            if self._wip is None:
                return False
            self._wip = self._wip.model_copy(update={"content": content})
            return True

        tasks = self._todo if column is Column.TODO else self._done
        tasks.replace_at(index, tasks.items[index].model_copy(update={"content": content}))
        return True

    def _holds(self, column: Column, index: int, task_id: int) -> bool:
        if column is Column.WIP:
            return self._wip is not None and self._wip.id == task_id
        tasks = self._todo if column is Column.TODO else self._done
        return 0 <= index < len(tasks) and tasks.items[index].id == task_id
