"""Task domain model."""

from itertools import count

from pydantic import BaseModel, Field

# Process-wide id source; ids are never reused within a process.
_task_ids = count(1)


def next_task_id() -> int:
    """Allocate the next task id."""
    return next(_task_ids)


class Task(BaseModel):
    """A single task on the board.

    Identity is the ``id``; two tasks with the same content are still
    different tasks. ``content`` is edited in place.
    """

    id: int = Field(default_factory=next_task_id, frozen=True)
    content: str

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return self.content
