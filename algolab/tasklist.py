"""A first-in, first-out list of pending tasks."""

from __future__ import annotations

import sys
from collections import deque
from typing import Deque, Iterator, Optional, Sequence


class TaskList:
    """Tasks are added at the back and taken from the front."""

    def __init__(self) -> None:
        self._tasks: Deque[str] = deque()

    def insert_back(self, task: str) -> None:
        """Append a task to the end of the list."""
        self._tasks.append(task)

    def remove_front(self) -> str:
        """Remove and return the first task; raise IndexError when empty."""
        if not self._tasks:
            raise IndexError("remove_front from an empty task list")
        return self._tasks.popleft()

    def is_empty(self) -> bool:
        """True when no tasks remain."""
        return not self._tasks

    def format(self) -> str:
        """The tasks as numbered lines, "1. task" and so on."""
        return "\n".join(f"{number}. {task}" for number, task in enumerate(self._tasks, 1))

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tasks)


def _show(tasks: TaskList) -> None:
    print("Tasks not done:")
    if not tasks.is_empty():
        print(tasks.format())


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Fill a task list, complete the tasks in order and report progress."""
    tasks = TaskList()
    for task in ("clean desktop", "wash the laundry", "do homeworks"):
        tasks.insert_back(task)
    _show(tasks)

    print(f"  done: {tasks.remove_front()}")

    tasks.insert_back("wash dishes")
    tasks.insert_back("collect rubbish")
    print()
    _show(tasks)

    while not tasks.is_empty():
        print(f"  done: {tasks.remove_front()}")

    if tasks.is_empty():
        print("All the tasks done!")
    return 0


if __name__ == "__main__":
    sys.exit(main())