"""Tasks and the round-robin scheduler."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, Optional

from fenix.klist import LinkedList, ListNode
from fenix.printk import Console

__all__ = [
    "TASK_STACK_SIZE",
    "TASK_STACK_MAGIC",
    "TASK_STACK_MAGIC_LEN",
    "TASK_FILES",
    "TaskState",
    "Task",
    "Scheduler",
]

TASK_STACK_SIZE = 2048
TASK_STACK_MAGIC = 0xCC
TASK_STACK_MAGIC_LEN = 12
TASK_FILES = 8

_FRAME_SIZE = 0x20
_INITIAL_XPSR = 0x1000000
_USER_MODE_CONTROL = 3


class TaskState(IntEnum):
    """Run states of a task."""

    RUNNING = 0
    INTERRUPTIBLE = 1
    UNINTERRUPTIBLE = 2
    STOPPED = 3


class Task:
    """A task with its own stack, guarded at the bottom by a magic pattern."""

    def __init__(self, entry: Callable[[], None]) -> None:
        self.entry = entry
        self.stack = bytearray(TASK_STACK_SIZE)
        self.stack[:TASK_STACK_MAGIC_LEN] = bytes([TASK_STACK_MAGIC]) * TASK_STACK_MAGIC_LEN
        self.psp = TASK_STACK_SIZE - _FRAME_SIZE
        self.control = _USER_MODE_CONTROL
        # Initial exception frame: the task starts at its entry point.
        self.r12 = 0
        self.lr = 0
        self.pc = entry
        self.xpsr = _INITIAL_XPSR
        self.stack[self.psp + 0x1C:self.psp + 0x20] = _INITIAL_XPSR.to_bytes(4, "little")
        self.state = TaskState.RUNNING
        self.timeout_ms = 0
        self.files: list[Optional[object]] = [None] * TASK_FILES
        self.node = ListNode(self)

    def stack_intact(self) -> bool:
        """True when the magic pattern at the stack bottom is untouched."""
        return all(b == TASK_STACK_MAGIC for b in self.stack[:TASK_STACK_MAGIC_LEN])

    def __repr__(self) -> str:
        name = getattr(self.entry, "__name__", repr(self.entry))
        return f"Task({name}, state={self.state.name})"


class Scheduler:
    """Round-robin scheduler over a queue of tasks."""

    def __init__(self, console: Console) -> None:
        self.console = console
        self._tasks = LinkedList()
        self.current: Optional[Task] = None

    def create_task(self, entry: Callable[[], None]) -> Task:
        """Create a runnable task and queue it; the first one becomes current."""
        task = Task(entry)
        self._tasks.add_tail(task.node)
        if self.current is None:
            self.current = task
        return task

    def check_stack(self) -> None:
        """Panic when the current task has overrun its stack."""
        if self.current is None:
            raise RuntimeError("no current task")
        if not self.current.stack_intact():
            self.console.panic("check_psp failed")

    def schedule(self, tick_ms: int) -> Optional[Task]:
        """Pick the next runnable task other than the current one.

        Sleeping tasks whose timeout has passed are woken. The chosen task is
        moved to the back of the queue and becomes current. Returns the
        current task afterwards.
        """
        for node in self._tasks.nodes():
            task: Task = node.owner
            if task is self.current:
                continue
            if task.state in (TaskState.INTERRUPTIBLE, TaskState.UNINTERRUPTIBLE):
                if tick_ms > task.timeout_ms:
                    task.state = TaskState.RUNNING
            if task.state == TaskState.RUNNING:
                self._tasks.move_tail(task.node)
                self.current = task
                break
        return self.current

    def tasks(self) -> list[Task]:
        """The tasks in queue order."""
        return list(self._tasks)