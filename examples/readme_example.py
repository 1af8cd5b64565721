from dataclasses import dataclass, field
from enum import Enum

from copymutate import copy_mutate, copy_update, copying, mutation


class TaskStatus(Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


@dataclass
class Task:
    description: str
    status: TaskStatus


@dataclass
class TaskList:
    """Agent backlog. Every edit below produces a new TaskList."""

    owner: str
    tasks: list[Task] = field(default_factory=list)


def start_first_pending(backlog: TaskList) -> None:
    for task in backlog.tasks:
        if task.status == TaskStatus.PENDING:
            task.status = TaskStatus.IN_PROGRESS
            return


@copying
def add_task(backlog: TaskList, description: str) -> None:
    backlog.tasks.append(Task(description, TaskStatus.PENDING))


def main() -> None:
    initial = TaskList("agent-1", [Task("Research topic", TaskStatus.PENDING)])

    started = copy_mutate(initial, start_first_pending)
    report = Task("Write report", TaskStatus.PENDING)
    extended = started | mutation(lambda b: b.tasks.append(report))
    handed_off = copy_update(extended, lambda b: TaskList("agent-2", b.tasks))
    final = add_task(handed_off, "Review draft")

    for name, backlog in [
        ("initial", initial),
        ("started", started),
        ("extended", extended),
        ("handed_off", handed_off),
        ("final", final),
    ]:
        summary = ", ".join(f"{t.description}={t.status.value}" for t in backlog.tasks)
        print(f"{name:>10} [{backlog.owner}]: {summary}")


if __name__ == "__main__":
    main()
