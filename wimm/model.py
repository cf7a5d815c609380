"""Task and status records."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class StatusKind(Enum):
    """The states a task can be in."""

    PENDING = "Pending"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"
    DEFERRED = "Deferred"
    DROPPED = "Dropped"
    ON_HOLD = "OnHold"


_TIMED_KINDS = frozenset({StatusKind.IN_PROGRESS, StatusKind.DEFERRED})


def _check_timestamp(value: Any, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{field} must be a non-negative integer, got {value!r}")
    return value


@dataclass(frozen=True)
class Status:
    """A task status; in-progress and deferred statuses carry a timestamp."""

    kind: StatusKind
    timestamp: int | None = None

    def __post_init__(self):
        if self.kind in _TIMED_KINDS:
            _check_timestamp(self.timestamp, "timestamp")
        elif self.timestamp is not None:
            raise ValueError(f"status {self.kind.value} takes no timestamp")

    @classmethod
    def pending(cls):
        return cls(StatusKind.PENDING)

    @classmethod
    def in_progress(cls, since):
        return cls(StatusKind.IN_PROGRESS, since)

    @classmethod
    def completed(cls):
        return cls(StatusKind.COMPLETED)

    @classmethod
    def deferred(cls, until):
        return cls(StatusKind.DEFERRED, until)

    @classmethod
    def dropped(cls):
        return cls(StatusKind.DROPPED)

    @classmethod
    def on_hold(cls):
        return cls(StatusKind.ON_HOLD)

    def to_dict(self):
        data: dict[str, Any] = {"kind": self.kind.value}
        if self.timestamp is not None:
            data["timestamp"] = self.timestamp
        return data

    @classmethod
    def from_dict(cls, data):
        try:
            kind = StatusKind(data["kind"])
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"invalid status: {data!r}") from exc
        return cls(kind, data.get("timestamp"))

    def __str__(self):
        match self.kind:
            case StatusKind.PENDING:
                return "Pending"
            case StatusKind.IN_PROGRESS:
                return f"In Progress since {self.timestamp}"
            case StatusKind.COMPLETED:
                return "Completed"
            case StatusKind.DROPPED:
                return "Dropped"
            case StatusKind.DEFERRED:
                return f"Deferred until {self.timestamp}"
            case _:
                return "On Hold"


@dataclass(frozen=True)
class Task:
    """A tracked task; times are seconds since the Unix epoch."""

    id: str
    name: str
    status: Status
    created_at: int
    time_spent: int

    def __post_init__(self):
        _check_timestamp(self.created_at, "created_at")
        _check_timestamp(self.time_spent, "time_spent")

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "status": self.status.to_dict(),
            "created_at": self.created_at,
            "time_spent": self.time_spent,
        }

    @classmethod
    def from_dict(cls, data):
        try:
            task_id = data["id"]
            name = data["name"]
            status = Status.from_dict(data["status"])
            created_at = data["created_at"]
            time_spent = data["time_spent"]
        except (KeyError, TypeError) as exc:
            raise ValueError(f"invalid task: {data!r}") from exc
        if not isinstance(task_id, str) or not isinstance(name, str):
            raise ValueError(f"invalid task: {data!r}")
        return cls(task_id, name, status, created_at, time_spent)

    def __str__(self):
        return (
            f"Task(id: {self.id}, name: {self.name}, status: {self.status}, "
            f"created_at: {self.created_at}, time_spent: {self.time_spent})"
        )