"""Shared data classes used across the store, editor and writer."""

import enum
from dataclasses import dataclass, field


class EdgeKind(enum.Enum):
    DEPENDENCY = "dependency"  # new card is a dependency of the target
    DEPENDENT = "dependent"    # new card depends on the target


@dataclass(frozen=True)
class Edge:
    kind: EdgeKind
    target: int


@dataclass
class FinishedInfo:
    ease_factor: float = 2.5
    interval_days: float = 0
    repetitions: int = 0


@dataclass
class PendingCard:
    question: str
    answer: str
    topic_id: int
    finished: bool
    source_id: int | None = None
    finished_info: FinishedInfo | None = None
    edges: list[Edge] = field(default_factory=list)


@dataclass
class CardRecord:
    id: int
    question: str
    answer: str
    topic_id: int
    status: str
    source_id: int | None = None


@dataclass
class Topic:
    id: int
    name: str
