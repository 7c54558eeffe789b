"""
Data models for critical path calculations.

Defines dataclasses for plan tasks, dependencies, and forward-pass results.
"""

from dataclasses import dataclass, field
from typing import Optional

import pandas as pd

from timeplan.utils.dates import DateLike, parse_date, days_between

FINISH_TO_START = 'finish-to-start'
START_TO_START = 'start-to-start'
FINISH_TO_FINISH = 'finish-to-finish'
START_TO_FINISH = 'start-to-finish'

DEPENDENCY_TYPES = (FINISH_TO_START, START_TO_START, FINISH_TO_FINISH, START_TO_FINISH)

_DEPENDENCY_TYPE_CODES = {
    'FS': FINISH_TO_START,
    'SS': START_TO_START,
    'FF': FINISH_TO_FINISH,
    'SF': START_TO_FINISH,
}

DEPENDENCY_RELATION = 'dependency'
RELATION_TYPES = (DEPENDENCY_RELATION, 'hierarchy', 'association', 'composition', 'aggregation')


def normalize_dependency_type(value: Optional[str]) -> str:
    """Map a dependency type or its short code (FS/SS/FF/SF) to the canonical name."""
    if value is None:
        return FINISH_TO_START
    key = str(value).strip()
    if key.upper() in _DEPENDENCY_TYPE_CODES:
        return _DEPENDENCY_TYPE_CODES[key.upper()]
    if key.lower() in DEPENDENCY_TYPES:
        return key.lower()
    raise ValueError(f"Unknown dependency type {value!r}; expected one of {DEPENDENCY_TYPES}")


@dataclass
class Task:
    """Represents a plan line: a bar with a date span, or a milestone without an end date."""

    task_id: str
    start_date: DateLike
    end_date: Optional[DateLike] = None
    timeline_id: Optional[str] = None
    label: str = ''

    def __post_init__(self):
        start = parse_date(self.start_date)
        if start is None:
            raise ValueError(f"Task {self.task_id} has no start date")
        self.start_date = start
        self.end_date = parse_date(self.end_date)

    @property
    def duration_days(self) -> int:
        """Calendar days between start and end (0 for milestones)."""
        return days_between(self.start_date, self.end_date)

    def is_milestone(self) -> bool:
        """Check if task is a milestone (zero duration)."""
        return self.duration_days == 0


@dataclass
class Dependency:
    """Represents a predecessor-successor relation between two tasks."""

    relation_id: str
    from_task_id: str
    to_task_id: str
    dependency_type: Optional[str] = None
    lag_days: float = 0.0
    relation_type: str = DEPENDENCY_RELATION
    # Type as given by the caller, None when it fell back to finish-to-start
    declared_type: Optional[str] = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.relation_type not in RELATION_TYPES:
            raise ValueError(f"Unknown relation type {self.relation_type!r}; "
                             f"expected one of {RELATION_TYPES}")
        if self.dependency_type is not None:
            self.declared_type = normalize_dependency_type(self.dependency_type)
        self.dependency_type = normalize_dependency_type(self.dependency_type)
        self.lag_days = float(self.lag_days or 0.0)

    def is_dependency(self) -> bool:
        """
        Check if the relation constrains the schedule.

        Dependency relations always do. Other kinds do only when they
        explicitly declare a finish-to-start type.
        """
        return (self.relation_type == DEPENDENCY_RELATION
                or self.declared_type == FINISH_TO_START)

    def is_self_loop(self) -> bool:
        return self.from_task_id == self.to_task_id

    def is_finish_to_start(self) -> bool:
        return self.dependency_type == FINISH_TO_START

    def is_start_to_start(self) -> bool:
        return self.dependency_type == START_TO_START

    def is_finish_to_finish(self) -> bool:
        return self.dependency_type == FINISH_TO_FINISH

    def is_start_to_finish(self) -> bool:
        return self.dependency_type == START_TO_FINISH


@dataclass
class ScheduledTask:
    """Forward-pass values for one task, in days relative to the plan start."""

    task_id: str
    duration_days: int
    earliest_start: float = 0.0
    earliest_finish: float = 0.0
    chosen_predecessor: Optional[str] = None
    depth: int = 1


@dataclass
class CPMResult:
    """Results from a critical path calculation."""

    critical_path: list[str]       # task_ids in execution order
    schedule: dict[str, ScheduledTask] = field(default_factory=dict)
    project_duration_days: float = 0.0
    has_cycle: bool = False
    cycle: list[str] = field(default_factory=list)
    dropped_relations: int = 0

    def get_critical_tasks(self) -> list[ScheduledTask]:
        """Get scheduled entries on the critical path."""
        return [self.schedule[tid] for tid in self.critical_path if tid in self.schedule]

    def to_dataframe(self) -> pd.DataFrame:
        """Per-task forward-pass values as a DataFrame, one row per scheduled task."""
        critical = set(self.critical_path)
        rows = [
            {
                'task_id': entry.task_id,
                'duration_days': entry.duration_days,
                'earliest_start': entry.earliest_start,
                'earliest_finish': entry.earliest_finish,
                'chosen_predecessor': entry.chosen_predecessor,
                'depth': entry.depth,
                'is_critical': entry.task_id in critical,
            }
            for entry in self.schedule.values()
        ]
        columns = ['task_id', 'duration_days', 'earliest_start', 'earliest_finish',
                   'chosen_predecessor', 'depth', 'is_critical']
        return pd.DataFrame(rows, columns=columns)
