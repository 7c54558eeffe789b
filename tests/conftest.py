"""Pytest configuration and fixtures."""
import pytest
from datetime import date, timedelta
from typing import Optional

from timeplan.cpm.models import Task, Dependency

PLAN_START = date(2025, 1, 1)


def make_task(task_id: str, days: Optional[int], offset: int = 0) -> Task:
    """Task starting `offset` days after PLAN_START lasting `days` days (None for a milestone)."""
    start = PLAN_START + timedelta(days=offset)
    end = start + timedelta(days=days) if days is not None else None
    return Task(task_id=task_id, start_date=start, end_date=end)


def make_dep(from_id: str, to_id: str, dependency_type: Optional[str] = None,
             lag: float = 0.0, relation_id: Optional[str] = None,
             relation_type: str = 'dependency') -> Dependency:
    """Dependency with an id derived from its endpoints."""
    return Dependency(
        relation_id=relation_id or f'{from_id}->{to_id}',
        from_task_id=from_id,
        to_task_id=to_id,
        dependency_type=dependency_type,
        lag_days=lag,
        relation_type=relation_type,
    )


@pytest.fixture
def task_factory():
    """Factory for tasks; see make_task."""
    return make_task


@pytest.fixture
def dep_factory():
    """Factory for dependencies; see make_dep."""
    return make_dep


@pytest.fixture
def chain_plan():
    """A(5d) -> B(3d) -> C(2d), finish-to-start."""
    tasks = [make_task('A', 5), make_task('B', 3), make_task('C', 2)]
    relations = [make_dep('A', 'B'), make_dep('B', 'C')]
    return tasks, relations


@pytest.fixture
def branching_plan():
    """A(5d) feeds a short branch B(1d) and a long branch C(5d) -> D(5d)."""
    tasks = [make_task('A', 5), make_task('B', 1), make_task('C', 5), make_task('D', 5)]
    relations = [make_dep('A', 'B'), make_dep('A', 'C'), make_dep('C', 'D')]
    return tasks, relations


@pytest.fixture
def store_line_records():
    """Line payloads as held by the plan store."""
    return [
        {
            'id': 'line-1',
            'timelineId': 'tl-1',
            'label': 'Design',
            'startDate': '2025-01-01',
            'endDate': '2025-01-11',
            'schemaId': 'bar-schema',
            'attributes': {'status': 'in-progress'},
        },
        {
            'id': 'line-2',
            'timelineId': 'tl-1',
            'label': 'Design review',
            'startDate': '2025-01-11',
            'schemaId': 'milestone-schema',
        },
        {
            'id': 'line-3',
            'timelineId': 'tl-2',
            'label': 'Build',
            'startDate': '2025-01-12',
            'endDate': '2025-02-01',
        },
    ]


@pytest.fixture
def store_relation_records():
    """Relation payloads as held by the plan store."""
    return [
        {
            'id': 'rel-1',
            'type': 'dependency',
            'fromLineId': 'line-1',
            'toLineId': 'line-2',
            'properties': {'dependencyType': 'finish-to-start'},
        },
        {
            'id': 'rel-2',
            'type': 'dependency',
            'fromLineId': 'line-2',
            'toLineId': 'line-3',
            'properties': {'dependencyType': 'start-to-start', 'lag': 1},
        },
    ]
