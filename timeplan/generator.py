"""
Synthetic plan generator.

Produces reproducible plans of bars, milestones and gateways spread over
several timelines, linked by dependency chains, for benchmarks and tests.
"""

import random
import uuid
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Optional

from timeplan.config.settings import settings
from timeplan.cpm.models import Task, Dependency, DEPENDENCY_TYPES

LINE_KINDS = ('bar', 'milestone', 'gateway')
BAR_LENGTH_DAYS = 14
LINE_SPACING_DAYS = 7


@dataclass
class GeneratedPlan:
    """A generated plan."""

    title: str
    timeline_ids: list[str]
    tasks: list[Task] = field(default_factory=list)
    relations: list[Dependency] = field(default_factory=list)


def _make_id(rng: random.Random) -> str:
    return str(uuid.UUID(int=rng.getrandbits(128), version=4))


def generate_line(timeline_id: str, index: int, start_date: date,
                  rng: Optional[random.Random] = None) -> Task:
    """
    Generate one line. Every third line is a two-week bar; the rest are
    milestones and gateways without an end date.
    """
    rng = rng or random.Random()
    kind = LINE_KINDS[index % len(LINE_KINDS)]
    start = start_date + timedelta(days=index * LINE_SPACING_DAYS)
    end = start + timedelta(days=BAR_LENGTH_DAYS) if kind == 'bar' else None

    return Task(
        task_id=_make_id(rng),
        start_date=start,
        end_date=end,
        timeline_id=timeline_id,
        label=f'{kind.capitalize()} {index + 1}',
    )


def generate_relations(tasks: list[Task], density: float = 0.3,
                       rng: Optional[random.Random] = None) -> list[Dependency]:
    """Link consecutive tasks with probability `density`, cycling dependency types."""
    rng = rng or random.Random()
    relations = []

    for i in range(len(tasks) - 1):
        if rng.random() > density:
            continue
        relations.append(Dependency(
            relation_id=_make_id(rng),
            from_task_id=tasks[i].task_id,
            to_task_id=tasks[i + 1].task_id,
            dependency_type=DEPENDENCY_TYPES[i % len(DEPENDENCY_TYPES)],
            lag_days=0.0,
        ))

    return relations


def generate_time_plan(
    title: str = 'Test Plan',
    num_timelines: int = None,
    num_lines_per_timeline: int = None,
    relation_density: float = None,
    start_date: date = None,
    seed: Optional[int] = None,
) -> GeneratedPlan:
    """
    Generate a complete plan.

    Args:
        title: Plan title
        num_timelines: Number of timelines (default: BENCH_TIMELINES)
        num_lines_per_timeline: Lines per timeline (default: BENCH_LINES_PER_TIMELINE)
        relation_density: Probability of linking consecutive lines (default: BENCH_RELATION_DENSITY)
        start_date: Date of the first line (default: today)
        seed: Random seed for reproducible plans

    Returns:
        GeneratedPlan with tasks in timeline order and relations between them
    """
    if num_timelines is None:
        num_timelines = settings.BENCH_TIMELINES
    if num_lines_per_timeline is None:
        num_lines_per_timeline = settings.BENCH_LINES_PER_TIMELINE
    if relation_density is None:
        relation_density = settings.BENCH_RELATION_DENSITY
    if not 0.0 <= relation_density <= 1.0:
        raise ValueError(f"relation_density must be between 0 and 1, got {relation_density}")

    rng = random.Random(seed)
    start_date = start_date or date.today()

    plan = GeneratedPlan(title=title, timeline_ids=[])
    for t_index in range(num_timelines):
        timeline_id = _make_id(rng)
        plan.timeline_ids.append(timeline_id)
        for i in range(num_lines_per_timeline):
            index = t_index * num_lines_per_timeline + i
            plan.tasks.append(generate_line(timeline_id, index, start_date, rng))

    plan.relations = generate_relations(plan.tasks, relation_density, rng)
    return plan
