"""
Critical Path Analysis.

Entry points for computing the critical path of a plan and rendering
a short text report of the result.
"""

import logging
from typing import Sequence

from ..cpm.models import Task, Dependency, CPMResult
from ..cpm.network import TaskNetwork
from ..cpm.engine import CPMEngine

logger = logging.getLogger(__name__)


def analyze_critical_path(
    tasks: Sequence[Task],
    relations: Sequence[Dependency],
) -> CPMResult:
    """
    Build the dependency network and run the forward pass.

    Args:
        tasks: All tasks in the plan
        relations: All relations between tasks; ones referencing missing
                   tasks are ignored

    Returns:
        CPMResult with the critical path and per-task schedule. Cyclic
        input yields an empty critical path with `has_cycle` set.

    Raises:
        TypeError: If tasks or relations is None
    """
    network = TaskNetwork.from_lists(tasks, relations)
    if network.dropped_count:
        logger.info(f"Ignored {network.dropped_count} relations referencing missing tasks")
    return CPMEngine(network).run()


def calculate_critical_path(
    tasks: Sequence[Task],
    relations: Sequence[Dependency],
) -> list[str]:
    """
    Calculate the critical (longest) path through the dependency network.

    Args:
        tasks: All tasks in the plan
        relations: All relations (dependencies) between tasks

    Returns:
        Task IDs on the critical path in start-to-finish order; empty when
        there are no usable dependencies or the graph contains a cycle
    """
    if tasks is None or relations is None:
        raise TypeError("tasks and relations must be lists, not None")
    if not tasks or not relations:
        return []
    return analyze_critical_path(tasks, relations).critical_path


def format_critical_path_report(result: CPMResult, max_rows: int = 20) -> str:
    """Format a critical path result as a printable report."""
    lines = []
    lines.append("=" * 80)
    lines.append("CRITICAL PATH REPORT")
    lines.append("=" * 80)

    if result.has_cycle:
        lines.append(f"\nDependency cycle detected: {' -> '.join(result.cycle)}")
        lines.append("No critical path can be computed.")
        lines.append("\n" + "=" * 80)
        return "\n".join(lines)

    lines.append(f"\nScheduled Tasks: {len(result.schedule)}")
    lines.append(f"Ignored Relations: {result.dropped_relations}")
    lines.append(f"Critical Tasks: {len(result.critical_path)}")
    lines.append(f"Project Duration: {result.project_duration_days:g} days")

    if not result.critical_path:
        lines.append("\nNo dependency chain found.")
    else:
        lines.append(f"\n--- Critical Path (first {max_rows} tasks) ---")
        for i, entry in enumerate(result.get_critical_tasks()[:max_rows]):
            lines.append(f"  {i+1:3d}. {entry.task_id:38s} | "
                         f"start {entry.earliest_start:7g}d | "
                         f"finish {entry.earliest_finish:7g}d | "
                         f"{entry.duration_days}d")
        if len(result.critical_path) > max_rows:
            lines.append(f"  ... and {len(result.critical_path) - max_rows} more critical tasks")

    lines.append("\n" + "=" * 80)
    return "\n".join(lines)


def print_critical_path_report(result: CPMResult) -> None:
    """Print a formatted critical path report."""
    print(format_critical_path_report(result))
