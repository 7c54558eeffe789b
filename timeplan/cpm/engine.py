"""
Critical path engine.

Implements the forward pass (earliest start/finish in relative days) and
the backward walk over chosen predecessors that yields the critical path.
"""

import logging

from .models import Dependency, ScheduledTask, CPMResult
from .network import TaskNetwork

logger = logging.getLogger(__name__)


class CPMEngine:
    """
    Longest-path engine over a task network.

    The network must be acyclic; `run` checks this and returns an empty
    result for cyclic input instead of raising.
    """

    def __init__(self, network: TaskNetwork):
        self.network = network
        self.schedule: dict[str, ScheduledTask] = {}

    def forward_pass(self) -> dict[str, ScheduledTask]:
        """
        Calculate earliest start and finish for all tasks.

        Processes tasks in topological order. Tasks without predecessors
        start at day 0. Otherwise the earliest start is the largest start
        driven by any incoming relation; the first relation reaching that
        maximum becomes the chosen predecessor.
        """
        schedule: dict[str, ScheduledTask] = {}

        for task_id in self.network.topological_sort():
            task = self.network.tasks[task_id]
            entry = ScheduledTask(task_id=task_id, duration_days=task.duration_days)

            best_start = None
            best_dep = None
            for dep in self.network.get_predecessors(task_id):
                driven = self._get_driven_early_start(schedule[dep.from_task_id], dep, entry)
                if best_start is None or driven > best_start:
                    best_start = driven
                    best_dep = dep

            if best_dep is not None:
                pred = schedule[best_dep.from_task_id]
                entry.earliest_start = best_start
                entry.chosen_predecessor = pred.task_id
                entry.depth = pred.depth + 1

            entry.earliest_finish = entry.earliest_start + entry.duration_days
            schedule[task_id] = entry

        self.schedule = schedule
        return schedule

    @staticmethod
    def _get_driven_early_start(pred: ScheduledTask, dep: Dependency,
                                succ: ScheduledTask) -> float:
        """
        Calculate the early start driven by a predecessor relationship.

        Handles FS, SS, FF, SF relationship types with lag.
        """
        lag = dep.lag_days

        if dep.is_finish_to_start():
            # FS: successor starts after predecessor finishes + lag
            return pred.earliest_finish + lag

        if dep.is_start_to_start():
            # SS: successor starts after predecessor starts + lag
            return pred.earliest_start + lag

        if dep.is_finish_to_finish():
            # FF: successor finishes after predecessor finishes + lag
            return pred.earliest_finish + lag - succ.duration_days

        # SF: successor finishes after predecessor starts + lag
        return pred.earliest_start + lag - succ.duration_days

    def get_critical_path(self) -> list[str]:
        """
        Return task IDs on the critical path in execution order.

        The path ends at the chained task with the latest earliest finish.
        Ties prefer the longer predecessor chain, then task input order.
        """
        if not self.network.dependencies:
            return []

        end_entry = None
        for task_id in self.network.tasks_in_chain():
            entry = self.schedule.get(task_id)
            if entry is None:
                continue
            if end_entry is None or (entry.earliest_finish, entry.depth) > \
                    (end_entry.earliest_finish, end_entry.depth):
                end_entry = entry

        if end_entry is None:
            return []

        path = []
        current = end_entry.task_id
        while current is not None:
            path.append(current)
            current = self.schedule[current].chosen_predecessor
        path.reverse()
        return path

    def run(self) -> CPMResult:
        """
        Execute the full calculation.

        Returns:
            CPMResult; for cyclic networks the critical path and schedule
            are empty and `cycle` holds the offending task IDs.
        """
        cycle = self.network.find_cycle()
        if cycle:
            logger.warning(f"Dependency cycle detected, no critical path: {' -> '.join(cycle)}")
            return CPMResult(
                critical_path=[],
                has_cycle=True,
                cycle=cycle,
                dropped_relations=self.network.dropped_count,
            )

        self.forward_pass()
        critical_path = self.get_critical_path()
        project_duration = (self.schedule[critical_path[-1]].earliest_finish
                            if critical_path else 0.0)

        logger.debug(f"Critical path computed: {len(self.network.tasks)} tasks, "
                     f"{len(self.network.tasks_in_chain())} in chain, "
                     f"path length {len(critical_path)}, duration {project_duration} days")

        return CPMResult(
            critical_path=critical_path,
            schedule=self.schedule,
            project_duration_days=project_duration,
            dropped_relations=self.network.dropped_count,
        )
