"""
Task Network for critical path calculations.

Manages tasks and dependencies with support for cycle detection,
topological sorting and network traversal.
"""

import logging
from collections import defaultdict
from typing import Iterable, Optional

from .models import Task, Dependency

logger = logging.getLogger(__name__)

# DFS colours
_WHITE, _GRAY, _BLACK = 0, 1, 2


class CycleError(ValueError):
    """Raised when the dependency graph contains a cycle."""

    def __init__(self, cycle: list[str]):
        self.cycle = cycle
        super().__init__(f"Circular dependency detected: {' -> '.join(cycle)}")


class TaskNetwork:
    """
    Task dependency network.

    Maintains tasks and their predecessor/successor relationships
    in input order, with efficient lookups and DFS-based ordering.
    """

    def __init__(self):
        self.tasks: dict[str, Task] = {}
        self.dependencies: list[Dependency] = []
        self.dropped_count = 0
        self._successors: dict[str, list[Dependency]] = defaultdict(list)
        self._predecessors: dict[str, list[Dependency]] = defaultdict(list)

    @classmethod
    def from_lists(cls, tasks: Iterable[Task], relations: Iterable[Dependency]) -> 'TaskNetwork':
        """
        Build a network from flat task and relation lists.

        Relations with a missing endpoint, or that are not dependency
        relations, are dropped.
        """
        if tasks is None or relations is None:
            raise TypeError("tasks and relations must be lists, not None")

        network = cls()
        for task in tasks:
            network.add_task(task)
        for dep in relations:
            network.add_dependency_safe(dep)
        return network

    def add_task(self, task: Task) -> None:
        """Add a task to the network."""
        self.tasks[task.task_id] = task

    def add_dependency(self, dep: Dependency) -> None:
        """
        Add a dependency to the network.

        Both predecessor and successor tasks must exist in the network.
        """
        if dep.from_task_id not in self.tasks:
            raise ValueError(f"Predecessor task {dep.from_task_id} not in network")
        if dep.to_task_id not in self.tasks:
            raise ValueError(f"Successor task {dep.to_task_id} not in network")
        self._link(dep)

    def add_dependency_safe(self, dep: Dependency) -> bool:
        """
        Add a dependency only if it is a dependency relation and both tasks exist.

        Returns True if added, False if skipped.
        """
        if not dep.is_dependency():
            return False
        if dep.from_task_id not in self.tasks or dep.to_task_id not in self.tasks:
            self.dropped_count += 1
            logger.debug(f"Dropping relation {dep.relation_id}: "
                         f"{dep.from_task_id} -> {dep.to_task_id} references a missing task")
            return False
        self._link(dep)
        return True

    def _link(self, dep: Dependency) -> None:
        self.dependencies.append(dep)
        self._successors[dep.from_task_id].append(dep)
        self._predecessors[dep.to_task_id].append(dep)

    def get_task(self, task_id: str) -> Optional[Task]:
        """Get a task by ID."""
        return self.tasks.get(task_id)

    def get_successors(self, task_id: str) -> list[Dependency]:
        """Get dependencies where task_id is the predecessor."""
        return self._successors.get(task_id, [])

    def get_predecessors(self, task_id: str) -> list[Dependency]:
        """Get dependencies where task_id is the successor."""
        return self._predecessors.get(task_id, [])

    def get_start_tasks(self) -> list[str]:
        """Get task IDs with no predecessors."""
        return [tid for tid in self.tasks if not self._predecessors.get(tid)]

    def get_end_tasks(self) -> list[str]:
        """Get task IDs with no successors."""
        return [tid for tid in self.tasks if not self._successors.get(tid)]

    def tasks_in_chain(self) -> list[str]:
        """Task IDs touching at least one dependency, in task input order."""
        return [tid for tid in self.tasks
                if self._successors.get(tid) or self._predecessors.get(tid)]

    def _dfs(self) -> tuple[list[str], list[str]]:
        """
        Iterative white/gray/black DFS over every task.

        Returns (post_order, cycle). The cycle is empty when the graph is
        a DAG; otherwise it lists the first cycle found, closed on its
        starting task. A task is coloured gray before its own edges are
        explored, so a self-loop is reported as [task, task].
        """
        color = {tid: _WHITE for tid in self.tasks}
        post_order: list[str] = []

        for root in self.tasks:
            if color[root] != _WHITE:
                continue

            color[root] = _GRAY
            path = [root]
            stack = [(root, iter(self._successors.get(root, [])))]

            while stack:
                node, edges = stack[-1]
                advanced = False
                for dep in edges:
                    succ = dep.to_task_id
                    if color[succ] == _GRAY:
                        start = path.index(succ)
                        return post_order, path[start:] + [succ]
                    if color[succ] == _WHITE:
                        color[succ] = _GRAY
                        path.append(succ)
                        stack.append((succ, iter(self._successors.get(succ, []))))
                        advanced = True
                        break
                if not advanced:
                    stack.pop()
                    path.pop()
                    color[node] = _BLACK
                    post_order.append(node)

        return post_order, []

    def find_cycle(self) -> list[str]:
        """Return one cycle as a list of task IDs, or an empty list for a DAG."""
        _, cycle = self._dfs()
        return cycle

    def has_cycle(self) -> bool:
        """Check whether any cycle (self-loops included) exists."""
        return bool(self.find_cycle())

    def topological_sort(self) -> list[str]:
        """
        Return task IDs in topological order (predecessors before successors).

        Uses reverse DFS post-order. Raises CycleError if a circular
        dependency is detected.
        """
        post_order, cycle = self._dfs()
        if cycle:
            raise CycleError(cycle)
        post_order.reverse()
        return post_order

    def get_statistics(self) -> dict:
        """Get network statistics."""
        dependency_types = defaultdict(int)
        for dep in self.dependencies:
            dependency_types[dep.dependency_type] += 1

        return {
            'total_tasks': len(self.tasks),
            'total_dependencies': len(self.dependencies),
            'dropped_relations': self.dropped_count,
            'tasks_in_chain': len(self.tasks_in_chain()),
            'start_tasks': len(self.get_start_tasks()),
            'end_tasks': len(self.get_end_tasks()),
            'milestones': sum(1 for t in self.tasks.values() if t.is_milestone()),
            'dependency_types': dict(dependency_types),
        }

    def validate(self) -> list[str]:
        """
        Validate network integrity.

        Returns list of issues found (empty if valid).
        """
        issues = []

        if self.dropped_count:
            issues.append(f"{self.dropped_count} relations reference missing tasks and were dropped")

        self_loops = [dep.relation_id for dep in self.dependencies if dep.is_self_loop()]
        if self_loops:
            issues.append(f"{len(self_loops)} relations point at their own task: {self_loops[:5]}")

        cycle = self.find_cycle()
        if cycle:
            issues.append(str(CycleError(cycle)))

        return issues

    def __len__(self) -> int:
        return len(self.tasks)

    def __contains__(self, task_id: str) -> bool:
        return task_id in self.tasks

    def __repr__(self) -> str:
        return f"TaskNetwork({len(self.tasks)} tasks, {len(self.dependencies)} dependencies)"
