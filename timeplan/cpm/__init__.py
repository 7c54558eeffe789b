"""
Critical path calculator for time plans.

This module provides:
- Task and dependency models (FS, SS, FF, SF with lag)
- Task network construction with cycle detection
- Forward pass scheduling and critical path extraction
"""

from .models import (
    Task,
    Dependency,
    ScheduledTask,
    CPMResult,
    FINISH_TO_START,
    START_TO_START,
    FINISH_TO_FINISH,
    START_TO_FINISH,
    DEPENDENCY_TYPES,
)
from .network import TaskNetwork, CycleError
from .engine import CPMEngine

__all__ = [
    'Task',
    'Dependency',
    'ScheduledTask',
    'CPMResult',
    'FINISH_TO_START',
    'START_TO_START',
    'FINISH_TO_FINISH',
    'START_TO_FINISH',
    'DEPENDENCY_TYPES',
    'TaskNetwork',
    'CycleError',
    'CPMEngine',
]
