"""
Time plan critical path calculator.

Computes the longest dependency chain through a plan's tasks under
finish-to-start, start-to-start, finish-to-finish and start-to-finish
relations with lag.
"""

from .cpm import (
    Task,
    Dependency,
    ScheduledTask,
    CPMResult,
    TaskNetwork,
    CycleError,
    CPMEngine,
)
from .analysis import (
    analyze_critical_path,
    calculate_critical_path,
    format_critical_path_report,
)
from .validation import (
    validate_relations,
    auto_fix_relations,
    find_duplicate_relations,
    get_validation_summary,
)

__version__ = '0.1.0'

__all__ = [
    # Models
    'Task',
    'Dependency',
    'ScheduledTask',
    'CPMResult',
    # Core
    'TaskNetwork',
    'CycleError',
    'CPMEngine',
    # Analysis
    'analyze_critical_path',
    'calculate_critical_path',
    'format_critical_path_report',
    # Validation
    'validate_relations',
    'auto_fix_relations',
    'find_duplicate_relations',
    'get_validation_summary',
]
