"""
Analysis entry points for plan critical paths.
"""

from .critical_path import (
    analyze_critical_path,
    calculate_critical_path,
    format_critical_path_report,
    print_critical_path_report,
)

__all__ = [
    'analyze_critical_path',
    'calculate_critical_path',
    'format_critical_path_report',
    'print_critical_path_report',
]
