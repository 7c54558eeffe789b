"""
Record schemas for plan store payloads.
"""

from .timeplan import (
    LineRecord,
    RelationRecord,
    RelationProperties,
    tasks_from_records,
    dependencies_from_records,
)

__all__ = [
    'LineRecord',
    'RelationRecord',
    'RelationProperties',
    'tasks_from_records',
    'dependencies_from_records',
]
