"""Relation validation utilities."""

from .relation_validator import (
    RelationWarning,
    RelationValidationResult,
    AutoFixResult,
    validate_relations,
    auto_fix_relations,
    find_duplicate_relations,
    get_validation_summary,
)

__all__ = [
    'RelationWarning',
    'RelationValidationResult',
    'AutoFixResult',
    'validate_relations',
    'auto_fix_relations',
    'find_duplicate_relations',
    'get_validation_summary',
]
