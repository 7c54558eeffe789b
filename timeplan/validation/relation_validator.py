"""
Relation integrity validation.

Checks that relations reference existing tasks, do not point at their
own task, and are not duplicated, and can strip the offending ones:
  - missing_from: source task does not exist
  - missing_to:   target task does not exist
  - circular:     relation points at its own task
  - duplicate:    same source/target pair as an earlier relation
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Sequence

from ..cpm.models import Task, Dependency

logger = logging.getLogger(__name__)

MISSING_FROM = 'missing_from'
MISSING_TO = 'missing_to'
CIRCULAR = 'circular'
DUPLICATE = 'duplicate'


@dataclass
class RelationWarning:
    """A single problem found on a relation."""

    relation_id: str
    type: str
    message: str
    from_task_id: str
    to_task_id: str


@dataclass
class RelationValidationResult:
    """Outcome of validate_relations."""

    valid: bool
    warnings: list[RelationWarning] = field(default_factory=list)
    fixed_relations: list[Dependency] = field(default_factory=list)


@dataclass
class AutoFixResult:
    """Outcome of auto_fix_relations."""

    fixed: list[Dependency]
    removed: int
    warnings: list[RelationWarning]
    by_type: dict[str, int] = field(default_factory=dict)


def validate_relations(
    relations: Sequence[Dependency],
    tasks: Sequence[Task],
) -> RelationValidationResult:
    """
    Validate relation integrity against the task list.

    A relation may collect several warnings; it is kept in
    `fixed_relations` only when it collects none.

    Args:
        relations: Relations to check
        tasks: Tasks the relations should reference

    Returns:
        RelationValidationResult with warnings and the valid relations in input order
    """
    task_ids = {t.task_id for t in tasks}
    warnings: list[RelationWarning] = []
    valid_relations: list[Dependency] = []
    seen_pairs: dict[tuple[str, str], str] = {}

    for rel in relations:
        found = []

        if rel.from_task_id not in task_ids:
            found.append((MISSING_FROM, f"Source task does not exist: {rel.from_task_id}"))

        if rel.to_task_id not in task_ids:
            found.append((MISSING_TO, f"Target task does not exist: {rel.to_task_id}"))

        if rel.is_self_loop():
            found.append((CIRCULAR, f"Relation points at its own task: {rel.from_task_id}"))

        pair = (rel.from_task_id, rel.to_task_id)
        if pair in seen_pairs:
            found.append((DUPLICATE, f"Duplicate of relation {seen_pairs[pair]}: "
                                     f"{rel.from_task_id} -> {rel.to_task_id}"))
        else:
            seen_pairs[pair] = rel.relation_id

        for warning_type, message in found:
            warnings.append(RelationWarning(
                relation_id=rel.relation_id,
                type=warning_type,
                message=message,
                from_task_id=rel.from_task_id,
                to_task_id=rel.to_task_id,
            ))

        if not found:
            valid_relations.append(rel)

    return RelationValidationResult(
        valid=not warnings,
        warnings=warnings,
        fixed_relations=valid_relations,
    )


def auto_fix_relations(
    relations: Sequence[Dependency],
    tasks: Sequence[Task],
) -> AutoFixResult:
    """
    Remove every invalid relation, keeping the valid ones.

    Logs a warning summary grouped by problem type when anything is removed.
    """
    result = validate_relations(relations, tasks)
    removed = len(relations) - len(result.fixed_relations)
    by_type = dict(Counter(w.type for w in result.warnings))

    if removed:
        summary = ', '.join(f'{k}={v}' for k, v in sorted(by_type.items()))
        logger.warning(f"Removed {removed} invalid relations ({summary})")

    return AutoFixResult(
        fixed=result.fixed_relations,
        removed=removed,
        warnings=result.warnings,
        by_type=by_type,
    )


def find_duplicate_relations(relations: Sequence[Dependency]) -> list[str]:
    """
    Find relations repeating the source/target pair of an earlier relation.

    Returns:
        IDs of the repeated relations in input order (the first of each pair is not included)
    """
    seen_pairs: dict[tuple[str, str], str] = {}
    duplicates: list[str] = []

    for rel in relations:
        pair = (rel.from_task_id, rel.to_task_id)
        if pair in seen_pairs:
            duplicates.append(rel.relation_id)
            logger.warning(f"Duplicate relation {rel.relation_id} (same as {seen_pairs[pair]})")
        else:
            seen_pairs[pair] = rel.relation_id

    return duplicates


def get_validation_summary(
    relations: Sequence[Dependency],
    tasks: Sequence[Task],
) -> dict[str, Any]:
    """
    Summarize relation validation as counts.

    Returns:
        Dictionary with total, valid (relations without warnings),
        invalid (number of warnings) and warnings_by_type
    """
    result = validate_relations(relations, tasks)

    return {
        'total': len(relations),
        'valid': len(result.fixed_relations),
        'invalid': len(result.warnings),
        'warnings_by_type': dict(Counter(w.type for w in result.warnings)),
    }
