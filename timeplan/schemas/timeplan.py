"""
Time plan record schemas.

Records as held by the plan store: camelCase keys, relation details in a
free-form `properties` bag. Converted to core models before calculation.
"""

from datetime import date, datetime
from typing import Any, Iterable, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

from ..cpm.models import Task, Dependency

DependencyTypeName = Literal[
    'finish-to-start', 'start-to-start', 'finish-to-finish', 'start-to-finish',
    'FS', 'SS', 'FF', 'SF',
]
RelationTypeName = Literal['dependency', 'hierarchy', 'association', 'composition', 'aggregation']


class LineRecord(BaseModel):
    """
    A plan line (bar, milestone, or gateway).

    Payload key: lines[]
    """
    model_config = ConfigDict(populate_by_name=True, extra='ignore')

    id: str = Field(description="Unique line identifier")
    timeline_id: Optional[str] = Field(default=None, alias="timelineId", description="Owning timeline")
    label: str = Field(default='', description="Display name")
    start_date: Union[datetime, date] = Field(alias="startDate", description="Start date")
    end_date: Optional[Union[datetime, date]] = Field(
        default=None, alias="endDate", description="End date (absent for milestones and gateways)"
    )

    def to_task(self) -> Task:
        return Task(
            task_id=self.id,
            start_date=self.start_date,
            end_date=self.end_date,
            timeline_id=self.timeline_id,
            label=self.label,
        )


class RelationProperties(BaseModel):
    """Type-specific relation properties."""
    model_config = ConfigDict(populate_by_name=True, extra='allow')

    dependency_type: Optional[DependencyTypeName] = Field(
        default=None, alias="dependencyType", description="FS/SS/FF/SF constraint"
    )
    lag: Optional[float] = Field(default=None, description="Signed lag in days")


class RelationRecord(BaseModel):
    """
    A relation between two lines.

    Payload key: relations[]
    """
    model_config = ConfigDict(populate_by_name=True, extra='ignore')

    id: str = Field(description="Unique relation identifier")
    type: RelationTypeName = Field(default='dependency', description="Relation kind")
    from_line_id: str = Field(alias="fromLineId", description="Source line ID")
    to_line_id: str = Field(alias="toLineId", description="Target line ID")
    properties: RelationProperties = Field(default_factory=RelationProperties)

    def to_dependency(self) -> Dependency:
        return Dependency(
            relation_id=self.id,
            from_task_id=self.from_line_id,
            to_task_id=self.to_line_id,
            dependency_type=self.properties.dependency_type,
            lag_days=self.properties.lag or 0.0,
            relation_type=self.type,
        )


def tasks_from_records(records: Iterable[dict[str, Any]]) -> list[Task]:
    """Validate line payloads and convert them to tasks."""
    return [LineRecord.model_validate(r).to_task() for r in records]


def dependencies_from_records(records: Iterable[dict[str, Any]]) -> list[Dependency]:
    """Validate relation payloads and convert them to dependencies."""
    return [RelationRecord.model_validate(r).to_dependency() for r in records]
