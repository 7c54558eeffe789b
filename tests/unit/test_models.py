"""Unit tests for task and dependency models."""
import pytest
from datetime import date, datetime

import pandas as pd

from timeplan.cpm.models import (
    Task,
    Dependency,
    ScheduledTask,
    CPMResult,
    FINISH_TO_START,
    START_TO_START,
    FINISH_TO_FINISH,
    START_TO_FINISH,
)


class TestTaskDuration:
    """Test duration derivation from start and end dates."""

    def test_bar_duration_in_days(self):
        task = Task(task_id='a', start_date=date(2025, 1, 1), end_date=date(2025, 1, 6))
        assert task.duration_days == 5
        assert not task.is_milestone()

    def test_missing_end_date_is_milestone(self):
        task = Task(task_id='m', start_date=date(2025, 1, 1))
        assert task.end_date is None
        assert task.duration_days == 0
        assert task.is_milestone()

    def test_time_of_day_is_ignored(self):
        """Durations count calendar days, not elapsed hours."""
        task = Task(
            task_id='a',
            start_date=datetime(2025, 1, 1, 18, 0),
            end_date=datetime(2025, 1, 2, 6, 0),
        )
        assert task.duration_days == 1

    def test_iso_strings_are_accepted(self):
        task = Task(task_id='a', start_date='2025-03-01', end_date='2025-03-15')
        assert task.start_date == pd.Timestamp('2025-03-01')
        assert task.duration_days == 14

    @pytest.mark.parametrize("end_value", [None, '', float('nan')])
    def test_empty_end_values(self, end_value):
        task = Task(task_id='a', start_date='2025-03-01', end_date=end_value)
        assert task.end_date is None
        assert task.duration_days == 0

    def test_end_before_start_clamps_to_zero(self):
        task = Task(task_id='a', start_date=date(2025, 1, 10), end_date=date(2025, 1, 1))
        assert task.duration_days == 0

    def test_missing_start_date_raises(self):
        with pytest.raises(ValueError):
            Task(task_id='a', start_date=None)

    def test_unparseable_date_raises(self):
        with pytest.raises(ValueError):
            Task(task_id='a', start_date='not a date')


class TestDependency:
    """Test dependency type handling."""

    @pytest.mark.parametrize("value,expected", [
        ('FS', FINISH_TO_START),
        ('ss', START_TO_START),
        ('FF', FINISH_TO_FINISH),
        ('SF', START_TO_FINISH),
        ('finish-to-finish', FINISH_TO_FINISH),
        ('Start-To-Finish', START_TO_FINISH),
        (None, FINISH_TO_START),
    ])
    def test_dependency_type_normalization(self, value, expected):
        dep = Dependency(relation_id='r', from_task_id='a', to_task_id='b', dependency_type=value)
        assert dep.dependency_type == expected

    def test_unknown_dependency_type_raises(self):
        with pytest.raises(ValueError, match='Unknown dependency type'):
            Dependency(relation_id='r', from_task_id='a', to_task_id='b',
                       dependency_type='after-lunch')

    def test_defaults(self):
        dep = Dependency(relation_id='r', from_task_id='a', to_task_id='b', lag_days=None)
        assert dep.is_finish_to_start()
        assert dep.lag_days == 0.0
        assert dep.is_dependency()
        assert not dep.is_self_loop()

    def test_self_loop(self):
        dep = Dependency(relation_id='r', from_task_id='a', to_task_id='a')
        assert dep.is_self_loop()

    def test_non_dependency_relation(self):
        dep = Dependency(relation_id='r', from_task_id='a', to_task_id='b',
                         relation_type='hierarchy')
        assert not dep.is_dependency()
        assert dep.is_finish_to_start()

    @pytest.mark.parametrize("declared,expected", [
        ('finish-to-start', True),
        ('FS', True),
        ('start-to-start', False),
        ('finish-to-finish', False),
    ])
    def test_declared_finish_to_start_makes_dependency(self, declared, expected):
        dep = Dependency(relation_id='r', from_task_id='a', to_task_id='b',
                         dependency_type=declared, relation_type='association')
        assert dep.is_dependency() is expected

    def test_unknown_relation_type_raises(self):
        with pytest.raises(ValueError, match='Unknown relation type'):
            Dependency(relation_id='r', from_task_id='a', to_task_id='b',
                       relation_type='friendship')


class TestCPMResult:
    """Test result helpers."""

    def _result(self):
        schedule = {
            'A': ScheduledTask('A', 5, 0, 5, None, 1),
            'B': ScheduledTask('B', 1, 5, 6, 'A', 2),
            'C': ScheduledTask('C', 5, 5, 10, 'A', 2),
        }
        return CPMResult(critical_path=['A', 'C'], schedule=schedule, project_duration_days=10)

    def test_get_critical_tasks(self):
        result = self._result()
        assert [t.task_id for t in result.get_critical_tasks()] == ['A', 'C']

    def test_to_dataframe(self):
        df = self._result().to_dataframe()
        assert list(df['task_id']) == ['A', 'B', 'C']
        assert list(df['is_critical']) == [True, False, True]
        assert df.loc[df['task_id'] == 'C', 'earliest_finish'].item() == 10

    def test_empty_to_dataframe_has_columns(self):
        df = CPMResult(critical_path=[]).to_dataframe()
        assert df.empty
        assert 'earliest_finish' in df.columns
