"""Unit tests for task placement contexts."""

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from app.domains.tasks.context import (
    UNSCHEDULED,
    CalendarContext,
    SomedayContext,
    apply_context_changes,
    build_context,
    context_columns,
    context_of,
)
from app.exceptions.task import InvalidTaskContextError
from app.shared.updates import CLEAR, Set

DAY = datetime(2026, 3, 1, tzinfo=timezone.utc)


class TestBuildContext:
    def test_calendar(self):
        assert build_context(date=DAY) == CalendarContext(date=DAY)

    def test_someday(self):
        assert build_context(list_id=4, position=2) == SomedayContext(list_id=4, position=2)

    def test_unscheduled(self):
        assert build_context() is UNSCHEDULED

    def test_date_and_list_rejected(self):
        with pytest.raises(InvalidTaskContextError):
            build_context(date=DAY, list_id=4)


class TestContextColumns:
    def test_calendar_clears_list_fields(self):
        assert context_columns(CalendarContext(date=DAY)) == {
            "date": DAY,
            "list_id": None,
            "position": None,
        }

    def test_row_roundtrip(self):
        row = SimpleNamespace(date=None, list_id=7, position=0)
        assert context_of(row) == SomedayContext(list_id=7, position=0)

    def test_detached_someday_row(self):
        row = SimpleNamespace(date=None, list_id=None, position=3)
        assert context_of(row) == SomedayContext(list_id=None, position=3)


class TestApplyContextChanges:
    def test_setting_date_moves_to_calendar(self):
        current = SomedayContext(list_id=1, position=0)
        assert apply_context_changes(current, date=Set(DAY)) == CalendarContext(date=DAY)

    def test_setting_list_moves_off_calendar(self):
        current = CalendarContext(date=DAY)
        result = apply_context_changes(current, list_id=Set(2), position=Set(5))
        assert result == SomedayContext(list_id=2, position=5)

    def test_clearing_date_unschedules(self):
        assert apply_context_changes(CalendarContext(date=DAY), date=CLEAR) is UNSCHEDULED

    def test_clearing_position_keeps_list(self):
        current = SomedayContext(list_id=1, position=3)
        assert apply_context_changes(current, position=CLEAR) == SomedayContext(1, None)

    def test_nothing_supplied_keeps_context(self):
        current = SomedayContext(list_id=1, position=3)
        assert apply_context_changes(current) == current

    def test_date_and_list_in_one_update_rejected(self):
        with pytest.raises(InvalidTaskContextError):
            apply_context_changes(UNSCHEDULED, date=Set(DAY), list_id=Set(1))
