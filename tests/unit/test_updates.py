"""Unit tests for per-field update intents and their GraphQL translation."""

from types import SimpleNamespace

import pytest
import strawberry

from app.exceptions.base import ValidationError
from app.schemas.base import parse_datetime_update, to_update
from app.shared.updates import CLEAR, KEEP, Clear, Keep, Set, apply_update


class TestToUpdate:
    def test_unset_keeps(self):
        assert to_update(strawberry.UNSET) is KEEP

    def test_null_clears(self):
        assert to_update(None) is CLEAR

    def test_value_sets(self):
        assert to_update("blue") == Set("blue")

    def test_falsy_values_still_set(self):
        assert to_update(False) == Set(False)
        assert to_update(0) == Set(0)
        assert to_update("") == Set("")

    def test_date_update_is_parsed(self):
        update = parse_datetime_update("2026-03-01T09:30:00Z")
        assert isinstance(update, Set)
        assert update.value.year == 2026
        assert update.value.utcoffset().total_seconds() == 0

    def test_date_update_keep_and_clear(self):
        assert isinstance(parse_datetime_update(strawberry.UNSET), Keep)
        assert isinstance(parse_datetime_update(None), Clear)


class TestApplyUpdate:
    def test_keep_leaves_field(self):
        row = SimpleNamespace(color="red")
        assert apply_update(row, "color", KEEP) is False
        assert row.color == "red"

    def test_clear_nulls_nullable_field(self):
        row = SimpleNamespace(color="red")
        assert apply_update(row, "color", CLEAR) is True
        assert row.color is None

    def test_set_writes_value(self):
        row = SimpleNamespace(color="red")
        apply_update(row, "color", Set("blue"))
        assert row.color == "blue"

    def test_clear_rejected_for_required_field(self):
        row = SimpleNamespace(title="Buy milk")
        with pytest.raises(ValidationError, match="title cannot be null"):
            apply_update(row, "title", CLEAR, nullable=False)
        assert row.title == "Buy milk"

