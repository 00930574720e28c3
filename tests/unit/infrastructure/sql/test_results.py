"""
Unit tests for result shaping.
"""

from table_gateway.infrastructure.sql.results import key_by, shape_row, shape_rows


class TestShapeRow:
    """Tests for single-row shaping."""

    def test_row_returned_as_dict(self):
        assert shape_row({"id": 1, "name": "a"}) == {"id": 1, "name": "a"}

    def test_missing_and_empty_collapse_to_none(self):
        assert shape_row(None) is None
        assert shape_row({}) is None


class TestShapeRows:
    """Tests for multi-row shaping."""

    def test_empty_result_is_empty_list(self):
        assert shape_rows([], "id") == []

    def test_rows_with_primary_key_are_keyed(self):
        rows = [{"id": 3, "n": "a"}, {"id": 5, "n": "b"}]

        assert shape_rows(rows, "id") == {3: rows[0], 5: rows[1]}

    def test_rows_without_primary_key_stay_a_list(self):
        rows = [{"n": "b"}, {"n": "a"}]

        assert shape_rows(rows, "id") == rows

    def test_only_first_row_decides(self):
        rows = [{"n": "a"}, {"id": 1, "n": "b"}]

        assert isinstance(shape_rows(rows, "id"), list)

    def test_duplicate_keys_later_row_wins(self):
        rows = [{"id": 1, "n": "first"}, {"id": 1, "n": "second"}]

        assert shape_rows(rows, "id") == {1: {"id": 1, "n": "second"}}

    def test_key_by_keeps_row_order(self):
        rows = [{"id": 5}, {"id": 3}, {"id": 9}]

        assert list(key_by(rows, "id")) == [5, 3, 9]
