"""
Tests for the sorting module.
"""

import pytest

from fastquery.api.sorting import SortOrder, SortSpec, resolve_sort


class TestSortOrder:
    """Tests for the SortOrder enum."""

    def test_values(self):
        assert SortOrder.ASC == "asc"
        assert SortOrder.DESC == "desc"

    @pytest.mark.parametrize(
        "raw,expected",
        [("asc", SortOrder.ASC), ("DESC", SortOrder.DESC), (" Asc ", SortOrder.ASC)],
    )
    def test_parse(self, raw, expected):
        assert SortOrder.parse(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "up", "ascending"])
    def test_parse_unknown(self, raw):
        assert SortOrder.parse(raw) is None


class TestSortSpec:
    """Tests for the SortSpec class."""

    def test_default_order(self):
        assert SortSpec("name").order == SortOrder.ASC

    def test_to_dict(self):
        assert SortSpec("name", SortOrder.DESC).to_dict() == {"name": "desc"}

    def test_string_representation(self):
        assert str(SortSpec("name", SortOrder.DESC)) == "name:desc"

    def test_repr(self):
        assert repr(SortSpec("name")) == "SortSpec(field='name', order='asc')"


class TestResolveSort:
    """Tests for resolve_sort."""

    def test_requested_sort(self):
        assert resolve_sort("name", "asc", "created_at") == SortSpec("name", SortOrder.ASC)

    @pytest.mark.parametrize(
        "sort_by,sort_order",
        [
            ("name", None),
            (None, "asc"),
            (None, None),
            ("", "asc"),
            ("name", "sideways"),
        ],
    )
    def test_incomplete_request_falls_back(self, sort_by, sort_order):
        assert resolve_sort(sort_by, sort_order, "created_at") == SortSpec(
            "created_at", SortOrder.DESC
        )

    def test_custom_default(self):
        assert resolve_sort(None, None, "id", "asc") == SortSpec("id", SortOrder.ASC)

    def test_sort_field_is_not_validated(self):
        assert resolve_sort("no_such_field", "desc", "id").field == "no_such_field"
