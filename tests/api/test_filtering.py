"""
Tests for the filtering module.

This module contains tests for field specs, value coercion, filter
conditions and predicate construction.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from fastquery.api.filtering import (
    AnyOf,
    FieldSpec,
    FilterCondition,
    FilterKind,
    FilterOperator,
    FilterPredicate,
    ValueType,
    build_predicate,
    coerce_value,
)
from fastquery.errors import ValidationError

NAME_EMAIL = [FieldSpec(name="name"), FieldSpec(name="email")]

SOFT_DELETE = FilterCondition("is_deleted", FilterOperator.EQ, False, ValueType.BOOLEAN)


class TestFieldSpec:
    """Tests for the FieldSpec model."""

    def test_defaults(self):
        spec = FieldSpec(name="name")
        assert spec.kind == FilterKind.EXACT
        assert spec.value_type == ValueType.STRING
        assert spec.query_keys() == ["name"]

    def test_range_query_keys(self):
        spec = FieldSpec(name="age", kind="range", value_type="integer")
        assert spec.query_keys() == ["age_min", "age_max"]

    def test_boolean_range_rejected(self):
        with pytest.raises(PydanticValidationError):
            FieldSpec(name="active", kind=FilterKind.RANGE, value_type=ValueType.BOOLEAN)

    def test_contains_requires_string(self):
        with pytest.raises(PydanticValidationError):
            FieldSpec(name="age", kind=FilterKind.CONTAINS, value_type=ValueType.INTEGER)


class TestCoerceValue:
    """Tests for coerce_value."""

    def test_string_is_left_as_is(self):
        assert coerce_value("name", " Sam ", ValueType.STRING) == " Sam "

    @pytest.mark.parametrize("raw", ["true", "TRUE", "1", "yes", "on"])
    def test_boolean_true(self, raw):
        assert coerce_value("active", raw, ValueType.BOOLEAN) is True

    @pytest.mark.parametrize("raw", ["false", "0", "No", "off"])
    def test_boolean_false(self, raw):
        assert coerce_value("active", raw, ValueType.BOOLEAN) is False

    def test_integer(self):
        assert coerce_value("age", " 42 ", ValueType.INTEGER) == 42

    def test_number_accepts_comma(self):
        assert coerce_value("price", "3,5", ValueType.NUMBER) == 3.5

    @pytest.mark.parametrize(
        "raw,value_type",
        [
            ("maybe", ValueType.BOOLEAN),
            ("4.2", ValueType.INTEGER),
            ("abc", ValueType.NUMBER),
            ("", ValueType.INTEGER),
        ],
    )
    def test_invalid_values_raise(self, raw, value_type):
        with pytest.raises(ValidationError) as exc_info:
            coerce_value("field", raw, value_type)
        assert exc_info.value.status_code == 400
        assert exc_info.value.fields[0]["field"] == "field"
        assert exc_info.value.fields[0]["code"] == "INVALID_FILTER_VALUE"


class TestFilterCondition:
    """Tests for the FilterCondition class."""

    def test_to_dict(self):
        condition = FilterCondition("name", FilterOperator.EQ, "Sam")
        assert condition.to_dict() == {
            "field": "name",
            "operator": "eq",
            "value": "Sam",
            "type": "string",
        }

    def test_string_representation(self):
        condition = FilterCondition("name", FilterOperator.CONTAINS, "sa")
        assert str(condition) == "name:contains:sa"

    def test_equality(self):
        assert FilterCondition("name", FilterOperator.EQ, "Sam") == FilterCondition(
            "name", FilterOperator.EQ, "Sam"
        )
        assert FilterCondition("name", FilterOperator.EQ, "Sam") != FilterCondition(
            "name", FilterOperator.EQ, "Max"
        )


class TestBuildPredicate:
    """Tests for build_predicate."""

    def test_empty_params_keep_soft_delete_clause(self):
        predicate = build_predicate({}, NAME_EMAIL, ["name", "email"])
        assert predicate == FilterPredicate([SOFT_DELETE])
        assert len(predicate) == 1

    def test_search_builds_or_over_searchable_fields(self):
        predicate = build_predicate({"search": "abc"}, NAME_EMAIL, ["name", "email"])
        assert predicate.clauses[0] == AnyOf(
            [
                FilterCondition("name", FilterOperator.CONTAINS, "abc"),
                FilterCondition("email", FilterOperator.CONTAINS, "abc"),
            ]
        )
        assert predicate.clauses[-1] == SOFT_DELETE

    def test_search_term_is_trimmed(self):
        predicate = build_predicate({"search": "  abc "}, NAME_EMAIL, ["name"])
        assert predicate.clauses[0].conditions[0].value == "abc"

    @pytest.mark.parametrize("term", ["", "   "])
    def test_blank_search_is_ignored(self, term):
        predicate = build_predicate({"search": term}, NAME_EMAIL, ["name", "email"])
        assert predicate == FilterPredicate([SOFT_DELETE])

    def test_search_without_searchable_fields_is_ignored(self):
        predicate = build_predicate({"search": "abc"}, NAME_EMAIL, [])
        assert predicate == FilterPredicate([SOFT_DELETE])

    def test_exact_filters_follow_declared_order(self):
        predicate = build_predicate(
            {"email": "sam@example.com", "name": "Sam"}, NAME_EMAIL, []
        )
        assert [c.field for c in predicate.clauses] == ["name", "email", "is_deleted"]
        assert predicate.clauses[0] == FilterCondition("name", FilterOperator.EQ, "Sam")

    def test_search_comes_before_filters(self):
        predicate = build_predicate(
            {"name": "Sam", "search": "ex"}, NAME_EMAIL, ["email"]
        )
        assert isinstance(predicate.clauses[0], AnyOf)
        assert predicate.clauses[1] == FilterCondition("name", FilterOperator.EQ, "Sam")
        assert predicate.clauses[2] == SOFT_DELETE

    def test_unconfigured_keys_never_appear(self):
        predicate = build_predicate(
            {"role": "owner", "password": "x"}, NAME_EMAIL, ["name"]
        )
        assert predicate.fields() == ["is_deleted"]

    def test_typed_and_contains_fields(self):
        specs = [
            FieldSpec(name="active", value_type=ValueType.BOOLEAN),
            FieldSpec(name="name", kind=FilterKind.CONTAINS),
        ]
        predicate = build_predicate({"active": "yes", "name": "am"}, specs, [])
        assert predicate.clauses[0] == FilterCondition(
            "active", FilterOperator.EQ, True, ValueType.BOOLEAN
        )
        assert predicate.clauses[1] == FilterCondition("name", FilterOperator.CONTAINS, "am")

    def test_range_fields(self):
        specs = [FieldSpec(name="age", kind=FilterKind.RANGE, value_type=ValueType.INTEGER)]
        predicate = build_predicate({"age_min": "18", "age_max": "65"}, specs, [])
        assert predicate.clauses[:2] == [
            FilterCondition("age", FilterOperator.GTE, 18, ValueType.INTEGER),
            FilterCondition("age", FilterOperator.LTE, 65, ValueType.INTEGER),
        ]

    def test_range_with_single_bound(self):
        specs = [FieldSpec(name="age", kind=FilterKind.RANGE, value_type=ValueType.INTEGER)]
        predicate = build_predicate({"age_max": "30"}, specs, [])
        assert predicate.clauses[0] == FilterCondition(
            "age", FilterOperator.LTE, 30, ValueType.INTEGER
        )
        assert len(predicate) == 2

    def test_invalid_typed_value_raises(self):
        specs = [FieldSpec(name="age", value_type=ValueType.INTEGER)]
        with pytest.raises(ValidationError):
            build_predicate({"age": "old"}, specs, [])

    def test_custom_soft_delete_field(self):
        predicate = build_predicate({}, NAME_EMAIL, [], soft_delete_field="deleted")
        assert predicate.clauses[0].field == "deleted"
        assert predicate.clauses[0].value is False

    def test_to_dict(self):
        predicate = build_predicate({"name": "Sam"}, NAME_EMAIL, [])
        assert predicate.to_dict() == {
            "AND": [
                {"field": "name", "operator": "eq", "value": "Sam", "type": "string"},
                {"field": "is_deleted", "operator": "eq", "value": False, "type": "boolean"},
            ]
        }
