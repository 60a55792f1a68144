"""
Filtering utilities for list endpoints.

This module describes which fields of a resource can be filtered and how,
and turns the selected query parameters into a storage-agnostic filter
predicate: an AND of conditions, one of which may be an OR over the
searchable fields.
"""

from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, model_validator

from fastquery.api.params import SEARCH_KEY
from fastquery.errors import ValidationError

TRUE_VALUES = {"1", "true", "yes", "y", "on"}
FALSE_VALUES = {"0", "false", "no", "n", "off"}

RANGE_MIN_SUFFIX = "_min"
RANGE_MAX_SUFFIX = "_max"


class FilterKind(str, Enum):
    """
    How a filterable field is matched against its query value.

    Attributes:
        EXACT: Field equals the value
        CONTAINS: Field contains the value, case-insensitive
        RANGE: Field lies between ``<name>_min`` and ``<name>_max``
    """

    EXACT = "exact"
    CONTAINS = "contains"
    RANGE = "range"


class ValueType(str, Enum):
    """Type a raw query string is coerced to before it enters a condition."""

    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"


class FilterOperator(str, Enum):
    """
    Operators a filter condition can carry.

    Attributes:
        EQ: Equal to
        CONTAINS: Case-insensitive substring match
        GTE: Greater than or equal to
        LTE: Less than or equal to
    """

    EQ = "eq"
    CONTAINS = "contains"
    GTE = "gte"
    LTE = "lte"


class FieldSpec(BaseModel):
    """
    Filter configuration for a single field.

    Attributes:
        name: Field name, used both as query key and as record attribute
        kind: How the field is matched
        value_type: Type the query value is coerced to
    """

    model_config = ConfigDict(frozen=True)

    name: str
    kind: FilterKind = FilterKind.EXACT
    value_type: ValueType = ValueType.STRING

    @model_validator(mode="after")
    def check_kind_and_type(self) -> "FieldSpec":
        if self.kind == FilterKind.RANGE and self.value_type == ValueType.BOOLEAN:
            raise ValueError(f"Range filter on '{self.name}' cannot be boolean")
        if self.kind == FilterKind.CONTAINS and self.value_type != ValueType.STRING:
            raise ValueError(f"Contains filter on '{self.name}' must be a string")
        return self

    def query_keys(self) -> List[str]:
        """Query string keys this field reads."""
        if self.kind == FilterKind.RANGE:
            return [self.name + RANGE_MIN_SUFFIX, self.name + RANGE_MAX_SUFFIX]
        return [self.name]


class FilterCondition:
    """
    Filter condition on a single field.

    Attributes:
        field: Field name to filter on
        operator: Filter operator
        value: Coerced value to compare with
        value_type: Type tag of ``value``
    """

    def __init__(
        self,
        field: str,
        operator: FilterOperator,
        value: Any,
        value_type: ValueType = ValueType.STRING,
    ):
        self.field = field
        self.operator = operator
        self.value = value
        self.value_type = value_type

    def to_dict(self) -> Dict[str, Any]:
        return {
            "field": self.field,
            "operator": self.operator.value,
            "value": self.value,
            "type": self.value_type.value,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FilterCondition):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        return f"{self.field}:{self.operator.value}:{self.value}"

    def __repr__(self) -> str:
        return (
            f"FilterCondition(field='{self.field}', "
            f"operator='{self.operator.value}', value={repr(self.value)})"
        )


class AnyOf:
    """
    Disjunction of filter conditions.

    Attributes:
        conditions: Conditions of which at least one must hold
    """

    def __init__(self, conditions: Sequence[FilterCondition]):
        self.conditions = list(conditions)

    def to_dict(self) -> Dict[str, Any]:
        return {"OR": [c.to_dict() for c in self.conditions]}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AnyOf):
            return NotImplemented
        return self.conditions == other.conditions

    def __repr__(self) -> str:
        return f"AnyOf({self.conditions!r})"


Clause = Union[FilterCondition, AnyOf]


class FilterPredicate:
    """
    Conjunction of clauses applied to a record set.

    A predicate built by :func:`build_predicate` always holds at least
    the soft-delete clause, so it is never an unconditioned match.

    Attributes:
        clauses: Clauses that must all hold
    """

    def __init__(self, clauses: Sequence[Clause]):
        self.clauses = list(clauses)

    def fields(self) -> List[str]:
        """Names of every field referenced by the predicate."""
        names: List[str] = []
        for clause in self.clauses:
            conditions = clause.conditions if isinstance(clause, AnyOf) else [clause]
            for condition in conditions:
                if condition.field not in names:
                    names.append(condition.field)
        return names

    def to_dict(self) -> Dict[str, Any]:
        return {"AND": [c.to_dict() for c in self.clauses]}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FilterPredicate):
            return NotImplemented
        return self.clauses == other.clauses

    def __len__(self) -> int:
        return len(self.clauses)

    def __repr__(self) -> str:
        return f"FilterPredicate({self.clauses!r})"


def _invalid_value(field: str, raw: Any, value_type: ValueType) -> ValidationError:
    message = f'Invalid value for filter "{field}": expected {value_type.value}'
    return ValidationError(
        message=message,
        fields=[{"field": field, "message": message, "code": "INVALID_FILTER_VALUE"}],
        details={"value": raw},
    )


def coerce_value(field: str, raw: Any, value_type: ValueType) -> Any:
    """
    Coerce a raw query value to the declared value type.

    Args:
        field: Query key the value came from, used in error messages
        raw: Raw value, normally a string
        value_type: Target type

    Returns:
        The coerced value

    Raises:
        ValidationError: If the value cannot be coerced
    """
    if value_type == ValueType.STRING:
        return raw if isinstance(raw, str) else str(raw)

    text = str(raw).strip()
    if value_type == ValueType.BOOLEAN:
        if isinstance(raw, bool):
            return raw
        lowered = text.lower()
        if lowered in TRUE_VALUES:
            return True
        if lowered in FALSE_VALUES:
            return False
        raise _invalid_value(field, raw, value_type)

    try:
        if value_type == ValueType.INTEGER:
            return int(text)
        return float(text.replace(",", "."))
    except ValueError:
        raise _invalid_value(field, raw, value_type)


def build_predicate(
    params: Mapping[str, Any],
    filterable_fields: Sequence[FieldSpec],
    searchable_fields: Sequence[str],
    soft_delete_field: str = "is_deleted",
) -> FilterPredicate:
    """
    Build the filter predicate for a list query.

    Clauses are appended in a fixed order: the search disjunction, then one
    clause per filterable field present in ``params`` (in declared order),
    then the soft-delete exclusion.

    The ``search`` term is stripped of surrounding whitespace before it is
    matched, so ``" Sam "`` searches for ``"Sam"``; a blank term adds no
    clause.

    Args:
        params: Selected query parameters
        filterable_fields: Filter configuration of the resource
        searchable_fields: Fields matched by the ``search`` term
        soft_delete_field: Boolean field flagging deleted records

    Returns:
        The combined predicate

    Raises:
        ValidationError: If a filter value does not match its declared type
    """
    clauses: List[Clause] = []

    search_term = _search_term(params.get(SEARCH_KEY))
    if search_term and searchable_fields:
        clauses.append(
            AnyOf(
                [
                    FilterCondition(field, FilterOperator.CONTAINS, search_term)
                    for field in searchable_fields
                ]
            )
        )

    for spec in filterable_fields:
        clauses.extend(_field_conditions(spec, params))

    clauses.append(
        FilterCondition(soft_delete_field, FilterOperator.EQ, False, ValueType.BOOLEAN)
    )
    return FilterPredicate(clauses)


def _search_term(raw: Optional[Any]) -> Optional[str]:
    if raw is None:
        return None
    term = str(raw).strip()
    return term or None


def _field_conditions(
    spec: FieldSpec, params: Mapping[str, Any]
) -> List[FilterCondition]:
    if spec.kind == FilterKind.RANGE:
        conditions = []
        bounds = (
            (spec.name + RANGE_MIN_SUFFIX, FilterOperator.GTE),
            (spec.name + RANGE_MAX_SUFFIX, FilterOperator.LTE),
        )
        for key, operator in bounds:
            if key in params:
                value = coerce_value(key, params[key], spec.value_type)
                conditions.append(
                    FilterCondition(spec.name, operator, value, spec.value_type)
                )
        return conditions

    if spec.name not in params:
        return []

    value = coerce_value(spec.name, params[spec.name], spec.value_type)
    operator = (
        FilterOperator.CONTAINS if spec.kind == FilterKind.CONTAINS else FilterOperator.EQ
    )
    return [FilterCondition(spec.name, operator, value, spec.value_type)]
