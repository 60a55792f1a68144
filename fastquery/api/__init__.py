"""
API utilities for list endpoints.

This module provides the list query builder and its parts: filter
predicates, sorting, pagination and the paginated response helper.
"""

from fastquery.api.builder import BuiltQuery, QueryParams, ResourceQueryConfig, build_query
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
from fastquery.api.pagination import (
    PaginationOptions,
    QueryResult,
    calculate_pagination,
    paginate,
)
from fastquery.api.params import pick
from fastquery.api.sorting import SortOrder, SortSpec, resolve_sort

__all__ = [
    "AnyOf",
    "BuiltQuery",
    "FieldSpec",
    "FilterCondition",
    "FilterKind",
    "FilterOperator",
    "FilterPredicate",
    "PaginationOptions",
    "QueryParams",
    "QueryResult",
    "ResourceQueryConfig",
    "SortOrder",
    "SortSpec",
    "ValueType",
    "build_predicate",
    "build_query",
    "calculate_pagination",
    "coerce_value",
    "paginate",
    "pick",
    "resolve_sort",
]
