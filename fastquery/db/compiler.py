"""
Translation of list query descriptors into SQLAlchemy expressions.
"""

from typing import Any, List, Optional

from sqlalchemy import and_, asc, desc, inspect, or_
from sqlalchemy.sql.elements import ColumnElement

from fastquery.api.filtering import AnyOf, FilterCondition, FilterOperator, FilterPredicate
from fastquery.api.sorting import SortOrder, SortSpec
from fastquery.errors import BadRequestError
from fastquery.logging import Logger, get_logger

default_logger = get_logger(__name__)


def _column_keys(model: Any) -> List[str]:
    return [attr.key for attr in inspect(model).column_attrs]


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _compile_condition(condition: FilterCondition, model: Any, columns: List[str]):
    if condition.field not in columns:
        raise BadRequestError(
            message=f"Unknown filter field: {condition.field}",
            code="INVALID_FILTER_FIELD",
            details={"field": condition.field, "model": model.__name__},
        )

    column = getattr(model, condition.field)

    if condition.operator == FilterOperator.EQ:
        return column == condition.value
    if condition.operator == FilterOperator.CONTAINS:
        return column.ilike(f"%{_escape_like(str(condition.value))}%", escape="\\")
    if condition.operator == FilterOperator.GTE:
        return column >= condition.value
    if condition.operator == FilterOperator.LTE:
        return column <= condition.value
    raise BadRequestError(message=f"Unsupported filter operator: {condition.operator}")


def compile_predicate(predicate: FilterPredicate, model: Any) -> ColumnElement:
    """
    Compile a filter predicate into a SQLAlchemy boolean expression.

    Args:
        predicate: Predicate built by the query builder
        model: SQLAlchemy model class the predicate applies to

    Returns:
        A boolean expression usable in ``where()``

    Raises:
        BadRequestError: If the predicate names a field the model does not map
    """
    columns = _column_keys(model)
    clauses = []
    for clause in predicate.clauses:
        if isinstance(clause, AnyOf):
            clauses.append(
                or_(*[_compile_condition(c, model, columns) for c in clause.conditions])
            )
        else:
            clauses.append(_compile_condition(clause, model, columns))
    return and_(*clauses)


def compile_order_by(
    sort: SortSpec,
    model: Any,
    default: Optional[SortSpec] = None,
    logger: Optional[Logger] = None,
) -> List[Any]:
    """
    Compile a sort specification into SQLAlchemy order_by expressions.

    A sort field the model does not map is skipped with a warning and
    ``default`` is used instead. The primary key is appended as a tie-breaker
    so that pages do not overlap.

    Args:
        sort: Requested sort specification
        model: SQLAlchemy model class
        default: Sort used when ``sort`` names an unknown field
        logger: Optional logger

    Returns:
        List of order_by expressions
    """
    columns = _column_keys(model)
    order_by = []

    if sort.field not in columns:
        log = logger or default_logger
        log.warning(f"Ignoring unknown sort field '{sort.field}' on {model.__name__}")
        sort = default if default is not None and default.field in columns else None

    if sort is not None:
        column = getattr(model, sort.field)
        order_by.append(desc(column) if sort.order == SortOrder.DESC else asc(column))

    mapper = inspect(model)
    for pk in mapper.primary_key:
        key = mapper.get_property_by_column(pk).key
        if sort is None or key != sort.field:
            order_by.append(asc(getattr(model, key)))

    return order_by
