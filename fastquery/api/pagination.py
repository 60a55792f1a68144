"""
Pagination utilities for list endpoints.

This module resolves the ``page`` / ``limit`` / ``sortBy`` / ``sortOrder``
query parameters into pagination options and builds the paginated list
response from a query result.

Pagination policy:
- absent or blank ``page``/``limit`` fall back to their defaults;
- a value that is not a plain ASCII integer, or that does not fit a 64-bit
  storage integer (alone or as the page offset), raises :class:`ValidationError`;
- an integer below 1 falls back to the default;
- ``limit`` above ``max_limit`` (when set) is capped.
"""

from math import ceil
from typing import Any, Dict, List, Mapping, Optional, Sequence

from fastquery.api.params import LIMIT_KEY, PAGE_KEY, SORT_BY_KEY, SORT_ORDER_KEY
from fastquery.api.sorting import SortOrder, SortSpec, resolve_sort
from fastquery.errors import ValidationError
from fastquery.schemas import ListMetadata, ListResponse

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
# Largest offset or row count a 64-bit storage integer can hold
MAX_INTEGER = 2**63 - 1


class PaginationOptions:
    """
    Resolved pagination options.

    Attributes:
        page: Page number (1-indexed)
        limit: Number of items per page
        skip: Number of items before the page, ``(page - 1) * limit``
        sort: Resolved sort specification
    """

    def __init__(self, page: int, limit: int, sort: SortSpec):
        self.page = page
        self.limit = limit
        self.skip = (page - 1) * limit
        self.sort = sort

    def to_dict(self) -> Dict[str, Any]:
        return {
            "page": self.page,
            "limit": self.limit,
            "skip": self.skip,
            "sort_by": self.sort.field,
            "sort_order": self.sort.order.value,
        }

    def __repr__(self) -> str:
        return (
            f"PaginationOptions(page={self.page}, limit={self.limit}, "
            f"skip={self.skip}, sort={self.sort!r})"
        )


def _invalid_integer(key: str, raw: Any, expected: str) -> ValidationError:
    message = f'Invalid value for "{key}": expected {expected}'
    return ValidationError(
        message=message,
        fields=[{"field": key, "message": message, "code": "INVALID_INTEGER"}],
        details={"value": raw},
    )


def _parse_positive_int(key: str, raw: Optional[Any], default: int) -> int:
    if raw is None:
        return default
    text = str(raw).strip()
    if not text:
        return default
    digits = text[1:] if text.startswith("-") else text
    # ASCII digits with an optional leading minus
    if not (digits.isascii() and digits.isdigit()):
        raise _invalid_integer(key, raw, "a positive integer")
    value = int(text)
    if value > MAX_INTEGER:
        raise _invalid_integer(key, raw, f"an integer no greater than {MAX_INTEGER}")
    return value if value >= 1 else default


def calculate_pagination(
    params: Mapping[str, Any],
    default_sort_field: str = "created_at",
    default_sort_order: SortOrder = SortOrder.DESC,
    default_limit: int = DEFAULT_LIMIT,
    max_limit: Optional[int] = None,
) -> PaginationOptions:
    """
    Calculate pagination options from query parameters.

    Args:
        params: Query parameters; only the pagination keys are read
        default_sort_field: Field used when no usable sort is requested
        default_sort_order: Order used when no usable sort is requested
        default_limit: Page size used when none is requested
        max_limit: Optional cap for the page size

    Returns:
        Resolved pagination options

    Raises:
        ValidationError: If ``page`` or ``limit`` is not an integer, or the
            resulting offset is too large for storage

    Example:
        >>> calculate_pagination({"page": "3", "limit": "25"}).skip
        50
    """
    page = _parse_positive_int(PAGE_KEY, params.get(PAGE_KEY), DEFAULT_PAGE)
    limit = _parse_positive_int(LIMIT_KEY, params.get(LIMIT_KEY), default_limit)
    if max_limit is not None and limit > max_limit:
        limit = max_limit
    if (page - 1) * limit > MAX_INTEGER:
        raise _invalid_integer(
            PAGE_KEY, params.get(PAGE_KEY), f"a page whose offset fits in {MAX_INTEGER}"
        )

    sort = resolve_sort(
        params.get(SORT_BY_KEY),
        params.get(SORT_ORDER_KEY),
        default_sort_field,
        default_sort_order,
    )
    return PaginationOptions(page=page, limit=limit, sort=sort)


class QueryResult:
    """
    Result of a paginated list query.

    Attributes:
        items: Records of the requested page
        total: Number of records matching the predicate, ignoring pagination
    """

    def __init__(self, items: Sequence[Any], total: int):
        if total < 0:
            raise ValueError("total must be non-negative")
        self.items: List[Any] = list(items)
        self.total = total

    def __repr__(self) -> str:
        return f"QueryResult(items={len(self.items)}, total={self.total})"


def to_metadata(options: PaginationOptions, total: int) -> ListMetadata:
    """
    Build list metadata for a page of ``total`` matching records.
    """
    total_pages = ceil(total / options.limit) if total > 0 else 0
    return ListMetadata(
        total=total,
        page=options.page,
        page_size=options.limit,
        total_pages=total_pages,
        has_next=options.page < total_pages,
        has_previous=options.page > 1,
    )


def paginate(
    result: QueryResult,
    options: PaginationOptions,
    message: Optional[str] = None,
) -> ListResponse:
    """
    Create a paginated list response.

    Args:
        result: Items of the page and the total match count
        options: Pagination options the items were fetched with
        message: Optional response message

    Returns:
        ListResponse containing the items and pagination metadata
    """
    return ListResponse(
        success=True,
        data=result.items,
        message=message or "Items retrieved successfully",
        metadata=to_metadata(options, result.total),
    )
