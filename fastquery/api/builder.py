"""
List query builder.

Turns the raw query string of a list endpoint into a query descriptor:
filter predicate, pagination window and sort order. The builder is a pure
function; it performs no I/O and keeps no state between calls.

Example:
    ```python
    config = ResourceQueryConfig(
        filterable_fields=["name", "email"],
        searchable_fields=["name", "email"],
    )

    @app.get("/admins")
    async def list_admins(query: BuiltQuery = Depends(QueryParams(config))):
        ...
    ```
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from fastapi import Request
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from fastquery.api.filtering import FieldSpec, FilterPredicate, build_predicate
from fastquery.api.pagination import (
    DEFAULT_LIMIT,
    PaginationOptions,
    calculate_pagination,
)
from fastquery.api.params import PAGINATION_KEYS, SEARCH_KEY, pick
from fastquery.api.sorting import SortOrder, SortSpec
from fastquery.config.base import BaseAppSettings
from fastquery.logging import Logger, get_logger

default_logger = get_logger(__name__)

RESERVED_KEYS = {SEARCH_KEY, *PAGINATION_KEYS}


class ResourceQueryConfig(BaseModel):
    """
    Query configuration of one resource type.

    Attributes:
        filterable_fields: Ordered field specs; plain names mean exact string match
        searchable_fields: Ordered fields matched by the ``search`` term
        default_sort_field: Field used when no usable sort is requested
        default_sort_order: Order used when no usable sort is requested
        default_limit: Page size used when none is requested
        max_limit: Optional cap for the page size
        soft_delete_field: Boolean field flagging deleted records
    """

    model_config = ConfigDict(frozen=True)

    filterable_fields: List[FieldSpec] = Field(default_factory=list)
    searchable_fields: List[str] = Field(default_factory=list)
    default_sort_field: str = "created_at"
    default_sort_order: SortOrder = SortOrder.DESC
    default_limit: int = Field(default=DEFAULT_LIMIT, ge=1)
    max_limit: Optional[int] = Field(default=None, ge=1)
    soft_delete_field: str = "is_deleted"

    @field_validator("filterable_fields", mode="before")
    def normalize_fields(cls, value):
        """Accept plain field names as shorthand for exact string filters."""
        return [{"name": item} if isinstance(item, str) else item for item in value]

    @model_validator(mode="after")
    def check_query_keys(self) -> "ResourceQueryConfig":
        seen = set()
        for spec in self.filterable_fields:
            for key in spec.query_keys():
                if key in RESERVED_KEYS:
                    raise ValueError(f"'{key}' is a reserved query key")
                if key in seen:
                    raise ValueError(f"Duplicate filter key: {key}")
                seen.add(key)
        return self

    @classmethod
    def from_settings(
        cls,
        settings: BaseAppSettings,
        filterable_fields: Sequence[Union[str, FieldSpec]] = (),
        searchable_fields: Sequence[str] = (),
        **overrides: Any,
    ) -> "ResourceQueryConfig":
        """
        Create a config with the defaults taken from application settings.
        """
        values: Dict[str, Any] = {
            "default_sort_field": settings.QUERY_DEFAULT_SORT_FIELD,
            "default_sort_order": settings.QUERY_DEFAULT_SORT_ORDER,
            "default_limit": settings.QUERY_DEFAULT_LIMIT,
            "max_limit": settings.QUERY_MAX_LIMIT,
            "soft_delete_field": settings.QUERY_SOFT_DELETE_FIELD,
        }
        values.update(overrides)
        return cls(
            filterable_fields=list(filterable_fields),
            searchable_fields=list(searchable_fields),
            **values,
        )

    def filter_keys(self) -> List[str]:
        """Query keys read by the filter predicate, search included."""
        keys = [key for spec in self.filterable_fields for key in spec.query_keys()]
        return keys + [SEARCH_KEY]


class BuiltQuery:
    """
    Query descriptor produced by :func:`build_query`.

    Attributes:
        predicate: Filter predicate for both the page read and the count
        pagination: Resolved pagination options
        skip: Number of records to skip
        take: Number of records to return
        order_by: Sort specification
        page: Page number
        limit: Page size
    """

    def __init__(self, predicate: FilterPredicate, pagination: PaginationOptions):
        self.predicate = predicate
        self.pagination = pagination

    @property
    def skip(self) -> int:
        return self.pagination.skip

    @property
    def take(self) -> int:
        return self.pagination.limit

    @property
    def order_by(self) -> SortSpec:
        return self.pagination.sort

    @property
    def page(self) -> int:
        return self.pagination.page

    @property
    def limit(self) -> int:
        return self.pagination.limit

    def to_dict(self) -> Dict[str, Any]:
        return {
            "predicate": self.predicate.to_dict(),
            "skip": self.skip,
            "take": self.take,
            "order_by": self.order_by.to_dict(),
            "page": self.page,
            "limit": self.limit,
        }

    def __repr__(self) -> str:
        return (
            f"BuiltQuery(predicate={self.predicate!r}, skip={self.skip}, "
            f"take={self.take}, order_by={self.order_by!r})"
        )


def build_query(
    params: Mapping[str, Any],
    config: ResourceQueryConfig,
    logger: Optional[Logger] = None,
) -> BuiltQuery:
    """
    Build a list query descriptor from raw query parameters.

    Only the configured filter keys, ``search`` and the pagination keys are
    read; every other key is ignored.

    Args:
        params: Raw query parameters
        config: Query configuration of the resource
        logger: Optional logger, defaults to the module logger

    Returns:
        The query descriptor

    Raises:
        ValidationError: If a pagination number or filter value is malformed
    """
    log = logger or default_logger

    filters = pick(params, config.filter_keys())
    options = pick(params, PAGINATION_KEYS)

    pagination = calculate_pagination(
        options,
        default_sort_field=config.default_sort_field,
        default_sort_order=config.default_sort_order,
        default_limit=config.default_limit,
        max_limit=config.max_limit,
    )
    predicate = build_predicate(
        filters,
        config.filterable_fields,
        config.searchable_fields,
        soft_delete_field=config.soft_delete_field,
    )

    query = BuiltQuery(predicate, pagination)
    log.debug(f"Built list query: {query!r}")
    return query


class QueryParams:
    """
    FastAPI dependency building a list query from the request's query string.

    Example:
        ```python
        @app.get("/items")
        async def list_items(query: BuiltQuery = Depends(QueryParams(config))):
            result = await repository.list(query)
            return paginate(result, query.pagination)
        ```
    """

    def __init__(self, config: ResourceQueryConfig):
        self.config = config

    def __call__(self, request: Request) -> BuiltQuery:
        return build_query(request.query_params, self.config)
