"""
Sorting utilities for list endpoints.

This module resolves the ``sortBy`` / ``sortOrder`` query parameters into
a sort specification, falling back to the resource default.
"""

from enum import Enum
from typing import Any, Dict, Optional


class SortOrder(str, Enum):
    """
    Sort direction enum.

    Attributes:
        ASC: Ascending order
        DESC: Descending order
    """

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: Optional[Any]) -> Optional["SortOrder"]:
        """
        Parse a sort order, case-insensitively.

        Returns None for missing or unknown values.
        """
        if value is None:
            return None
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


class SortSpec:
    """
    Sort specification.

    Attributes:
        field: Field name to sort by
        order: Sort direction
    """

    def __init__(self, field: str, order: SortOrder = SortOrder.ASC):
        self.field = field
        self.order = order

    def to_dict(self) -> Dict[str, str]:
        """
        Convert to the ``{field: order}`` form used by ORM clients.
        """
        return {self.field: self.order.value}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SortSpec):
            return NotImplemented
        return self.field == other.field and self.order == other.order

    def __str__(self) -> str:
        return f"{self.field}:{self.order.value}"

    def __repr__(self) -> str:
        return f"SortSpec(field='{self.field}', order='{self.order.value}')"


def resolve_sort(
    sort_by: Optional[Any],
    sort_order: Optional[Any],
    default_field: str,
    default_order: SortOrder = SortOrder.DESC,
) -> SortSpec:
    """
    Resolve the requested sort, or the default one.

    The request is honoured only when both ``sort_by`` is non-blank and
    ``sort_order`` is ``asc`` or ``desc``. ``sort_by`` is not checked
    against the resource's fields.

    Args:
        sort_by: Requested field
        sort_order: Requested order
        default_field: Field used when the request is incomplete
        default_order: Order used when the request is incomplete

    Returns:
        The resolved sort specification
    """
    field = str(sort_by).strip() if sort_by is not None else ""
    order = SortOrder.parse(sort_order)

    if field and order is not None:
        return SortSpec(field, order)
    return SortSpec(default_field, SortOrder(default_order))
