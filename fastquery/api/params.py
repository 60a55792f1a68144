"""
Query parameter selection helpers.
"""

from typing import Any, Dict, Iterable, Mapping

SEARCH_KEY = "search"

PAGE_KEY = "page"
LIMIT_KEY = "limit"
SORT_BY_KEY = "sortBy"
SORT_ORDER_KEY = "sortOrder"

PAGINATION_KEYS = (LIMIT_KEY, PAGE_KEY, SORT_BY_KEY, SORT_ORDER_KEY)


def pick(params: Mapping[str, Any], keys: Iterable[str]) -> Dict[str, Any]:
    """
    Select the given keys from a mapping.

    Keys missing from ``params`` are left out; the result follows the order
    of ``keys``, not the order of ``params``.

    Example:
        >>> pick({"page": "2", "debug": "1"}, ["page", "limit"])
        {'page': '2'}
    """
    return {key: params[key] for key in keys if key in params}
