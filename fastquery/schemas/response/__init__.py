"""
Response schemas for API endpoints.
"""

from fastquery.schemas.response.base import BaseResponse
from fastquery.schemas.response.error import ErrorInfo, ErrorResponse
from fastquery.schemas.response.list import ListMetadata, ListResponse

__all__ = [
    "BaseResponse",
    "ErrorResponse",
    "ErrorInfo",
    "ListResponse",
    "ListMetadata",
]
