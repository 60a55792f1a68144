"""
Common schemas for fastquery.

This module provides reusable Pydantic schemas for API responses and metadata.

Limitations:
- Envelope structure is fixed; customization requires subclassing or code changes
- Only basic metadata (timestamp, version, pagination) is included by default
"""

from fastquery.schemas.metadata import BaseMetadata, ResponseMetadata
from fastquery.schemas.response import (
    BaseResponse,
    ErrorInfo,
    ErrorResponse,
    ListMetadata,
    ListResponse,
)

__all__ = [
    # Metadata schemas
    "BaseMetadata",
    "ResponseMetadata",
    # Response schemas
    "BaseResponse",
    "ErrorResponse",
    "ErrorInfo",
    "ListResponse",
    "ListMetadata",
]
