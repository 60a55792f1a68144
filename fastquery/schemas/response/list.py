"""
List response schema for collections of objects.

This module contains the schemas returned by paginated list endpoints.
"""

from typing import Generic, List, Optional, TypeVar

from pydantic import Field

from fastquery.schemas.metadata import BaseMetadata
from fastquery.schemas.response.base import BaseResponse

T = TypeVar("T")


class ListMetadata(BaseMetadata):
    """
    Metadata specific to list responses.

    Attributes:
        total: Number of records matching the filter, ignoring pagination
        page: Current page number
        page_size: Maximum items per page
        total_pages: Number of pages for the current page size
        has_next: Whether there is a next page
        has_previous: Whether there is a previous page
    """

    total: int = Field(default=0, ge=0, description="Total number of matching items")
    page: Optional[int] = Field(default=None, description="Current page number")
    page_size: Optional[int] = Field(default=None, description="Maximum items per page")
    total_pages: Optional[int] = Field(default=None, description="Number of pages")
    has_next: Optional[bool] = Field(
        default=None, description="Whether there are more pages after this one"
    )
    has_previous: Optional[bool] = Field(
        default=None, description="Whether there are pages before this one"
    )


class ListResponse(BaseResponse[List[T], ListMetadata], Generic[T]):
    """
    Schema for list/collection API responses.

    Attributes:
        data: The list of response items
        metadata: Pagination and response metadata
        success: Whether the request was successful
        message: Optional message providing additional context
    """

    data: List[T] = Field(default_factory=list, description="List of items")
    metadata: ListMetadata = Field(
        default_factory=ListMetadata,
        description="Response metadata including pagination info",
    )
