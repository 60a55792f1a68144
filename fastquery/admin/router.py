"""
Admin list endpoint.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from fastquery.admin.fields import admin_query_config
from fastquery.admin.models import Admin
from fastquery.admin.schemas import AdminRead
from fastquery.api.builder import BuiltQuery, QueryParams
from fastquery.api.pagination import QueryResult, paginate
from fastquery.api.sorting import SortSpec
from fastquery.config.base import BaseAppSettings
from fastquery.db.manager import get_db
from fastquery.db.repository import QueryRepository
from fastquery.schemas import ListResponse


def create_admin_router(settings: BaseAppSettings) -> APIRouter:
    """
    Create the admin router.

    ``GET /admins`` accepts ``search``, the filter keys of
    :data:`ADMIN_FILTERABLE_FIELDS`, ``page``, ``limit``, ``sortBy`` and
    ``sortOrder``.
    """
    config = admin_query_config(settings)
    default_sort = SortSpec(config.default_sort_field, config.default_sort_order)

    router = APIRouter(prefix="/admins", tags=["admins"])

    @router.get("", response_model=ListResponse[AdminRead])
    async def list_admins(
        query: BuiltQuery = Depends(QueryParams(config)),
        session: AsyncSession = Depends(get_db),
    ):
        repository = QueryRepository(Admin, session, default_sort=default_sort)
        result = await repository.list(query)
        admins = [AdminRead.model_validate(admin) for admin in result.items]
        return paginate(
            QueryResult(items=admins, total=result.total),
            query.pagination,
            message="Admins retrieved successfully",
        )

    return router
