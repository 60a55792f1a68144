"""
Admin resource: model, list query configuration and list endpoint.
"""

from fastquery.admin.fields import (
    ADMIN_FILTERABLE_FIELDS,
    ADMIN_SEARCHABLE_FIELDS,
    admin_query_config,
)
from fastquery.admin.models import Admin
from fastquery.admin.router import create_admin_router
from fastquery.admin.schemas import AdminRead

__all__ = [
    "ADMIN_FILTERABLE_FIELDS",
    "ADMIN_SEARCHABLE_FIELDS",
    "Admin",
    "AdminRead",
    "admin_query_config",
    "create_admin_router",
]
