"""
List query configuration of the admin resource.
"""

from fastquery.api.builder import ResourceQueryConfig
from fastquery.config.base import BaseAppSettings

ADMIN_FILTERABLE_FIELDS = ["name", "email", "contact_number", "role"]

ADMIN_SEARCHABLE_FIELDS = ["name", "email"]


def admin_query_config(settings: BaseAppSettings) -> ResourceQueryConfig:
    """Build the admin list query configuration from application settings."""
    return ResourceQueryConfig.from_settings(
        settings,
        filterable_fields=ADMIN_FILTERABLE_FIELDS,
        searchable_fields=ADMIN_SEARCHABLE_FIELDS,
    )
