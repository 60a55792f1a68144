"""
Admin response schemas.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AdminRead(BaseModel):
    """
    Admin as returned by the list endpoint.

    The soft-delete flag is not exposed.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Admin identifier")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Login email")
    contact_number: Optional[str] = Field(default=None, description="Phone number")
    role: str = Field(..., description="Admin role")
    created_at: datetime
    updated_at: datetime
