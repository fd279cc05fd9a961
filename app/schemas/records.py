from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class RecordResponse(BaseModel):
    """Columns every persisted record exposes on the admin endpoints"""
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    class Config:
        from_attributes = True
