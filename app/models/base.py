from sqlalchemy import Column, Integer, DateTime
from sqlalchemy.sql import func


class RecordMixin:
    """Surrogate id, audit timestamps and the soft-delete marker shared by every table"""

    id = Column(Integer, primary_key=True, autoincrement=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now(), server_default=func.now())
    # Rows are never physically removed; a non-null value hides the row from reads
    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True)
