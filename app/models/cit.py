from sqlalchemy import Column, String, Text
from app.database import Base
from app.models.base import RecordMixin


class CITConversion(RecordMixin, Base):
    __tablename__ = "cit_conversions"

    conversion_id = Column(String, unique=True, nullable=False, index=True)
    # Idempotency key, deliberately not unique
    request_id = Column(String, nullable=False, index=True)
    client_id = Column(String)
    status = Column(String, nullable=False, default="completed")
    conversion_date = Column(String)
    processed_by = Column(String)
    conversion_result = Column(Text)
