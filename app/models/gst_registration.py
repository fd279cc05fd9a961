from sqlalchemy import Column, String, Text
from app.database import Base
from app.models.base import RecordMixin


class GSTRegistration(RecordMixin, Base):
    __tablename__ = "gst_registrations"

    client_id = Column(String, nullable=False, index=True)
    registration_id = Column(String, unique=True, nullable=False, index=True)
    gst_registration_number = Column(String, index=True)
    name = Column(Text)
    registered_from = Column(String)
    registered_to = Column(String)
    status = Column(String)
    remarks = Column(Text)
