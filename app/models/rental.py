from sqlalchemy import Column, String, Integer, Text
from app.database import Base
from app.models.base import RecordMixin


class RentalSubmission(RecordMixin, Base):
    __tablename__ = "rental_submissions"

    ref_no = Column(String, unique=True, nullable=False, index=True)
    assmt_year = Column(Integer, nullable=False)
    authorised_person_email = Column(String)
    authorised_person_name = Column(String)
    development_name = Column(String)
    submission_data = Column(Text)  # JSON encoded propertyDtl list
    total_properties = Column(Integer, nullable=False, default=0)
    status = Column(String, nullable=False, default="submitted")
