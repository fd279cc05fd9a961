from sqlalchemy import Column, String, Integer, Text
from app.database import Base
from app.models.base import RecordMixin


class SingPassAuthRecord(RecordMixin, Base):
    __tablename__ = "singpass_auth_records"

    auth_url = Column(Text, nullable=False)
    state = Column(String, unique=True, nullable=False, index=True)
    scope = Column(String)
    callback_url = Column(String)
    client_id = Column(String)
    status = Column(String, nullable=False, default="pending")  # pending -> completed


class SingPassTokenRecord(RecordMixin, Base):
    __tablename__ = "singpass_token_records"

    code = Column(String, nullable=False)
    state = Column(String, unique=True, nullable=False, index=True)
    access_token = Column(String, nullable=False)
    token_type = Column(String, nullable=False, default="Bearer")
    expires_in = Column(Integer, nullable=False, default=3600)
    refresh_token = Column(String)
    scope = Column(String)
    callback_url = Column(String)
    client_id = Column(String)
    status = Column(String, nullable=False, default="active")
