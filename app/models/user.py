from sqlalchemy import Column, String, Boolean, Enum
import enum
from app.database import Base
from app.models.base import RecordMixin


class UserRole(str, enum.Enum):
    ADMIN = "admin"
    USER = "user"


class User(RecordMixin, Base):
    __tablename__ = "users"

    name = Column(String(255))
    username = Column(String(50), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    role = Column(Enum(UserRole), nullable=False, default=UserRole.USER)
    is_active = Column(Boolean, nullable=False, default=True)
