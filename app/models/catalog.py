from sqlalchemy import Column, String, Integer, Text, Numeric, ForeignKey
from app.database import Base
from app.models.base import RecordMixin


class Category(RecordMixin, Base):
    __tablename__ = "categories"

    name = Column(String(100), unique=True, nullable=False)
    description = Column(Text)


class Product(RecordMixin, Base):
    __tablename__ = "products"

    name = Column(String(255), nullable=False)
    description = Column(Text)
    price = Column(Numeric(12, 2, asdecimal=False), nullable=False, default=0)
    stock = Column(Integer, nullable=False, default=0)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
