from pydantic import BaseModel, Field
from typing import Optional
from app.schemas.records import RecordResponse


# Category Schemas
class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None


class CategoryUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None


class CategoryResponse(RecordResponse):
    name: str
    description: Optional[str] = None


# Product Schemas
class ProductCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    price: float = Field(0, ge=0)
    stock: int = Field(0, ge=0)
    category_id: int
    user_id: Optional[int] = None


class ProductUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    stock: Optional[int] = Field(None, ge=0)
    category_id: Optional[int] = None
    user_id: Optional[int] = None


class ProductResponse(RecordResponse):
    name: str
    description: Optional[str] = None
    price: float
    stock: int
    category_id: int
    user_id: Optional[int] = None
