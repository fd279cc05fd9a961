"""
Admin CRUD over the persisted records.

Every resource gets the same five routes from add_crud_routes; natural-key
lookups are added next to them. Admin writes store what they are given and
skip the business validation of the IRAS endpoints.
"""
import logging
from typing import Awaitable, Callable, Optional, Type
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession
from app.api.responses import api_json, paginated, parse_id
from app.core.errors import APIError
from app.core.pagination import Pagination, get_pagination
from app.database import get_db
from app.middleware.auth import get_current_admin_user, get_current_user
from app.repositories.base import BaseRepository, DuplicateRecordError, RecordNotFoundError
from app.repositories.catalog import CategoryRepository, ProductRepository
from app.repositories.cit import CITConversionRepository
from app.repositories.gst import GSTRegistrationRepository
from app.repositories.property import PropertyStatementRepository, PropertyTaxBalanceRepository
from app.repositories.rental import RentalSubmissionRepository
from app.repositories.singpass import SingPassAuthRepository, SingPassTokenRepository
from app.repositories.user import UserRepository
from app.schemas.auth import UserResponse
from app.schemas.catalog import (
    CategoryCreate, CategoryUpdate, CategoryResponse,
    ProductCreate, ProductUpdate, ProductResponse,
)
from app.schemas.cit import CITConversionCreate, CITConversionUpdate, CITConversionResponse
from app.schemas.gst import GSTRegistrationCreate, GSTRegistrationUpdate, GSTRegistrationResponse
from app.schemas.property import (
    PropertyStatementCreate, PropertyStatementUpdate, PropertyStatementResponse,
    PropertyTaxBalanceCreate, PropertyTaxBalanceUpdate, PropertyTaxBalanceResponse,
)
from app.schemas.rental import RentalSubmissionCreate, RentalSubmissionUpdate, RentalSubmissionResponse
from app.schemas.singpass import (
    SingPassAuthRecordCreate, SingPassAuthRecordUpdate, SingPassAuthRecordResponse,
    SingPassTokenRecordCreate, SingPassTokenRecordUpdate, SingPassTokenRecordResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(get_current_user)])

DeleteHook = Callable[[AsyncSession, int], Awaitable[None]]


def add_crud_routes(
    path: str,
    repository_cls: Type[BaseRepository],
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    response_schema: Type[BaseModel],
    label: str,
    plural: str,
    before_delete: Optional[DeleteHook] = None,
):
    """Register list/create/get/update/delete routes for one record type"""

    @router.post(path, status_code=status.HTTP_201_CREATED)
    async def create_record(payload: create_schema, db: AsyncSession = Depends(get_db)):
        try:
            record = await repository_cls(db).create_from(payload)
        except DuplicateRecordError as e:
            raise APIError(status.HTTP_409_CONFLICT, f"Failed to create {label.lower()}", str(e))
        logger.info(f"Admin created {label} {record.id}")
        return api_json(
            f"{label} created successfully",
            response_schema.model_validate(record),
            status_code=status.HTTP_201_CREATED,
        )

    @router.get(path)
    async def list_records(
        pagination: Pagination = Depends(get_pagination),
        db: AsyncSession = Depends(get_db),
    ):
        items, total = await repository_cls(db).list(pagination.offset, pagination.limit)
        return api_json(
            f"{plural} retrieved successfully",
            paginated(items, total, pagination, response_schema),
        )

    @router.get(f"{path}/{{record_id}}")
    async def get_record(record_id: str, db: AsyncSession = Depends(get_db)):
        try:
            record = await repository_cls(db).get_by_id(parse_id(record_id))
        except RecordNotFoundError as e:
            raise APIError(status.HTTP_404_NOT_FOUND, f"{label} not found", str(e))
        return api_json(f"{label} retrieved successfully", response_schema.model_validate(record))

    @router.put(f"{path}/{{record_id}}")
    async def update_record(record_id: str, patch: update_schema, db: AsyncSession = Depends(get_db)):
        record_key = parse_id(record_id)
        try:
            record = await repository_cls(db).update(record_key, patch)
        except RecordNotFoundError as e:
            raise APIError(status.HTTP_404_NOT_FOUND, f"{label} not found", str(e))
        except DuplicateRecordError as e:
            raise APIError(status.HTTP_409_CONFLICT, f"Failed to update {label.lower()}", str(e))
        return api_json(f"{label} updated successfully", response_schema.model_validate(record))

    @router.delete(f"{path}/{{record_id}}")
    async def delete_record(record_id: str, db: AsyncSession = Depends(get_db)):
        record_key = parse_id(record_id)
        if before_delete is not None:
            await before_delete(db, record_key)
        try:
            await repository_cls(db).soft_delete(record_key)
        except RecordNotFoundError as e:
            raise APIError(status.HTTP_404_NOT_FOUND, f"{label} not found", str(e))
        logger.info(f"Admin deleted {label} {record_key}")
        return api_json(f"{label} deleted successfully")


def add_lookup_route(path: str, lookup: Callable, response_schema: Type[BaseModel], label: str):
    """GET route resolving a record by its natural key"""

    @router.get(path)
    async def get_by_key(key: str, db: AsyncSession = Depends(get_db)):
        try:
            record = await lookup(db, key)
        except RecordNotFoundError as e:
            raise APIError(status.HTTP_404_NOT_FOUND, f"{label} not found", str(e))
        return api_json(f"{label} retrieved successfully", response_schema.model_validate(record))


async def ensure_category_unused(db: AsyncSession, category_id: int):
    if await CategoryRepository(db).count_products(category_id) > 0:
        raise APIError(
            status.HTTP_409_CONFLICT,
            "Failed to delete category",
            "cannot delete category with existing products",
        )


add_crud_routes(
    "/gst-registrations", GSTRegistrationRepository,
    GSTRegistrationCreate, GSTRegistrationUpdate, GSTRegistrationResponse,
    "GST registration", "GST registrations",
)
add_crud_routes(
    "/property-statements", PropertyStatementRepository,
    PropertyStatementCreate, PropertyStatementUpdate, PropertyStatementResponse,
    "Property statement", "Property statements",
)
add_crud_routes(
    "/property-tax-balances", PropertyTaxBalanceRepository,
    PropertyTaxBalanceCreate, PropertyTaxBalanceUpdate, PropertyTaxBalanceResponse,
    "Property tax balance", "Property tax balances",
)

add_lookup_route(
    "/rental-submissions/ref/{key}",
    lambda db, key: RentalSubmissionRepository(db).get_by_ref_no(key),
    RentalSubmissionResponse, "Rental submission",
)
add_crud_routes(
    "/rental-submissions", RentalSubmissionRepository,
    RentalSubmissionCreate, RentalSubmissionUpdate, RentalSubmissionResponse,
    "Rental submission", "Rental submissions",
)

add_lookup_route(
    "/cit-conversions/conversion/{key}",
    lambda db, key: CITConversionRepository(db).get_by_conversion_id(key),
    CITConversionResponse, "CIT conversion",
)
add_lookup_route(
    "/cit-conversions/request/{key}",
    lambda db, key: CITConversionRepository(db).get_by_request_id(key),
    CITConversionResponse, "CIT conversion",
)
add_crud_routes(
    "/cit-conversions", CITConversionRepository,
    CITConversionCreate, CITConversionUpdate, CITConversionResponse,
    "CIT conversion", "CIT conversions",
)

add_lookup_route(
    "/singpass-auth/state/{key}",
    lambda db, key: SingPassAuthRepository(db).get_by_state(key),
    SingPassAuthRecordResponse, "SingPass auth record",
)
add_crud_routes(
    "/singpass-auth", SingPassAuthRepository,
    SingPassAuthRecordCreate, SingPassAuthRecordUpdate, SingPassAuthRecordResponse,
    "SingPass auth record", "SingPass auth records",
)

add_lookup_route(
    "/singpass-tokens/state/{key}",
    lambda db, key: SingPassTokenRepository(db).get_by_state(key),
    SingPassTokenRecordResponse, "SingPass token record",
)
add_crud_routes(
    "/singpass-tokens", SingPassTokenRepository,
    SingPassTokenRecordCreate, SingPassTokenRecordUpdate, SingPassTokenRecordResponse,
    "SingPass token record", "SingPass token records",
)

add_crud_routes(
    "/categories", CategoryRepository,
    CategoryCreate, CategoryUpdate, CategoryResponse,
    "Category", "Categories",
    before_delete=ensure_category_unused,
)
add_crud_routes(
    "/products", ProductRepository,
    ProductCreate, ProductUpdate, ProductResponse,
    "Product", "Products",
)


# User management (admin role only)
@router.get("/users")
async def list_users(
    pagination: Pagination = Depends(get_pagination),
    admin=Depends(get_current_admin_user),
    db: AsyncSession = Depends(get_db),
):
    items, total = await UserRepository(db).list(pagination.offset, pagination.limit)
    return api_json("Users retrieved successfully", paginated(items, total, pagination, UserResponse))


@router.get("/users/{user_id}")
async def get_user(
    user_id: str,
    admin=Depends(get_current_admin_user),
    db: AsyncSession = Depends(get_db),
):
    try:
        user = await UserRepository(db).get_by_id(parse_id(user_id, "Invalid user ID"))
    except RecordNotFoundError as e:
        raise APIError(status.HTTP_404_NOT_FOUND, "User not found", str(e))
    return api_json("User retrieved successfully", UserResponse.model_validate(user))


@router.put("/users/{user_id}/deactivate")
async def deactivate_user(
    user_id: str,
    admin=Depends(get_current_admin_user),
    db: AsyncSession = Depends(get_db),
):
    try:
        user = await UserRepository(db).deactivate(parse_id(user_id, "Invalid user ID"))
    except RecordNotFoundError as e:
        raise APIError(status.HTTP_404_NOT_FOUND, "Failed to deactivate user", str(e))
    logger.info(f"User {user.id} deactivated by {admin.username}")
    return api_json("User deactivated successfully", UserResponse.model_validate(user))


@router.delete("/users/{user_id}")
async def delete_user(
    user_id: str,
    admin=Depends(get_current_admin_user),
    db: AsyncSession = Depends(get_db),
):
    user_key = parse_id(user_id, "Invalid user ID")
    try:
        await UserRepository(db).soft_delete(user_key)
    except RecordNotFoundError as e:
        raise APIError(status.HTTP_404_NOT_FOUND, "User not found", str(e))
    logger.info(f"User {user_key} deleted by {admin.username}")
    return api_json("User deleted successfully")
