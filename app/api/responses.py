from typing import Any, List, Optional, Type
from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from app.core.errors import APIError
from app.core.pagination import Pagination, total_pages
from app.schemas.common import IrasResponse, PaginationResponse


def iras_json(envelope: IrasResponse, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    """IRAS envelopes omit absent members, matching the upstream contract"""
    return JSONResponse(status_code=status_code, content=envelope.model_dump(mode="json", exclude_none=True))


def api_json(
    message: str,
    data: Any = None,
    status_code: int = status.HTTP_200_OK,
    success: bool = True,
    error: Optional[str] = None,
) -> JSONResponse:
    content = {"success": success, "message": message}
    if data is not None:
        content["data"] = jsonable_encoder(data)
    if error is not None:
        content["error"] = error
    return JSONResponse(status_code=status_code, content=content)


def paginated(items: List[Any], total: int, pagination: Pagination, schema: Type[BaseModel]) -> PaginationResponse:
    return PaginationResponse(
        data=[schema.model_validate(item) for item in items],
        total=total,
        page=pagination.page,
        limit=pagination.limit,
        total_pages=total_pages(total, pagination.limit),
    )


def parse_id(raw: str, message: str = "Invalid ID format") -> int:
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise APIError(status.HTTP_400_BAD_REQUEST, message, f"{raw!r} is not a valid id")
