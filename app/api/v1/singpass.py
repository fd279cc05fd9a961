import logging
from fastapi import APIRouter, Depends, status
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession
from app.api.iras import IrasCall, IrasEndpoint
from app.api.responses import iras_json
from app.core.errors import IrasError
from app.database import get_db
from app.schemas.singpass import SingPassAuthRequest, SingPassTokenRequest
from app.services.singpass import SingPassService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/prod/Authentication")

singpass_endpoint = IrasEndpoint()


async def _auth_request(call: IrasCall) -> SingPassAuthRequest:
    """Auth parameters come from a JSON body when one is sent, otherwise from the query string"""
    if call.request.headers.get("content-type", "").startswith("application/json"):
        try:
            return SingPassAuthRequest.model_validate(await call.request.json())
        except (ValueError, ValidationError):
            logger.debug("SingPass auth body unreadable, falling back to query parameters")

    try:
        return SingPassAuthRequest.model_validate(dict(call.request.query_params))
    except ValidationError:
        raise IrasError(status.HTTP_400_BAD_REQUEST, call.endpoint.failure(
            "Invalid request parameters", 40004,
            "request", "Invalid JSON body or query parameter format",
        ))


@router.post("/SingPassServiceAuth")
async def singpass_service_auth(
    call: IrasCall = Depends(singpass_endpoint),
    db: AsyncSession = Depends(get_db),
):
    request = await _auth_request(call)
    return iras_json(await SingPassService(db).authenticate(request))


@router.post("/SingPassServiceAuthToken")
async def singpass_service_auth_token(
    call: IrasCall = Depends(singpass_endpoint),
    db: AsyncSession = Depends(get_db),
):
    request = await call.body(SingPassTokenRequest)
    return iras_json(await SingPassService(db).exchange_token(request))
