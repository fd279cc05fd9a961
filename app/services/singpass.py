"""
SingPass service authentication.

The auth step stores a pending record keyed by its state token; the token
step looks the state up, stores the issued token and marks the auth record
completed in the same commit.
"""
import logging
import uuid
from datetime import datetime
from fastapi import status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.errors import IrasError
from app.models.singpass import SingPassAuthRecord, SingPassTokenRecord
from app.repositories.base import RepositoryError
from app.repositories.singpass import SingPassAuthRepository, SingPassTokenRepository
from app.schemas.common import FieldInfo, IrasResponse, iras_error
from app.schemas.singpass import SingPassAuthData, SingPassAuthRequest, SingPassTokenData, SingPassTokenRequest

logger = logging.getLogger(__name__)

SINGPASS_LOGIN_URL = "https://stg-saml.singpass.gov.sg/FIM/sps/SingpassIDPFed/saml20/logininitial"
SINGPASS_CLIENT_ID = "a1234b5c-1234-abcd-efgh-a1234b5cdef"
RECORD_CLIENT_ID = "singpass-client"

DEFAULT_SCOPE = "GSTReturnsSub+GSTTransListSub"
DEFAULT_CALLBACK_URL = "http://www.iras.gov.sg/callback"
TOKEN_EXPIRES_IN = 3600

REGISTERED_CALLBACK_URLS = (
    "http://www.iras.gov.sg/callback",
    "https://www.iras.gov.sg/callback",
    "http://localhost:8090/callback",
    "https://localhost:8090/callback",
    "http://dirtor.mv/ma",
)


def is_registered_callback(callback_url: str) -> bool:
    return callback_url in REGISTERED_CALLBACK_URLS


def build_auth_url(scope: str, callback_url: str, state: str) -> str:
    return f"{SINGPASS_LOGIN_URL}?client_id={SINGPASS_CLIENT_ID}&scope={scope}&redirect_uri={callback_url}&state={state}"


def _generate_token(kind: str) -> str:
    return f"SP_{kind}_{datetime.now().strftime('%Y%m%d%H%M%S')}_{str(uuid.uuid4())[:8]}"


def _unregistered_callback() -> IrasResponse:
    return iras_error("Arguments Error", 850301, [
        FieldInfo(field="callback_url", message="The callback_url specified is not registered"),
    ])


def _missing(message_code: int, field: str, label: str) -> IrasResponse:
    return iras_error("Missing required field", message_code, [
        FieldInfo(field=field, message=f"{label} is required"),
    ])


def _internal_error() -> IrasError:
    return IrasError(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        iras_error("Internal server error", 50001, return_code=50),
    )


class SingPassService:
    def __init__(self, db: AsyncSession):
        self.auth_records = SingPassAuthRepository(db)
        self.token_records = SingPassTokenRepository(db)

    async def authenticate(self, request: SingPassAuthRequest) -> IrasResponse:
        if request.callback_url and not is_registered_callback(request.callback_url):
            return _unregistered_callback()

        state = request.state or str(uuid.uuid4())
        scope = request.scope or DEFAULT_SCOPE
        callback_url = request.callback_url or DEFAULT_CALLBACK_URL
        auth_url = build_auth_url(scope, callback_url, state)

        try:
            await self.auth_records.create(SingPassAuthRecord(
                auth_url=auth_url,
                state=state,
                scope=scope,
                callback_url=callback_url,
                client_id=RECORD_CLIENT_ID,
                status="pending",
            ))
        except (RepositoryError, SQLAlchemyError):
            logger.exception(f"Failed to save SingPass auth record for state={state}")
            raise _internal_error()

        return IrasResponse(returnCode=10, data=SingPassAuthData(url=auth_url, state=state))

    async def exchange_token(self, request: SingPassTokenRequest) -> IrasResponse:
        if not request.code.strip():
            return _missing(40001, "code", "Code")
        if not request.state.strip():
            return _missing(40002, "state", "State")
        if not request.callback_url.strip():
            return _missing(40003, "callback_url", "Callback URL")
        if not request.scope.strip():
            return _missing(40004, "scope", "Scope")
        if not is_registered_callback(request.callback_url):
            return _unregistered_callback()

        try:
            auth_record = await self.auth_records.find_by_state(request.state)
        except SQLAlchemyError:
            logger.exception(f"SingPass state lookup failed for state={request.state}")
            raise _internal_error()
        if auth_record is None:
            return iras_error("Invalid state", 40005, [
                FieldInfo(field="state", message="State not found or expired"),
            ])

        token = SingPassTokenRecord(
            code=request.code,
            state=request.state,
            access_token=_generate_token("AT"),
            token_type="Bearer",
            expires_in=TOKEN_EXPIRES_IN,
            refresh_token=_generate_token("RT"),
            scope=request.scope,
            callback_url=request.callback_url,
            client_id=RECORD_CLIENT_ID,
            status="active",
        )
        try:
            token = await self.token_records.issue(token, auth_record)
        except (RepositoryError, SQLAlchemyError):
            # A state can only be exchanged once; the unique index rejects repeats
            logger.exception(f"Failed to save SingPass token for state={request.state}")
            raise _internal_error()

        return IrasResponse(
            returnCode=10,
            data=SingPassTokenData(
                access_token=token.access_token,
                token_type=token.token_type,
                expires_in=token.expires_in,
                refresh_token=token.refresh_token,
                scope=token.scope,
            ),
        )
