"""
Header check and body parsing shared by the IRAS-style endpoints.

Each endpoint family instantiates IrasEndpoint with its own envelope quirks
and uses it as a dependency. The dependency returns an IrasCall that parses the body
into the endpoint's request model, short-circuiting with the family's
"Invalid request format" envelope when the body is not usable.
"""
import logging
from typing import Type, TypeVar, Union
from fastapi import Depends, Request, status
from pydantic import BaseModel, ValidationError
from app.config import Settings, get_settings
from app.core.errors import IrasError
from app.schemas.common import FieldInfo, IrasResponse, iras_error

logger = logging.getLogger(__name__)

RequestModel = TypeVar("RequestModel", bound=BaseModel)

CLIENT_ID_HEADER = "X-IBM-Client-Id"
CLIENT_SECRET_HEADER = "X-IBM-Client-Secret"
ACCESS_TOKEN_HEADER = "access_token"


class IrasEndpoint:
    def __init__(
        self,
        string_codes: bool = False,
        nested_fields: bool = False,
        require_access_token: bool = False,
        body_message_code: int = 40004,
        body_field_message: str = "Invalid JSON format",
    ):
        self.string_codes = string_codes
        self.nested_fields = nested_fields
        self.require_access_token = require_access_token
        self.body_message_code = body_message_code
        self.body_field_message = body_field_message

    def failure(self, message: str, message_code: int, field: str, field_message: str) -> IrasResponse:
        code: Union[int, str] = str(message_code) if self.string_codes else message_code
        return iras_error(
            message, code, [FieldInfo(field=field, message=field_message)], nested=self.nested_fields
        )

    def body_error(self) -> IrasError:
        return IrasError(
            status.HTTP_400_BAD_REQUEST,
            self.failure("Invalid request format", self.body_message_code, "body", self.body_field_message),
        )

    async def __call__(self, request: Request, settings: Settings = Depends(get_settings)) -> "IrasCall":
        client_id = request.headers.get(CLIENT_ID_HEADER, "")
        client_secret = request.headers.get(CLIENT_SECRET_HEADER, "")
        access_token = request.headers.get(ACCESS_TOKEN_HEADER, "")

        # Sandbox credentials stand in for missing headers in development only
        if settings.is_development:
            client_id = client_id or settings.IBM_CLIENT_ID
            client_secret = client_secret or settings.IBM_CLIENT_SECRET
            if self.require_access_token:
                access_token = access_token or settings.DEMO_ACCESS_TOKEN

        if not client_id or not client_secret:
            raise IrasError(status.HTTP_401_UNAUTHORIZED, self.failure(
                "Missing required headers", 40003,
                "headers", "X-IBM-Client-Id and X-IBM-Client-Secret are required",
            ))
        if self.require_access_token and not access_token:
            raise IrasError(status.HTTP_401_UNAUTHORIZED, self.failure(
                "Missing access token", 40004,
                "access_token", "CorpPass access token is required",
            ))

        return IrasCall(self, request, client_id, client_secret, access_token)


class IrasCall:
    """Credentials of one IRAS request plus access to its parsed body"""

    def __init__(self, endpoint: IrasEndpoint, request: Request, client_id: str, client_secret: str, access_token: str):
        self.endpoint = endpoint
        self.request = request
        self.client_id = client_id
        self.client_secret = client_secret
        self.access_token = access_token

    async def body(self, model: Type[RequestModel]) -> RequestModel:
        try:
            payload = await self.request.json()
            return model.model_validate(payload)
        except (ValueError, ValidationError) as e:
            logger.debug(f"Rejected {model.__name__} body: {e}")
            raise self.endpoint.body_error()
