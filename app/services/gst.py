import logging
from fastapi import status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.errors import IrasError
from app.repositories.base import RecordNotFoundError
from app.repositories.gst import GSTRegistrationRepository
from app.schemas.common import FieldInfo, IrasResponse, iras_error
from app.schemas.gst import GSTSearchRequest, GSTData

logger = logging.getLogger(__name__)


class GSTService:
    """Lookup of seeded GST registrations by registration and client id"""

    def __init__(self, db: AsyncSession):
        self.registrations = GSTRegistrationRepository(db)

    async def search_registered(self, request: GSTSearchRequest) -> IrasResponse:
        if not request.clientID.strip():
            raise IrasError(status.HTTP_400_BAD_REQUEST, iras_error(
                "Invalid client ID", 40001,
                [FieldInfo(field="clientID", message="Client ID is required")],
            ))
        if not request.regID.strip():
            raise IrasError(status.HTTP_400_BAD_REQUEST, iras_error(
                "Invalid registration ID", 40002,
                [FieldInfo(field="regID", message="Registration ID is required")],
            ))

        try:
            registration = await self.registrations.get_by_registration(request.regID, request.clientID)
        except RecordNotFoundError:
            raise IrasError(
                status.HTTP_404_NOT_FOUND,
                iras_error("GST registration not found", 20001, return_code=20),
            )
        except SQLAlchemyError:
            logger.exception(f"GST lookup failed for regID={request.regID}")
            raise IrasError(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                iras_error("Internal server error", 50001, return_code=50),
            )

        return IrasResponse(
            returnCode=10,
            data=GSTData(
                name=registration.name or "",
                gstRegistrationNumber=registration.gst_registration_number or "",
                registrationId=registration.registration_id,
                RegisteredFrom=registration.registered_from or "",
                RegisteredTo=registration.registered_to or "",
                Remarks=registration.remarks or "",
                Status=registration.status or "",
            ),
        )
