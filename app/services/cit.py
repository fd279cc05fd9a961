import logging
from datetime import datetime
from fastapi import status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.errors import IrasError
from app.models.cit import CITConversion
from app.repositories.base import RepositoryError
from app.repositories.cit import CITConversionRepository
from app.schemas.cit import CITConversionData, ConvertFormCSRequest
from app.schemas.common import FieldInfo, IrasResponse, iras_error

logger = logging.getLogger(__name__)

PROCESSED_BY = "IRAS_CIT_SYSTEM"


def generate_conversion_id(now: datetime = None) -> str:
    return "CIT" + (now or datetime.now()).strftime("%Y%m%d%H%M%S")


def _conversion_data(record: CITConversion) -> CITConversionData:
    return CITConversionData(
        conversionID=record.conversion_id,
        status=record.status,
        conversionDate=record.conversion_date or "",
        processedBy=record.processed_by or "",
        conversionResult=record.conversion_result or "",
    )


class CITService:
    def __init__(self, db: AsyncSession):
        self.conversions = CITConversionRepository(db)

    async def convert_form_cs(self, request: ConvertFormCSRequest) -> IrasResponse:
        if request.id <= 0:
            return iras_error("Invalid ID", 40001, [
                FieldInfo(field="id", message="ID must be greater than 0"),
            ])

        request_id = str(request.id)
        try:
            # Read-then-insert with no lock: two concurrent first requests for
            # the same id can both insert. Known race, left as is.
            existing = await self.conversions.find_by_request_id(request_id)
            if existing is not None:
                return IrasResponse(returnCode=10, data=_conversion_data(existing))

            now = datetime.now()
            record = await self.conversions.create(CITConversion(
                conversion_id=generate_conversion_id(now),
                request_id=request_id,
                client_id=request_id,
                status="completed",
                conversion_date=now.strftime("%Y-%m-%d %H:%M:%S"),
                processed_by=PROCESSED_BY,
                conversion_result=f"Form CS conversion completed for ID: {request.id}",
            ))
        except (RepositoryError, SQLAlchemyError):
            logger.exception(f"Form C-S conversion failed for id={request.id}")
            raise IrasError(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                iras_error("Internal server error", 50001, return_code=50),
            )

        return IrasResponse(returnCode=10, data=_conversion_data(record))
