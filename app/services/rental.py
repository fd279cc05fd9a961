import json
import logging
from datetime import datetime
from typing import List
from fastapi import status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.errors import IrasError
from app.models.rental import RentalSubmission
from app.repositories.base import RepositoryError
from app.repositories.rental import RentalSubmissionRepository
from app.schemas.common import FieldInfo, IrasResponse, iras_error
from app.schemas.rental import RentalSubmissionData, RentalSubmissionRequest

logger = logging.getLogger(__name__)

RENTAL_SUCCESS = 0


def generate_ref_no(now: datetime = None) -> str:
    return "RNT" + (now or datetime.now()).strftime("%Y%m%d%H%M%S")


def _rejected(message: str, message_code: int, fields: List[FieldInfo]) -> IrasResponse:
    return iras_error(message, message_code, fields, nested=True)


class RentalService:
    def __init__(self, db: AsyncSession):
        self.submissions = RentalSubmissionRepository(db)

    def validate(self, request: RentalSubmissionRequest):
        """
        Header fields are checked in order and the first failure is returned.
        Property lines are checked together so every bad line is reported.
        """
        if request.assmtYear <= 0:
            return _rejected("Invalid assessment year", 40001, [
                FieldInfo(field="assmtYear", message="Assessment year must be greater than 0"),
            ])
        if not request.authorisedPersonEmail.strip():
            return _rejected("Invalid authorised person email", 40002, [
                FieldInfo(field="authorisedPersonEmail", message="Authorised person email is required"),
            ])
        if not request.authorisedPersonName.strip():
            return _rejected("Invalid authorised person name", 40003, [
                FieldInfo(field="authorisedPersonName", message="Authorised person name is required"),
            ])
        if not request.developmentName.strip():
            return _rejected("Invalid development name", 40004, [
                FieldInfo(field="developmentName", message="Development name is required"),
            ])
        if not request.propertyDtl:
            return _rejected("No property details provided", 40005, [
                FieldInfo(field="propertyDtl", message="At least one property detail is required"),
            ])

        line_errors = [
            FieldInfo(
                field="propertyTaxRef",
                message="Property tax reference is required",
                recordID=f"{line.recordID:.0f}",
            )
            for line in request.propertyDtl
            if not line.propertyTaxRef.strip()
        ]
        if line_errors:
            return _rejected("Validation errors in property details", 40006, line_errors)
        return None

    async def submit(self, request: RentalSubmissionRequest) -> IrasResponse:
        rejection = self.validate(request)
        if rejection is not None:
            return rejection

        record = RentalSubmission(
            ref_no=generate_ref_no(),
            assmt_year=request.assmtYear,
            authorised_person_email=request.authorisedPersonEmail,
            authorised_person_name=request.authorisedPersonName,
            development_name=request.developmentName,
            submission_data=json.dumps([line.model_dump(exclude_none=True) for line in request.propertyDtl]),
            total_properties=len(request.propertyDtl),
            status="submitted",
        )
        try:
            record = await self.submissions.create(record)
        except (RepositoryError, SQLAlchemyError):
            # Two submissions in the same second share a refNo and land here
            logger.exception("Failed to store rental submission")
            raise IrasError(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                iras_error("Internal server error", 50001, return_code=50),
            )

        logger.info(f"Rental submission {record.ref_no} stored with {record.total_properties} properties")
        return IrasResponse(returnCode=RENTAL_SUCCESS, data=RentalSubmissionData(refNo=record.ref_no))
