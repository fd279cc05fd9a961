"""
Property consolidated statement retrieval and property tax balance search.

A lookup miss falls back to a fixed demo statement/balance in development
mode only; elsewhere a miss is reported as returnCode 20.
"""
import logging
from datetime import date
from typing import Optional
from fastapi import status
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from app.config import Settings
from app.core.errors import IrasError
from app.repositories.property import PropertyStatementRepository, PropertyTaxBalanceRepository
from app.schemas.common import FieldInfo, IrasResponse, iras_error
from app.schemas.property import (
    ConsolidatedStatement,
    ConsolidatedStatementData,
    ConsolidatedStatementRequest,
    PaymentHistory,
    PropertyDetail,
    TaxBalanceData,
    TaxBalanceSearchRequest,
)

logger = logging.getLogger(__name__)

PROPERTY_SUCCESS = 0


def _internal_error() -> IrasError:
    return IrasError(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        iras_error("Internal server error", 50001, return_code=50),
    )


def demo_consolidated_statement(request: ConsolidatedStatementRequest, today: Optional[date] = None) -> IrasResponse:
    """Fixed two-property statement used when no record matches in development"""
    return IrasResponse(
        returnCode=PROPERTY_SUCCESS,
        data=ConsolidatedStatementData(
            refNo=request.refNo,
            propertyTaxRef=request.propertyTaxRef,
            consolidatedStatement=ConsolidatedStatement(
                statementDate=(today or date.today()).isoformat(),
                totalAmount="2,500.00",
                propertyDetails=[
                    PropertyDetail(
                        propertyId="PROP001",
                        address="123 Orchard Road, Singapore 238858",
                        propertyType="Residential",
                        taxAmount="1,200.00",
                        dueDate="2025-03-31",
                        status="Outstanding",
                    ),
                    PropertyDetail(
                        propertyId="PROP002",
                        address="456 Marina Bay, Singapore 018956",
                        propertyType="Commercial",
                        taxAmount="1,300.00",
                        dueDate="2025-03-31",
                        status="Outstanding",
                    ),
                ],
                paymentHistory=[
                    PaymentHistory(
                        paymentDate="2024-12-15",
                        amount="2,400.00",
                        paymentMethod="Online Banking",
                        transactionRef="TXN202412150001",
                    ),
                    PaymentHistory(
                        paymentDate="2024-06-15",
                        amount="2,350.00",
                        paymentMethod="Credit Card",
                        transactionRef="TXN202406150001",
                    ),
                ],
            ),
        ),
    )


def demo_tax_balance(request: TaxBalanceSearchRequest) -> IrasResponse:
    return IrasResponse(
        returnCode=PROPERTY_SUCCESS,
        data=TaxBalanceData(
            propertyTaxRef=request.propertyTaxRef or "PROP001",
            ownerTaxRef=request.ownerTaxRef or "S1234567D",
            propertyDesc="123 Orchard Road, Singapore 238858",
            postalCode=request.postalCode or "238858",
            outstandingBalance="1,200.00",
            isGiro="N",
        ),
    )


class PropertyService:
    def __init__(self, db: AsyncSession, settings: Settings):
        self.statements = PropertyStatementRepository(db)
        self.balances = PropertyTaxBalanceRepository(db)
        self.settings = settings

    async def retrieve_consolidated_statement(self, request: ConsolidatedStatementRequest) -> IrasResponse:
        if not request.refNo.strip():
            raise IrasError(status.HTTP_400_BAD_REQUEST, iras_error(
                "Missing reference number", 40001,
                [FieldInfo(field="refNo", message="Reference number is required")],
            ))
        if not request.propertyTaxRef.strip():
            raise IrasError(status.HTTP_400_BAD_REQUEST, iras_error(
                "Missing property tax reference", 40002,
                [FieldInfo(field="propertyTaxRef", message="Property tax reference is required")],
            ))

        try:
            record = await self.statements.find_statement(request.refNo, request.propertyTaxRef)
        except SQLAlchemyError:
            logger.exception(f"Consolidated statement lookup failed for refNo={request.refNo}")
            raise _internal_error()

        if record is None:
            if self.settings.is_development:
                logger.info(f"No statement for refNo={request.refNo}, returning demo statement")
                return demo_consolidated_statement(request)
            raise IrasError(
                status.HTTP_404_NOT_FOUND,
                iras_error("Consolidated statement not found", 20001, return_code=20),
            )

        if record.consolidated_data:
            try:
                statement = ConsolidatedStatement.model_validate_json(record.consolidated_data)
            except ValidationError:
                logger.exception(f"Stored consolidated data for record {record.id} is unreadable")
                raise IrasError(
                    status.HTTP_500_INTERNAL_SERVER_ERROR,
                    iras_error("Error parsing consolidated data", 50002, return_code=50),
                )
        else:
            statement = ConsolidatedStatement(
                statementDate=record.statement_date or "",
                totalAmount=record.total_amount or "",
            )

        return IrasResponse(
            returnCode=PROPERTY_SUCCESS,
            data=ConsolidatedStatementData(
                refNo=record.ref_no,
                propertyTaxRef=record.property_tax_ref,
                consolidatedStatement=statement,
            ),
        )

    async def search_tax_balance(self, request: TaxBalanceSearchRequest) -> IrasResponse:
        if not request.clientID.strip():
            raise IrasError(status.HTTP_400_BAD_REQUEST, iras_error(
                "Invalid client ID", 40001,
                [FieldInfo(field="clientID", message="Client ID is required")],
            ))

        try:
            balance = await self.balances.search(
                request.clientID,
                postal_code=request.postalCode,
                blk_house_no=request.blkHouseNo,
                street_name=request.streetName,
                storey_no=request.storeyNo,
                unit_no=request.unitNo,
                owner_tax_ref=request.ownerTaxRef,
                property_tax_ref=request.propertyTaxRef,
            )
        except SQLAlchemyError:
            logger.exception(f"Tax balance search failed for clientID={request.clientID}")
            raise _internal_error()

        if balance is None:
            if self.settings.is_development:
                return demo_tax_balance(request)
            raise IrasError(
                status.HTTP_404_NOT_FOUND,
                iras_error("Property tax balance not found", 20001, return_code=20),
            )

        return IrasResponse(
            returnCode=PROPERTY_SUCCESS,
            data=TaxBalanceData(
                propertyTaxRef=balance.property_tax_ref or "",
                ownerTaxRef=balance.owner_tax_ref or "",
                propertyDesc=balance.property_desc or "",
                postalCode=balance.postal_code or "",
                outstandingBalance=f"{balance.outstanding_balance or 0:,.2f}",
                isGiro="Y" if balance.is_giro else "N",
            ),
        )
