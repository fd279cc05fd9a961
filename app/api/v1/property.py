from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.api.iras import IrasCall, IrasEndpoint
from app.api.responses import iras_json
from app.config import Settings, get_settings
from app.database import get_db
from app.schemas.property import ConsolidatedStatementRequest, TaxBalanceSearchRequest
from app.services.property import PropertyService

router = APIRouter()

property_endpoint = IrasEndpoint()


@router.post("/sb/PropertyConsolidatedStatement/retrieve")
async def retrieve_consolidated_statement(
    call: IrasCall = Depends(property_endpoint),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    request = await call.body(ConsolidatedStatementRequest)
    return iras_json(await PropertyService(db, settings).retrieve_consolidated_statement(request))


@router.post("/sb/PTTaxBal/PtyTaxBalSearch")
async def search_property_tax_balance(
    call: IrasCall = Depends(property_endpoint),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    request = await call.body(TaxBalanceSearchRequest)
    return iras_json(await PropertyService(db, settings).search_tax_balance(request))
