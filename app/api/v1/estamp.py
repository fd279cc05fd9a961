from fastapi import APIRouter, Depends
from app.api.iras import IrasCall, IrasEndpoint
from app.api.responses import iras_json
from app.schemas.estamp import (
    MortgageRequest,
    SalePurchaseBuyersRequest,
    SalePurchaseSellersRequest,
    ShareTransferRequest,
    TenancyAgreementRequest,
)
from app.services import estamp

router = APIRouter(prefix="/sb/eStamp")

# eStamp calls act on behalf of a CorpPass user and carry its access token
estamp_endpoint = IrasEndpoint(
    require_access_token=True,
    body_message_code=40005,
    body_field_message="Invalid JSON format or missing required fields",
)


@router.post("/StampTenancyAgreement")
async def stamp_tenancy_agreement(call: IrasCall = Depends(estamp_endpoint)):
    request = await call.body(TenancyAgreementRequest)
    return iras_json(estamp.stamp_tenancy_agreement(request))


@router.post("/ShareTransfer")
async def stamp_share_transfer(call: IrasCall = Depends(estamp_endpoint)):
    request = await call.body(ShareTransferRequest)
    return iras_json(estamp.stamp_share_transfer(request))


@router.post("/StampMortgage")
async def stamp_mortgage(call: IrasCall = Depends(estamp_endpoint)):
    request = await call.body(MortgageRequest)
    return iras_json(estamp.stamp_mortgage(request))


@router.post("/SalePurchaseBuyers")
async def stamp_sale_purchase_buyers(call: IrasCall = Depends(estamp_endpoint)):
    request = await call.body(SalePurchaseBuyersRequest)
    return iras_json(estamp.stamp_sale_purchase_buyers(request))


@router.post("/SalePurchaseSellers")
async def stamp_sale_purchase_sellers(call: IrasCall = Depends(estamp_endpoint)):
    request = await call.body(SalePurchaseSellersRequest)
    return iras_json(estamp.stamp_sale_purchase_sellers(request))
