from fastapi import APIRouter, Depends
from app.api.iras import IrasCall, IrasEndpoint
from app.api.responses import iras_json
from app.schemas.sd import IndustrialSSDRequest, PubListedSharesRequest, SCAuthenticityRequest
from app.services import sd

router = APIRouter(prefix="/prod/SD")

sd_endpoint = IrasEndpoint()


@router.post("/SCAuthenticity")
async def verify_stamp_certificate(call: IrasCall = Depends(sd_endpoint)):
    """Check that a stamp certificate reference has a known document format"""
    request = await call.body(SCAuthenticityRequest)
    return iras_json(sd.verify_stamp_certificate(request))


@router.post("/CalPubListedCompanyShares")
async def calculate_listed_shares_duty(call: IrasCall = Depends(sd_endpoint)):
    request = await call.body(PubListedSharesRequest)
    return iras_json(sd.calculate_listed_shares_duty(request))


@router.post("/CalIndustrialSSD")
async def calculate_industrial_ssd(call: IrasCall = Depends(sd_endpoint)):
    request = await call.body(IndustrialSSDRequest)
    return iras_json(sd.calculate_industrial_ssd(request))
