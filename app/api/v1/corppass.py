from typing import Optional
from fastapi import APIRouter, Depends, Query
from app.api.iras import IrasCall, IrasEndpoint
from app.api.responses import iras_json
from app.schemas.corppass import CorpPassTokenRequest
from app.services import corppass

router = APIRouter()

corppass_endpoint = IrasEndpoint(string_codes=True)


@router.get("/sb/Authentication/CorpPassAuth")
async def corppass_auth(
    scope: Optional[str] = Query(None),
    callback_url: Optional[str] = Query(None),
    state: Optional[str] = Query(None),
    tax_agent: Optional[str] = Query(None),
    call: IrasCall = Depends(corppass_endpoint),
):
    """Build the CorpPass login URL for the caller's callback"""
    return iras_json(corppass.corppass_auth(
        scope=scope or "",
        callback_url=callback_url or "",
        state=state or "",
        tax_agent=tax_agent == "true",
    ))


@router.post("/sb/Authentication/CorpPassToken")
async def corppass_token(call: IrasCall = Depends(corppass_endpoint)):
    request = await call.body(CorpPassTokenRequest)
    return iras_json(corppass.corppass_token(request))
