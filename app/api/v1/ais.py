from fastapi import APIRouter, Depends
from app.api.iras import IrasCall, IrasEndpoint
from app.api.responses import iras_json
from app.schemas.ais import AISOrgSearchRequest
from app.services.ais import search_organization

router = APIRouter()

ais_endpoint = IrasEndpoint(string_codes=True)


@router.post("/sb/ESubmission/AISOrgSearch")
async def ais_org_search(call: IrasCall = Depends(ais_endpoint)):
    """Report whether an organisation participates in the Auto-Inclusion Scheme"""
    request = await call.body(AISOrgSearchRequest)
    return iras_json(search_organization(request))
