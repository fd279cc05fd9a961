from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.api.iras import IrasCall, IrasEndpoint
from app.api.responses import iras_json
from app.database import get_db
from app.schemas.cit import ConvertFormCSRequest
from app.services.cit import CITService

router = APIRouter()

cit_endpoint = IrasEndpoint()


@router.post("/prod/ct/convertformcs")
async def convert_form_cs(
    call: IrasCall = Depends(cit_endpoint),
    db: AsyncSession = Depends(get_db),
):
    request = await call.body(ConvertFormCSRequest)
    return iras_json(await CITService(db).convert_form_cs(request))
