from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.api.iras import IrasCall, IrasEndpoint
from app.api.responses import iras_json
from app.database import get_db
from app.schemas.gst import GSTSearchRequest
from app.services.gst import GSTService

router = APIRouter()

gst_endpoint = IrasEndpoint()


@router.post("/prod/GSTListing/SearchGSTRegistered")
async def search_gst_registered(
    call: IrasCall = Depends(gst_endpoint),
    db: AsyncSession = Depends(get_db),
):
    """Check whether a business is GST-registered"""
    request = await call.body(GSTSearchRequest)
    return iras_json(await GSTService(db).search_registered(request))
