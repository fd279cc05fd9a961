from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.api.iras import IrasCall, IrasEndpoint
from app.api.responses import iras_json
from app.database import get_db
from app.schemas.rental import RentalSubmissionRequest
from app.services.rental import RentalService

router = APIRouter()

rental_endpoint = IrasEndpoint(nested_fields=True)


@router.post("/sb/rental/Submission")
async def submit_rental(
    call: IrasCall = Depends(rental_endpoint),
    db: AsyncSession = Depends(get_db),
):
    """Submit annual rental details for a development"""
    request = await call.body(RentalSubmissionRequest)
    return iras_json(await RentalService(db).submit(request))
