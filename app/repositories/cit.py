from typing import Optional
from app.models.cit import CITConversion
from app.repositories.base import BaseRepository


class CITConversionRepository(BaseRepository[CITConversion]):
    model = CITConversion

    async def find_by_request_id(self, request_id: str) -> Optional[CITConversion]:
        return await self.find_by(request_id=request_id)

    async def get_by_request_id(self, request_id: str) -> CITConversion:
        return await self.get_by(request_id=request_id)

    async def get_by_conversion_id(self, conversion_id: str) -> CITConversion:
        return await self.get_by(conversion_id=conversion_id)
