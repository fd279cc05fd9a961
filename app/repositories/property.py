from typing import Optional
from app.models.property import PropertyConsolidatedStatement, PropertyTaxBalance
from app.repositories.base import BaseRepository


class PropertyStatementRepository(BaseRepository[PropertyConsolidatedStatement]):
    model = PropertyConsolidatedStatement

    async def find_statement(self, ref_no: str, property_tax_ref: str) -> Optional[PropertyConsolidatedStatement]:
        return await self.find_by(ref_no=ref_no, property_tax_ref=property_tax_ref)


class PropertyTaxBalanceRepository(BaseRepository[PropertyTaxBalance]):
    model = PropertyTaxBalance

    async def search(self, client_id: str, **criteria) -> Optional[PropertyTaxBalance]:
        """First balance for the client matching every non-empty address/reference criterion"""
        filters = {key: value for key, value in criteria.items() if value}
        return await self.find_by(client_id=client_id, **filters)
