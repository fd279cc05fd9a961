from app.models.gst_registration import GSTRegistration
from app.repositories.base import BaseRepository


class GSTRegistrationRepository(BaseRepository[GSTRegistration]):
    model = GSTRegistration

    async def get_by_registration(self, registration_id: str, client_id: str) -> GSTRegistration:
        return await self.get_by(registration_id=registration_id, client_id=client_id)
