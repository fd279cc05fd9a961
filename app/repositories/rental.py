from app.models.rental import RentalSubmission
from app.repositories.base import BaseRepository


class RentalSubmissionRepository(BaseRepository[RentalSubmission]):
    model = RentalSubmission

    async def get_by_ref_no(self, ref_no: str) -> RentalSubmission:
        return await self.get_by(ref_no=ref_no)
