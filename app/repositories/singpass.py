from typing import Optional
from app.models.singpass import SingPassAuthRecord, SingPassTokenRecord
from app.repositories.base import BaseRepository


class SingPassAuthRepository(BaseRepository[SingPassAuthRecord]):
    model = SingPassAuthRecord

    async def find_by_state(self, state: str) -> Optional[SingPassAuthRecord]:
        return await self.find_by(state=state)

    async def get_by_state(self, state: str) -> SingPassAuthRecord:
        return await self.get_by(state=state)


class SingPassTokenRepository(BaseRepository[SingPassTokenRecord]):
    model = SingPassTokenRecord

    async def get_by_state(self, state: str) -> SingPassTokenRecord:
        return await self.get_by(state=state)

    async def issue(self, token: SingPassTokenRecord, auth_record: SingPassAuthRecord) -> SingPassTokenRecord:
        """Insert the token and complete its auth record in one commit"""
        self.session.add(token)
        auth_record.status = "completed"
        await self._commit()
        await self.session.refresh(token)
        return token
