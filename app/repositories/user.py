from typing import Optional
from sqlalchemy import or_
from app.models.user import User
from app.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    model = User

    async def find_by_username(self, username: str) -> Optional[User]:
        return await self.find_by(username=username)

    async def find_by_email(self, email: str) -> Optional[User]:
        return await self.find_by(email=email)

    async def find_by_login(self, identifier: str) -> Optional[User]:
        """Login accepts either the username or the email address"""
        result = await self.session.execute(
            self._active().where(or_(User.username == identifier, User.email == identifier)).limit(1)
        )
        return result.scalars().first()

    async def deactivate(self, user_id: int) -> User:
        user = await self.get_by_id(user_id)
        user.is_active = False
        return await self.save(user)
