from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from f1companion.models.user import Account, UserProfile


class ProfileRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_account_id(self, account_id: str) -> UserProfile | None:
        res = await self.session.execute(
            select(UserProfile).where(UserProfile.account_id == account_id)
        )
        return res.scalar_one_or_none()

    async def get_account(self, account_id: str) -> Account | None:
        res = await self.session.execute(
            select(Account).where(Account.id == account_id)
        )
        return res.scalar_one_or_none()

    def add_account(self, account: Account) -> None:
        self.session.add(account)

    def add_profile(self, profile: UserProfile) -> None:
        self.session.add(profile)
