from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from f1companion.models.constructor import Constructor
from f1companion.models.driver import Driver


class CatalogRepository:
    """Read access to the seeded driver / constructor catalog."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_drivers(self, active_only: bool | None = None) -> list[Driver]:
        stmt = select(Driver).where(Driver.is_deleted.is_(False))
        if active_only is not None:
            stmt = stmt.where(Driver.is_active.is_(active_only))
        res = await self.session.execute(
            stmt.order_by(Driver.last_name.asc(), Driver.first_name.asc())
        )
        return list(res.scalars().all())

    async def get_driver(self, driver_id: int) -> Driver | None:
        res = await self.session.execute(
            select(Driver).where(Driver.id == driver_id, Driver.is_deleted.is_(False))
        )
        return res.scalar_one_or_none()

    async def list_constructors(
        self, active_only: bool | None = None
    ) -> list[Constructor]:
        stmt = select(Constructor).where(Constructor.is_deleted.is_(False))
        if active_only is not None:
            stmt = stmt.where(Constructor.is_active.is_(active_only))
        res = await self.session.execute(stmt.order_by(Constructor.name.asc()))
        return list(res.scalars().all())

    async def get_constructor(self, constructor_id: int) -> Constructor | None:
        res = await self.session.execute(
            select(Constructor).where(
                Constructor.id == constructor_id,
                Constructor.is_deleted.is_(False),
            )
        )
        return res.scalar_one_or_none()

    async def get_entity(self, model: type, entity_id: int):
        """Catalog row of either kind, ``None`` when missing or soft-deleted."""
        res = await self.session.execute(
            select(model).where(model.id == entity_id, model.is_deleted.is_(False))
        )
        return res.scalar_one_or_none()
