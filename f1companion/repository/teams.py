from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from f1companion.models.slot_role import SlotRole
from f1companion.models.team import Team


class TeamRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_team(self, team_id: int) -> Team | None:
        res = await self.session.execute(
            select(Team).where(Team.id == team_id, Team.is_deleted.is_(False))
        )
        return res.scalar_one_or_none()

    async def get_by_user(self, user_id: int) -> Team | None:
        res = await self.session.execute(
            select(Team).where(Team.user_id == user_id, Team.is_deleted.is_(False))
        )
        return res.scalar_one_or_none()

    async def list_teams(self) -> list[Team]:
        res = await self.session.execute(
            select(Team).where(Team.is_deleted.is_(False)).order_by(Team.id.asc())
        )
        return list(res.scalars().all())

    def add(self, team: Team) -> None:
        self.session.add(team)

    # --- roster slots -----------------------------------------------------

    async def list_slots(self, team_id: int, role: SlotRole) -> list:
        """``(slot, catalog_row)`` pairs for the team, ordered by slot position."""
        slot_model = role.slot_model
        catalog_model = role.catalog_model
        res = await self.session.execute(
            select(slot_model, catalog_model)
            .join(
                catalog_model,
                getattr(slot_model, role.entity_column) == catalog_model.id,
            )
            .where(
                slot_model.team_id == team_id,
                slot_model.is_deleted.is_(False),
            )
            .order_by(slot_model.slot_position.asc())
        )
        return [tuple(row) for row in res.all()]

    async def get_slot_at(self, team_id: int, role: SlotRole, slot_position: int):
        slot_model = role.slot_model
        res = await self.session.execute(
            select(slot_model).where(
                slot_model.team_id == team_id,
                slot_model.slot_position == slot_position,
                slot_model.is_deleted.is_(False),
            )
        )
        return res.scalar_one_or_none()

    async def get_slot_for_entity(self, team_id: int, role: SlotRole, entity_id: int):
        slot_model = role.slot_model
        res = await self.session.execute(
            select(slot_model).where(
                slot_model.team_id == team_id,
                getattr(slot_model, role.entity_column) == entity_id,
                slot_model.is_deleted.is_(False),
            )
        )
        return res.scalar_one_or_none()

    def add_slot(self, slot) -> None:
        self.session.add(slot)

    async def delete_slot(self, slot) -> None:
        await self.session.delete(slot)
