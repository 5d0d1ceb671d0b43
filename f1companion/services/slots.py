import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from f1companion.core.audit import stamp_created
from f1companion.core.errors import (
    EntityAlreadyOnTeamError,
    InvalidSlotPositionError,
    NotFoundError,
    SlotOccupiedError,
    TeamOwnershipError,
)
from f1companion.models.slot_role import SlotRole
from f1companion.models.team import Team
from f1companion.projections import slot_sequence
from f1companion.repository.catalog import CatalogRepository
from f1companion.repository.teams import TeamRepository

logger = logging.getLogger(__name__)


class SlotService:
    """Fixed-size roster seats per team: drivers 0-4, constructors 0-1.

    A seat is never updated in place; changing a pick is remove + assign.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.teams = TeamRepository(session)
        self.catalog = CatalogRepository(session)

    @staticmethod
    def _check_owner(team: Team, user_id: int) -> None:
        if team.user_id != user_id:
            logger.warning(
                "User %s attempted to modify team %s owned by %s",
                user_id,
                team.id,
                team.user_id,
            )
            raise TeamOwnershipError(team.id, team.user_id, user_id)

    @staticmethod
    def _check_position(role: SlotRole, slot_position: int) -> None:
        if not 0 <= slot_position <= role.max_position:
            logger.warning("Invalid slot position %s for %s", slot_position, role.name)
            raise InvalidSlotPositionError(slot_position, role.max_position, role.name)

    async def assign(
        self,
        team: Team,
        role: SlotRole,
        entity_id: int,
        slot_position: int,
        acting_user_id: int,
    ):
        self._check_owner(team, acting_user_id)
        self._check_position(role, slot_position)
        team_id = team.id

        if await self.teams.get_slot_at(team_id, role, slot_position):
            logger.warning("Slot %s already occupied on team %s", slot_position, team_id)
            raise SlotOccupiedError(slot_position, team_id)

        if await self.teams.get_slot_for_entity(team_id, role, entity_id):
            logger.warning("%s %s already on team %s", role.name, entity_id, team_id)
            raise EntityAlreadyOnTeamError(entity_id, role.name, team_id)

        entity = await self.catalog.get_entity(role.catalog_model, entity_id)
        if entity is None:
            raise NotFoundError(f"{role.name.capitalize()} {entity_id} not found")

        slot = role.slot_model(
            team_id=team_id,
            slot_position=slot_position,
            **{role.entity_column: entity_id},
        )
        stamp_created(slot, acting_user_id)
        self.teams.add_slot(slot)

        try:
            await self.session.commit()
        except IntegrityError as e:
            # a concurrent request took the seat or the entity in between
            await self.session.rollback()
            if await self.teams.get_slot_at(team_id, role, slot_position):
                raise SlotOccupiedError(slot_position, team_id) from e
            raise EntityAlreadyOnTeamError(entity_id, role.name, team_id) from e

        logger.info(
            "%s %s added to team %s at slot %s",
            role.name.capitalize(),
            entity_id,
            team_id,
            slot_position,
        )
        return slot

    async def remove(
        self,
        team: Team,
        role: SlotRole,
        slot_position: int,
        acting_user_id: int,
    ) -> bool:
        """Empty a seat. Returns ``False`` when it was already empty."""
        self._check_owner(team, acting_user_id)
        self._check_position(role, slot_position)
        team_id = team.id

        slot = await self.teams.get_slot_at(team_id, role, slot_position)
        if slot is None:
            logger.info("Slot %s on team %s already empty", slot_position, team_id)
            return False

        await self.teams.delete_slot(slot)
        await self.session.commit()

        logger.info(
            "%s removed from team %s at slot %s",
            role.name.capitalize(),
            team_id,
            slot_position,
        )
        return True

    async def list_slots(self, team: Team, role: SlotRole) -> list:
        """``role.size`` entries in seat order; empty seats are ``None``."""
        slots = await self.teams.list_slots(team.id, role)
        return [
            seat[0] if seat else None for seat in slot_sequence(role, slots)
        ]
