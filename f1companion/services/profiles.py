import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from f1companion.core.audit import stamp_updated, utcnow
from f1companion.core.errors import AlreadyRegisteredError, ValidationError
from f1companion.models.user import Account, UserProfile
from f1companion.repository.users import ProfileRepository

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("display_name", "email", "first_name", "last_name", "avatar_url")


class ProfileService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.profiles = ProfileRepository(session)

    async def register(
        self,
        account_id: str,
        email: str | None,
        display_name: str | None = None,
    ) -> UserProfile:
        """Create the account and its profile together."""
        logger.info("Creating user profile for account %s", account_id)

        if not email:
            raise ValidationError("An email address is required to register")

        if await self.profiles.get_by_account_id(account_id) is not None:
            raise AlreadyRegisteredError(account_id)

        now = utcnow()
        if await self.profiles.get_account(account_id) is None:
            self.profiles.add_account(
                Account(
                    id=account_id,
                    created_at=now,
                    updated_at=now,
                    is_active=True,
                    last_login_at=now,
                )
            )

        profile = UserProfile(
            account_id=account_id,
            email=email,
            display_name=display_name,
            created_at=now,
        )
        self.profiles.add_profile(profile)

        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            logger.warning("Profile creation for account %s lost a race", account_id)
            raise AlreadyRegisteredError(account_id) from e

        logger.info(
            "Created user profile %s for account %s", profile.id, account_id
        )
        return profile

    async def update_profile(self, profile: UserProfile, changes: dict) -> UserProfile:
        """Apply non-null ``changes``; unknown keys are ignored."""
        for field in UPDATABLE_FIELDS:
            value = changes.get(field)
            if value is not None:
                setattr(profile, field, value)
        stamp_updated(profile)

        await self.session.commit()
        logger.info("Updated user profile %s", profile.id)
        return profile
