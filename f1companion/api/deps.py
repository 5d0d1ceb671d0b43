from dataclasses import dataclass
from typing import Annotated

import jwt
from fastapi import Depends, Path
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from f1companion.core import config
from f1companion.core.errors import AuthenticationError, ProfileRequiredError
from f1companion.db.database import get_db
from f1companion.models.user import UserProfile
from f1companion.repository.users import ProfileRepository
from f1companion.schemas.common import MAX_ID

bearer_scheme = HTTPBearer(auto_error=False)

# ids in the URL path; out-of-range values never reach the database
IdPath = Annotated[int, Path(gt=0, le=MAX_ID)]


@dataclass(frozen=True)
class AuthClaims:
    account_id: str
    email: str | None


def decode_access_token(token: str) -> AuthClaims:
    """Verify a Supabase access token and pull out the subject and email."""
    if not config.SUPABASE_JWT_SECRET:
        raise RuntimeError("SUPABASE_JWT_SECRET is not set. Put it into .env")
    try:
        payload = jwt.decode(
            token,
            config.SUPABASE_JWT_SECRET,
            algorithms=["HS256"],
            audience=config.SUPABASE_JWT_AUDIENCE,
        )
    except jwt.ExpiredSignatureError as e:
        raise AuthenticationError("Access token has expired.") from e
    except jwt.InvalidTokenError as e:
        raise AuthenticationError("Valid authentication token is required.") from e

    subject = payload.get("sub")
    if not subject:
        raise AuthenticationError("Access token has no subject.")
    return AuthClaims(account_id=str(subject), email=payload.get("email"))


async def get_claims(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> AuthClaims:
    if credentials is None:
        raise AuthenticationError("Valid authentication token is required.")
    return decode_access_token(credentials.credentials)


async def get_current_user(
    claims: AuthClaims = Depends(get_claims),
    db: AsyncSession = Depends(get_db),
) -> UserProfile:
    user = await ProfileRepository(db).get_by_account_id(claims.account_id)
    if user is None:
        # the frontend calls /me/register right after sign-up
        raise ProfileRequiredError(claims.account_id)
    return user
