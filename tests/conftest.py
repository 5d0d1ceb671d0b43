import os
import time

# config reads these at import time
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["SUPABASE_JWT_SECRET"] = "test-jwt-secret-for-the-f1companion-suite"
os.environ["SUPABASE_JWT_AUDIENCE"] = "authenticated"

import jwt
import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from f1companion import models  # noqa: F401
from f1companion.db.base import Base
from f1companion.db.database import get_db
from f1companion.main import app
from f1companion.models.constructor import Constructor
from f1companion.models.driver import Driver

JWT_SECRET = os.environ["SUPABASE_JWT_SECRET"]


def make_token(
    sub: str, email: str | None = None, *, secret: str = JWT_SECRET, ttl: int = 3600
) -> str:
    payload = {"sub": sub, "aud": "authenticated", "exp": int(time.time()) + ttl}
    if email:
        payload["email"] = email
    return jwt.encode(payload, secret, algorithm="HS256")


def bearer(sub: str, email: str | None = None) -> dict:
    return {"Authorization": f"Bearer {make_token(sub, email or f'{sub}@example.com')}"}


@pytest.fixture
async def engine(tmp_path):
    # a file database so concurrent requests get separate connections
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        connect_args={"timeout": 30},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def catalog(session_factory):
    async with session_factory() as session:
        session.add_all(
            [
                Driver(id=1, first_name="Max", last_name="Verstappen", abbreviation="VER", country_abbreviation="NED"),
                Driver(id=4, first_name="Lando", last_name="Norris", abbreviation="NOR", country_abbreviation="GBR"),
                Driver(id=14, first_name="Fernando", last_name="Alonso", abbreviation="ALO", country_abbreviation="ESP"),
                Driver(id=16, first_name="Charles", last_name="Leclerc", abbreviation="LEC", country_abbreviation="MON"),
                Driver(id=44, first_name="Lewis", last_name="Hamilton", abbreviation="HAM", country_abbreviation="GBR"),
                Driver(id=63, first_name="George", last_name="Russell", abbreviation="RUS", country_abbreviation="GBR"),
                Driver(id=3, first_name="Daniel", last_name="Ricciardo", abbreviation="RIC", country_abbreviation="AUS", is_active=False),
                Constructor(id=1, name="Red Bull", full_name="Oracle Red Bull Racing", country_abbreviation="AUT"),
                Constructor(id=2, name="Ferrari", full_name="Scuderia Ferrari", country_abbreviation="ITA"),
                Constructor(id=3, name="McLaren", full_name="McLaren Formula 1 Team", country_abbreviation="GBR"),
            ]
        )
        await session.commit()


@pytest.fixture
def signup(client):
    """Register a profile for ``sub`` (and optionally a team); returns auth headers."""

    async def _signup(sub: str, *, first_name=None, last_name=None, team_name=None) -> dict:
        headers = bearer(sub)
        resp = await client.post(
            "/api/me/register", json={"displayName": sub}, headers=headers
        )
        assert resp.status_code == 201, resp.text
        if first_name or last_name:
            resp = await client.patch(
                "/api/me/profile",
                json={"firstName": first_name, "lastName": last_name},
                headers=headers,
            )
            assert resp.status_code == 200, resp.text
        if team_name:
            resp = await client.post(
                "/api/teams", json={"name": team_name}, headers=headers
            )
            assert resp.status_code == 201, resp.text
        return headers

    return _signup
