import pytest

from f1companion.core.errors import TeamOwnershipError
from f1companion.models.slot_role import DRIVER_ROLE
from f1companion.repository.teams import TeamRepository
from f1companion.repository.users import ProfileRepository
from f1companion.services.slots import SlotService


async def roster(client, headers):
    resp = await client.get("/api/me/team", headers=headers)
    assert resp.status_code == 200, resp.text
    return resp.json()


async def add_driver(client, headers, driver_id, slot):
    return await client.post(
        "/api/me/team/drivers",
        json={"driverId": driver_id, "slotPosition": slot},
        headers=headers,
    )


@pytest.mark.asyncio
async def test_empty_roster_has_fixed_length(client, catalog, signup):
    headers = await signup("max", team_name="Orange Army")

    data = await roster(client, headers)
    assert data["name"] == "Orange Army"
    assert data["drivers"] == [None] * 5
    assert data["constructors"] == [None] * 2


@pytest.mark.asyncio
async def test_roster_length_with_some_seats_taken(client, catalog, signup):
    headers = await signup("max", team_name="Orange Army")

    assert (await add_driver(client, headers, 16, 3)).status_code == 201
    resp = await client.post(
        "/api/me/team/constructors",
        json={"constructorId": 2, "slotPosition": 1},
        headers=headers,
    )
    assert resp.status_code == 201

    data = resp.json()
    assert len(data["drivers"]) == 5
    assert len(data["constructors"]) == 2
    assert data["drivers"][3]["abbreviation"] == "LEC"
    assert data["drivers"][3]["slotPosition"] == 3
    assert [d for i, d in enumerate(data["drivers"]) if i != 3] == [None] * 4
    assert data["constructors"][0] is None
    assert data["constructors"][1]["name"] == "Ferrari"


@pytest.mark.asyncio
async def test_same_driver_twice_is_rejected(client, catalog, signup):
    headers = await signup("max", team_name="Orange Army")

    assert (await add_driver(client, headers, 44, 0)).status_code == 201

    resp = await add_driver(client, headers, 44, 1)
    assert resp.status_code == 409
    body = resp.json()
    assert body["status"] == 409
    assert body["title"] == "Entity Already on Team"
    assert body["instance"] == "/api/me/team/drivers"

    data = await roster(client, headers)
    assert data["drivers"][0]["id"] == 44
    assert data["drivers"][1] is None


@pytest.mark.asyncio
async def test_occupied_slot_keeps_original_driver(client, catalog, signup):
    headers = await signup("max", team_name="Orange Army")

    assert (await add_driver(client, headers, 1, 0)).status_code == 201

    resp = await add_driver(client, headers, 4, 0)
    assert resp.status_code == 409
    assert resp.json()["title"] == "Slot Already Occupied"

    data = await roster(client, headers)
    assert data["drivers"][0]["id"] == 1
    assert all(d is None for d in data["drivers"][1:])


@pytest.mark.asyncio
async def test_replace_driver_is_remove_then_assign(client, catalog, signup):
    headers = await signup("max", team_name="Orange Army")
    assert (await add_driver(client, headers, 1, 2)).status_code == 201

    resp = await client.delete("/api/me/team/drivers/2", headers=headers)
    assert resp.status_code == 204

    assert (await add_driver(client, headers, 4, 2)).status_code == 201
    data = await roster(client, headers)
    assert data["drivers"][2]["id"] == 4


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("path", "payload"),
    [
        ("/api/me/team/drivers", {"driverId": 1, "slotPosition": 5}),
        ("/api/me/team/drivers", {"driverId": 1, "slotPosition": -1}),
        ("/api/me/team/constructors", {"constructorId": 1, "slotPosition": 2}),
    ],
)
async def test_out_of_range_slot(client, catalog, signup, path, payload):
    headers = await signup("max", team_name="Orange Army")

    resp = await client.post(path, json=payload, headers=headers)
    assert resp.status_code == 400
    assert resp.json()["title"] == "Invalid Slot Position"
    assert set(resp.json()["errors"]) == {"slotPosition"}


@pytest.mark.asyncio
async def test_unknown_driver(client, catalog, signup):
    headers = await signup("max", team_name="Orange Army")

    resp = await add_driver(client, headers, 999, 0)
    assert resp.status_code == 404

    data = await roster(client, headers)
    assert data["drivers"] == [None] * 5


@pytest.mark.asyncio
async def test_remove_empty_slot_is_noop(client, catalog, signup):
    headers = await signup("max", team_name="Orange Army")

    resp = await client.delete("/api/me/team/constructors/1", headers=headers)
    assert resp.status_code == 204

    resp = await client.delete("/api/me/team/constructors/2", headers=headers)
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_roster_requires_team(client, catalog, signup):
    headers = await signup("max")

    resp = await client.get("/api/me/team", headers=headers)
    assert resp.status_code == 404

    resp = await add_driver(client, headers, 1, 0)
    assert resp.status_code == 400
    assert resp.json()["title"] == "Team Required"


@pytest.mark.asyncio
async def test_only_owner_can_change_roster(client, catalog, signup, session_factory):
    await signup("max", team_name="Orange Army")
    await signup("lando")

    async with session_factory() as session:
        profiles = ProfileRepository(session)
        owner = await profiles.get_by_account_id("max")
        intruder = await profiles.get_by_account_id("lando")
        team = await TeamRepository(session).get_by_user(owner.id)

        with pytest.raises(TeamOwnershipError):
            await SlotService(session).assign(team, DRIVER_ROLE, 1, 0, intruder.id)

        slots = await SlotService(session).list_slots(team, DRIVER_ROLE)
        assert slots == [None] * 5


@pytest.mark.asyncio
@pytest.mark.parametrize("driver_id", [0, 2**31, 2**63])
async def test_driver_id_out_of_range(client, catalog, signup, driver_id):
    headers = await signup("max", team_name="Orange Army")

    resp = await add_driver(client, headers, driver_id, 0)
    assert resp.status_code == 422

    data = await roster(client, headers)
    assert data["drivers"] == [None] * 5


@pytest.mark.asyncio
async def test_huge_slot_in_path(client, catalog, signup):
    headers = await signup("max", team_name="Orange Army")

    resp = await client.delete(f"/api/me/team/drivers/{2**63}", headers=headers)
    assert resp.status_code == 400
