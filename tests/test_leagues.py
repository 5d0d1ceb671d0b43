import asyncio

import pytest


async def create_league(client, headers, **fields):
    payload = {"name": "Sunday League", **fields}
    resp = await client.post("/api/leagues", json=payload, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()


async def team_id(client, headers):
    resp = await client.get("/api/me/team", headers=headers)
    return resp.json()["id"]


@pytest.mark.asyncio
async def test_create_league(client, signup):
    owner = await signup("owner", first_name="Christian", last_name="Horner")

    league = await create_league(client, owner, name="  Paddock Club ")
    assert league["name"] == "Paddock Club"
    assert league["maxTeams"] == 15
    assert league["teamCount"] == 0
    assert league["isPrivate"] is False
    assert league["ownerName"] == "Christian Horner"
    assert "ownerId" not in league


@pytest.mark.asyncio
async def test_create_league_validation(client, signup):
    owner = await signup("owner")

    resp = await client.post(
        "/api/leagues", json={"name": "Big", "maxTeams": 0}, headers=owner
    )
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_join_public_league(client, signup):
    owner = await signup("owner")
    alice = await signup("alice", team_name="Alice GP")
    league = await create_league(client, owner)

    resp = await client.post(f"/api/leagues/{league['id']}/join", headers=alice)
    assert resp.status_code == 200
    assert resp.json()["teamCount"] == 1

    resp = await client.get("/api/me/leagues", headers=alice)
    assert [lg["id"] for lg in resp.json()] == [league["id"]]


@pytest.mark.asyncio
async def test_private_league_needs_invite(client, signup):
    owner = await signup("owner")
    alice = await signup("alice", team_name="Alice GP")
    league = await create_league(client, owner, isPrivate=True)

    resp = await client.post(f"/api/leagues/{league['id']}/join", headers=alice)
    assert resp.status_code == 403
    assert resp.json()["title"] == "Private League"


@pytest.mark.asyncio
async def test_owner_team_joins_like_everyone_else(client, signup):
    owner = await signup("owner", team_name="Owner Racing")
    alice = await signup("alice", team_name="Alice GP")
    league = await create_league(client, owner, maxTeams=1)

    resp = await client.post(f"/api/leagues/{league['id']}/join", headers=owner)
    assert resp.status_code == 200

    resp = await client.post(f"/api/leagues/{league['id']}/join", headers=alice)
    assert resp.status_code == 409
    assert resp.json()["title"] == "League Full"


@pytest.mark.asyncio
async def test_available_leagues(client, signup):
    owner = await signup("owner")
    alice = await signup("alice", team_name="Alice GP")
    bob = await signup("bob", team_name="Bob GP")

    joined = await create_league(client, owner, name="Monaco Friends")
    full = await create_league(client, owner, name="Monza Club", maxTeams=1)
    await create_league(client, owner, name="Secret Society", isPrivate=True)
    open_league = await create_league(client, owner, name="Open Paddock")

    assert (
        await client.post(f"/api/leagues/{joined['id']}/join", headers=alice)
    ).status_code == 200
    assert (
        await client.post(f"/api/leagues/{full['id']}/join", headers=bob)
    ).status_code == 200

    resp = await client.get("/api/leagues/available", headers=alice)
    assert resp.status_code == 200
    assert [lg["id"] for lg in resp.json()] == [open_league["id"]]

    resp = await client.get(
        "/api/leagues/available", params={"search": "MONACO"}, headers=bob
    )
    assert [lg["name"] for lg in resp.json()] == ["Monaco Friends"]


@pytest.mark.asyncio
async def test_list_leagues(client, signup):
    owner = await signup("owner")
    other = await signup("other")
    mine = await create_league(client, owner, name="Mine")
    await create_league(client, other, name="Theirs")

    resp = await client.get("/api/leagues", headers=owner)
    assert [lg["name"] for lg in resp.json()] == ["Mine", "Theirs"]

    resp = await client.get("/api/leagues", params={"owned": True}, headers=owner)
    assert [lg["id"] for lg in resp.json()] == [mine["id"]]


@pytest.mark.asyncio
async def test_owner_adds_and_removes_team(client, signup):
    owner = await signup("owner")
    alice = await signup("alice", team_name="Alice GP")
    bob = await signup("bob", team_name="Bob GP")
    league = await create_league(client, owner, isPrivate=True)
    alice_team = await team_id(client, alice)

    resp = await client.post(
        f"/api/leagues/{league['id']}/teams",
        json={"teamId": alice_team},
        headers=bob,
    )
    assert resp.status_code == 403

    resp = await client.post(
        f"/api/leagues/{league['id']}/teams",
        json={"teamId": alice_team},
        headers=owner,
    )
    assert resp.status_code == 201
    assert resp.json()["teamCount"] == 1

    resp = await client.post(
        f"/api/leagues/{league['id']}/teams", json={"teamId": 999}, headers=owner
    )
    assert resp.status_code == 404

    resp = await client.delete(
        f"/api/leagues/{league['id']}/teams/{alice_team}", headers=bob
    )
    assert resp.status_code == 403

    resp = await client.delete(
        f"/api/leagues/{league['id']}/teams/{alice_team}", headers=owner
    )
    assert resp.status_code == 204

    resp = await client.delete(
        f"/api/leagues/{league['id']}/teams/{alice_team}", headers=owner
    )
    assert resp.status_code == 404

    resp = await client.get(f"/api/leagues/{league['id']}", headers=owner)
    assert resp.json()["teamCount"] == 0
    assert resp.json()["teams"] == []


@pytest.mark.asyncio
async def test_team_owner_can_leave(client, signup):
    owner = await signup("owner")
    alice = await signup("alice", team_name="Alice GP")
    league = await create_league(client, owner)
    await client.post(f"/api/leagues/{league['id']}/join", headers=alice)

    resp = await client.delete(
        f"/api/leagues/{league['id']}/teams/{await team_id(client, alice)}",
        headers=alice,
    )
    assert resp.status_code == 204

    resp = await client.get("/api/me/leagues", headers=alice)
    assert resp.json() == []


@pytest.mark.asyncio
async def test_delete_league(client, signup):
    owner = await signup("owner")
    alice = await signup("alice", team_name="Alice GP")
    league = await create_league(client, owner)
    await client.post(f"/api/leagues/{league['id']}/join", headers=alice)

    resp = await client.delete(f"/api/leagues/{league['id']}", headers=alice)
    assert resp.status_code == 403

    resp = await client.delete(f"/api/leagues/{league['id']}", headers=owner)
    assert resp.status_code == 204

    resp = await client.get(f"/api/leagues/{league['id']}", headers=owner)
    assert resp.status_code == 404
    assert resp.json()["title"] == "League Not Found"

    resp = await client.get("/api/me/leagues", headers=alice)
    assert resp.json() == []


@pytest.mark.asyncio
async def test_owner_add_respects_capacity(client, signup):
    owner = await signup("owner")
    alice = await signup("alice", team_name="Alice GP")
    bob = await signup("bob", team_name="Bob GP")
    league = await create_league(client, owner, isPrivate=True, maxTeams=1)
    url = f"/api/leagues/{league['id']}/teams"

    resp = await client.post(
        url, json={"teamId": await team_id(client, alice)}, headers=owner
    )
    assert resp.status_code == 201

    resp = await client.post(
        url, json={"teamId": await team_id(client, bob)}, headers=owner
    )
    assert resp.status_code == 409
    assert resp.json()["title"] == "League Full"

    resp = await client.get(f"/api/leagues/{league['id']}", headers=owner)
    assert [t["name"] for t in resp.json()["teams"]] == ["Alice GP"]


@pytest.mark.asyncio
async def test_owner_add_existing_member(client, signup):
    owner = await signup("owner")
    alice = await signup("alice", team_name="Alice GP")
    league = await create_league(client, owner)
    url = f"/api/leagues/{league['id']}/teams"
    payload = {"teamId": await team_id(client, alice)}

    assert (await client.post(url, json=payload, headers=owner)).status_code == 201

    resp = await client.post(url, json=payload, headers=owner)
    assert resp.status_code == 409
    assert resp.json()["title"] == "Already in League"

    resp = await client.get(f"/api/leagues/{league['id']}", headers=owner)
    assert resp.json()["teamCount"] == 1


@pytest.mark.asyncio
async def test_concurrent_owner_adds_never_overfill(client, signup):
    owner = await signup("owner")
    league = await create_league(client, owner, maxTeams=2)
    url = f"/api/leagues/{league['id']}/teams"

    team_ids = []
    for i in range(6):
        headers = await signup(f"p{i}", team_name=f"Team {i}")
        team_ids.append(await team_id(client, headers))

    responses = await asyncio.gather(
        *(client.post(url, json={"teamId": tid}, headers=owner) for tid in team_ids)
    )
    codes = sorted(r.status_code for r in responses)
    assert codes == [201] * 2 + [409] * 4
    assert all(
        r.json()["title"] == "League Full" for r in responses if r.status_code == 409
    )

    resp = await client.get(f"/api/leagues/{league['id']}", headers=owner)
    assert resp.json()["teamCount"] == 2


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("method", "path", "payload"),
    [
        ("GET", f"/api/leagues/{2**63}", None),
        ("DELETE", f"/api/leagues/{2**31}", None),
        ("POST", f"/api/leagues/{2**63}/join", None),
        ("POST", "/api/leagues/1/teams", {"teamId": 2**63}),
        ("DELETE", f"/api/leagues/1/teams/{2**63}", None),
        ("GET", f"/api/teams/{2**63}", None),
        ("GET", f"/api/drivers/{2**63}", None),
        ("GET", f"/api/constructors/{2**31}", None),
    ],
)
async def test_ids_beyond_database_range(client, signup, method, path, payload):
    headers = await signup("owner")

    resp = await client.request(method, path, json=payload, headers=headers)
    assert resp.status_code == 422
