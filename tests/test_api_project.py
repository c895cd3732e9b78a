"""
Tests for project CRUD and membership management.
"""
from .conftest import add_member, create_project, create_task


async def test_create_project_adds_creator_as_owner(alice):
    project = await create_project(alice, "Apollo", description="Moon", color="blue")
    assert project["name"] == "Apollo"
    assert project["is_creator"] is True
    assert [(m["user"]["email"], m["role"]) for m in project["members"]] == [("alice@example.com", "OWNER")]


async def test_project_validation(alice):
    assert (await alice.post("/api/project", json={"name": ""})).status_code == 422
    assert (await alice.post("/api/project", json={"name": "x" * 51})).status_code == 422
    assert (await alice.post("/api/project", json={"name": "ok", "description": "d" * 201})).status_code == 422
    await create_project(alice, "Apollo")
    duplicate = await alice.post("/api/project", json={"name": "Apollo"})
    assert duplicate.status_code == 400


async def test_list_only_member_projects(alice, bob):
    mine = await create_project(alice, "Apollo")
    await create_project(bob, "Gemini")
    names = [p["name"] for p in (await alice.get("/api/project")).json()]
    assert names == ["Apollo"]

    await add_member(alice, mine["id"], "bob@example.com")
    projects = (await bob.get("/api/project")).json()
    assert sorted(p["name"] for p in projects) == ["Apollo", "Gemini"]
    shared = next(p for p in projects if p["name"] == "Apollo")
    assert shared["is_creator"] is False


async def test_get_project_requires_membership(alice, bob):
    project = await create_project(alice, "Apollo")
    await create_task(alice, project["id"], "Launch")
    assert (await bob.get(f"/api/project/{project['id']}")).status_code == 403

    data = (await alice.get(f"/api/project/{project['id']}")).json()
    assert [t["title"] for t in data["tasks"]] == ["Launch"]
    assert (await alice.get("/api/project/00000000-0000-0000-0000-000000000000")).status_code == 404


async def test_only_creator_edits_and_deletes(alice, bob):
    project = await create_project(alice, "Apollo")
    await add_member(alice, project["id"], "bob@example.com")

    assert (await bob.patch(f"/api/project/{project['id']}", json={"name": "Hijack"})).status_code == 403
    assert (await bob.delete(f"/api/project/{project['id']}")).status_code == 403

    edited = await alice.patch(f"/api/project/{project['id']}", json={"description": "To the moon"})
    assert edited.status_code == 200
    assert edited.json()["description"] == "To the moon"
    assert (await alice.patch(f"/api/project/{project['id']}", json={})).status_code == 400

    await create_task(alice, project["id"], "Launch")
    assert (await alice.delete(f"/api/project/{project['id']}")).status_code == 200
    assert (await alice.get(f"/api/project/{project['id']}")).status_code == 404
    assert (await alice.get("/api/task")).json() == []


async def test_member_management(alice, bob, carol):
    project = await create_project(alice, "Apollo")
    pid = project["id"]

    member = await add_member(alice, pid, "bob@example.com")
    assert member["role"] == "MEMBER"
    assert (await alice.post(f"/api/project/member/{pid}", json={"email": "bob@example.com"})).status_code == 409
    assert (await alice.post(f"/api/project/member/{pid}", json={"email": "nobody@example.com"})).status_code == 404
    assert (await bob.post(f"/api/project/member/{pid}", json={"email": "carol@example.com"})).status_code == 403

    members = (await bob.get(f"/api/project/member/{pid}")).json()
    assert [m["user"]["email"] for m in members] == ["alice@example.com", "bob@example.com"]
    assert (await carol.get(f"/api/project/member/{pid}")).status_code == 403


async def test_member_removal_rules(alice, bob, carol):
    project = await create_project(alice, "Apollo")
    pid = project["id"]
    await add_member(alice, pid, "bob@example.com")
    await add_member(alice, pid, "carol@example.com")

    creator = await alice.delete(f"/api/project/member/{pid}/{alice.user['id']}")
    assert creator.status_code == 400

    await create_task(alice, pid, "Review", assignee_id=bob.user["id"])
    busy = await alice.delete(f"/api/project/member/{pid}/{bob.user['id']}")
    assert busy.status_code == 409

    assert (await bob.delete(f"/api/project/member/{pid}/{carol.user['id']}")).status_code == 403
    removed = await alice.delete(f"/api/project/member/{pid}/{carol.user['id']}")
    assert removed.status_code == 200
    assert (await carol.get(f"/api/project/{pid}")).status_code == 403
    again = await alice.delete(f"/api/project/member/{pid}/{carol.user['id']}")
    assert again.status_code == 404
