"""
Tests for task creation, visibility, edits, status changes and deletion.
"""
from datetime import UTC, datetime, timedelta

import pytest

from .conftest import add_member, create_project, create_task


@pytest.fixture
async def project(alice, bob):
    project = await create_project(alice, "Apollo")
    await add_member(alice, project["id"], "bob@example.com")
    return project


async def test_create_task_defaults(alice, project):
    task = await create_task(alice, project["id"], "Launch", description="Go")
    assert task["status"] == "TODO"
    assert task["priority"] == "MEDIUM"
    assert task["creator_id"] == alice.user["id"]
    assert task["assignee_id"] is None


async def test_create_task_validation(alice, carol, project):
    pid = project["id"]
    assert (await alice.post(f"/api/task/{pid}", json={"title": ""})).status_code == 422
    assert (await alice.post(f"/api/task/{pid}", json={"title": "t" * 101})).status_code == 422
    assert (await alice.post(f"/api/task/{pid}", json={"title": "x", "description": "d" * 501})).status_code == 422
    assert (await alice.post(f"/api/task/{pid}", json={"title": "x", "priority": "SOMEDAY"})).status_code == 422

    past = (datetime.now(UTC) - timedelta(hours=1)).isoformat()
    assert (await alice.post(f"/api/task/{pid}", json={"title": "x", "due_date": past})).status_code == 400

    outsider = await alice.post(f"/api/task/{pid}", json={"title": "x", "assignee_id": carol.user["id"]})
    assert outsider.status_code == 400

    assert (await carol.post(f"/api/task/{pid}", json={"title": "x"})).status_code == 403


async def test_create_task_with_assignee_and_due_date(alice, bob, project):
    due = datetime.now(UTC) + timedelta(days=2)
    task = await create_task(bob, project["id"], "Fuel", assignee_id=bob.user["id"],
                             priority="URGENT", due_date=due.isoformat())
    assert task["assignee_id"] == bob.user["id"]
    assert task["priority"] == "URGENT"
    stored = datetime.fromisoformat(task["due_date"])
    assert stored.tzinfo is None
    assert abs(stored - due.replace(tzinfo=None)) < timedelta(seconds=1)


async def test_visibility(alice, bob, carol, project):
    task = await create_task(alice, project["id"], "Launch")
    other = await create_project(carol, "Gemini")
    await create_task(carol, other["id"], "Orbit")

    assert [t["title"] for t in (await bob.get("/api/task")).json()] == ["Launch"]
    assert [t["title"] for t in (await carol.get("/api/task")).json()] == ["Orbit"]
    filtered = await carol.get("/api/task", params={"project_id": project["id"]})
    assert filtered.json() == []

    assert (await bob.get(f"/api/task/{task['id']}")).status_code == 200
    assert (await carol.get(f"/api/task/{task['id']}")).status_code == 404


async def test_tasks_are_listed_newest_first(alice, project):
    for title in ["one", "two", "three"]:
        await create_task(alice, project["id"], title)
    titles = [t["title"] for t in (await alice.get("/api/task", params={"project_id": project["id"]})).json()]
    assert titles == ["three", "two", "one"]


async def test_status_change_permissions(alice, bob, carol, project):
    task = await create_task(bob, project["id"], "Fuel")
    foreign = await create_task(alice, project["id"], "Paint")
    url = f"/api/task/{task['id']}/status"

    # project creator may move anyone's task
    moved = await alice.patch(url, json={"status": "IN_PROGRESS"})
    assert moved.status_code == 200
    assert moved.json()["status"] == "IN_PROGRESS"
    assert datetime.fromisoformat(moved.json()["last_modified_date"]) > \
        datetime.fromisoformat(task["last_modified_date"])

    # a plain member may not move a task they neither created nor own
    assert (await bob.patch(f"/api/task/{foreign['id']}/status", json={"status": "DONE"})).status_code == 403
    # invisible task
    assert (await carol.patch(url, json={"status": "DONE"})).status_code == 404
    # malformed status
    assert (await bob.patch(url, json={"status": "ARCHIVED"})).status_code == 400
    missing = await bob.patch("/api/task/00000000-0000-0000-0000-000000000000/status", json={"status": "DONE"})
    assert missing.status_code == 404


async def test_assignee_may_change_status(alice, bob, project):
    task = await create_task(alice, project["id"], "Dock", assignee_id=bob.user["id"])
    response = await bob.patch(f"/api/task/{task['id']}/status", json={"status": "REVIEW"})
    assert response.status_code == 200
    assert response.json()["status"] == "REVIEW"


async def test_edit_task(alice, bob, carol, project):
    task = await create_task(bob, project["id"], "Fuel")
    url = f"/api/task/{task['id']}"

    edited = await bob.patch(url, json={"title": "Refuel", "priority": "HIGH",
                                        "assignee_id": alice.user["id"]})
    assert edited.status_code == 200
    assert edited.json()["title"] == "Refuel"
    assert edited.json()["priority"] == "HIGH"
    assert edited.json()["creator_id"] == bob.user["id"]

    assert (await bob.patch(url, json={})).status_code == 400
    assert (await bob.patch(url, json={"assignee_id": carol.user["id"]})).status_code == 400
    assert (await carol.patch(url, json={"title": "Nope"})).status_code == 404


async def test_only_creator_deletes(alice, bob, project):
    task = await create_task(bob, project["id"], "Fuel")
    url = f"/api/task/{task['id']}"
    assert (await alice.delete(url)).status_code == 403
    assert (await bob.delete(url)).status_code == 200
    assert (await bob.get(url)).status_code == 404


async def test_task_changes_mark_the_project(alice, project, redis):
    await create_task(alice, project["id"], "Launch")
    marker = await redis.get(f"project_task_update:{project['id']}")
    assert marker is not None
    await create_task(alice, project["id"], "Land")
    assert await redis.get(f"project_task_update:{project['id']}") != marker
