from datetime import datetime, timedelta, timezone

import pytest

from clubify.database import database


def _deadline(days: int) -> str:
    return (datetime.now(timezone.utc) + timedelta(days=days)).isoformat()


async def _create_task(api_client, assigner, assignee, **overrides):
    payload = {
        "title": "Prepare flyers",
        "description": "Print 100 copies",
        "assignedTo": assignee["id"],
        "club": "default-club",
        "deadline": _deadline(7),
    }
    payload.update(overrides)
    response = await api_client.post("/api/tasks", json=payload, headers=assigner["headers"])
    assert response.status_code == 201, response.text
    return response.json()["task"]


@pytest.mark.asyncio
async def test_lead_assigns_task_in_default_club(api_client, lead, member):
    task = await _create_task(api_client, lead, member, priority="high")

    assert task["status"] == "pending"
    assert task["priority"] == "high"
    assert task["assignedBy"]["id"] == lead["id"]
    assert task["assignedTo"] == {"id": member["id"], "name": member["name"], "email": member["email"], "role": None}
    assert task["club"]["name"] == "Default Club"
    assert task["notes"] == []
    assert task["completedAt"] is None


@pytest.mark.asyncio
async def test_task_visibility_by_role(api_client, make_user, board):
    lead_a = await make_user("lead")
    lead_b = await make_user("lead")
    member_a = await make_user("member")
    member_b = await make_user("member")

    await _create_task(api_client, lead_a, member_a, title="A")
    await _create_task(api_client, lead_b, member_b, title="B")

    async def titles(user):
        response = await api_client.get("/api/tasks", headers=user["headers"])
        assert response.status_code == 200
        return sorted(t["title"] for t in response.json()["tasks"])

    assert await titles(member_a) == ["A"]
    assert await titles(member_b) == ["B"]
    assert await titles(lead_a) == ["A"]
    assert await titles(board) == ["A", "B"]


@pytest.mark.asyncio
async def test_tasks_sorted_by_deadline(api_client, lead, member):
    await _create_task(api_client, lead, member, title="later", deadline=_deadline(10))
    await _create_task(api_client, lead, member, title="sooner", deadline=_deadline(1))

    response = await api_client.get("/api/tasks", headers=member["headers"])
    assert [t["title"] for t in response.json()["tasks"]] == ["sooner", "later"]


@pytest.mark.asyncio
async def test_assignee_completes_task_with_note(api_client, lead, member):
    task = await _create_task(api_client, lead, member)

    response = await api_client.put(
        f"/api/tasks/{task['id']}",
        json={"status": "completed", "notes": "  Done and delivered  "},
        headers=member["headers"],
    )
    assert response.status_code == 200
    updated = response.json()["task"]
    assert updated["status"] == "completed"
    assert updated["completedAt"] is not None
    assert len(updated["notes"]) == 1
    assert updated["notes"][0]["content"] == "Done and delivered"
    assert updated["notes"][0]["user"]["id"] == member["id"]

    # A blank note changes nothing
    again = await api_client.put(
        f"/api/tasks/{task['id']}", json={"notes": "   "}, headers=lead["headers"]
    )
    assert again.status_code == 200
    assert len(again.json()["task"]["notes"]) == 1


@pytest.mark.asyncio
async def test_only_assigner_or_assignee_may_update(api_client, lead, member, make_user):
    task = await _create_task(api_client, lead, member)
    outsider = await make_user("board")

    response = await api_client.put(
        f"/api/tasks/{task['id']}", json={"status": "in_progress"}, headers=outsider["headers"]
    )
    assert response.status_code == 403
    assert response.json()["message"] == "Not authorized to update this task"

    missing = await api_client.put("/api/tasks/nope", json={"status": "in_progress"}, headers=lead["headers"])
    assert missing.status_code == 404
    assert missing.json()["message"] == "Task not found"


@pytest.mark.asyncio
async def test_create_task_errors(api_client, lead, member):
    unknown_user = await api_client.post(
        "/api/tasks",
        json={"title": "X", "assignedTo": "ghost", "deadline": _deadline(1)},
        headers=lead["headers"],
    )
    assert unknown_user.status_code == 404
    assert unknown_user.json()["message"] == "Assigned user not found"

    unknown_club = await api_client.post(
        "/api/tasks",
        json={"title": "X", "assignedTo": member["id"], "deadline": _deadline(1), "club": "ghost-club"},
        headers=lead["headers"],
    )
    assert unknown_club.status_code == 404
    assert unknown_club.json()["message"] == "Club not found"

    no_deadline = await api_client.post(
        "/api/tasks", json={"title": "X", "assignedTo": member["id"]}, headers=lead["headers"]
    )
    assert no_deadline.status_code == 400
    assert no_deadline.json() == {"success": False, "message": "deadline is required"}

    bad_priority = await api_client.post(
        "/api/tasks",
        json={"title": "X", "assignedTo": member["id"], "deadline": _deadline(1), "priority": "asap"},
        headers=lead["headers"],
    )
    assert bad_priority.status_code == 400
    assert bad_priority.json()["success"] is False


@pytest.mark.asyncio
async def test_reopening_clears_completion_time(api_client, lead, member):
    task = await _create_task(api_client, lead, member)
    url = f"/api/tasks/{task['id']}"

    done = await api_client.put(url, json={"status": "completed"}, headers=member["headers"])
    assert done.json()["task"]["completedAt"] is not None

    reopened = await api_client.put(url, json={"status": "in_progress"}, headers=lead["headers"])
    assert reopened.status_code == 200
    assert reopened.json()["task"]["status"] == "in_progress"
    assert reopened.json()["task"]["completedAt"] is None


@pytest.mark.asyncio
async def test_failed_note_rolls_back_status(api_client, error_client, lead, member, monkeypatch):
    task = await _create_task(api_client, lead, member)
    execute = database.execute

    async def execute_or_fail(query, values=None):
        if str(query).startswith("INSERT INTO task_notes"):
            raise RuntimeError("disk I/O error")
        return await execute(query, values)

    monkeypatch.setattr(database, "execute", execute_or_fail)

    response = await error_client.put(
        f"/api/tasks/{task['id']}",
        json={"status": "completed", "notes": "Done"},
        headers=member["headers"],
    )
    assert response.status_code == 500
    assert response.json()["message"] == "Something went wrong!"

    listed = await api_client.get("/api/tasks", headers=member["headers"])
    stored = listed.json()["tasks"][0]
    assert stored["status"] == "pending"
    assert stored["completedAt"] is None
    assert stored["notes"] == []
