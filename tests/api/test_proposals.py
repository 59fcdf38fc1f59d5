import pytest

from clubify.config import settings
from clubify.database import database


async def _submit(api_client, user, **overrides):
    payload = {
        "title": "Monthly hackathon",
        "description": "Run a hackathon on the first Saturday of every month",
        "category": "event",
        "estimatedCost": "",
        "requirements": "Room booking\n\nPizza\n",
        "benefits": ["More members"],
    }
    payload.update(overrides)
    response = await api_client.post("/api/proposals", json=payload, headers=user["headers"])
    assert response.status_code == 201, response.text
    return response.json()["proposal"]


@pytest.mark.asyncio
async def test_member_submits_proposal(api_client, member):
    proposal = await _submit(api_client, member)

    assert proposal["status"] == "pending"
    assert proposal["proposer"]["id"] == member["id"]
    assert proposal["requirements"] == ["Room booking", "Pizza"]
    assert proposal["benefits"] == ["More members"]
    assert proposal["risks"] == []
    assert proposal["estimatedCost"] is None
    assert proposal["reviews"] == []


@pytest.mark.asyncio
async def test_members_only_see_their_own(api_client, make_user, lead):
    author = await make_user("member")
    other = await make_user("member")
    await _submit(api_client, author, title="Mine")
    await _submit(api_client, other, title="Theirs")

    own = await api_client.get("/api/proposals", headers=author["headers"])
    assert [p["title"] for p in own.json()["proposals"]] == ["Mine"]

    everything = await api_client.get("/api/proposals", headers=lead["headers"])
    assert [p["title"] for p in everything.json()["proposals"]] == ["Theirs", "Mine"]


@pytest.mark.asyncio
async def test_review_workflow(api_client, member, lead, board):
    proposal = await _submit(api_client, member)
    url = f"/api/proposals/{proposal['id']}/review"

    revision = await api_client.put(
        url, json={"status": "needs_revision", "comments": "Add a budget"}, headers=lead["headers"]
    )
    assert revision.status_code == 200
    reviewed = revision.json()["proposal"]
    assert reviewed["status"] == "pending"
    assert len(reviewed["reviews"]) == 1
    assert reviewed["reviews"][0]["reviewer"]["id"] == lead["id"]
    assert reviewed["reviews"][0]["comments"] == "Add a budget"

    approval = await api_client.put(url, json={"status": "approved"}, headers=board["headers"])
    approved = approval.json()["proposal"]
    assert approved["status"] == "approved"
    assert [r["status"] for r in approved["reviews"]] == ["needs_revision", "approved"]


@pytest.mark.asyncio
async def test_review_permissions_and_errors(api_client, member, lead):
    proposal = await _submit(api_client, member)

    forbidden = await api_client.put(
        f"/api/proposals/{proposal['id']}/review", json={"status": "approved"}, headers=member["headers"]
    )
    assert forbidden.status_code == 403

    missing = await api_client.put(
        "/api/proposals/ghost/review", json={"status": "rejected"}, headers=lead["headers"]
    )
    assert missing.status_code == 404
    assert missing.json()["message"] == "Proposal not found"

    invalid = await api_client.put(
        f"/api/proposals/{proposal['id']}/review", json={"status": "maybe"}, headers=lead["headers"]
    )
    assert invalid.status_code == 400


@pytest.fixture
def failing_status_update(monkeypatch):
    execute = database.execute

    async def execute_or_fail(query, values=None):
        if str(query).startswith("UPDATE proposals"):
            raise RuntimeError("disk I/O error")
        return await execute(query, values)

    monkeypatch.setattr(database, "execute", execute_or_fail)


@pytest.mark.asyncio
async def test_failed_review_leaves_proposal_untouched(api_client, error_client, member, lead,
                                                       failing_status_update, monkeypatch):
    monkeypatch.setattr(settings, "DEBUG", True)
    proposal = await _submit(api_client, member)

    response = await error_client.put(
        f"/api/proposals/{proposal['id']}/review", json={"status": "approved"}, headers=lead["headers"]
    )
    assert response.status_code == 500
    assert response.headers["content-type"].startswith("application/json")
    assert response.json() == {
        "success": False,
        "message": "Something went wrong!",
        "error": "disk I/O error",
    }

    listed = await api_client.get("/api/proposals", headers=member["headers"])
    stored = listed.json()["proposals"][0]
    assert stored["status"] == "pending"
    assert stored["reviews"] == []
