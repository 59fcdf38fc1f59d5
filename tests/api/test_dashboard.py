from datetime import datetime, timedelta, timezone

import pytest


def _in_days(days: int) -> str:
    return (datetime.now(timezone.utc) + timedelta(days=days)).isoformat()


@pytest.mark.asyncio
async def test_member_overview(api_client, member, lead):
    await api_client.post(
        "/api/tasks",
        json={"title": "Flyers", "assignedTo": member["id"], "deadline": _in_days(2)},
        headers=lead["headers"],
    )
    await api_client.post("/api/events", json={"title": "Meetup", "startDate": _in_days(5)}, headers=lead["headers"])
    await api_client.post(
        "/api/events", json={"title": "Old", "startDate": _in_days(-5)}, headers=lead["headers"]
    )
    await api_client.post(
        "/api/proposals", json={"title": "Idea", "description": "Details"}, headers=member["headers"]
    )
    await api_client.post(
        "/api/messages",
        json={"recipient": member["id"], "subject": "Hi", "content": "Welcome"},
        headers=lead["headers"],
    )

    response = await api_client.get("/api/dashboard", headers=member["headers"])
    assert response.status_code == 200
    body = response.json()
    assert body["user"]["id"] == member["id"]
    assert body["totalTasks"] == 1
    assert body["pendingTasks"] == 1
    assert body["upcomingEvents"] == 1
    assert body["totalProposals"] == 1
    assert body["pendingProposals"] == 1
    assert body["unreadMessages"] == 1
    assert body["sales"] is None


@pytest.mark.asyncio
async def test_lead_overview_includes_sales(api_client, lead):
    response = await api_client.get("/api/dashboard", headers=lead["headers"])
    assert response.status_code == 200
    assert response.json()["sales"] == {"totalSales": 0, "salesByProduct": {}, "totalTransactions": 0}
