import pytest


async def _send(api_client, sender, recipient, **overrides):
    payload = {"recipient": recipient["id"], "subject": "Hello", "content": "Are you coming on Friday?"}
    payload.update(overrides)
    response = await api_client.post("/api/messages", json=payload, headers=sender["headers"])
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_send_message(api_client, member, lead):
    body = await _send(api_client, member, lead, priority="high")

    assert body["success"] is True
    assert body["message"] == "Message sent successfully"
    sent = body["data"]
    assert sent["sender"]["id"] == member["id"]
    assert sent["sender"]["role"] == "member"
    assert sent["recipient"]["role"] == "lead"
    assert sent["isRead"] is False
    assert sent["readAt"] is None
    assert sent["priority"] == "high"


@pytest.mark.asyncio
async def test_inbox_and_outbox(api_client, member, lead):
    await _send(api_client, member, lead, subject="first")
    await _send(api_client, lead, member, subject="reply")

    inbox = await api_client.get("/api/messages", headers=lead["headers"])
    assert [m["subject"] for m in inbox.json()["messages"]] == ["first"]

    outbox = await api_client.get("/api/messages", params={"type": "sent"}, headers=lead["headers"])
    assert [m["subject"] for m in outbox.json()["messages"]] == ["reply"]


@pytest.mark.asyncio
async def test_mark_as_read(api_client, member, lead):
    message = (await _send(api_client, member, lead))["data"]

    not_mine = await api_client.put(f"/api/messages/{message['id']}/read", headers=member["headers"])
    assert not_mine.status_code == 403
    assert not_mine.json()["message"] == "Not authorized to mark this message as read"

    response = await api_client.put(f"/api/messages/{message['id']}/read", headers=lead["headers"])
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Message marked as read"}

    inbox = await api_client.get("/api/messages", headers=lead["headers"])
    read = inbox.json()["messages"][0]
    assert read["isRead"] is True
    assert read["readAt"] is not None


@pytest.mark.asyncio
async def test_message_errors(api_client, member):
    unknown = await api_client.post(
        "/api/messages",
        json={"recipient": "ghost", "subject": "Hi", "content": "?"},
        headers=member["headers"],
    )
    assert unknown.status_code == 404
    assert unknown.json()["message"] == "Recipient not found"

    missing = await api_client.put("/api/messages/ghost/read", headers=member["headers"])
    assert missing.status_code == 404
