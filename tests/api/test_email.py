import pytest

from clubify.services.email_service import email_service


@pytest.fixture
def sent_emails(monkeypatch):
    outbox = []

    async def fake_send(to, subject, body, sender_name, sender_email):
        outbox.append({
            "to": to,
            "subject": subject,
            "body": body,
            "sender_name": sender_name,
            "sender_email": sender_email,
        })
        return {"success": True, "message_id": "<test@clubify.com>"}

    monkeypatch.setattr(email_service, "send_email", fake_send)
    return outbox


@pytest.mark.asyncio
async def test_relay_to_lead(api_client, member, lead, sent_emails):
    response = await api_client.post(
        "/api/send-email",
        json={"recipientId": lead["id"], "subject": "Budget", "message": "Can we talk?"},
        headers=member["headers"],
    )
    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message": f"Email sent successfully to {lead['name']}",
        "recipient": {"name": lead["name"], "email": lead["email"], "role": "lead"},
    }
    assert sent_emails == [{
        "to": lead["email"],
        "subject": "Budget",
        "body": "Can we talk?",
        "sender_name": member["name"],
        "sender_email": member["email"],
    }]


@pytest.mark.asyncio
async def test_relay_validation(api_client, member, make_user, sent_emails):
    other_member = await make_user("member")

    incomplete = await api_client.post(
        "/api/send-email", json={"recipientId": other_member["id"]}, headers=member["headers"]
    )
    assert incomplete.status_code == 400
    assert incomplete.json()["message"] == "Recipient, subject, and message are required"

    unknown = await api_client.post(
        "/api/send-email",
        json={"recipientId": "ghost", "subject": "Hi", "message": "?"},
        headers=member["headers"],
    )
    assert unknown.status_code == 404
    assert unknown.json()["message"] == "Recipient not found"

    to_member = await api_client.post(
        "/api/send-email",
        json={"recipientId": other_member["id"], "subject": "Hi", "message": "?"},
        headers=member["headers"],
    )
    assert to_member.status_code == 400
    assert to_member.json()["message"] == "Can only send emails to leads or board members"
    assert sent_emails == []


@pytest.mark.asyncio
async def test_relay_failure_is_reported(api_client, member, board, monkeypatch):
    async def failing_send(*args):
        return {"success": False, "error": "Connection refused"}

    monkeypatch.setattr(email_service, "send_email", failing_send)

    response = await api_client.post(
        "/api/send-email",
        json={"recipientId": board["id"], "subject": "Hi", "message": "?"},
        headers=member["headers"],
    )
    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "message": "Failed to send email",
        "error": "Connection refused",
    }


@pytest.mark.asyncio
async def test_multiline_subject_is_rejected(api_client, member, lead, sent_emails):
    response = await api_client.post(
        "/api/send-email",
        json={"recipientId": lead["id"], "subject": "Hi\r\nBcc: someone@example.com", "message": "?"},
        headers=member["headers"],
    )
    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Subject must be a single line"}
    assert sent_emails == []
