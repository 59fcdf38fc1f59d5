"""
Email Service
Relays member-composed messages to leads and board members
"""

import logging
from email.errors import MessageError
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr, make_msgid
from html import escape

import aiosmtplib
from fastapi import HTTPException, status
from sqlalchemy import select

from clubify.config import settings
from clubify.database import database, row_to_dict
from clubify.models import User
from clubify.schemas.message import SendEmailRequest

logger = logging.getLogger(__name__)

users = User.__table__

# Only these roles accept relayed email
EMAIL_RECIPIENT_ROLES = ("lead", "board")


def build_message(to: str, subject: str, body: str, sender_name: str, sender_email: str) -> MIMEMultipart:
    """Compose the relay email; replies go straight to the sender"""
    message = MIMEMultipart("alternative")
    message["Subject"] = subject
    message["From"] = formataddr((f"{sender_name} via {settings.APP_NAME}", settings.EMAIL_FROM))
    message["To"] = to
    message["Reply-To"] = sender_email
    message["Message-ID"] = make_msgid(domain=settings.EMAIL_FROM.split("@")[-1])

    text_body = f"""From: {sender_name} ({sender_email})
Subject: {subject}

{body}

--
This message was sent via {settings.APP_NAME}.
Reply directly to this email to respond to {sender_name}.
"""

    html_body = f"""
    <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px; border: 1px solid #e0e0e0; border-radius: 8px;">
      <div style="background-color: #4F46E5; color: white; padding: 20px; border-radius: 8px 8px 0 0;">
        <h2 style="margin: 0;">New Message from {escape(settings.APP_NAME)}</h2>
      </div>
      <div style="padding: 20px; background-color: #f9fafb;">
        <p style="font-size: 14px; color: #6b7280;"><strong>From:</strong> {escape(sender_name)} ({escape(sender_email)})</p>
        <p style="font-size: 14px; color: #6b7280;"><strong>Subject:</strong> {escape(subject)}</p>
        <div style="background-color: white; padding: 20px; border-radius: 8px; border-left: 4px solid #4F46E5;">
          <p style="font-size: 16px; line-height: 1.6; color: #1f2937; white-space: pre-wrap;">{escape(body)}</p>
        </div>
      </div>
      <div style="padding: 20px; background-color: #f3f4f6; text-align: center; border-radius: 0 0 8px 8px;">
        <p style="color: #6b7280; font-size: 12px; margin: 0;">
          This message was sent via {escape(settings.APP_NAME)}<br>
          Reply directly to this email to respond to {escape(sender_name)}
        </p>
      </div>
    </div>
    """

    message.attach(MIMEText(text_body, "plain"))
    message.attach(MIMEText(html_body, "html"))
    return message


class EmailService:
    """Service for sending emails"""

    @staticmethod
    async def send_email(to: str, subject: str, body: str, sender_name: str, sender_email: str) -> dict:
        """
        Send one email through the configured SMTP relay

        Without SMTP credentials (development) the email is written to the
        log and reported as sent.

        Returns:
            {"success": True, "message_id": ...} or {"success": False, "error": ...}
        """
        message = build_message(to, subject, body, sender_name, sender_email)

        if not (settings.SMTP_HOST and settings.SMTP_USER and settings.SMTP_PASSWORD):
            logger.info(
                "--- EMAIL (Development Mode) ---\nTo: %s\nReply-To: %s\nSubject: %s\n%s\n--- END EMAIL ---",
                to, sender_email, subject, body
            )
            return {"success": True, "message_id": message["Message-ID"]}

        try:
            async with aiosmtplib.SMTP(hostname=settings.SMTP_HOST, port=settings.SMTP_PORT) as smtp:
                await smtp.login(settings.SMTP_USER, settings.SMTP_PASSWORD)
                await smtp.send_message(message)
        except (aiosmtplib.SMTPException, MessageError, OSError) as e:
            logger.error("Email send to %s failed: %s", to, e)
            return {"success": False, "error": str(e)}

        logger.info("Email sent to %s (%s)", to, message["Message-ID"])
        return {"success": True, "message_id": message["Message-ID"]}

    @staticmethod
    async def relay_to_leader(sender: dict, data: SendEmailRequest) -> dict:
        """
        Forward a message to a lead or board member's inbox

        Returns:
            The recipient's name, email and role
        """
        if not data.recipient_id or not data.subject or not data.message:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Recipient, subject, and message are required"
            )

        # Line breaks in a header would start a new header
        if "\r" in data.subject or "\n" in data.subject:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Subject must be a single line"
            )

        row = await database.fetch_one(select(users).where(users.c.id == data.recipient_id))
        if not row:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Recipient not found"
            )
        recipient = row_to_dict(row, users)

        if recipient["role"] not in EMAIL_RECIPIENT_ROLES:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Can only send emails to leads or board members"
            )

        logger.info("Relaying email from %s to %s", sender["email"], recipient["email"])

        result = await email_service.send_email(
            recipient["email"],
            data.subject,
            data.message,
            sender["name"],
            sender["email"],
        )

        if not result["success"]:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail={"message": "Failed to send email", "error": result["error"]}
            )

        return {
            "name": recipient["name"],
            "email": recipient["email"],
            "role": recipient["role"],
        }


# Create singleton instance
email_service = EmailService()
