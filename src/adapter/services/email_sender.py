"""
Email transports for IEmailSender.
"""

import asyncio
import logging
import smtplib
from email.message import EmailMessage

from src.app.services.email_sender import IEmailSender

logger = logging.getLogger(__name__)


class SmtpEmailSender(IEmailSender):
    """
    Sends HTML mail over SMTP.

    smtplib is blocking, so each send runs in a worker thread.
    """

    def __init__(
        self,
        host: str,
        port: int,
        sender: str,
        username: str = "",
        password: str = "",
        use_tls: bool = True,
    ):
        self.host = host
        self.port = port
        self.sender = sender
        self.username = username
        self.password = password
        self.use_tls = use_tls

    def _build_message(self, to: str, subject: str, html: str) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self.sender
        message["To"] = to
        message["Subject"] = subject
        message.set_content("This message requires an HTML capable mail client.")
        message.add_alternative(html, subtype="html")
        return message

    def _send_sync(self, message: EmailMessage) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=10) as smtp:
            if self.use_tls:
                smtp.starttls()
            if self.username:
                smtp.login(self.username, self.password)
            smtp.send_message(message)

    async def send(self, to: str, subject: str, html: str) -> None:
        await asyncio.to_thread(self._send_sync, self._build_message(to, subject, html))
        logger.info(f"Sent email '{subject}' to {to}")


class LoggingEmailSender(IEmailSender):
    """Development transport: logs the email instead of sending it"""

    async def send(self, to: str, subject: str, html: str) -> None:
        logger.info(f"[email] to={to} subject={subject!r} ({len(html)} bytes of HTML)")
