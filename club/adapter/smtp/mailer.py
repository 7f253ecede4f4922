"""SMTP mailer.

``smtplib`` is blocking, so each send runs in a worker thread.
"""

import asyncio
import smtplib
from dataclasses import dataclass
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

import logfire

from club.adapter.error import MailerError
from club.config import MailSettings
from club.domain.service.membership_service import Mailer

from .templates import approval_email, rejection_email


class SmtpMailer(Mailer):
    """Mailer delivering through an SMTP server."""

    def __init__(self, settings: MailSettings) -> None:
        """Initialize SMTP mailer.

        Args:
            settings: Mail settings
        """
        self.settings = settings

    async def send_approval(self, username: str, email: str) -> None:
        subject, html = approval_email(username, self.settings.club_name)
        await self.send(email, subject, html)

    async def send_rejection(self, username: str, email: str) -> None:
        subject, html = rejection_email(username, self.settings.club_name)
        await self.send(email, subject, html)

    async def send(self, to: str, subject: str, html: str) -> None:
        """Send an HTML email.

        Raises:
            MailerError: If the SMTP exchange fails
        """
        with logfire.span("smtp.send", to=to, subject=subject):
            await asyncio.to_thread(self._send_sync, to, subject, html)
            logfire.info("Email sent", to=to, subject=subject)

    def _build_message(self, to: str, subject: str, html: str) -> MIMEMultipart:
        message = MIMEMultipart("alternative")
        message["Subject"] = subject
        message["From"] = self.settings.from_address
        message["To"] = to
        message.attach(MIMEText(html, "html"))
        return message

    def _send_sync(self, to: str, subject: str, html: str) -> None:
        message = self._build_message(to, subject, html)
        try:
            if self.settings.port == 465:
                server: smtplib.SMTP = smtplib.SMTP_SSL(
                    self.settings.host, self.settings.port, timeout=self.settings.timeout
                )
            else:
                server = smtplib.SMTP(
                    self.settings.host, self.settings.port, timeout=self.settings.timeout
                )
            with server:
                if self.settings.use_tls and self.settings.port != 465:
                    server.starttls()
                if self.settings.username and self.settings.password:
                    server.login(self.settings.username, self.settings.password)
                server.send_message(message)
        except (smtplib.SMTPException, OSError) as e:
            raise MailerError(f"Failed to send email to {to}: {e}") from e


@dataclass
class SentMail:
    """Email captured by ``MockMailer``."""

    kind: str
    username: str
    email: str


class MockMailer(Mailer):
    """Mailer that records messages instead of sending them.

    Set ``fail`` to simulate an SMTP outage.
    """

    def __init__(self) -> None:
        self.sent: list[SentMail] = []
        self.fail = False

    async def send_approval(self, username: str, email: str) -> None:
        self._record("approval", username, email)

    async def send_rejection(self, username: str, email: str) -> None:
        self._record("rejection", username, email)

    def _record(self, kind: str, username: str, email: str) -> None:
        if self.fail:
            raise MailerError("Mock mailer unavailable")
        self.sent.append(SentMail(kind=kind, username=username, email=email))
