"""Unit tests for the SMTP mailer."""

import smtplib
from unittest.mock import MagicMock, patch

import pytest

from club.adapter.error import MailerError
from club.adapter.smtp import SmtpMailer
from club.adapter.smtp.templates import approval_email, rejection_email
from club.config import MailSettings


class TestTemplates:
    def test_approval_mentions_user_and_club(self):
        subject, html = approval_email("Ada", "Robotics Club")

        assert subject == "Membership Approved - Welcome to the Robotics Club!"
        assert "<b>Ada</b>" in html

    def test_rejection_escapes_username(self):
        subject, html = rejection_email("<script>", "Robotics Club")

        assert subject == "Membership Request Status - Robotics Club"
        assert "<script>" not in html
        assert "&lt;script&gt;" in html


class TestSmtpMailer:
    @pytest.mark.asyncio
    async def test_sends_approval_over_starttls(self):
        """Should log in and send one HTML message."""
        settings = MailSettings(
            host="smtp.test", port=587, username="bot", password="pw"
        )
        mailer = SmtpMailer(settings)

        with patch("club.adapter.smtp.mailer.smtplib.SMTP") as smtp_cls:
            server = MagicMock()
            smtp_cls.return_value = server
            server.__enter__.return_value = server

            await mailer.send_approval("Ada", "ada@example.com")

        smtp_cls.assert_called_once_with("smtp.test", 587, timeout=settings.timeout)
        server.starttls.assert_called_once()
        server.login.assert_called_once_with("bot", "pw")
        message = server.send_message.call_args.args[0]
        assert message["To"] == "ada@example.com"
        assert message["From"] == settings.from_address
        assert message["Subject"].startswith("Membership Approved")

    @pytest.mark.asyncio
    async def test_smtp_failure_becomes_mailer_error(self):
        """Should wrap SMTP exceptions."""
        mailer = SmtpMailer(MailSettings(host="smtp.test", use_tls=False))

        with patch("club.adapter.smtp.mailer.smtplib.SMTP") as smtp_cls:
            server = MagicMock()
            smtp_cls.return_value = server
            server.__enter__.return_value = server
            server.send_message.side_effect = smtplib.SMTPRecipientsRefused({})

            with pytest.raises(MailerError):
                await mailer.send_rejection("Ada", "ada@example.com")

        server.starttls.assert_not_called()
