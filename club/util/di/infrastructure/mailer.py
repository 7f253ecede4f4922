"""Outgoing mail infrastructure providers."""

from dishka import Scope, provide

from club.adapter.smtp import SmtpMailer
from club.config import MailSettings
from club.domain.service import Mailer
from club.util.di.base import ProviderBase


class MailerProvider(ProviderBase):
    """Mailer component base."""

    __mock_component__ = "mailer"


class ProdMailerProvider(MailerProvider):
    """Production mailer sending through SMTP."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_mailer(self, settings: MailSettings) -> Mailer:
        """Provide mailer."""
        return SmtpMailer(settings=settings)
