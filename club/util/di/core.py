"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from club.config import AuthSettings, ImageSettings, MailSettings, Settings
from club.util.di.base import ProviderBase
from club.util.error import ConfigurationError

DEFAULT_SECRET = "CHANGE_ME_IN_PRODUCTION"


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment.

        Raises:
            ConfigurationError: If production runs with placeholder secrets
        """
        settings = Settings()
        if settings.environment == "production":
            if settings.auth.jwt_secret == DEFAULT_SECRET:
                raise ConfigurationError("AUTH__JWT_SECRET", "must be set in production")
            if settings.images.api_secret == DEFAULT_SECRET:
                raise ConfigurationError("IMAGES__API_SECRET", "must be set in production")
        return settings

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_image_settings(self, settings: Settings) -> ImageSettings:
        """Provide image hosting settings."""
        return settings.images

    @provide(scope=Scope.APP)
    def provide_mail_settings(self, settings: Settings) -> MailSettings:
        """Provide outgoing mail settings."""
        return settings.mail
