"""localekit configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from localekit.configuration.i18n import I18nSettings


class Settings(BaseSettings):
    """localekit configuration settings - main aggregator.

    Environment Variables:
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        ENVIRONMENT: Deployment environment name (development, production)

    Example:
        ```python
        from localekit.configuration import settings

        if settings.is_production:
            ...
        fallback = settings.i18n.FALLBACK_LOCALE
        ```
    """

    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"

    i18n: I18nSettings

    @property
    def is_production(self) -> bool:
        """Check if the library is running in production.

        Returns:
            True if ENVIRONMENT is "production", False otherwise.
        """
        return self.ENVIRONMENT.lower() == "production"

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        if "i18n" not in kwargs:
            kwargs["i18n"] = I18nSettings()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the singleton settings instance
settings = Settings()
