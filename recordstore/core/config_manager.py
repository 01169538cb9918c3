from typing import Literal, Optional
import logging
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from recordstore.core.patterns.singleton import Singleton


DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class Settings(BaseSettings):
    """Package settings using Pydantic BaseSettings."""

    # Logging Configuration
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"
    log_format: str = DEFAULT_LOG_FORMAT

    # Development Settings
    debug: bool = False

    # Store Behaviour
    validate_records: bool = False

    model_config = SettingsConfigDict(
        env_prefix="RECORDSTORE_",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


class ConfigManager(Singleton):
    """
    Singleton Configuration Manager.

    Loads the package settings once and hands them to the stores and the
    logging setup. Stores read ``validate_records`` when they are built, so
    reloading afterwards does not change their behaviour.
    """

    def _setup(self):
        """Initialize the configuration manager."""
        self._settings: Optional[Settings] = None
        self._logger = logging.getLogger(__name__)
        self._load_settings()

    def _load_settings(self):
        """Load settings from environment variables and .env file."""
        try:
            self._settings = Settings()
            self._logger.info(f"Configuration loaded successfully. Debug mode: {self._settings.debug}")
        except Exception as e:
            self._logger.error(f"Failed to load configuration: {e}")
            raise

    @property
    def settings(self) -> Settings:
        """Get the package settings."""
        if self._settings is None:
            self._load_settings()
        return self._settings

    def reload_settings(self):
        """Reload settings from environment variables and .env file."""
        self._logger.info("Reloading configuration settings...")
        self._load_settings()

    def is_debug_mode(self) -> bool:
        """Check if the package runs in debug mode."""
        return self.settings.debug

    def is_validation_enabled(self) -> bool:
        """Check if stores should reject records without an id."""
        return self.settings.validate_records

    def get_logging_settings(self) -> dict:
        """Get logging configuration settings."""
        return {
            "level": "DEBUG" if self.settings.debug else self.settings.log_level,
            "format": self.settings.log_format,
        }


# Create the global config manager instance
config_manager = ConfigManager.get_instance()
