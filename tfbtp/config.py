"""Provider settings loaded from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CLI_SERVER_URL = "https://cpcli.cf.eu10.hana.ondemand.com"


class Settings(BaseSettings):
    """All configuration is driven by ``BTP_*`` environment variables."""

    # CLI server
    cli_server_url: str = DEFAULT_CLI_SERVER_URL

    # Credentials, used when the provider block leaves them null
    username: str = ""
    password: str = ""
    idp: str = ""

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # Check every export table before marshalling instead of on first use
    strict_export_fields: bool = False

    model_config = SettingsConfigDict(
        env_prefix="BTP_", env_file=".env", env_file_encoding="utf-8",
    )


# Singleton – import this from anywhere
settings = Settings()
