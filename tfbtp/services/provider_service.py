"""Resolve the provider block into credentials for the CLI client."""

from __future__ import annotations

from typing import Optional

from tfbtp.config import Settings, settings as default_settings
from tfbtp.models.provider import Credentials, ProviderConfig
from tfbtp.models.values import StringValue
from tfbtp.utils.logging import get_logger

log = get_logger(__name__)


class ProviderConfigError(ValueError):
    """The provider block cannot be turned into a usable client configuration."""


def _pick(field: str, value: StringValue, fallback: str) -> str:
    if value.is_unknown():
        raise ProviderConfigError(f"Cannot use unknown value as {field}")
    if value.is_null():
        return fallback
    return value.value_string()


def resolve_credentials(
    config: ProviderConfig, cfg: Optional[Settings] = None,
) -> Credentials:
    """Merge the provider block with ``BTP_*`` settings.

    A null server URL, identity provider, username or password falls back
    to the environment. Unknown credentials are rejected; they cannot be
    resolved before apply. The global account is taken as given.
    """
    cfg = cfg or default_settings

    if config.cli_server_url.is_null():
        server_url = cfg.cli_server_url
    else:
        server_url = config.cli_server_url.value_string()

    creds = Credentials(
        cli_server_url=server_url,
        globalaccount=config.globalaccount.value_string(),
        idp=_pick("identity provider", config.idp, cfg.idp),
        username=_pick("username", config.username, cfg.username),
        password=_pick("password", config.password, cfg.password),
    )

    if not creds.username or not creds.password:
        raise ProviderConfigError("globalaccount, username and password must be given.")

    log.info(
        "provider.configured",
        server=creds.cli_server_url,
        globalaccount=creds.globalaccount,
        idp=creds.idp or "default",
    )
    return creds
