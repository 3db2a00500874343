"""Wrap marshalled parameter records into CLI commands."""

from __future__ import annotations

from pydantic import BaseModel

from tfbtp.config import settings
from tfbtp.models.commands import CliAction, CliCommand
from tfbtp.utils.params import to_params_map, validate_export_fields


def build_command(command: str, action: CliAction, record: BaseModel) -> CliCommand:
    """Marshal ``record`` and attach the result to a ``CliCommand``.

    Marshalling errors propagate; they point at a broken record
    definition, not at user input.
    """
    if settings.strict_export_fields:
        validate_export_fields(type(record))
    return CliCommand(command=command, action=action, params=to_params_map(record))
