"""CLI invocation structures."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class CliAction(str, Enum):
    get = "get"
    list = "list"
    create = "create"
    update = "update"
    delete = "delete"
    add_role = "add-role"
    remove_role = "remove-role"


class CliCommand(BaseModel):
    """A single call against the BTP CLI server."""

    command: str = Field(description='Command path, e.g. "accounts/subaccount"')
    action: CliAction
    params: dict[str, str] = Field(default_factory=dict)


class CommandPlan(BaseModel):
    """Ordered calls that bring the remote side in line with the config."""

    description: str
    commands: list[CliCommand] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.commands
