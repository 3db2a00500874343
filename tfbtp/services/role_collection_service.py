"""Role collection create and update plans.

Roles are a nested block. The CLI adds and removes them one at a time, so
updates are planned from the difference between plan and state.
"""

from __future__ import annotations

from tfbtp.models.commands import CliAction, CliCommand, CommandPlan
from tfbtp.models.role_collection import (
    ROLE_COLLECTION_COMMAND,
    RoleCollectionConfig,
    RoleCollectionParams,
    RoleCollectionRoleParams,
    RoleRef,
    same_role,
)
from tfbtp.models.values import StringValue
from tfbtp.services.command_builder import build_command
from tfbtp.utils.logging import get_logger
from tfbtp.utils.sets import compute_delta

log = get_logger(__name__)


def _role_command(action: CliAction, rc: RoleCollectionConfig, role: RoleRef) -> CliCommand:
    params = RoleCollectionRoleParams(
        subaccount_id=rc.subaccount_id,
        role_collection_name=rc.name,
        role_name=role.name,
        role_template_app_id=role.role_template_app_id,
        role_template_name=role.role_template_name,
    )
    return build_command(ROLE_COLLECTION_COMMAND, action, params)


def _clearable(description: StringValue) -> StringValue:
    """Null means "no description"; the CLI clears it with an empty string."""
    return StringValue.of("") if description.is_null() else description


def plan_create(desired: RoleCollectionConfig) -> CommandPlan:
    """Create the collection, then add each role."""
    params = RoleCollectionParams(
        subaccount_id=desired.subaccount_id,
        name=desired.name,
        description=desired.description,
    )
    commands = [build_command(ROLE_COLLECTION_COMMAND, CliAction.create, params)]
    commands += [_role_command(CliAction.add_role, desired, r) for r in desired.roles]
    log.info("role_collection.plan_create", name=desired.name, roles=len(desired.roles))
    return CommandPlan(
        description=f"Create role collection {desired.name}", commands=commands,
    )


def plan_update(desired: RoleCollectionConfig, current: RoleCollectionConfig) -> CommandPlan:
    """Plan the calls that turn ``current`` into ``desired``.

    Removals come before additions. The description is sent when it is
    not unknown and differs from the state; a null description clears it.
    """
    if desired.subaccount_id != current.subaccount_id or desired.name != current.name:
        raise ValueError(
            f"role collection '{current.name}' cannot be renamed or moved in place",
        )

    commands: list[CliCommand] = []

    description = _clearable(desired.description)
    if not description.is_unknown() and description != _clearable(current.description):
        params = RoleCollectionParams(
            subaccount_id=desired.subaccount_id,
            name=desired.name,
            description=description,
        )
        commands.append(build_command(ROLE_COLLECTION_COMMAND, CliAction.update, params))

    delta = compute_delta(desired.roles, current.roles, same_role)
    commands += [_role_command(CliAction.remove_role, desired, r) for r in delta.to_remove]
    commands += [_role_command(CliAction.add_role, desired, r) for r in delta.to_add]

    log.info(
        "role_collection.plan_update",
        name=desired.name,
        add=len(delta.to_add),
        remove=len(delta.to_remove),
    )
    return CommandPlan(
        description=f"Update role collection {desired.name}", commands=commands,
    )
