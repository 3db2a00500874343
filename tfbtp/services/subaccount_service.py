"""Subaccount create / update / delete commands."""

from __future__ import annotations

from tfbtp.models.commands import CliAction, CliCommand
from tfbtp.models.subaccount import (
    SUBACCOUNT_COMMAND,
    SubaccountCreateParams,
    SubaccountDeleteParams,
    SubaccountUpdateParams,
)
from tfbtp.services.command_builder import build_command
from tfbtp.utils.logging import get_logger

log = get_logger(__name__)


def build_create(params: SubaccountCreateParams) -> CliCommand:
    cmd = build_command(SUBACCOUNT_COMMAND, CliAction.create, params)
    log.info("subaccount.create", subdomain=params.subdomain, region=params.region)
    return cmd


def build_update(params: SubaccountUpdateParams) -> CliCommand:
    cmd = build_command(SUBACCOUNT_COMMAND, CliAction.update, params)
    log.info("subaccount.update", subaccount=params.subaccount_id, keys=sorted(cmd.params))
    return cmd


def build_delete(global_account: str, subaccount_id: str) -> CliCommand:
    params = SubaccountDeleteParams(
        global_account=global_account, subaccount_id=subaccount_id,
    )
    log.info("subaccount.delete", subaccount=subaccount_id)
    return build_command(SUBACCOUNT_COMMAND, CliAction.delete, params)
