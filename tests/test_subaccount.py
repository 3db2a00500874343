"""Tests for subaccount command building."""

from __future__ import annotations

import json
from typing import Annotated

import pytest

from tfbtp.models.commands import CliAction
from tfbtp.models.subaccount import SubaccountCreateParams, SubaccountUpdateParams
from tfbtp.models.values import BoolValue, StringValue
from tfbtp.services.command_builder import build_command
from tfbtp.services.subaccount_service import build_create, build_delete, build_update
from tfbtp.utils.params import Export, UnsupportedFieldTypeError

GA = "795b53bb-a3f0-4769-adf0-26173282a975"
SA = "6aa64c2f-38c1-49a9-b2e8-cf9fea769b7f"


class BrokenParams(SubaccountUpdateParams):
    retries: Annotated[int, Export("retries")] = 0


class TestCreate:
    def test_minimal(self):
        cmd = build_create(
            SubaccountCreateParams(
                global_account=GA, display_name="dev", subdomain="dev-1", region="eu10",
            ),
        )
        assert cmd.command == "accounts/subaccount"
        assert cmd.action == CliAction.create
        assert cmd.params == {
            "globalAccount": GA,
            "displayName": "dev",
            "subdomain": "dev-1",
            "region": "eu10",
        }

    def test_full(self):
        cmd = build_create(
            SubaccountCreateParams(
                global_account=GA,
                display_name="prod",
                subdomain="prod-1",
                region="us10",
                description=StringValue.of("Production"),
                beta_enabled=BoolValue.of(False),
                used_for_production=StringValue.of("USED_FOR_PRODUCTION"),
                subaccount_admins='["jane.doe@test.com"]',
                labels={"costcenter": ["12345"], "owner": ["a", "b"]},
                parent_id="dir-1",
            ),
        )
        assert cmd.params["description"] == "Production"
        assert cmd.params["betaEnabled"] == "false"
        assert cmd.params["usedForProduction"] == "USED_FOR_PRODUCTION"
        assert cmd.params["subaccountAdmins"] == '["jane.doe@test.com"]'
        assert cmd.params["directoryID"] == "dir-1"
        assert json.loads(cmd.params["labels"]) == {"costcenter": ["12345"], "owner": ["a", "b"]}


class TestUpdate:
    def test_unknown_values_omitted(self):
        cmd = build_update(
            SubaccountUpdateParams(
                global_account=GA,
                subaccount_id=SA,
                display_name=StringValue.of("renamed"),
                description=StringValue.unknown(),
                beta_enabled=BoolValue.unknown(),
            ),
        )
        assert cmd.action == CliAction.update
        assert cmd.params == {"globalAccount": GA, "subaccount": SA, "displayName": "renamed"}

    def test_clear_labels(self):
        cmd = build_update(SubaccountUpdateParams(global_account=GA, subaccount_id=SA, labels={}))
        assert cmd.params["labels"] == "{}"


class TestDelete:
    def test_confirm_always_sent(self):
        cmd = build_delete(GA, SA)
        assert cmd.action == CliAction.delete
        assert cmd.params == {"globalAccount": GA, "subaccount": SA, "confirm": "true"}


class TestBuildCommand:
    def test_unsupported_field_propagates(self):
        with pytest.raises(UnsupportedFieldTypeError, match="retries"):
            build_command(
                "accounts/subaccount",
                CliAction.update,
                BrokenParams(global_account=GA, subaccount_id=SA),
            )

    def test_strict_mode_rejects_before_marshalling(self, strict_mode, monkeypatch):
        import tfbtp.services.command_builder as cb

        calls = []
        monkeypatch.setattr(cb, "to_params_map", lambda r: calls.append(r) or {})
        with pytest.raises(UnsupportedFieldTypeError):
            cb.build_command(
                "accounts/subaccount",
                CliAction.update,
                BrokenParams(global_account=GA, subaccount_id=SA),
            )
        assert calls == []
