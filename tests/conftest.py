"""Shared pytest fixtures."""

from __future__ import annotations

import os

# Force settings to use test-safe defaults before any import
for _var in ("BTP_USERNAME", "BTP_PASSWORD", "BTP_IDP", "BTP_GLOBALACCOUNT", "BTP_CLI_SERVER_URL"):
    os.environ.pop(_var, None)
os.environ.setdefault("BTP_STRICT_EXPORT_FIELDS", "false")

import pytest

from tfbtp.models.role_collection import RoleCollectionConfig, RoleRef
from tfbtp.models.values import StringValue


@pytest.fixture
def strict_mode(monkeypatch):
    """Turn on export table checks for the duration of a test."""
    from tfbtp.config import settings

    monkeypatch.setattr(settings, "strict_export_fields", True)
    return settings


@pytest.fixture
def viewer_role():
    return RoleRef(
        name="Subaccount Viewer",
        role_template_app_id="cis-local!b4",
        role_template_name="Subaccount_Viewer",
    )


@pytest.fixture
def admin_role():
    return RoleRef(
        name="Subaccount Admin",
        role_template_app_id="cis-local!b4",
        role_template_name="Subaccount_Admin",
    )


@pytest.fixture
def auditor_role():
    return RoleRef(
        name="Auditor",
        role_template_app_id="auditlog!b12",
        role_template_name="Auditlog_Auditor",
    )


@pytest.fixture
def role_collection(viewer_role, admin_role):
    return RoleCollectionConfig(
        subaccount_id="6aa64c2f-38c1-49a9-b2e8-cf9fea769b7f",
        name="My Collection",
        description=StringValue.of("managed by terraform"),
        roles=[viewer_role, admin_role],
    )
