"""Subaccount parameter records."""

from __future__ import annotations

from typing import Annotated, Optional

from pydantic import BaseModel

from tfbtp.models.values import BoolValue, StringValue
from tfbtp.utils.params import Export

SUBACCOUNT_COMMAND = "accounts/subaccount"


class SubaccountCreateParams(BaseModel):
    global_account: Annotated[str, Export("globalAccount")]
    display_name: Annotated[str, Export("displayName")]
    subdomain: Annotated[str, Export("subdomain")]
    region: Annotated[str, Export("region")]
    description: Annotated[StringValue, Export("description")] = StringValue()
    beta_enabled: Annotated[BoolValue, Export("betaEnabled")] = BoolValue()
    used_for_production: Annotated[StringValue, Export("usedForProduction")] = StringValue()
    # JSON array of user names
    subaccount_admins: Annotated[Optional[str], Export("subaccountAdmins")] = None
    labels: Annotated[Optional[dict[str, list[str]]], Export("labels")] = None
    parent_id: Annotated[str, Export("directoryID")] = ""


class SubaccountUpdateParams(BaseModel):
    global_account: Annotated[str, Export("globalAccount")]
    subaccount_id: Annotated[str, Export("subaccount")]
    display_name: Annotated[StringValue, Export("displayName")] = StringValue()
    description: Annotated[StringValue, Export("description")] = StringValue()
    beta_enabled: Annotated[BoolValue, Export("betaEnabled")] = BoolValue()
    labels: Annotated[Optional[dict[str, list[str]]], Export("labels")] = None


class SubaccountDeleteParams(BaseModel):
    global_account: Annotated[str, Export("globalAccount")]
    subaccount_id: Annotated[str, Export("subaccount")]
    confirm: Annotated[bool, Export("confirm")] = True
