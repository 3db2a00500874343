"""Role collection configuration and parameter records."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from tfbtp.models.values import StringValue
from tfbtp.utils.params import Export

ROLE_COLLECTION_COMMAND = "security/role-collection"


class RoleRef(BaseModel):
    """A role inside a role collection."""

    model_config = ConfigDict(frozen=True)

    name: str
    role_template_app_id: str
    role_template_name: str


def same_role(a: RoleRef, b: RoleRef) -> bool:
    return (
        a.name == b.name
        and a.role_template_app_id == b.role_template_app_id
        and a.role_template_name == b.role_template_name
    )


class RoleCollectionConfig(BaseModel):
    """Plan or state of a subaccount role collection."""

    subaccount_id: str
    name: str
    description: StringValue = StringValue()
    roles: list[RoleRef] = Field(default_factory=list)


class RoleCollectionParams(BaseModel):
    subaccount_id: Annotated[str, Export("subaccount")]
    name: Annotated[str, Export("roleCollectionName")]
    description: Annotated[StringValue, Export("description")] = StringValue()


class RoleCollectionRoleParams(BaseModel):
    subaccount_id: Annotated[str, Export("subaccount")]
    role_collection_name: Annotated[str, Export("roleCollectionName")]
    role_name: Annotated[str, Export("roleName")]
    role_template_app_id: Annotated[str, Export("roleTemplateAppID")]
    role_template_name: Annotated[str, Export("roleTemplateName")]
