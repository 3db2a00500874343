"""Provider block and the credentials resolved from it."""

from __future__ import annotations

from pydantic import BaseModel, Field

from tfbtp.models.values import StringValue


class ProviderConfig(BaseModel):
    cli_server_url: StringValue = StringValue()
    globalaccount: StringValue = StringValue()
    username: StringValue = StringValue()
    password: StringValue = StringValue()
    idp: StringValue = StringValue()


class Credentials(BaseModel):
    cli_server_url: str
    globalaccount: str
    username: str
    password: str = Field(repr=False)
    idp: str = ""
