"""Pydantic models for Mixcore request and response bodies.

The backend speaks camelCase JSON; models expose snake_case attributes and
accept either spelling on input.  Unknown fields are kept, because the
backend adds fields independently of the client.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class ApiModel(BaseModel):
    """Base class for wire models (camelCase aliases, extra fields allowed)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_payload(self) -> dict[str, Any]:
        """Serialise to a JSON-compatible camelCase dictionary."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# ── Auth ────────────────────────────────────────────────────────────


class LoginRequest(ApiModel):
    email: str | None = None
    username: str | None = None
    password: str | None = None
    remember_me: bool = False
    return_url: str | None = None


class RegisterAccountRequest(ApiModel):
    user_name: str
    email: str
    password: str
    confirm_password: str
    phone_number: str | None = None
    provider: Literal["Facebook"] | None = None
    provider_key: str | None = None
    data: dict[str, str] | None = None


class TokenInfo(ApiModel):
    access_token: str
    refresh_token: str | None = None
    token_type: str = "Bearer"
    expires_in: int | None = None
    client_id: str | None = None
    issued_at: datetime | None = None
    expires_at: datetime | None = None
    device_id: str | None = None


class Role(ApiModel):
    role_id: str
    user_id: str


class Profile(ApiModel):
    """Current user's profile.  Only identity fields are required."""

    id: str
    user_name: str
    email: str | None = None
    email_confirmed: bool = False
    name: str | None = None
    nick_name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    avatar: str | None = None
    phone_number: str | None = None
    join_date: datetime | None = None
    last_modified: datetime | None = None
    roles: list[Role] = Field(default_factory=list)
    claims: list[str] = Field(default_factory=list)
    user_data: dict[str, Any] | None = None


# ── Global settings ─────────────────────────────────────────────────


class RsaKeys(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    private_key: str | None = Field(default=None, alias="PrivateKey")
    public_key: str | None = Field(default=None, alias="PublicKey")


class GlobalSettings(ApiModel):
    domain: str | None = None
    api_encrypt_key: str | None = None
    rsa_keys: RsaKeys | None = None
    is_encrypt_api: bool = False
    page_types: list[str] = Field(default_factory=list)
    module_types: list[str] = Field(default_factory=list)
    mix_database_types: list[str] = Field(default_factory=list)
    data_types: list[str] = Field(default_factory=list)
    statuses: list[str] = Field(default_factory=list)
    expired_at: datetime | None = None


# ── Data ────────────────────────────────────────────────────────────


class PagingData(ApiModel):
    page_index: int = 0
    page: int | None = None
    page_size: int = 10
    total: int | None = None
    total_page: int | None = None


class PaginationResult(ApiModel, Generic[T]):
    """One page of rows from a filter query."""

    items: list[T] = Field(default_factory=list)
    paging_data: PagingData = Field(default_factory=PagingData)


class ExportDataResponse(ApiModel):
    file_name: str | None = None
    extension: str | None = None
    content: str | None = None


class UploadedFile(ApiModel):
    """Response of the storage upload endpoint."""

    file_name: str | None = None
    file_folder: str | None = None
    extension: str | None = None
    file_path: str | None = None


__all__: list[str] = [
    "ApiModel",
    "LoginRequest",
    "RegisterAccountRequest",
    "TokenInfo",
    "Role",
    "Profile",
    "RsaKeys",
    "GlobalSettings",
    "PagingData",
    "PaginationResult",
    "ExportDataResponse",
    "UploadedFile",
]
