"""Client configuration and REST endpoint tables."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_BASE_URL = "https://api.mixcore.io/api/v2"
SDK_VERSION = "0.1.0"


@dataclass(frozen=True)
class ClientConfig:
    """Configuration for :class:`~mixcore_sdk.client.MixcoreClient`.

    Attributes:
        endpoint: Base URL every endpoint path is appended to.
        token_key: Storage key of the access token.
        refresh_token_key: Storage key of the refresh token.
        token_type: Scheme used in the ``Authorization`` header.
        timeout: Request timeout in seconds.
        headers: Extra headers sent with every request.
    """

    endpoint: str = DEFAULT_BASE_URL
    token_key: str = "mix_access_token"  # noqa: S105
    refresh_token_key: str = "mix_refresh_token"  # noqa: S105
    token_type: str = "Bearer"  # noqa: S105
    timeout: float = 30.0
    headers: dict[str, str] = field(default_factory=dict)

    def sdk_headers(self) -> dict[str, str]:
        """Identification headers merged with user-supplied ones."""
        return {
            "x-sdk-name": "Python",
            "x-sdk-platform": "client",
            "x-sdk-language": "python",
            "x-sdk-version": SDK_VERSION,
            **self.headers,
        }


# ═══════════════════════════════════════════════════════════════
# ENDPOINTS
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class AuthEndpoints:
    sign_in: str = "/rest/auth/user/login"
    external_login: str = "/rest/auth/p4ps/external-login-unsecure"
    register: str = "/rest/auth/user/register"
    get_profile: str = "/rest/auth/user/my-profile"
    renew_token: str = "/rest/auth/user/renew-token"


@dataclass(frozen=True)
class GlobalEndpoints:
    global_setting: str = "/rest/shared/get-global-settings"
    dashboard_info: str = "/rest/mix-portal/common/en-US/dashboard"
    restart_app: str = "/rest/shared/stop-application"
    clear_cache: str = "/rest/shared/clear-cache"


@dataclass(frozen=True)
class ContentEndpoints:
    page_content: str = "/rest/mix-portal/mix-page-content"
    application: str = "/rest/mix-portal/mix-application"
    post_content: str = "/rest/mix-portal/mix-post-content"
    module_content: str = "/rest/mix-portal/mix-module-content"
    module_data: str = "/rest/mix-portal/mix-module-data"
    post_to_post: str = "/rest/mix-portal/mix-post-post"
    template: str = "/rest/mix-portal/mix-template"
    database: str = "/rest/mix-portal/mix-database"
    database_relation: str = "/rest/mix-portal/mix-database-relationship"
    database_context: str = "/rest/mix-portal/mixdb-context"
    get_database_by_system_name: str = "/rest/mix-portal/mix-database/get-by-name"
    mix_db: str = "/rest/mix-portal/mix-db"
    mix_db_column: str = "/rest/mix-portal/mix-database-column"


@dataclass(frozen=True)
class StorageEndpoints:
    upload: str = "/rest/mix-storage/upload-file"
    delete: str = "/rest/mix-storage/delete-file"


@dataclass(frozen=True)
class ServiceEndpoints:
    metadata: str = "/rest/mix-services/metadata"
    get_metadata: str = "/rest/mix-services/metadata/get-metadata"
    create_metadata_association: str = (
        "/rest/mix-services/metadata/create-metadata-association"
    )
    delete_metadata_association: str = (
        "/rest/mix-services/metadata/delete-metadata-association"
    )


@dataclass(frozen=True)
class UserEndpoints:
    list_users: str = "/rest/auth/user/list"
    detail: str = "/rest/auth/user/details"
    register: str = "/rest/auth/user/register"
    role: str = "/rest/auth/role"
    permission: str = "/rest/mix-services/permission"
    delete: str = "/rest/auth/user/remove-user"
    toggle_role: str = "/rest/auth/user/user-in-role"


@dataclass(frozen=True)
class Endpoints:
    """Endpoint path tables, grouped by backend area."""

    auth: AuthEndpoints = field(default_factory=AuthEndpoints)
    global_: GlobalEndpoints = field(default_factory=GlobalEndpoints)
    content: ContentEndpoints = field(default_factory=ContentEndpoints)
    storage: StorageEndpoints = field(default_factory=StorageEndpoints)
    service: ServiceEndpoints = field(default_factory=ServiceEndpoints)
    user: UserEndpoints = field(default_factory=UserEndpoints)
    settings_config: str = "/rest/mix-portal/configuration"
    audit_log_search: str = "/rest/mix-log/audit-log/search"


__all__: list[str] = [
    "DEFAULT_BASE_URL",
    "SDK_VERSION",
    "ClientConfig",
    "Endpoints",
    "AuthEndpoints",
    "GlobalEndpoints",
    "ContentEndpoints",
    "StorageEndpoints",
    "ServiceEndpoints",
    "UserEndpoints",
]
