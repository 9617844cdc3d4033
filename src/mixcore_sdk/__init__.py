"""Async Python client for the Mixcore REST API."""

from __future__ import annotations

from .auth import MixcoreAuth
from .callbacks import ActionCallback
from .client import MixcoreClient
from .config import ClientConfig, Endpoints
from .database import MixcoreDatabase
from .exceptions import (
    ApiError,
    AuthenticationError,
    InvalidFilterError,
    MixcoreError,
    OperatorNotFoundError,
    QueryError,
    TransportError,
)
from .models import (
    GlobalSettings,
    LoginRequest,
    PaginationResult,
    PagingData,
    Profile,
    RegisterAccountRequest,
    TokenInfo,
)
from .ports import ITokenStore, ITransport
from .query import (
    CompareOperator,
    Conjunction,
    Filter,
    FilterFactory,
    QueryBuilder,
    SearchMethod,
    Sort,
    SortDirection,
)
from .storage import MixcoreStorage
from .token_store import FileTokenStore, InMemoryTokenStore
from .transport import HttpTransport

__all__ = [
    # Client
    "MixcoreClient",
    "ClientConfig",
    "Endpoints",
    "ActionCallback",
    # Services
    "MixcoreAuth",
    "MixcoreDatabase",
    "MixcoreStorage",
    # Query
    "QueryBuilder",
    "Filter",
    "FilterFactory",
    "Sort",
    "CompareOperator",
    "Conjunction",
    "SearchMethod",
    "SortDirection",
    # Models
    "GlobalSettings",
    "LoginRequest",
    "PaginationResult",
    "PagingData",
    "Profile",
    "RegisterAccountRequest",
    "TokenInfo",
    # Infrastructure
    "HttpTransport",
    "ITransport",
    "ITokenStore",
    "InMemoryTokenStore",
    "FileTokenStore",
    # Exceptions
    "MixcoreError",
    "QueryError",
    "InvalidFilterError",
    "OperatorNotFoundError",
    "TransportError",
    "ApiError",
    "AuthenticationError",
]
