"""
TMDb integration client.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tmdb_http.integrations.tmdb.client import (
        TMDB_API_BASE_URL,
        TMDB_TIMEOUT_MS,
        TMDB_TOKEN_ENV_VAR,
        ClientConfig,
        TmdbSession,
        create_client,
        get_client,
    )

__all__ = [
    "TMDB_API_BASE_URL",
    "TMDB_TIMEOUT_MS",
    "TMDB_TOKEN_ENV_VAR",
    "ClientConfig",
    "TmdbSession",
    "create_client",
    "get_client",
]


def __getattr__(name: str):
    if name in __all__:
        from tmdb_http.integrations.tmdb import client

        return getattr(client, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
