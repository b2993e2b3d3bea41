from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Mapping

import requests

from tmdb_http.utils.env import load_env

logger = logging.getLogger(__name__)

TMDB_API_BASE_URL = "https://api.themoviedb.org/3"
TMDB_TIMEOUT_MS = 30000
TMDB_TOKEN_ENV_VAR = "TMDB_TOKEN"

# Index of `timeout` among the positional args that follow `url` in requests.Session.request.
_TIMEOUT_POSITIONAL_INDEX = 6

# `scheme://host/...` or protocol-relative `//host/...`
_ABSOLUTE_URL_RE = re.compile(r"^([a-z][a-z\d+\-.]*:)?//", re.IGNORECASE)


def _default_headers(token: str) -> dict[str, str]:
    return {
        "Content-Type": "application/json",
        "Access-Control-Allow-Origin": "*",
        "Authorization": f"Bearer {token}",
    }


@dataclass(frozen=True)
class ClientConfig:
    """Static settings shared by every request sent through a TmdbSession."""

    base_url: str
    timeout_ms: int
    default_headers: Mapping[str, str] = field(hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "default_headers", MappingProxyType(dict(self.default_headers)))

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000

    @classmethod
    def from_token(cls, token: str | None) -> ClientConfig:
        """
        Build the TMDb config around an explicit bearer token.

        A missing token is not an error here: the Authorization header becomes
        the bare `"Bearer "` prefix and TMDb rejects the requests later with 401.
        """

        return cls(
            base_url=TMDB_API_BASE_URL,
            timeout_ms=TMDB_TIMEOUT_MS,
            default_headers=_default_headers(token or ""),
        )

    @classmethod
    def from_env(cls, *, load_dotenv_file: bool = True) -> ClientConfig:
        """
        Build the TMDb config from `TMDB_TOKEN`, read once at call time.
        """

        if load_dotenv_file:
            load_env()
        return cls.from_token(os.getenv(TMDB_TOKEN_ENV_VAR))


class TmdbSession(requests.Session):
    """
    A requests session bound to a ClientConfig.

    Relative URLs are resolved against the base URL and every request gets the
    configured timeout unless the caller passes one. Responses and transport
    errors are handed back untouched.
    """

    def __init__(self, config: ClientConfig) -> None:
        super().__init__()
        self.config = config
        self.base_url = config.base_url
        self.timeout = config.timeout_seconds
        self.headers.update(dict(config.default_headers))

    def build_url(self, url: str) -> str:
        if _ABSOLUTE_URL_RE.match(url):
            if url.startswith("//"):
                scheme = self.base_url.split("://", 1)[0]
                return f"{scheme}:{url}"
            return url
        return f"{self.base_url.rstrip('/')}/{url.lstrip('/')}"

    def request(self, method: str | bytes, url: str | bytes, *args: Any, **kwargs: Any) -> requests.Response:
        if isinstance(url, bytes):
            url = url.decode("utf-8")
        if len(args) <= _TIMEOUT_POSITIONAL_INDEX and "timeout" not in kwargs:
            kwargs["timeout"] = self.timeout
        return super().request(method, self.build_url(url), *args, **kwargs)


def create_client(config: ClientConfig | None = None, *, token: str | None = None) -> TmdbSession:
    """
    Create a TMDb session.

    Pass `config` or `token` to avoid touching the process environment; with
    neither, `TMDB_TOKEN` is read once and captured in the returned session.
    No network I/O happens here.
    """

    if config is not None and token is not None:
        raise ValueError("Pass either config or token to create_client, not both.")
    if config is None:
        config = ClientConfig.from_token(token) if token is not None else ClientConfig.from_env()

    logger.debug(f"Created TMDb client for {config.base_url} (timeout {config.timeout_ms} ms)")
    return TmdbSession(config)


@lru_cache
def get_client() -> TmdbSession:
    """
    Return the process-wide TMDb session, creating it on first use.
    """

    return create_client()
