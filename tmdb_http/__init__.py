"""
Preconfigured HTTP access to the TMDb v3 API.

Callers should import the shared client from `tmdb_http.integrations.tmdb`
rather than building their own sessions, so every request carries the same
base URL, timeout and auth headers.
"""
