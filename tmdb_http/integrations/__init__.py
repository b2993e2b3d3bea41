"""
External system integrations.

Clients for third-party metadata APIs live under this namespace.
"""
