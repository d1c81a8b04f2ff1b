"""Authoritative multiplayer snake arena server."""

__all__ = [
    "client",
    "collision",
    "constants",
    "main",
    "protocol",
    "snake",
    "utils",
    "world",
]
