"""Role inheritance managers, matching operators and helpers for access-control policies."""

__version__ = "0.1.0"
__all__ = ["role_manager", "default_role_manager", "builtin_operators", "util"]