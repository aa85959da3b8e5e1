"""The role manager interface and the errors role managers raise."""

from __future__ import annotations

from abc import ABC, abstractmethod


class RBACError(Exception):
    """Base class for errors raised by role managers."""

    default_message = "role manager error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class DomainParameterError(RBACError):
    """More than one domain was given where at most one is allowed."""

    default_message = "domain should be 1 parameter"


class NamesNotFoundError(RBACError):
    """One or both of the two names of a link are unknown."""

    default_message = "name1 or name2 does not exist"


class NameNotFoundError(RBACError):
    """The requested name is unknown."""

    default_message = "name does not exist"


class RoleManager(ABC):
    """Operations for managing role inheritance.

    The optional trailing positional argument of the link and lookup
    methods is a domain, used as a prefix to the role names.
    """

    @abstractmethod
    def clear(self) -> None:
        """Drop all stored data and return to the initial state."""

    @abstractmethod
    def add_link(self, name1: str, name2: str, *args: str) -> None:
        """Make role ``name1`` inherit role ``name2``."""

    @abstractmethod
    def delete_link(self, name1: str, name2: str, *args: str) -> None:
        """Remove the inheritance link from ``name1`` to ``name2``."""

    @abstractmethod
    def has_link(self, name1: str, name2: str, *args: str) -> bool:
        """Tell whether ``name1`` inherits ``name2``."""

    @abstractmethod
    def get_roles(self, name: str, *args: str) -> list[str]:
        """Return the roles that ``name`` directly inherits."""

    @abstractmethod
    def get_users(self, name: str, *args: str) -> list[str]:
        """Return the names that directly inherit role ``name``."""

    @abstractmethod
    def print_roles(self) -> None:
        """Write all role links to the log."""