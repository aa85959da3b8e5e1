"""An in-memory role manager with bounded inheritance depth and optional patterns."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field

from .role_manager import (
    DomainParameterError,
    NameNotFoundError,
    NamesNotFoundError,
    RoleManager,
)

logger = logging.getLogger(__name__)

MatchingFunc = Callable[[str, str], bool]


@dataclass(eq=False)
class Role:
    """A named role and the roles it directly inherits."""

    name: str
    roles: list[Role] = field(default_factory=list)

    def add_role(self, role: Role) -> None:
        """Inherit ``role`` unless a role of that name is already inherited."""
        if not self.has_direct_role(role.name):
            self.roles.append(role)

    def delete_role(self, role: Role) -> None:
        """Stop inheriting the first role named like ``role``."""
        for i, existing in enumerate(self.roles):
            if existing.name == role.name:
                del self.roles[i]
                return

    def has_role(self, name: str, hierarchy_level: int) -> bool:
        """Tell whether this role is ``name`` or inherits it within the given depth."""
        if self.name == name:
            return True
        if hierarchy_level <= 0:
            return False
        return any(role.has_role(name, hierarchy_level - 1) for role in self.roles)

    def has_direct_role(self, name: str) -> bool:
        """Tell whether a role called ``name`` is directly inherited."""
        return any(role.name == name for role in self.roles)

    def get_roles(self) -> list[str]:
        """Return the names of the directly inherited roles."""
        return [role.name for role in self.roles]

    def __str__(self) -> str:
        if not self.roles:
            return ""
        names = ", ".join(self.get_roles())
        if len(self.roles) != 1:
            names = f"({names})"
        return f"{self.name} < {names}"


class DefaultRoleManager(RoleManager):
    """Role manager that keeps every role in memory.

    Inheritance is followed at most ``max_hierarchy_level`` links deep.
    A domain, when given, prefixes names as ``domain::name``.
    """

    def __init__(self, max_hierarchy_level: int) -> None:
        self.max_hierarchy_level = max_hierarchy_level
        self._all_roles: dict[str, Role] = {}
        self._has_pattern = False
        self._matching_func: MatchingFunc | None = None
        self._lock = threading.RLock()

    def add_matching_func(self, name: str, fn: MatchingFunc) -> None:
        """Match role names through ``fn`` instead of equality; replaces any earlier one."""
        self._has_pattern = True
        self._matching_func = fn

    @staticmethod
    def _qualify(domain: tuple[str, ...], *names: str) -> tuple[str, ...]:
        if len(domain) > 1:
            raise DomainParameterError()
        if domain:
            return tuple(f"{domain[0]}::{name}" for name in names)
        return names

    @staticmethod
    def _unqualify(domain: tuple[str, ...], names: list[str]) -> list[str]:
        if not domain:
            return names
        offset = len(domain[0]) + 2
        return [name[offset:] for name in names]

    def _has_role(self, name: str) -> bool:
        if self._has_pattern and self._matching_func is not None:
            return any(self._matching_func(name, key) for key in list(self._all_roles))
        return name in self._all_roles

    def _create_role(self, name: str) -> Role:
        if self._has_pattern and self._matching_func is not None:
            for key in list(self._all_roles):
                if self._matching_func(name, key):
                    name = key
        return self._all_roles.setdefault(name, Role(name))

    def clear(self) -> None:
        with self._lock:
            self._all_roles = {}

    def add_link(self, name1: str, name2: str, *args: str) -> None:
        name1, name2 = self._qualify(args, name1, name2)
        with self._lock:
            role1 = self._create_role(name1)
            role2 = self._create_role(name2)
            role1.add_role(role2)

    def delete_link(self, name1: str, name2: str, *args: str) -> None:
        name1, name2 = self._qualify(args, name1, name2)
        with self._lock:
            if not self._has_role(name1) or not self._has_role(name2):
                raise NamesNotFoundError()
            role1 = self._create_role(name1)
            role2 = self._create_role(name2)
            role1.delete_role(role2)

    def has_link(self, name1: str, name2: str, *args: str) -> bool:
        name1, name2 = self._qualify(args, name1, name2)
        if name1 == name2:
            return True
        with self._lock:
            if not self._has_role(name1) or not self._has_role(name2):
                return False
            return self._create_role(name1).has_role(name2, self.max_hierarchy_level)

    def get_roles(self, name: str, *args: str) -> list[str]:
        (name,) = self._qualify(args, name)
        with self._lock:
            if not self._has_role(name):
                return []
            roles = self._create_role(name).get_roles()
        return self._unqualify(args, roles)

    def get_users(self, name: str, *args: str) -> list[str]:
        (name,) = self._qualify(args, name)
        with self._lock:
            if not self._has_role(name):
                raise NameNotFoundError()
            users = [
                role.name
                for role in self._all_roles.values()
                if role.has_direct_role(name)
            ]
        return self._unqualify(args, users)

    def print_roles(self) -> None:
        if not logger.isEnabledFor(logging.INFO):
            return
        with self._lock:
            texts = [str(role) for role in self._all_roles.values()]
        logger.info(", ".join(text for text in texts if text))