"""Matching functions usable in access-control matchers."""

from __future__ import annotations

import ipaddress
import re
from collections.abc import Callable

from .role_manager import RBACError, RoleManager

_COLON_PARAM = re.compile(r"(.*):[^/]+(.*)")
_BRACE_PARAM = re.compile(r"(.*)\{[^/]+\}(.*)")


def key_match(key1: str, key2: str) -> bool:
    """Tell whether ``key1`` matches ``key2``, where ``*`` in ``key2`` matches any suffix."""
    i = key2.find("*")
    if i == -1:
        return key1 == key2
    if len(key1) > i:
        return key1[:i] == key2[:i]
    return key1 == key2[:i]


def key_match_func(*args: str) -> bool:
    """Call :func:`key_match` with the first two arguments."""
    return key_match(args[0], args[1])


def _expand_params(pattern: str, marker: str, param: re.Pattern[str]) -> str:
    pattern = pattern.replace("/*", "/.*")
    while marker in pattern:
        expanded = param.sub(r"\1[^/]+\2", pattern)
        if expanded == pattern:
            break
        pattern = expanded
    return pattern


def key_match2(key1: str, key2: str) -> bool:
    """Like :func:`key_match`, with ``/*`` and ``/:name`` path parameters."""
    pattern = _expand_params(key2, "/:", _COLON_PARAM)
    return regex_match(key1, "^" + pattern + "$")


def key_match2_func(*args: str) -> bool:
    """Call :func:`key_match2` with the first two arguments."""
    return key_match2(args[0], args[1])


def key_match3(key1: str, key2: str) -> bool:
    """Like :func:`key_match`, with ``/*`` and ``/{name}`` path parameters."""
    pattern = _expand_params(key2, "/{", _BRACE_PARAM)
    return regex_match(key1, "^" + pattern + "$")


def key_match3_func(*args: str) -> bool:
    """Call :func:`key_match3` with the first two arguments."""
    return key_match3(args[0], args[1])


def regex_match(key1: str, key2: str) -> bool:
    """Tell whether the regular expression ``key2`` matches somewhere in ``key1``."""
    return re.search(key2, key1) is not None


def regex_match_func(*args: str) -> bool:
    """Call :func:`regex_match` with the first two arguments."""
    return regex_match(args[0], args[1])


def _parse_ip(text: str) -> ipaddress.IPv4Address | ipaddress.IPv6Address:
    address = ipaddress.ip_address(text)
    if isinstance(address, ipaddress.IPv6Address) and address.ipv4_mapped is not None:
        return address.ipv4_mapped
    return address


def ip_match(ip1: str, ip2: str) -> bool:
    """Tell whether address ``ip1`` equals address ``ip2`` or lies in CIDR ``ip2``."""
    try:
        address = _parse_ip(ip1)
    except ValueError:
        raise ValueError(
            "invalid argument: ip1 in ip_match() is not an IP address."
        ) from None

    if "/" in ip2:
        try:
            network = ipaddress.ip_network(ip2, strict=False)
        except ValueError:
            pass
        else:
            return address in network

    try:
        other = _parse_ip(ip2)
    except ValueError:
        raise ValueError(
            "invalid argument: ip2 in ip_match() is neither an IP address nor a CIDR."
        ) from None
    return address == other


def ip_match_func(*args: str) -> bool:
    """Call :func:`ip_match` with the first two arguments."""
    return ip_match(args[0], args[1])


def generate_g_function(rm: RoleManager | None) -> Callable[..., bool]:
    """Build the ``g(name1, name2[, domain])`` function backed by a role manager."""

    def g(*args: str) -> bool:
        name1, name2 = args[0], args[1]
        if rm is None:
            return name1 == name2
        try:
            if len(args) == 2:
                return rm.has_link(name1, name2)
            return rm.has_link(name1, name2, args[2])
        except RBACError:
            return False

    return g