"""Utility helpers shared by the site configuration loader."""

from __future__ import annotations

import collections.abc as cabc
import re
import typing as typ
from types import MappingProxyType
from urllib.parse import urlsplit

from .models import SiteConfigError

URL_SCHEMES = frozenset({"http", "https"})
# Registered names (including IDN labels) and bracketed IPv6 literals.
HOSTNAME_PATTERN = re.compile(r"^[\w.~%:-]+$")


def _require_str(payload: cabc.Mapping[str, typ.Any], key: str, field: str) -> str:
    """Return the non-empty string stored under ``key`` or raise naming ``field``."""
    value = payload.get(key)
    if value is None:
        msg = f"{field} is required."
        raise SiteConfigError(msg)
    if not isinstance(value, str) or not value.strip():
        msg = f"{field} must be a non-empty string, got {value!r}"
        raise SiteConfigError(msg)
    return value


def _require_absolute_url(value: str, field: str) -> str:
    """Return ``value`` when it is an absolute http(s) URL with a valid authority."""
    msg = f"{field} must be an absolute URL, got {value!r}"
    try:
        parts = urlsplit(value)
        # Raises for non-numeric or out-of-range ports.
        _port = parts.port
    except ValueError as exc:
        raise SiteConfigError(msg) from exc
    if (
        parts.scheme.lower() not in URL_SCHEMES
        or not parts.hostname
        or not HOSTNAME_PATTERN.match(parts.hostname)
        or any(char.isspace() for char in value)
    ):
        raise SiteConfigError(msg)
    return value


def _require_positive_int(value: object, field: str) -> int:
    """Return ``value`` when it is a positive integer (booleans excluded)."""
    match value:
        case bool():
            pass
        case int() if value > 0:
            return value
        case None:
            msg = f"{field} is required."
            raise SiteConfigError(msg)
    msg = f"{field} must be a positive integer, got {value!r}"
    raise SiteConfigError(msg)


def _optional_bool(
    payload: cabc.Mapping[str, typ.Any], key: str, field: str, *, default: bool
) -> bool:
    """Return the boolean under ``key``, ``default`` when absent."""
    value = payload.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        msg = f"{field} must be true or false, got {value!r}"
        raise SiteConfigError(msg)
    return value


def _optional_str(
    payload: cabc.Mapping[str, typ.Any], key: str, field: str, *, default: str
) -> str:
    """Return the string under ``key``, ``default`` when absent."""
    if payload.get(key) is None:
        return default
    return _require_str(payload, key, field)


def _require_mapping(value: object, field: str) -> cabc.Mapping[str, typ.Any]:
    """Return ``value`` when it is a mapping or raise naming ``field``."""
    if not isinstance(value, cabc.Mapping):
        if value is None:
            msg = f"{field} is required."
        else:
            msg = f"{field} must be a mapping, got {type(value).__name__}"
        raise SiteConfigError(msg)
    return value


def _freeze(value: typ.Any) -> typ.Any:
    """Return a read-only copy of ``value``: mappings proxied, lists as tuples."""
    if isinstance(value, cabc.Mapping):
        return MappingProxyType({str(k): _freeze(v) for k, v in value.items()})
    if isinstance(value, list | tuple):
        return tuple(_freeze(item) for item in value)
    return value


def _thaw(value: typ.Any) -> typ.Any:
    """Invert :func:`_freeze` into plain dicts and lists for serialisation."""
    if isinstance(value, cabc.Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, tuple | list):
        return [_thaw(item) for item in value]
    return value


__all__ = [
    "HOSTNAME_PATTERN",
    "URL_SCHEMES",
    "_freeze",
    "_optional_bool",
    "_optional_str",
    "_require_absolute_url",
    "_require_mapping",
    "_require_positive_int",
    "_require_str",
    "_thaw",
]
