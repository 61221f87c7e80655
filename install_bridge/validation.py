"""Structural and URL-syntax validation for install-bridge configs."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List

from pydantic import AnyUrl, TypeAdapter

from .models import PLATFORM_ORDER, ValidationResult

_URL_ADAPTER = TypeAdapter(AnyUrl)
_PLATFORM_KEYS = {platform.value for platform in PLATFORM_ORDER}


def is_valid_url(value: Any) -> bool:
    """Return True when ``value`` is a syntactically valid absolute URL.

    Any scheme is accepted, ``file:`` included. Reachability and scheme policy
    are not checked.
    """
    if not isinstance(value, str):
        return False
    try:
        _URL_ADAPTER.validate_python(value)
    except ValueError:
        # ValidationError, or UnicodeEncodeError for lone surrogates
        return False
    return True


def validate_config(candidate: Any) -> ValidationResult:
    """Check ``candidate`` and collect every structural and value error."""
    if not isinstance(candidate, Mapping):
        return ValidationResult(valid=False, errors=["Config must be an object"])

    errors: List[str] = []

    name = candidate.get("name")
    if not name or not isinstance(name, str):
        errors.append("name is required and must be a string")

    installers = candidate.get("installers")
    if not isinstance(installers, Mapping):
        errors.append("installers is required and must be an object")
    else:
        if not installers:
            errors.append("at least one installer platform must be specified")

        for platform, url in installers.items():
            if platform not in _PLATFORM_KEYS:
                errors.append(f"invalid platform: {platform} (must be darwin, win32, or linux)")
            if not is_valid_url(url):
                errors.append(f"installer for {platform} must be a valid HTTP(S) URL")

    return ValidationResult(valid=not errors, errors=errors)


__all__ = ["is_valid_url", "validate_config"]
