"""User-agent based platform detection."""

from __future__ import annotations

from typing import Optional

from .models import UNKNOWN_PLATFORM, Platform

# Checked in order; the first group with a matching token wins.
_UA_TOKENS = (
    (Platform.DARWIN, ("mac", "darwin", "iphone", "ipad")),
    (Platform.LINUX, ("linux", "android")),
    (Platform.WIN32, ("win",)),
)


def detect_os(user_agent: Optional[str]) -> str:
    """Classify a User-Agent string as darwin, linux, win32 or unknown."""
    if not user_agent:
        return UNKNOWN_PLATFORM

    ua = user_agent.lower()
    for platform, tokens in _UA_TOKENS:
        if any(token in ua for token in tokens):
            return platform
    return UNKNOWN_PLATFORM


__all__ = ["detect_os"]
