"""Core data models shared across install-bridge components."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Dict, List, Optional


class Platform(StrEnum):
    """Platforms an installer can be configured for."""

    DARWIN = "darwin"
    WIN32 = "win32"
    LINUX = "linux"


# Only ever produced by OS detection, never a valid installer key.
UNKNOWN_PLATFORM = "unknown"

PLATFORM_ORDER = (Platform.DARWIN, Platform.WIN32, Platform.LINUX)

PLATFORM_NAMES = {
    Platform.DARWIN.value: "macOS",
    Platform.WIN32.value: "Windows",
    Platform.LINUX.value: "Linux",
}

DEFAULT_BADGE_LABEL = "Install"
DEFAULT_BADGE_COLOR = "#0366d6"
DEFAULT_BADGE_STYLE = "flat"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a configuration candidate."""

    valid: bool
    errors: List[str]


@dataclass(frozen=True)
class InstallTarget:
    """Resolved install destination for a single platform."""

    available: bool
    platform: str
    url: Optional[str] = None
    fallback: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"available": self.available, "platform": self.platform}
        if self.available:
            data["url"] = self.url
        else:
            data["fallback"] = self.fallback
        return data


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing and validating raw configuration text."""

    success: bool
    config: Optional[Dict[str, Any]] = None
    errors: Optional[List[str]] = None

    def to_dict(self) -> Dict[str, Any]:
        if self.success:
            return {"success": True, "config": self.config}
        return {"success": False, "errors": list(self.errors or [])}


@dataclass(frozen=True)
class Snippets:
    """Embed snippets pointing a badge image at an install target."""

    markdown: str
    html: str

    def to_dict(self) -> Dict[str, str]:
        return {"markdown": self.markdown, "html": self.html}


__all__ = [
    "DEFAULT_BADGE_COLOR",
    "DEFAULT_BADGE_LABEL",
    "DEFAULT_BADGE_STYLE",
    "InstallTarget",
    "PLATFORM_NAMES",
    "PLATFORM_ORDER",
    "ParseResult",
    "Platform",
    "Snippets",
    "UNKNOWN_PLATFORM",
    "ValidationResult",
]
