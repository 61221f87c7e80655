"""Install badges and per-platform install links from a small JSON config."""

from .badge import generate_badge
from .config import create_template, parse_config
from .detect import detect_os
from .models import (
    PLATFORM_ORDER,
    UNKNOWN_PLATFORM,
    InstallTarget,
    ParseResult,
    Platform,
    Snippets,
    ValidationResult,
)
from .resolver import get_install_target
from .snippets import generate_snippets
from .validation import validate_config

__version__ = "1.0.0"

__all__ = [
    "InstallTarget",
    "PLATFORM_ORDER",
    "ParseResult",
    "Platform",
    "Snippets",
    "UNKNOWN_PLATFORM",
    "ValidationResult",
    "create_template",
    "detect_os",
    "generate_badge",
    "generate_snippets",
    "get_install_target",
    "parse_config",
    "validate_config",
]
