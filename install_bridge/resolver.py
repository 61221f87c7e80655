"""Install target resolution for a detected platform."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from .models import PLATFORM_ORDER, InstallTarget


def _installers(config: Mapping[str, Any]) -> Mapping[str, Any]:
    installers = config.get("installers")
    return installers if isinstance(installers, Mapping) else {}


def first_installer(installers: Optional[Mapping[str, Any]]) -> Optional[str]:
    """Return the preferred installer URL when no target platform is known.

    Canonical platforms are tried in ``PLATFORM_ORDER``; otherwise the first
    configured entry wins.
    """
    if not installers:
        return None
    for platform in PLATFORM_ORDER:
        url = installers.get(platform.value)
        if url:
            return url
    return next(iter(installers.values()), None) or None


def get_install_target(config: Mapping[str, Any], platform: str) -> InstallTarget:
    """Resolve the direct download or the fallback link for ``platform``."""
    platform = str(platform)
    url = _installers(config).get(platform)
    if url:
        return InstallTarget(available=True, platform=platform, url=url)

    fallback = config.get("fallback") or config.get("homepage") or None
    return InstallTarget(available=False, platform=platform, fallback=fallback)


__all__ = ["first_installer", "get_install_target"]
