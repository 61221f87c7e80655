"""Markdown and HTML embed snippets for install badges."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from .models import Snippets
from .resolver import first_installer

DEFAULT_BADGE_PATH = "./install-badge.svg"


def generate_snippets(
    config: Mapping[str, Any],
    badge_path: str = DEFAULT_BADGE_PATH,
    install_url: Optional[str] = None,
) -> Snippets:
    """Build embed snippets linking the badge at ``badge_path`` to an install target.

    The link target is ``install_url`` when given, then the homepage, then the
    first installer in platform priority order.
    """
    installers = config.get("installers")
    target_url = (
        install_url
        or config.get("homepage")
        or first_installer(installers if isinstance(installers, Mapping) else None)
    )
    name = config.get("name")

    markdown = f"[![Install {name}]({badge_path})]({target_url})"
    html = f'<a href="{target_url}">\n  <img src="{badge_path}" alt="Install {name}" />\n</a>'
    return Snippets(markdown=markdown, html=html)


__all__ = ["DEFAULT_BADGE_PATH", "generate_snippets"]
