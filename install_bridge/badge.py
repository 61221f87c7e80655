"""SVG install badge rendering."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .models import DEFAULT_BADGE_COLOR, DEFAULT_BADGE_LABEL, DEFAULT_BADGE_STYLE

_LABEL_FILL = "#555"


def _coord(value: float) -> str:
    """Format a coordinate the way existing badges print it (``28``, ``61.5``)."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def _text_length(text: str) -> int:
    """Length in UTF-16 code units, the unit existing badges were sized in."""
    return len(text.encode("utf-16-le", "surrogatepass")) // 2


def badge_widths(label: str, name: str) -> tuple[int, int, int]:
    """Return ``(label_width, name_width, total_width)`` in pixels.

    Character-count heuristic, not real text metrics. Changing it changes the
    rendered output of every published badge.
    """
    label_width = _text_length(label) * 6 + 10
    name_width = _text_length(name) * 7 + 10
    return label_width, name_width, label_width + name_width


def generate_badge(config: Mapping[str, Any]) -> str:
    """Render the install badge for ``config`` as standalone SVG markup."""
    options = config.get("badge")
    if not isinstance(options, Mapping):
        options = {}
    label = options.get("label") or DEFAULT_BADGE_LABEL
    color = options.get("color") or DEFAULT_BADGE_COLOR
    style = options.get("style") or DEFAULT_BADGE_STYLE
    app_name = config["name"]

    label_width, name_width, total_width = badge_widths(label, app_name)
    label_x = _coord(label_width / 2)
    name_x = _coord(label_width + name_width / 2)

    if style == "flat":
        return _render_flat(label, app_name, color, label_width, name_width, total_width, label_x, name_x)
    return _render_simple(label, app_name, color, label_width, name_width, total_width, label_x, name_x)


def _render_flat(
    label: str,
    app_name: str,
    color: str,
    label_width: int,
    name_width: int,
    total_width: int,
    label_x: str,
    name_x: str,
) -> str:
    return f"""<svg xmlns="http://www.w3.org/2000/svg" width="{total_width}" height="20">
  <linearGradient id="b" x2="0" y2="100%">
    <stop offset="0" stop-color="#bbb" stop-opacity=".1"/>
    <stop offset="1" stop-opacity=".1"/>
  </linearGradient>
  <clipPath id="a">
    <rect width="{total_width}" height="20" rx="3" fill="#fff"/>
  </clipPath>
  <g clip-path="url(#a)">
    <path fill="{_LABEL_FILL}" d="M0 0h{label_width}v20H0z"/>
    <path fill="{color}" d="M{label_width} 0h{name_width}v20H{label_width}z"/>
    <path fill="url(#b)" d="M0 0h{total_width}v20H0z"/>
  </g>
  <g fill="#fff" text-anchor="middle"
     font-family="DejaVu Sans,Verdana,Geneva,sans-serif" font-size="11">
    <text x="{label_x}" y="15" fill="#010101" fill-opacity=".3">{label}</text>
    <text x="{label_x}" y="14">{label}</text>
    <text x="{name_x}" y="15" fill="#010101" fill-opacity=".3">{app_name}</text>
    <text x="{name_x}" y="14">{app_name}</text>
  </g>
</svg>"""


def _render_simple(
    label: str,
    app_name: str,
    color: str,
    label_width: int,
    name_width: int,
    total_width: int,
    label_x: str,
    name_x: str,
) -> str:
    return f"""<svg xmlns="http://www.w3.org/2000/svg" width="{total_width}" height="20">
  <rect width="{label_width}" height="20" fill="{_LABEL_FILL}"/>
  <rect x="{label_width}" width="{name_width}" height="20" fill="{color}"/>
  <text x="{label_x}" y="14" fill="#fff"
        font-family="Arial,sans-serif" font-size="11"
        text-anchor="middle">{label}</text>
  <text x="{name_x}" y="14" fill="#fff"
        font-family="Arial,sans-serif" font-size="11"
        text-anchor="middle">{app_name}</text>
</svg>"""


__all__ = ["badge_widths", "generate_badge"]
