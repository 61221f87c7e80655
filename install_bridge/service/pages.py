"""HTML pages rendered by the install-bridge service."""

from __future__ import annotations

from collections.abc import Mapping
from html import escape
from typing import Any

from ..models import PLATFORM_NAMES, UNKNOWN_PLATFORM

_FALLBACK_STYLE = """body {
  font-family: -apple-system,BlinkMacSystemFont,'Segoe UI',Roboto,sans-serif;
  background:#f5f5f5;
  display:flex;
  align-items:center;
  justify-content:center;
  min-height:100vh;
  margin:0;
  padding:20px;
}
.container {
  background:white;
  border-radius:8px;
  box-shadow:0 4px 12px rgba(0,0,0,0.1);
  max-width:520px;
  width:100%;
  padding:40px;
  text-align:center;
}
h1 { margin-bottom:10px; }
.notice {
  color:#d73a49;
  margin-bottom:20px;
}
a.btn {
  display:block;
  margin:10px 0;
  padding:14px 20px;
  background:#0366d6;
  color:white;
  text-decoration:none;
  border-radius:6px;
  font-weight:500;
}
a.btn:hover { background:#0256c1; }
.footer {
  margin-top:30px;
  font-size:14px;
  color:#666;
}"""

_INDEX_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>Install Bridge</title>
<style>
body {
  font-family:-apple-system,BlinkMacSystemFont,'Segoe UI',Roboto,sans-serif;
  max-width:800px;
  margin:60px auto;
  padding:20px;
  line-height:1.6;
}
code { background:#f5f5f5; padding:2px 6px; border-radius:4px; }
</style>
</head>
<body>
<h1>Install Bridge Server</h1>
<p>Stateless HTTP interface for Install Bridge.</p>
<ul>
<li><code>GET /badge.svg?config=&lt;base64&gt;</code></li>
<li><code>GET /install?config=&lt;base64&gt;</code></li>
</ul>
</body>
</html>"""


def platform_name(platform: str) -> str:
    return PLATFORM_NAMES.get(str(platform), str(platform))


def render_index_page() -> str:
    return _INDEX_PAGE


def render_fallback_page(config: Mapping[str, Any], detected_os: str) -> str:
    """Render the download page shown when no installer or fallback applies.

    Config values are HTML-escaped on this page.
    """
    detected_os = str(detected_os)
    installers = config.get("installers")
    if not isinstance(installers, Mapping):
        installers = {}
    name = escape(str(config.get("name", "")))

    lines = [f"<h1>Install {name}</h1>"]
    if detected_os != UNKNOWN_PLATFORM:
        lines.append(f"<p>Detected OS: {escape(platform_name(detected_os))}</p>")
        if not installers.get(detected_os):
            lines.append('<p class="notice">No installer available for your platform</p>')
    buttons = "".join(
        f'<a class="btn" href="{escape(str(url))}">Download for {escape(platform_name(platform))}</a>'
        for platform, url in installers.items()
    )
    lines.append(buttons)
    homepage = config.get("homepage")
    if homepage:
        lines.append(f'<div class="footer"><a href="{escape(str(homepage))}">Learn more &rarr;</a></div>')

    body = "\n".join(lines)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>Install {name}</title>
<style>
{_FALLBACK_STYLE}
</style>
</head>
<body>
<div class="container">
{body}
</div>
</body>
</html>"""


__all__ = ["platform_name", "render_fallback_page", "render_index_page"]
