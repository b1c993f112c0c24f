"""HTML for the two pages the server renders itself."""

from __future__ import annotations

import html

from .settings import WEBUI_DIR

NOT_FOUND_TEXT = "Paste not found"

INDEX_HTML = (WEBUI_DIR / "index.html").read_text(encoding="utf-8")

PASTE_HTML = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Paste {token}</title>
  <link rel="stylesheet" href="/style.css">
</head>
<body>
  <main>
    <pre>{content}</pre>
    <p><a href="/">New paste</a></p>
  </main>
</body>
</html>
"""


def render_paste(token: str, content: str | None, escape: bool = True) -> str:
    """Page for one paste; ``content=None`` renders the not-found text.

    With ``escape=False`` the stored text goes into the page as-is, markup
    included.
    """
    body = NOT_FOUND_TEXT if content is None else content
    if escape:
        body = html.escape(body)
    return PASTE_HTML.format(token=html.escape(token), content=body)
