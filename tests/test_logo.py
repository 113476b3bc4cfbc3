from __future__ import annotations

import re

from markupsafe import Markup

from dymnds.components.logo import render_diamond_logo


def _attr(html: str, name: str) -> str:
    match = re.search(rf'{name}="([^"]*)"', html)
    assert match, f"missing {name} in {html}"
    return match.group(1)


def test_defaults_render_empty_caller_class_and_alt():
    html = str(render_diamond_logo())
    assert html.startswith("<img ")
    assert _attr(html, "src") == "/diamond-white.png"
    assert _attr(html, "class") == "diamond-dance "
    assert _attr(html, "alt") == ""


def test_caller_class_and_alt_are_forwarded():
    html = str(render_diamond_logo("big", "Logo"))
    assert _attr(html, "class") == "diamond-dance big"
    assert _attr(html, "alt") == "Logo"


def test_values_are_escaped():
    html = render_diamond_logo('x" onload="boom', "<b>")
    assert isinstance(html, Markup)
    assert 'onload="boom' not in html
    assert "<b>" not in html
    assert "&lt;b&gt;" in html
