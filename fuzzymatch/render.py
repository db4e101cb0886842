"""
Highlighting of match results for display.

The scorer only decides which characters matched; escaping and markup are
applied here, once, over the whole result.
"""

import html


def render_html(result, tag: str = "b") -> str:
    """
    Render a match as HTML.

    Every segment is HTML-escaped and each matched character is wrapped in
    <tag>...</tag>.

    Args:
        result: MatchResult to render
        tag: Element name used to mark matched characters

    Returns:
        HTML string
    """
    parts = []
    for plain, char in result.pieces:
        parts.append(html.escape(plain, quote=False))
        if char:
            parts.append(f"<{tag}>{html.escape(char, quote=False)}</{tag}>")
    return "".join(parts)


def render_marked(result, open: str = "[", close: str = "]") -> str:
    """Render a match as plain text with matched characters bracketed."""
    return "".join(
        plain + (f"{open}{char}{close}" if char else "")
        for plain, char in result.pieces
    )
