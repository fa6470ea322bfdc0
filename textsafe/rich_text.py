"""HTML rendering helpers for user text.

Link detection and newline conversion are delegated to a ``RawHtml``
implementation; ``BasicRawHtml`` is the default one. Helpers here only decide
what gets escaped before it reaches that collaborator.
"""

from __future__ import annotations

import html
import re
from typing import Protocol

AT_USERNAME_RE = re.compile(r"@(?<![\w@#/]@)([\w-]{2,30})(?![@\w-]|\.\w)")
FORUM_POST_PATH_RE = re.compile(r"(?:(?<= )|^)\b([\w-]+/[\w-]+)\b(?:(?= )|$)")

_URL_RE = re.compile(r"https?://[^\s<>\"']+", re.IGNORECASE)
_IMAGE_URL_RE = re.compile(r"\.(?:png|jpe?g|gif|webp)(?:\?\S*)?$", re.IGNORECASE)
_MARKDOWN_LINK_RE = re.compile(r"\[([^\]\n]+)\]\((https?://[^)\s]+)\)")
_NEWLINE_RE = re.compile(r"\r?\n")
_LINK_OR_MENTION_RE = re.compile(f"(?P<url>{_URL_RE.pattern})|(?P<mention>{AT_USERNAME_RE.pattern})", re.IGNORECASE)

_LINK_ATTRS = 'rel="nofollow noopener noreferrer" target="_blank"'


class RawHtml(Protocol):
    """Link expansion and line-break conversion, treated as a black box."""

    def add_links(self, text: str, expand_img: bool = True) -> str:
        ...

    def nl2br(self, text: str) -> str:
        ...

    def has_links(self, text: str) -> bool:
        ...

    def just_markdown_links(self, text: str) -> str:
        ...


class BasicRawHtml:
    """Autolinks http(s) URLs and ``@username`` mentions."""

    def _render_url(self, url: str, expand_img: bool) -> str:
        href = html.escape(url)
        if expand_img and _IMAGE_URL_RE.search(url):
            return f'<img src="{href}" class="embed" alt=""/>'
        return f'<a {_LINK_ATTRS} href="{href}">{href}</a>'

    def _render_match(self, m: re.Match[str], expand_img: bool) -> str:
        if m.group("url"):
            return self._render_url(m.group("url"), expand_img)
        name = m.group("mention")[1:]
        return f'<a href="/@/{html.escape(name)}">@{html.escape(name)}</a>'

    def add_links(self, text: str, expand_img: bool = True) -> str:
        out: list[str] = []
        pos = 0
        for m in _LINK_OR_MENTION_RE.finditer(text):
            out.append(html.escape(text[pos : m.start()]))
            out.append(self._render_match(m, expand_img))
            pos = m.end()
        out.append(html.escape(text[pos:]))
        return "".join(out)

    def nl2br(self, text: str) -> str:
        return _NEWLINE_RE.sub("<br>", text)

    def has_links(self, text: str) -> bool:
        return _URL_RE.search(text) is not None

    def just_markdown_links(self, text: str) -> str:
        return _MARKDOWN_LINK_RE.sub(lambda m: f'<a {_LINK_ATTRS} href="{m.group(2)}">{m.group(1)}</a>', text)


DEFAULT_RAW_HTML: RawHtml = BasicRawHtml()


def escape_html(text: str) -> str:
    return html.escape(text, quote=True)


def unescape_html(text: str) -> str:
    return html.unescape(text)


def has_links(text: str, raw_html: RawHtml = DEFAULT_RAW_HTML) -> bool:
    return raw_html.has_links(text)


def rich_text(
    text: str,
    nl2br: bool = True,
    expand_img: bool = True,
    raw_html: RawHtml = DEFAULT_RAW_HTML,
) -> str:
    with_links = raw_html.add_links(text, expand_img)
    return raw_html.nl2br(with_links) if nl2br else with_links


def nl2br_unsafe(text: str, raw_html: RawHtml = DEFAULT_RAW_HTML) -> str:
    """Convert newlines without escaping; ``text`` must already be safe."""
    return raw_html.nl2br(text)


def nl2br(text: str, raw_html: RawHtml = DEFAULT_RAW_HTML) -> str:
    return nl2br_unsafe(escape_html(text), raw_html)


def markdown_links_or_rich_text(text: str, raw_html: RawHtml = DEFAULT_RAW_HTML) -> str:
    """Render ``[label](url)`` links if present, else fall back to ``rich_text``."""

    escaped = escape_html(text)
    marked = raw_html.just_markdown_links(escaped)
    if marked == escaped:
        return rich_text(text, raw_html=raw_html)
    return nl2br_unsafe(marked, raw_html)
