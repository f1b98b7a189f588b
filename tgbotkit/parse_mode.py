"""Text formatting helpers for the Bot API parse modes."""

from __future__ import annotations

import re
from typing import Callable, Mapping, NamedTuple


class _Tag(NamedTuple):
    start: str = ""
    end: str = ""

    def wrap(self, content: str) -> str:
        return self.start + content + self.end


_EMPTY_TAG = _Tag()
_LINK_PLACEHOLDER = re.compile(r"\{title\}|\{url\}")


class ParseMode:
    """A message formatting mode: builds and escapes marked-up text."""

    __slots__ = ("_name", "_separator", "_tags", "_link_template", "_escaper")

    def __init__(
        self,
        name: str,
        *,
        tags: Mapping[str, tuple[str, str]],
        link_template: str,
        escaper: Callable[[str], str],
        separator: str = " ",
    ) -> None:
        self._name = name
        self._separator = separator
        self._tags = {kind: _Tag(*pair) for kind, pair in tags.items()}
        self._link_template = link_template
        self._escaper = escaper

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"ParseMode({self._name!r}, separator={self._separator!r})"

    def _wrap(self, kind: str, parts: tuple[str, ...]) -> str:
        return self._tags.get(kind, _EMPTY_TAG).wrap(self._separator.join(parts))

    def sep(self, separator: str) -> "ParseMode":
        """Return a copy that joins arguments with ``separator``."""
        clone = ParseMode.__new__(ParseMode)
        clone._name = self._name
        clone._separator = separator
        clone._tags = self._tags
        clone._link_template = self._link_template
        clone._escaper = self._escaper
        return clone

    def text(self, *args: str) -> str:
        return "\n".join(args)

    def line(self, *args: str) -> str:
        return " ".join(args)

    def bold(self, *args: str) -> str:
        return self._wrap("bold", args)

    def italic(self, *args: str) -> str:
        return self._wrap("italic", args)

    def underline(self, *args: str) -> str:
        return self._wrap("underline", args)

    def strike(self, *args: str) -> str:
        return self._wrap("strike", args)

    def spoiler(self, *args: str) -> str:
        return self._wrap("spoiler", args)

    def link(self, title: str, url: str) -> str:
        values = {"{title}": title, "{url}": url}
        return _LINK_PLACEHOLDER.sub(lambda m: values[m.group(0)], self._link_template)

    def code(self, *args: str) -> str:
        return self._wrap("code", args)

    def pre(self, *args: str) -> str:
        return self._wrap("pre", args)

    def blockquote(self, *args: str) -> str:
        return self._wrap("blockquote", args)

    def escape(self, value: str) -> str:
        return self._escaper(value)


_HTML_ESCAPES = str.maketrans(
    {"&": "&amp;", "'": "&#39;", "<": "&lt;", ">": "&gt;", '"': "&#34;"}
)


def _escape_html(value: str) -> str:
    return value.translate(_HTML_ESCAPES)


def _regexp_escaper(pattern: str) -> Callable[[str], str]:
    compiled = re.compile(pattern)
    return lambda value: compiled.sub(r"\\\1", value)


HTML = ParseMode(
    "HTML",
    tags={
        "bold": ("<b>", "</b>"),
        "italic": ("<i>", "</i>"),
        "underline": ("<u>", "</u>"),
        "strike": ("<s>", "</s>"),
        "spoiler": ("<tg-spoiler>", "</tg-spoiler>"),
        "code": ("<code>", "</code>"),
        "pre": ("<pre>", "</pre>"),
        "blockquote": ("<blockquote>", "</blockquote>"),
    },
    link_template='<a href="{url}">{title}</a>',
    escaper=_escape_html,
)

# Legacy mode; prefer MD2.
MD = ParseMode(
    "Markdown",
    tags={
        "bold": ("*", "*"),
        "italic": ("_", "_"),
        "code": ("`", "`"),
        "pre": ("```", "```"),
    },
    link_template="[{title}]({url})",
    escaper=_regexp_escaper(r"([_*`\[])"),
)

MD2 = ParseMode(
    "MarkdownV2",
    tags={
        "bold": ("*", "*"),
        "italic": ("_", "_"),
        "underline": ("__", "__"),
        "strike": ("~", "~"),
        "spoiler": ("||", "||"),
        "code": ("`", "`"),
        "pre": ("```", "```"),
        "blockquote": (">", ""),
    },
    link_template="[{title}]({url})",
    escaper=_regexp_escaper(r"([_*\[\]()~`>#+\-=|{}.!])"),
)