"""HTML to attributed (rich) text conversion.

The converter keeps the visible text of an HTML fragment and records which
stretches were bold, italic, linked and so on as :class:`TextRun` entries.
Runs use code-point offsets into :attr:`AttributedText.text` and always cover
the whole string.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace
from html.parser import HTMLParser
from typing import Any

from ..core.ranges import TextRange

LOGGER = logging.getLogger(__name__)

_COLLAPSIBLE_WHITESPACE = re.compile(r"[ \t\n\r\f]+")
_BULLET = "• "
_BLOCK_TAGS = frozenset(
    {
        "address",
        "article",
        "aside",
        "blockquote",
        "dd",
        "div",
        "dl",
        "dt",
        "figcaption",
        "figure",
        "footer",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "header",
        "hr",
        "li",
        "main",
        "nav",
        "ol",
        "p",
        "pre",
        "section",
        "table",
        "tr",
        "ul",
    }
)
_SKIPPED_TAGS = frozenset({"head", "script", "style", "template", "title"})
_VOID_TAGS = frozenset({"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "wbr"})
_HEADING_LEVELS = {f"h{level}": level for level in range(1, 7)}


@dataclass(slots=True, frozen=True)
class TextAttributes:
    """Character-level styling carried by a run of text."""

    bold: bool = False
    italic: bool = False
    underline: bool = False
    strikethrough: bool = False
    monospace: bool = False
    link: str | None = None
    heading: int | None = None

    @property
    def is_plain(self) -> bool:
        return self == _PLAIN


_PLAIN = TextAttributes()


@dataclass(slots=True, frozen=True)
class TextRun:
    range: TextRange
    attributes: TextAttributes


@dataclass(slots=True, frozen=True)
class AttributedText:
    """Plain text plus the styled runs covering it."""

    text: str = ""
    runs: tuple[TextRun, ...] = ()

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text

    @property
    def plain_text(self) -> str:
        return self.text

    def attributes_at(self, index: int) -> TextAttributes:
        """Return the attributes of the character at code-point ``index``."""

        if not 0 <= index < len(self.text):
            raise IndexError(f"index {index} outside text of length {len(self.text)}")
        for run in self.runs:
            if run.range.start <= index < run.range.end:
                return run.attributes
        return _PLAIN

    def run_text(self, run: TextRun) -> str:
        return self.text[run.range.start : run.range.end]


def html_to_attributed_string(markup: str) -> AttributedText:
    """Render an HTML fragment into :class:`AttributedText`.

    Returns an empty :class:`AttributedText` for empty or unparsable input.
    """

    if not isinstance(markup, str) or not markup.strip():
        return AttributedText()
    parser = _RichTextParser()
    try:
        parser.feed(markup)
        parser.close()
    except AssertionError as exc:
        LOGGER.debug("Could not parse HTML fragment: %s", exc)
        return AttributedText()
    return parser.result()


class _RichTextParser(HTMLParser):
    """Streams HTML events into ``(text, attributes)`` chunks."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self._chunks: list[list[Any]] = []
        self._stack: list[tuple[str, TextAttributes]] = []
        self._current = _PLAIN
        self._skip_depth = 0
        self._pre_depth = 0
        self._preformatted_tail = False

    # ------------------------------------------------------------------
    # HTMLParser hooks
    # ------------------------------------------------------------------
    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag in _SKIPPED_TAGS:
            self._skip_depth += 1
            return
        if self._skip_depth:
            return
        if tag == "br":
            self._trim_trailing_spaces()
            self._emit("\n", _PLAIN)
            return
        if tag in _BLOCK_TAGS:
            self._break_paragraph()
        if tag in ("td", "th") and self._tail() not in ("", "\n"):
            self._trim_trailing_spaces()
            self._emit("\t", _PLAIN)
            self._preformatted_tail = False
        if tag in _VOID_TAGS:
            return

        self._stack.append((tag, self._current))
        self._current = self._styled(tag, dict(attrs))
        if tag == "pre":
            self._pre_depth += 1
        elif tag == "li":
            self._emit(_BULLET, self._current)
            self._preformatted_tail = False

    def handle_endtag(self, tag: str) -> None:
        if tag in _SKIPPED_TAGS:
            self._skip_depth = max(0, self._skip_depth - 1)
            return
        if self._skip_depth or tag in _VOID_TAGS:
            return
        for position in range(len(self._stack) - 1, -1, -1):
            if self._stack[position][0] != tag:
                continue
            for open_tag, _ in self._stack[position:]:
                if open_tag == "pre":
                    self._pre_depth = max(0, self._pre_depth - 1)
            self._current = self._stack[position][1]
            del self._stack[position:]
            break
        if tag in _BLOCK_TAGS:
            self._break_paragraph()

    def handle_data(self, data: str) -> None:
        if self._skip_depth or not data:
            return
        if self._pre_depth:
            self._emit(data, self._current)
            self._preformatted_tail = True
            return
        collapsed = _COLLAPSIBLE_WHITESPACE.sub(" ", data)
        if self._tail() in ("", "\n", " ", "\t"):
            collapsed = collapsed.lstrip(" ")
        self._emit(collapsed, self._current)
        if collapsed:
            self._preformatted_tail = False

    # ------------------------------------------------------------------
    # Result assembly
    # ------------------------------------------------------------------
    def result(self) -> AttributedText:
        self._trim_trailing("\n" if self._preformatted_tail else " \n\t")
        text_parts: list[str] = []
        runs: list[TextRun] = []
        offset = 0
        for chunk_text, attributes in self._chunks:
            if not chunk_text:
                continue
            end = offset + len(chunk_text)
            if runs and runs[-1].attributes == attributes:
                runs[-1] = TextRun(TextRange(runs[-1].range.start, end), attributes)
            else:
                runs.append(TextRun(TextRange(offset, end), attributes))
            text_parts.append(chunk_text)
            offset = end
        return AttributedText(text="".join(text_parts), runs=tuple(runs))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _styled(self, tag: str, attrs: dict[str, str | None]) -> TextAttributes:
        current = self._current
        if tag in ("b", "strong"):
            return replace(current, bold=True)
        if tag in ("i", "em", "cite", "var", "dfn"):
            return replace(current, italic=True)
        if tag in ("u", "ins"):
            return replace(current, underline=True)
        if tag in ("s", "strike", "del"):
            return replace(current, strikethrough=True)
        if tag in ("code", "tt", "kbd", "samp", "pre"):
            return replace(current, monospace=True)
        if tag == "a" and attrs.get("href"):
            return replace(current, link=attrs["href"])
        if tag in _HEADING_LEVELS:
            return replace(current, bold=True, heading=_HEADING_LEVELS[tag])
        return current

    def _emit(self, text: str, attributes: TextAttributes) -> None:
        if not text:
            return
        if self._chunks and self._chunks[-1][1] == attributes:
            self._chunks[-1][0] += text
        else:
            self._chunks.append([text, attributes])

    def _tail(self) -> str:
        for chunk_text, _ in reversed(self._chunks):
            if chunk_text:
                return chunk_text[-1]
        return ""

    def _break_paragraph(self) -> None:
        self._trim_trailing_spaces()
        if self._tail() not in ("", "\n"):
            self._emit("\n", _PLAIN)

    def _trim_trailing_spaces(self) -> None:
        if not self._preformatted_tail:
            self._trim_trailing(" ")

    def _trim_trailing(self, characters: str) -> None:
        while self._chunks:
            trimmed = self._chunks[-1][0].rstrip(characters)
            if trimmed:
                self._chunks[-1][0] = trimmed
                return
            self._chunks.pop()


__all__ = ["AttributedText", "TextAttributes", "TextRun", "html_to_attributed_string"]
