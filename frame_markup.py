from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple


_BULLET_PREFIXES = ("- ", "* ")
_NUM_RE = re.compile(r"^([0-9]+)\.\s+(.*)")
_BOLD_RE = re.compile(r"\*\*(.*?)\*\*")
_URL_RE = re.compile(r"https?://\S+")


@dataclass(frozen=True)
class InlineSpan:
    kind: str  # "text" | "bold" | "link"
    text: str

    @property
    def url(self) -> Optional[str]:
        return self.text if self.kind == "link" else None


@dataclass(frozen=True)
class RenderNode:
    kind: str  # "paragraph" | "bullet" | "numbered" | "blank" | "emphasis"
    spans: Tuple[InlineSpan, ...] = ()
    index: Optional[int] = None


def _split_bold(text: str) -> List[Tuple[bool, str]]:
    """
    First pass: [(is_bold, fragment), ...]. Bold fragments come back without
    their ** delimiters. A ** without a closing pair stays in a plain fragment.
    """
    parts: List[Tuple[bool, str]] = []
    pos = 0
    for m in _BOLD_RE.finditer(text):
        if m.start() > pos:
            parts.append((False, text[pos:m.start()]))
        parts.append((True, m.group(1)))
        pos = m.end()
    if pos < len(text):
        parts.append((False, text[pos:]))
    return parts


def _split_urls(text: str) -> List[InlineSpan]:
    spans: List[InlineSpan] = []
    pos = 0
    for m in _URL_RE.finditer(text):
        if m.start() > pos:
            spans.append(InlineSpan("text", text[pos:m.start()]))
        spans.append(InlineSpan("link", m.group(0)))
        pos = m.end()
    if pos < len(text):
        spans.append(InlineSpan("text", text[pos:]))
    return spans


def parse_inline(text: Optional[str]) -> List[InlineSpan]:
    """
    Two passes: bold first, then bare URLs in the non-bold fragments only.
    Bold text is never scanned for links.
    """
    spans: List[InlineSpan] = []
    for is_bold, fragment in _split_bold(text or ""):
        if is_bold:
            spans.append(InlineSpan("bold", fragment))
        else:
            spans.extend(_split_urls(fragment))
    return spans


def _render_line(line: str) -> RenderNode:
    s = line.strip()

    if s.startswith(_BULLET_PREFIXES):
        return RenderNode("bullet", tuple(parse_inline(s[2:])))

    m = _NUM_RE.match(s)
    if m:
        return RenderNode("numbered", tuple(parse_inline(m.group(2))), index=int(m.group(1)))

    if not s:
        return RenderNode("blank")

    # header-like line, e.g. "Key points:"
    if s.endswith(":"):
        return RenderNode("emphasis", tuple(parse_inline(s)))

    return RenderNode("paragraph", tuple(parse_inline(s)))


def render(body: Optional[str]) -> List[RenderNode]:
    """
    Pure function: frame body -> one render node per physical line.
    Same input always gives an equal list.
    """
    return [_render_line(line) for line in (body or "").split("\n")]
