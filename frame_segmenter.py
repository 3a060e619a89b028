from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from frame_contract import DELIMITER, GLYPHS, ORDINALS, Ordinal, ordinal_for


_LEADING_GLYPHS_RE = re.compile(r"^(?:[" + GLYPHS + r"]\s*)+")
_TRAILING_GLYPHS_RE = re.compile(r"(?:\s*[" + GLYPHS + r"])+\s*$")
_SEPARATOR_RE = re.compile(r"^[\s—–\-:|*]+")
_MARKDOWN_LEAD_RE = re.compile(r"^(?:(?:#+|\*\*)\s*)+")


@dataclass(frozen=True)
class FrameRecord:
    """One recognized section of the model response."""
    id: int
    category: str
    title: str
    body: str

    @property
    def color(self) -> str:
        return ordinal_for(self.category).color


def _matches(ordinal: Ordinal) -> Callable[[str], bool]:
    return lambda chunk: ordinal.glyph in chunk or ordinal.marker in chunk


# Checked top-to-bottom; the first predicate that accepts a chunk decides its ordinal.
_CLASSIFIERS: Tuple[Tuple[Callable[[str], bool], Ordinal], ...] = tuple(
    (_matches(o), o) for o in ORDINALS
)


def split_chunks(document: Optional[str]) -> List[str]:
    """
    Split on the frame delimiter and drop whitespace-only pieces.
    Returned chunks are trimmed.
    """
    chunks = []
    for part in (document or "").split(DELIMITER):
        part = part.strip()
        if part:
            chunks.append(part)
    return chunks


def classify_chunk(chunk: str) -> Optional[Ordinal]:
    for matches, ordinal in _CLASSIFIERS:
        if matches(chunk):
            return ordinal
    return None


def _strip_heading(line: str, marker: str) -> str:
    s = line.strip()

    # markdown wrapping such as "## ..." or "**...**"
    lead = _MARKDOWN_LEAD_RE.match(s)
    if lead:
        s = s[lead.end():]
        if "**" in lead.group(0) and s.endswith("**"):
            s = s[:-2]

    s = _LEADING_GLYPHS_RE.sub("", s.strip())

    # "FRAME 10" is not the "FRAME 1" marker
    m = re.search(re.escape(marker) + r"(?![0-9])", s)
    if m:
        before = _TRAILING_GLYPHS_RE.sub("", s[:m.start()])
        after = _SEPARATOR_RE.sub("", s[m.end():])
        s = " ".join(p for p in (before.strip(), after.strip()) if p)
    return s.strip()


def extract_title(chunk: str, ordinal: Ordinal) -> str:
    """
    Heading text from the first line carrying the ordinal's marker, e.g.
    "🟦 FRAME 1 — PROBLEM STATEMENT" -> "PROBLEM STATEMENT".
    Falls back to the bare marker ("FRAME 1") when there is no such line
    or nothing is left after stripping.
    """
    for line in chunk.split("\n"):
        if ordinal.marker in line:
            return _strip_heading(line, ordinal.marker) or ordinal.marker
    return ordinal.marker


def segment(document: Optional[str]) -> List[FrameRecord]:
    """
    Pure function: raw model response -> ordered frame records.
    Chunks that match no ordinal are dropped. Never raises.
    """
    frames: List[FrameRecord] = []

    for chunk in split_chunks(document):
        ordinal = classify_chunk(chunk)
        if ordinal is None:
            continue

        # Line 0 is treated as the heading even when the marker sits further down.
        body = "\n".join(chunk.split("\n")[1:]).strip()

        frames.append(FrameRecord(
            id=len(frames) + 1,
            category=ordinal.category,
            title=extract_title(chunk, ordinal),
            body=body,
        ))

    return frames
