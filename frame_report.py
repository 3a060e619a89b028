from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional, Tuple

from frame_segmenter import FrameRecord, segment, split_chunks
from notion_format import build_notion_blocks


@dataclass(frozen=True)
class AnalysisResult:
    raw_text: str
    frames: Tuple[FrameRecord, ...]


def _no_status(msg: str) -> None:
    pass


class ReportBuilder:
    """
    Glue between the model response and the formatters.
    All parsing lives in frame_segmenter / frame_markup, all block building
    in notion_format; this class only sequences them and reports status.
    """

    def __init__(self, status_cb: Optional[Callable[[str], None]] = None):
        self.status_cb = status_cb or _no_status

    def parse(self, raw_text: Optional[str]) -> AnalysisResult:
        if not (raw_text or "").strip():
            raise RuntimeError("No response text generated.")

        self.status_cb("Parsing response")
        frames = tuple(segment(raw_text))

        skipped = len(split_chunks(raw_text)) - len(frames)
        if skipped:
            self.status_cb(f"Skipped {skipped} unrecognized sections")
        self.status_cb(f"Parsed {len(frames)} frames")

        return AnalysisResult(raw_text=raw_text, frames=frames)

    def notion_blocks(self, result: AnalysisResult, source_name: Optional[str], now: Optional[datetime] = None) -> list:
        return build_notion_blocks(result.frames, source_name, now or datetime.now())
