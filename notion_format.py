from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from app_contract import EMPTY_REPORT_TEXT, NOTION_TEXT_LIMIT, REPORT_TITLE
from frame_contract import ordinal_for
from frame_markup import InlineSpan, RenderNode, render
from frame_segmenter import FrameRecord


# render node kind -> Notion block type; "blank" has no block (no empty spacers)
_NODE_BLOCK_TYPES = {
    "paragraph": "paragraph",
    "bullet": "bulleted_list_item",
    "numbered": "numbered_list_item",
    "emphasis": "heading_3",
}


def date_mention_rich_text(dt: datetime):
    iso = dt.astimezone().isoformat(timespec="minutes")
    return [{
        "type": "mention",
        "mention": {"type": "date", "date": {"start": iso}}
    }]


def _chunks(s: str) -> List[str]:
    if not s:
        return [""]
    return [s[i:i + NOTION_TEXT_LIMIT] for i in range(0, len(s), NOTION_TEXT_LIMIT)]


def rt_text(s: str, bold: bool = False, url: Optional[str] = None):
    """
    Rich text items for one string. Long strings are split so every item stays
    under Notion's content limit; all pieces share the same styling.
    """
    items = []
    for piece in _chunks(s):
        text: Dict[str, Any] = {"content": piece}
        if url:
            text["link"] = {"url": url}
        item: Dict[str, Any] = {"type": "text", "text": text}
        if bold:
            item["annotations"] = {"bold": True}
        items.append(item)
    return items


def spans_rich_text(spans: Iterable[InlineSpan]):
    rich_text = []
    for span in spans:
        if span.kind == "bold":
            rich_text.extend(rt_text(span.text, bold=True))
        elif span.kind == "link":
            rich_text.extend(rt_text(span.text, url=span.url))
        else:
            rich_text.extend(rt_text(span.text))
    return rich_text


def node_block(node: RenderNode) -> Optional[Dict[str, Any]]:
    block_type = _NODE_BLOCK_TYPES.get(node.kind)
    if block_type is None:
        return None
    return {
        "object": "block",
        "type": block_type,
        block_type: {"rich_text": spans_rich_text(node.spans)},
    }


def frame_blocks(frame: FrameRecord) -> List[Dict[str, Any]]:
    ordinal = ordinal_for(frame.category)
    blocks: List[Dict[str, Any]] = [{
        "object": "block",
        "type": "heading_2",
        "heading_2": {
            "rich_text": rt_text(f"{ordinal.icon} {frame.title}"),
            "color": ordinal.color,
        }
    }]

    for node in render(frame.body):
        block = node_block(node)
        if block is not None:
            blocks.append(block)

    blocks.append({"object": "block", "type": "divider", "divider": {}})
    return blocks


def build_notion_blocks(
    frames: Iterable[FrameRecord],
    source_name: Optional[str],
    now: datetime,
) -> List[Dict[str, Any]]:
    """
    Pure function: frame records -> Notion blocks.
    No network, no model call, no Notion. Unit-test friendly.
    """
    blocks: List[Dict[str, Any]] = [{
        "object": "block",
        "type": "heading_1",
        "heading_1": {"rich_text": date_mention_rich_text(now) + rt_text(f" — {REPORT_TITLE}")}
    }]

    if source_name:
        blocks.append({
            "object": "block",
            "type": "paragraph",
            "paragraph": {"rich_text": rt_text(f"Source: {source_name}")}
        })

    blocks.append({"object": "block", "type": "divider", "divider": {}})

    frames = list(frames)
    if not frames:
        blocks.append({
            "object": "block",
            "type": "paragraph",
            "paragraph": {"rich_text": rt_text(EMPTY_REPORT_TEXT)}
        })
        return blocks

    for frame in frames:
        blocks.extend(frame_blocks(frame))

    return blocks
