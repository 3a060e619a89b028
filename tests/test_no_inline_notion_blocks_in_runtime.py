from pathlib import Path


def test_report_builder_does_not_build_notion_blocks_inline():
    """
    Guardrail: All Notion block formatting must live in notion_format.py (build_notion_blocks),
    not inside frame_report.py. This prevents drift where tests no longer reflect runtime.
    """
    p = Path(__file__).resolve().parents[1] / "frame_report.py"
    text = p.read_text("utf-8")

    forbidden_markers = [
        '"type": "heading_',
        '"type": "bulleted_list_item"',
        '"type": "numbered_list_item"',
        '"type": "paragraph"',
        '"type": "divider"',
        '"rich_text"',
    ]

    hits = [m for m in forbidden_markers if m in text]
    assert hits == [], f"frame_report.py contains inline Notion blocks markers: {hits}"


def test_report_builder_does_not_parse_inline():
    p = Path(__file__).resolve().parents[1] / "frame_report.py"
    text = p.read_text("utf-8")

    assert "import re" not in text
    assert "DELIMITER" not in text
