"""
Stable app-level constants used by runtime + tests.
Keep this file dependency-free.
"""

REPORT_TITLE = "Graph analysis"
EMPTY_REPORT_TEXT = "No frames found in the model response."

# Notion rejects rich_text items whose content is longer than this.
NOTION_TEXT_LIMIT = 2000
