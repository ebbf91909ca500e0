"""Atlassian Document Format (ADF) helpers.

Jira returns comments and descriptions as ADF trees: leaves carry `text`,
containers carry an ordered `content` list. The API guarantees a tree (no
cycles), so extraction recurses without a visited set.
"""

import re
from typing import Any

_URL_SPLIT = re.compile(r"(https?://[^\s]+)")
_URL = re.compile(r"^https?://")


def extract_text(node: Any) -> str:
    """Flatten an ADF node to plain text. Children are joined with no separator."""
    if not node:
        return ""
    if isinstance(node, str):
        return node
    if not isinstance(node, dict):
        return ""
    if isinstance(node.get("text"), str):
        return node["text"]
    children = node.get("content")
    if isinstance(children, list):
        return "".join(extract_text(child) for child in children)
    return ""


def linkify(text: str) -> list[dict]:
    """Split text into ADF text nodes, marking URLs as links."""
    nodes = []
    for part in _URL_SPLIT.split(text):
        if not part:
            continue
        if _URL.match(part):
            nodes.append(
                {"type": "text", "text": part, "marks": [{"type": "link", "attrs": {"href": part}}]}
            )
        else:
            nodes.append({"type": "text", "text": part})
    return nodes


def build_doc(text: str) -> dict:
    """Single-paragraph document with clickable links."""
    return {"version": 1, "type": "doc", "content": [{"type": "paragraph", "content": linkify(text)}]}


def paragraph_doc(value: str) -> dict:
    """Single-paragraph document holding value verbatim."""
    return {
        "version": 1,
        "type": "doc",
        "content": [{"type": "paragraph", "content": [{"type": "text", "text": value}]}],
    }
