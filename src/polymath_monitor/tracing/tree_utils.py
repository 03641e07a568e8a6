"""
Tree utility functions for trace trees.

Pure functions for traversing, previewing and comparing built trees.
"""

import json
from collections.abc import Iterable, Iterator
from typing import Optional

from ..core.models import TraceNode
from ..utils.settings import get_settings


def walk_tree(nodes: Iterable[TraceNode]) -> Iterator[TraceNode]:
    """Iterate over every node, depth-first, parents before children."""
    for node in nodes:
        yield node
        yield from walk_tree(node.children)


def collect_ids(nodes: Iterable[TraceNode]) -> list[str]:
    """Ids of all nodes in display order."""
    return [node.id for node in walk_tree(nodes)]


def count_nodes(nodes: Iterable[TraceNode]) -> int:
    return sum(1 for _ in walk_tree(nodes))


def find_node(nodes: Iterable[TraceNode], node_id: str) -> Optional[TraceNode]:
    """Find a node by id at any depth.

    Args:
        nodes: Top-level nodes of the tree
        node_id: Id to look for

    Returns:
        The first matching node or None
    """
    for node in walk_tree(nodes):
        if node.id == node_id:
            return node
    return None


def diff_ids(
    previous: Iterable[TraceNode], current: Iterable[TraceNode]
) -> tuple[list[str], list[str]]:
    """Compare two builds of the same log.

    Returns:
        Tuple of (added ids, removed ids), each in display order
    """
    previous_ids = collect_ids(previous)
    current_ids = collect_ids(current)
    known = set(previous_ids)
    kept = set(current_ids)
    added = [i for i in current_ids if i not in known]
    removed = [i for i in previous_ids if i not in kept]
    return added, removed


def node_preview(node: TraceNode, max_chars: Optional[int] = None) -> str:
    """One-line preview of a node's content.

    Args:
        node: The node to preview
        max_chars: Preview length, defaults to the preview_max_chars setting

    Returns:
        Truncated text, "[N items]" for lists, or "" when there is no content
    """
    if max_chars is None:
        max_chars = get_settings().preview_max_chars

    content = node.content
    if content is None:
        return ""
    if isinstance(content, str):
        return content[:max_chars]
    if isinstance(content, (list, tuple)):
        return f"[{len(content)} items]"
    try:
        return json.dumps(content, ensure_ascii=False, default=str)[:max_chars]
    except (TypeError, ValueError):
        return str(content)[:max_chars]
