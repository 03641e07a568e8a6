"""Trace tree building for agent execution logs."""

from .parser import coerce_log, fallback_message, parse_message
from .tree_builder import (
    ROOT_PATH,
    SUBAGENT_LABEL,
    SUBAGENT_PLACEHOLDER,
    TraceTreeBuilder,
    build_from_status,
    build_trace_tree,
)
from .tree_utils import (
    collect_ids,
    count_nodes,
    diff_ids,
    find_node,
    node_preview,
    walk_tree,
)

__all__ = [
    "TraceTreeBuilder",
    "build_trace_tree",
    "build_from_status",
    "parse_message",
    "fallback_message",
    "coerce_log",
    "ROOT_PATH",
    "SUBAGENT_LABEL",
    "SUBAGENT_PLACEHOLDER",
    "walk_tree",
    "collect_ids",
    "count_nodes",
    "find_node",
    "diff_ids",
    "node_preview",
]
