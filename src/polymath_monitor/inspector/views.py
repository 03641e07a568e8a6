"""
Inspector views - Display-ready content for the inspector panel.

Graph items (statements and implications) get a header, their tags, the
human-readable representation as math segments, an embedding summary and
a table of the remaining properties. Trace nodes get their full decoded
payload as pretty JSON.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from ..core.models import GraphEdge, GraphNode, TextSegment, TraceNode
from ..mathtext import segment_text, strip_inline_delimiters
from ..utils.settings import get_settings

NODE_TYPE_LABEL = "Statement Node"
EDGE_TYPE_LABEL = "Implication Edge"
UNKNOWN_TITLE = "Unknown ID"

# Rendered in the header or featured sections, not in the property table
FEATURED_FIELDS = ("human_rep", "uid", "embedding")
HIDDEN_FIELDS = ("verification",)


@dataclass(frozen=True)
class PropertyRow:
    """One row of the property table"""

    key: str
    label: str
    text: str
    is_math: bool = False


@dataclass(frozen=True)
class GraphItemView:
    """Inspector content for a statement node or implication edge"""

    type_label: str
    title: str
    tags: tuple[str, ...] = ()
    human_rep: tuple[TextSegment, ...] = ()
    embedding_summary: Optional[str] = None
    rows: tuple[PropertyRow, ...] = field(default_factory=tuple)

    @property
    def is_edge(self) -> bool:
        return self.type_label == EDGE_TYPE_LABEL


@dataclass(frozen=True)
class TraceNodeView:
    """Inspector content for a trace node"""

    title: str
    body: str


def summarize_embedding(embedding: Any, dims: Optional[int] = None) -> Optional[str]:
    """Format an embedding as "[v1, v2, v3 ... N dims]"."""
    if not isinstance(embedding, (list, tuple)) or not embedding:
        return None
    if dims is None:
        dims = get_settings().embedding_preview_dims
    head = ", ".join(str(v) for v in embedding[:dims])
    return f"[{head} ... {len(embedding)} dims]"


def _display_text(value: Any) -> str:
    """Render a property value the way the panel prints it."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        # Sequences print comma-joined, nested ones flattened
        return ",".join(_display_text(v) for v in value)
    return str(value)


def property_row(key: str, value: Any) -> PropertyRow:
    label = key.replace("_", " ")
    if isinstance(value, str) and "$" in value:
        return PropertyRow(key, label, strip_inline_delimiters(value), is_math=True)
    return PropertyRow(key, label, _display_text(value))


def inspect_graph_item(item: Union[GraphNode, GraphEdge]) -> GraphItemView:
    """Build the inspector view for a graph node or edge.

    Args:
        item: The selected node or edge

    Returns:
        GraphItemView with header, featured sections and property rows
    """
    properties = item.properties
    is_edge = isinstance(item, GraphEdge)
    tags = () if is_edge else item.tags

    human_rep = properties.get("human_rep")
    rows = tuple(
        property_row(key, value)
        for key, value in properties.items()
        if key not in FEATURED_FIELDS
        and key not in HIDDEN_FIELDS
        and value is not None
    )

    return GraphItemView(
        type_label=EDGE_TYPE_LABEL if is_edge else NODE_TYPE_LABEL,
        title=str(properties.get("uid") or UNKNOWN_TITLE),
        tags=tuple(tags),
        human_rep=tuple(segment_text(human_rep)) if isinstance(human_rep, str) else (),
        embedding_summary=summarize_embedding(properties.get("embedding")),
        rows=rows,
    )


def inspect_trace_node(node: TraceNode) -> TraceNodeView:
    """Build the inspector view for a trace node."""
    payload = node.raw if node.raw is not None else node.content
    body = json.dumps(payload, indent=2, ensure_ascii=False, default=str)
    return TraceNodeView(title=node.label, body=body)
