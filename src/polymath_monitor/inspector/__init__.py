"""Inspector panel view models."""

from .views import (
    EDGE_TYPE_LABEL,
    NODE_TYPE_LABEL,
    UNKNOWN_TITLE,
    GraphItemView,
    PropertyRow,
    TraceNodeView,
    inspect_graph_item,
    inspect_trace_node,
    property_row,
    summarize_embedding,
)

__all__ = [
    "GraphItemView",
    "TraceNodeView",
    "PropertyRow",
    "inspect_graph_item",
    "inspect_trace_node",
    "property_row",
    "summarize_embedding",
    "NODE_TYPE_LABEL",
    "EDGE_TYPE_LABEL",
    "UNKNOWN_TITLE",
]
