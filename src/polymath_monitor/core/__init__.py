"""Core models and refresh policies."""

from .models import (
    GraphEdge,
    GraphModel,
    GraphNode,
    SegmentKind,
    TextSegment,
    TraceKind,
    TraceNode,
    VerificationLevel,
)
from .refresh import (
    AlwaysReplacePolicy,
    CardinalityPolicy,
    DeepComparePolicy,
    DisplayedModel,
    RefreshPolicy,
    get_refresh_policy,
    model_cardinality,
)

__all__ = [
    # Models
    "TraceKind",
    "TraceNode",
    "VerificationLevel",
    "GraphNode",
    "GraphEdge",
    "GraphModel",
    "SegmentKind",
    "TextSegment",
    # Refresh
    "RefreshPolicy",
    "CardinalityPolicy",
    "AlwaysReplacePolicy",
    "DeepComparePolicy",
    "DisplayedModel",
    "get_refresh_policy",
    "model_cardinality",
]
