"""
Data models for Polymath Monitor
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Optional


class TraceKind(Enum):
    """Node kinds known to the trace monitor.

    Message kinds are taken verbatim from the log, so a TraceNode may carry
    a kind that is not listed here.
    """

    WORKFLOW = "workflow"
    TEXT_MESSAGE = "TextMessage"
    TOOL_CALL_REQUEST = "ToolCallRequestEvent"
    TOOL_CALL_EXECUTION = "ToolCallExecutionEvent"
    TOOL_CALL_SUMMARY = "ToolCallSummaryMessage"


class VerificationLevel(IntEnum):
    """Ordinal verification scale carried by statements and implications"""

    REJECTED = 0
    SPECULATIVE = 1
    NUMERICAL = 2
    FORMAL_SKETCH = 3
    VERIFIED = 4


class SegmentKind(Enum):
    LITERAL = "literal"
    INLINE_MATH = "inlineMath"
    BLOCK_MATH = "blockMath"


@dataclass(frozen=True)
class TraceNode:
    """A node of the agent execution trace tree"""

    id: str
    kind: str
    label: str
    content: Any = None
    children: tuple["TraceNode", ...] = ()
    raw: Any = None  # Full decoded message or nested log, for inspection

    @property
    def known_kind(self) -> Optional[TraceKind]:
        try:
            return TraceKind(self.kind)
        except ValueError:
            return None

    @property
    def is_workflow(self) -> bool:
        return self.kind == TraceKind.WORKFLOW.value

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.kind,
            "name": self.label,
            "content": self.content,
            "children": [child.to_dict() for child in self.children],
        }


@dataclass(frozen=True)
class GraphNode:
    """A statement node of the knowledge graph"""

    id: Any
    properties: dict = field(default_factory=dict)
    labels: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    verification: Optional[VerificationLevel] = None
    color: str = ""
    size: int = 5

    def to_dict(self) -> dict:
        # Properties are spread first so the structural keys always win
        return {
            **self.properties,
            "id": self.id,
            "labels": list(self.labels),
            "tags": list(self.tags),
            "color": self.color,
            "val": self.size,
        }


@dataclass(frozen=True)
class GraphEdge:
    """An implication between two statements"""

    id: Any
    source_id: Any
    target_id: Any
    properties: dict = field(default_factory=dict)
    verification: Optional[VerificationLevel] = None
    color: str = ""
    type: str = "IMPLICATION"

    def to_dict(self) -> dict:
        return {
            "source": self.source_id,
            "target": self.target_id,
            **self.properties,
            "type": self.type,
            "id": self.id,
            "color": self.color,
        }


@dataclass(frozen=True)
class GraphModel:
    """Deduplicated node/edge graph built from one pass over query rows"""

    nodes: tuple[GraphNode, ...] = ()
    edges: tuple[GraphEdge, ...] = ()

    @property
    def cardinality(self) -> tuple[int, int]:
        return len(self.nodes), len(self.edges)

    def node(self, node_id: Any) -> Optional[GraphNode]:
        for candidate in self.nodes:
            if candidate.id == node_id:
                return candidate
        return None

    def to_dict(self) -> dict:
        """Force-graph shape: {"nodes": [...], "links": [...]}"""
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "links": [e.to_dict() for e in self.edges],
        }


@dataclass(frozen=True)
class TextSegment:
    """A span of text tagged as prose, inline math or block math"""

    kind: SegmentKind
    text: str

    @classmethod
    def literal(cls, text: str) -> "TextSegment":
        return cls(SegmentKind.LITERAL, text)

    @classmethod
    def inline_math(cls, text: str) -> "TextSegment":
        return cls(SegmentKind.INLINE_MATH, text)

    @classmethod
    def block_math(cls, text: str) -> "TextSegment":
        return cls(SegmentKind.BLOCK_MATH, text)

    @property
    def is_math(self) -> bool:
        return self.kind is not SegmentKind.LITERAL

    def to_dict(self) -> dict:
        return {self.kind.value: self.text}
