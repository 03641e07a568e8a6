"""
Replacement policies for freshly built display models.

Builders recompute their model wholesale on every poll. Whether the new
model replaces the one on screen is the caller's decision; the policies
here encode that decision so it can be swapped without touching the
builders.

    CardinalityPolicy    replace only when node/edge counts change
    AlwaysReplacePolicy  replace on every build
    DeepComparePolicy    replace when the serialized models differ

With CardinalityPolicy, property-only changes on already-known entities
stay invisible until a cardinality change occurs. This avoids a full
relayout of the force graph on every poll.
"""

from typing import Any, Generic, Optional, Protocol, TypeVar

from ..utils.logger import debug, warn
from ..utils.settings import get_settings
from .models import GraphModel, TraceNode

M = TypeVar("M")


def model_cardinality(model: Any) -> tuple[int, ...]:
    """Count what a renderer would have to lay out for a model.

    Graph models count nodes and edges; trace trees (sequences of
    TraceNode) count every node at every depth.
    """
    if isinstance(model, GraphModel):
        return model.cardinality

    total = 0
    stack = list(model or ())
    while stack:
        node = stack.pop()
        total += 1
        if isinstance(node, TraceNode):
            stack.extend(node.children)
    return (total,)


def _serialize(model: Any) -> Any:
    if isinstance(model, GraphModel):
        return model.to_dict()
    return [n.to_dict() if isinstance(n, TraceNode) else n for n in model or ()]


class RefreshPolicy(Protocol):
    """Decides whether a new model replaces the displayed one."""

    def should_replace(self, previous: Optional[Any], current: Any) -> bool: ...


class CardinalityPolicy:
    def should_replace(self, previous: Optional[Any], current: Any) -> bool:
        if previous is None:
            return True
        return model_cardinality(previous) != model_cardinality(current)


class AlwaysReplacePolicy:
    def should_replace(self, previous: Optional[Any], current: Any) -> bool:
        return True


class DeepComparePolicy:
    def should_replace(self, previous: Optional[Any], current: Any) -> bool:
        if previous is None:
            return True
        return _serialize(previous) != _serialize(current)


REFRESH_POLICIES = {
    "cardinality": CardinalityPolicy,
    "always": AlwaysReplacePolicy,
    "deep": DeepComparePolicy,
}


def get_refresh_policy(name: str) -> RefreshPolicy:
    """Resolve a policy by its settings name.

    Unknown names fall back to the cardinality policy.
    """
    policy_cls = REFRESH_POLICIES.get((name or "").lower())
    if policy_cls is None:
        warn(f"Unknown refresh policy {name!r}, using 'cardinality'")
        policy_cls = CardinalityPolicy
    return policy_cls()


class DisplayedModel(Generic[M]):
    """Holds the model currently on screen.

    Not thread-safe; owned by the presentation layer that polls.
    """

    def __init__(self, policy: Optional[RefreshPolicy] = None):
        self.policy: RefreshPolicy = policy or CardinalityPolicy()
        self.current: Optional[M] = None

    def offer(self, model: M) -> bool:
        """Offer a freshly built model; returns True if it was adopted."""
        if not self.policy.should_replace(self.current, model):
            debug("Keeping displayed model, no relevant change")
            return False
        self.current = model
        return True

    def reset(self) -> None:
        self.current = None

    @classmethod
    def for_graph(cls) -> "DisplayedModel":
        """Holder for the knowledge graph, using the configured policy."""
        return cls(get_refresh_policy(get_settings().graph_refresh_policy))

    @classmethod
    def for_trace(cls) -> "DisplayedModel":
        """Holder for the trace tree, using the configured policy."""
        return cls(get_refresh_policy(get_settings().trace_refresh_policy))
