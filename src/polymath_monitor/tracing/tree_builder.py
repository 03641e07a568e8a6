"""
Trace Tree Builder - Turns nested agent execution logs into trace trees.

The log structure is recursive:

    {
        "msgs": [<message or JSON string>, ...],
        "subagents_logs": [<log>, ...],
    }

and maps to:
    - one node per message, in log order
    - one "workflow" node per sub-execution, after the messages
      - the sub-execution's own messages and workflows as children

Node ids are derived from the log position (or taken from an explicit
message id), so rebuilding a log that has only grown by appension keeps
every previously assigned id and order.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Optional

from ..core.models import TraceKind, TraceNode
from .parser import DEFAULT_KIND, UNKNOWN_SOURCE, coerce_log, parse_message

ROOT_PATH = "root"
SUBAGENT_LABEL = "Subagent Execution"
SUBAGENT_PLACEHOLDER = "Use inspector to view details"


def message_node_id(parent_path: str, index: int) -> str:
    return f"{parent_path}-msg-{index}"


def subagent_node_id(parent_path: str, index: int) -> str:
    return f"{parent_path}-sub-{index}"


def _entries(log: Mapping, key: str) -> Sequence:
    value = log.get(key)
    if isinstance(value, (list, tuple)):
        return value
    return ()


class TraceTreeBuilder:
    """Builds trace trees from agent execution logs.

    The builder holds no state between calls; the key names only describe
    the log shape.
    """

    def __init__(
        self,
        messages_key: str = "msgs",
        subagents_key: str = "subagents_logs",
    ):
        self.messages_key = messages_key
        self.subagents_key = subagents_key

    def build(self, chat_log: Any, parent_path: str = ROOT_PATH) -> list[TraceNode]:
        """Build the ordered list of top-level nodes for a log.

        Args:
            chat_log: Execution log mapping (or its JSON serialization)
            parent_path: Id prefix of the enclosing execution

        Returns:
            Message nodes followed by sub-execution nodes
        """
        log = coerce_log(chat_log)
        if not log:
            return []

        nodes = [
            self._message_node(raw, index, parent_path)
            for index, raw in enumerate(_entries(log, self.messages_key))
        ]
        nodes.extend(
            self._subagent_node(sub_log, index, parent_path)
            for index, sub_log in enumerate(_entries(log, self.subagents_key))
        )
        return nodes

    def build_from_status(self, agent_work: Any) -> list[TraceNode]:
        """Build the tree from an agent status payload ({"log": {...}})."""
        if not isinstance(agent_work, Mapping):
            return []
        return self.build(agent_work.get("log"))

    # -------------------------------------------------------------------------
    # Node Builders
    # -------------------------------------------------------------------------

    def _message_node(self, raw: Any, index: int, parent_path: str) -> TraceNode:
        msg = parse_message(raw)
        explicit_id = msg.get("id")
        kind = str(msg.get("type") or DEFAULT_KIND)
        source = msg.get("source") or UNKNOWN_SOURCE

        return TraceNode(
            id=(
                str(explicit_id)
                if explicit_id is not None and explicit_id != ""
                else message_node_id(parent_path, index)
            ),
            kind=kind,
            label=f"{source} ({kind})",
            content=msg.get("content"),
            children=(),
            raw=msg,
        )

    def _subagent_node(self, sub_log: Any, index: int, parent_path: str) -> TraceNode:
        path = subagent_node_id(parent_path, index)
        return TraceNode(
            id=path,
            kind=TraceKind.WORKFLOW.value,
            label=SUBAGENT_LABEL,
            content=SUBAGENT_PLACEHOLDER,
            children=tuple(self.build(sub_log, path)),
            raw=sub_log,
        )


_default_builder = TraceTreeBuilder()


def build_trace_tree(chat_log: Any, parent_path: str = ROOT_PATH) -> list[TraceNode]:
    """Build a trace tree with the default log shape."""
    return _default_builder.build(chat_log, parent_path)


def build_from_status(agent_work: Optional[Mapping]) -> list[TraceNode]:
    """Build a trace tree from an agent status payload."""
    return _default_builder.build_from_status(agent_work)
