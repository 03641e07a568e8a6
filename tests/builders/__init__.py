"""
Test Data Builders - Fluent API for creating test data.

Builder pattern provides chainable methods for constructing complex test data
with sensible defaults that can be overridden.

Usage:
    from tests.builders import ChatLogBuilder, RowBuilder

    # Create an execution log with one nested sub-execution
    log = (ChatLogBuilder()
        .add_message("planner", "start")
        .add_subagent(ChatLogBuilder().add_message("prover", "qed"))
        .build())

    # Create graph query rows
    rows = RowBuilder().statement(1, uid="S1").implies(10, target=2).build()
"""

from .chat_log import ChatLogBuilder
from .rows import RowBuilder, implication, statement

__all__ = ["ChatLogBuilder", "RowBuilder", "statement", "implication"]
