"""
Property tests: ids survive append-only growth of a log.

Rebuilding a log that only gained entries (at any nesting level) must keep
every previously seen id, in the same relative order.
"""

from hypothesis import HealthCheck, given, settings, strategies as st
from hypothesis.strategies import composite

from polymath_monitor.tracing import build_trace_tree, collect_ids

# =============================================================================
# STRATEGIES (Generators)
# =============================================================================

# Settings fixtures are autouse; they do not vary between examples
FIXTURE_CHECKS = [HealthCheck.function_scoped_fixture]

message_types = st.sampled_from(
    ["TextMessage", "ToolCallRequestEvent", "ToolCallExecutionEvent", None]
)


@composite
def messages(draw):
    """Mapping entries, serialized entries, and undecodable strings."""
    kind = draw(st.sampled_from(["mapping", "with_id", "garbage"]))
    if kind == "garbage":
        return "{" + draw(st.text(max_size=10)) + "\x00"
    msg = {"source": draw(st.sampled_from(["user", "planner", "prover"]))}
    msg_type = draw(message_types)
    if msg_type:
        msg["type"] = msg_type
    msg["content"] = draw(st.text(max_size=20))
    if kind == "with_id":
        msg["id"] = "m-" + draw(st.uuids()).hex
    return msg


def logs(max_depth: int = 3):
    leaf = st.builds(
        lambda msgs: {"msgs": msgs, "subagents_logs": []},
        st.lists(messages(), max_size=4),
    )
    return st.recursive(
        leaf,
        lambda children: st.builds(
            lambda msgs, subs: {"msgs": msgs, "subagents_logs": subs},
            st.lists(messages(), max_size=4),
            st.lists(children, max_size=3),
        ),
        max_leaves=max_depth * 3,
    )


@composite
def grown(draw, log):
    """Append-only extension: new messages and sub-logs at every level."""
    subs = [draw(grown(sub)) for sub in log["subagents_logs"]]
    subs += draw(st.lists(logs(max_depth=1), max_size=2))
    return {
        "msgs": list(log["msgs"]) + draw(st.lists(messages(), max_size=3)),
        "subagents_logs": subs,
    }


@composite
def log_pairs(draw):
    log = draw(logs())
    return log, draw(grown(log))


# =============================================================================
# PROPERTIES
# =============================================================================


class TestIdMonotonicity:
    """Ids from a log are kept by every append-only extension of it"""

    @settings(max_examples=75, deadline=None, suppress_health_check=FIXTURE_CHECKS)
    @given(log_pairs())
    def test_ids_are_subset(self, pair):
        before, after = pair

        old_ids = collect_ids(build_trace_tree(before))
        new_ids = collect_ids(build_trace_tree(after))

        assert set(old_ids) <= set(new_ids)

    @settings(max_examples=75, deadline=None, suppress_health_check=FIXTURE_CHECKS)
    @given(log_pairs())
    def test_relative_order_is_kept(self, pair):
        before, after = pair

        old_ids = collect_ids(build_trace_tree(before))
        known = set(old_ids)
        new_ids = [i for i in collect_ids(build_trace_tree(after)) if i in known]

        assert new_ids == old_ids

    @settings(max_examples=50, deadline=None, suppress_health_check=FIXTURE_CHECKS)
    @given(logs())
    def test_build_is_deterministic(self, log):
        assert build_trace_tree(log) == build_trace_tree(log)
