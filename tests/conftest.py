"""
Pytest configuration and shared fixtures for polymath_monitor tests.

This module provides:
- Settings isolation (no test reads the user's settings file)
- Sample execution logs and graph query rows built with tests.builders
"""

import sys
from pathlib import Path

import pytest

# Add src and project root to path for imports
root_path = Path(__file__).parent.parent
sys.path.insert(0, str(root_path / "src"))
sys.path.insert(0, str(root_path))

from tests.builders import ChatLogBuilder, RowBuilder  # noqa: E402


# =============================================================================
# Settings Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point settings at an empty temp dir and drop the cached instance."""
    from polymath_monitor.utils import settings

    config_dir = tmp_path / "config"
    monkeypatch.setattr(settings, "CONFIG_DIR", str(config_dir))
    monkeypatch.setattr(settings, "CONFIG_FILE", str(config_dir / "settings.json"))
    monkeypatch.setattr(settings, "_settings", None)
    yield settings


# =============================================================================
# Execution Log Fixtures
# =============================================================================


@pytest.fixture
def simple_log() -> dict:
    """Two messages and one sub-execution with one message."""
    return (
        ChatLogBuilder()
        .add_message("user", "Prove that gcd(a,b) divides a")
        .add_tool_request("planner", [{"name": "search", "arguments": "{}"}])
        .add_subagent(ChatLogBuilder().add_message("prover", "Done."))
        .build()
    )


@pytest.fixture
def nested_log() -> dict:
    """Sub-executions nested two levels deep."""
    inner = ChatLogBuilder().add_message("checker", "verified")
    middle = (
        ChatLogBuilder()
        .add_message("prover", "working")
        .add_subagent(inner)
        .add_subagent(ChatLogBuilder())
    )
    return ChatLogBuilder().add_message("planner", "start").add_subagent(middle).build()


# =============================================================================
# Graph Row Fixtures
# =============================================================================


@pytest.fixture
def statement_rows() -> list[dict]:
    """S1 implies S2 via implication 10; S2 repeated as a later source; S3 alone."""
    return (
        RowBuilder()
        .statement(1, uid="S1", verification=4, tags=["algebra", "gcd"])
        .implies(10, target=2, target_properties={"uid": "S2", "verification": 1}, verification=2)
        .statement(2, uid="S2 (later)", verification=0, tags=["late"])
        .statement(3, uid="S3")
        .build()
    )
