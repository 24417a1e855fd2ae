"""
Pytest configuration and shared fixtures for all robotlang tests.
"""

import sys
import pytest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
from robotlang.passes.base import PassContext, PassManager
from robotlang.shared.nodes import Block, Call, Condition, IfElse, Program, While


# =============================================================================
# Tree fixtures
# =============================================================================

@pytest.fixture
def negated_wall_if_else():
    """IfElse(NEXT_IS_NOT_WALL, then=[move], else=[turnleft, infect])"""
    return IfElse(
        Condition.NEXT_IS_NOT_WALL,
        Block([Call("move")]),
        Block([Call("turnleft"), Call("infect")]),
    )


@pytest.fixture
def sample_program():
    """Small program with two user-defined instructions and a main loop."""
    return Program(
        "Pathfinder",
        {
            "turn-around": Block([Call("turnleft"), Call("turnleft")]),
            "step-or-turn": Block([
                IfElse(
                    Condition.NEXT_IS_NOT_EMPTY,
                    Block([Call("turn-around")]),
                    Block([Call("move")]),
                ),
            ]),
        },
        Block([
            While(Condition.TRUE, Block([
                IfElse(
                    Condition.NEXT_IS_NOT_ENEMY,
                    Block([Call("step-or-turn")]),
                    Block([Call("infect")]),
                ),
            ])),
        ]),
    )


# =============================================================================
# Pass fixtures
# =============================================================================

@pytest.fixture
def ctx():
    """Fresh pass context per test."""
    return PassContext()


@pytest.fixture
def pass_manager():
    return PassManager()


# =============================================================================
# Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers for test organization."""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
