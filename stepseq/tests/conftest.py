"""Shared test fixtures for stepseq test suite."""
from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from returns.io import IOSuccess

from stepseq.sequencer.engine.types import SequenceDefinition, StepSpec

if TYPE_CHECKING:
    from unittest.mock import MagicMock

    from pytest_mock import MockerFixture


class Calculator:
    """Plain executor exposing arithmetic steps and halt state."""

    def __init__(self) -> None:
        self.halted = False
        self.halted_step: str | None = None
        self.halted_reason: object = None
        self.halted_error: Exception | None = None
        self.calls: list[str] = []

    def halt_sequence(self, reason: object) -> None:
        self.halted = True
        self.halted_reason = reason

    def add5(self, num: int) -> int:
        self.calls.append("add5")
        return num + 5

    def subtract3(self, num: int) -> int:
        self.calls.append("subtract3")
        return num - 3

    def multiply2(self, num: int) -> int:
        self.calls.append("multiply2")
        return num * 2

    def check_limit(self, num: int) -> int:
        self.calls.append("check_limit")
        if num > 10:
            self.halt_sequence("too large")
        return num

    def explode(self, num: int) -> int:
        self.calls.append("explode")
        msg = f"cannot handle {num}"
        raise ValueError(msg)


@pytest.fixture
def calculator() -> Calculator:
    """Return a fresh Calculator executor."""
    return Calculator()


@pytest.fixture
def arithmetic_definition() -> SequenceDefinition:
    """Return add5 -> subtract3 -> multiply2 with a formatting handler."""
    return SequenceDefinition(
        owner="Calculator",
        steps=(
            StepSpec(name="add5"),
            StepSpec(name="subtract3"),
            StepSpec(name="multiply2"),
        ),
        halt_handler=lambda step, reason: f"{step}: {reason}",
    )


@pytest.fixture
def mock_write_stderr(mocker: MockerFixture) -> MagicMock:
    """Return a mocked io_ops.write_stderr for diagnostic assertions."""
    return mocker.patch(  # type: ignore[no-any-return]
        "stepseq.sequencer.io_ops.write_stderr",
        return_value=IOSuccess(None),
    )
