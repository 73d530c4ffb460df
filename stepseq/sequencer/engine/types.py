"""Public API types for sequence definitions (Tier 1).

Sequence authors describe WHAT steps run in WHAT order.
The runner (Tier 2) handles HOW, including halt detection.
"""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Final, Protocol

HaltHandler = Callable[[str | None, object], object]

NO_PREVIOUS_STEP: Final = None
DEFAULT_HALT_MESSAGE: Final = "No halt handler configured for"


class _Terminus:
    """End-of-list marker appended to every working step list."""

    def __repr__(self) -> str:
        return "TERMINUS"


TERMINUS: Final = _Terminus()


@dataclass(frozen=True)
class StepSpec:
    """A single named step in a sequence.

    takes_input declares whether the step consumes the
    accumulator. None means the runner infers it from the
    resolved callable's signature.
    """

    name: str
    takes_input: bool | None = None


@dataclass(frozen=True)
class SequenceDefinition:
    """Frozen, ordered step list plus its single halt handler.

    Built once per owner type and shared by every execution.
    Duplicate step names are legal and re-execute the step.
    A None halt_handler means the default handler applies.
    """

    owner: str
    steps: tuple[StepSpec, ...] = field(default_factory=tuple)
    halt_handler: HaltHandler | None = None

    @property
    def step_names(self) -> list[str]:
        """Return step identifiers in execution order."""
        return [step.name for step in self.steps]


class StepExecutor(Protocol):
    """Capability surface the runner needs from an executor.

    Steps are resolved as attributes by name. Halt state
    lives here, not on the runner, so it stays inspectable
    after the run returns.
    """

    halted: bool
    halted_step: str | None
    halted_reason: object
    halted_error: Exception | None

    def halt_sequence(self, reason: object) -> None:
        """Flag the running sequence as halted with reason."""
        ...
