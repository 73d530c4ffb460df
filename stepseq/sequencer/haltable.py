"""Haltable mixin -- executor capability surface for owner classes.

Classes that declare a sequence with @sequencer mix this in to
get halt state, halt_sequence(), and start_sequence(). Halt
state is per instance; the definition is per class.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from stepseq.sequencer.engine.executor import run_sequence
from stepseq.sequencer.types import HaltSnapshot

if TYPE_CHECKING:
    from stepseq.sequencer.engine.types import SequenceDefinition


class Haltable:
    """Mixin that runs the owner's class-level sequence on self."""

    sequence: ClassVar[SequenceDefinition]

    halted: bool = False
    halted_step: str | None = None
    halted_reason: object = None
    halted_error: Exception | None = None

    def halt_sequence(self, reason: object) -> None:
        """Stop the running sequence after the current step."""
        self.halted = True
        self.halted_reason = reason

    def start_sequence(self, initial_value: object = None) -> object:
        """Run this class's sequence with self as the executor."""
        return run_sequence(type(self).sequence, self, initial_value)

    def halt_snapshot(self) -> HaltSnapshot:
        """Return the halt state of the most recent run."""
        error = self.halted_error
        return HaltSnapshot(
            halted=self.halted,
            step=self.halted_step,
            reason=self.halted_reason,
            error_type=type(error).__name__ if error is not None else None,
        )
