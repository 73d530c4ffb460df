"""Sequence construction -- builder block and class-body declaration.

A builder collects steps and the halt handler, then freezes
them into a SequenceDefinition. The @sequencer decorator runs
a builder block once per owner class and attaches the frozen
definition to that class.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from stepseq.sequencer import io_ops
from stepseq.sequencer.engine.types import (
    DEFAULT_HALT_MESSAGE,
    SequenceDefinition,
    StepSpec,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from stepseq.sequencer.engine.types import HaltHandler


def default_halt_handler(owner: str) -> HaltHandler:
    """Build the fallback handler used when none is registered.

    Writes a diagnostic naming the owner and returns a
    mapping of the halting step to its reason.
    """

    def handler(step: str | None, reason: object) -> object:
        io_ops.write_stderr(f"{DEFAULT_HALT_MESSAGE} {owner}\n")
        return {step: reason}

    return handler


class SequenceBuilder:
    """Mutable collector for a single sequence definition."""

    def __init__(self, owner: str) -> None:
        self.owner = owner
        self._steps: list[StepSpec] = []
        self._halt_handler: HaltHandler | None = None

    def step(
        self,
        name: str,
        *,
        takes_input: bool | None = None,
    ) -> SequenceBuilder:
        """Append a step. Existence is checked at run time only."""
        self._steps.append(StepSpec(name=name, takes_input=takes_input))
        return self

    def on_halt(self, handler: HaltHandler) -> SequenceBuilder:
        """Replace the active halt handler."""
        self._halt_handler = handler
        return self

    def build(self) -> SequenceDefinition:
        """Freeze collected steps into a SequenceDefinition."""
        handler = self._halt_handler or default_halt_handler(self.owner)
        return SequenceDefinition(
            owner=self.owner,
            steps=tuple(self._steps),
            halt_handler=handler,
        )


class SequenceDeclaration:
    """Class-body descriptor holding an owner's frozen definition.

    The builder block runs exactly once, when the owning class
    is created, so every instance shares one definition.
    """

    def __init__(
        self,
        block: Callable[[SequenceBuilder], Any],
    ) -> None:
        self._block = block
        self.definition: SequenceDefinition | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        builder = SequenceBuilder(owner.__name__)
        self._block(builder)
        self.definition = builder.build()

    def __get__(
        self,
        instance: object,
        owner: type | None = None,
    ) -> SequenceDefinition:
        if self.definition is None:
            msg = "sequencer block was never bound to a class"
            raise TypeError(msg)
        return self.definition


def sequencer(
    block: Callable[[SequenceBuilder], Any],
) -> SequenceDeclaration:
    """Declare a class's step sequence from a builder block.

    Usage, inside a class body::

        @sequencer
        def sequence(seq: SequenceBuilder) -> None:
            seq.step("add_five")
            seq.step("multiply_by_two")
            seq.on_halt(lambda step, reason: f"{step}: {reason}")
    """
    return SequenceDeclaration(block)
