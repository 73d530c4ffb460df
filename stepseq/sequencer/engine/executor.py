"""Engine executor -- ordered step dispatch with halt detection.

Tier 2: resolves step names on the executor, threads the
accumulator, and converts step errors into halt state. Halt
detection is an explicit check at the top of every iteration,
so a step that halts (or raises) is observed on the next pass
over the working list, including the terminal marker.
"""
from __future__ import annotations

import inspect
from typing import TYPE_CHECKING

from returns.io import IOFailure, IOResult, IOSuccess
from returns.unsafe import unsafe_perform_io

from stepseq.sequencer.engine.builder import default_halt_handler
from stepseq.sequencer.engine.types import (
    NO_PREVIOUS_STEP,
    TERMINUS,
    StepSpec,
)
from stepseq.sequencer.errors import (
    SequenceError,
    StepNotDefinedError,
    step_not_defined,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from stepseq.sequencer.engine.types import (
        HaltHandler,
        SequenceDefinition,
        StepExecutor,
    )

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.VAR_POSITIONAL,
)


def resolve_step(
    executor: object,
    step: StepSpec,
    owner: str,
) -> IOResult[Callable[..., object], SequenceError]:
    """Map a step name to the executor's bound callable.

    Returns IOFailure with a StepNotDefinedError payload when the
    executor has no callable attribute of that name, or when
    looking the attribute up raises (e.g. a failing property).
    """
    try:
        step_fn = getattr(executor, step.name, None)
    except Exception as exc:  # noqa: BLE001
        return IOFailure(step_not_defined(step.name, owner, exc))
    if callable(step_fn):
        return IOSuccess(step_fn)
    return IOFailure(step_not_defined(step.name, owner))


def accepts_accumulator(step_fn: Callable[..., object]) -> bool:
    """Return True when step_fn takes any positional argument.

    Callables whose signature cannot be read are passed the
    accumulator.
    """
    try:
        signature = inspect.signature(step_fn)
    except (TypeError, ValueError):
        return True
    return any(
        param.kind in _POSITIONAL_KINDS
        for param in signature.parameters.values()
    )


def invoke_step(
    step: StepSpec,
    step_fn: Callable[..., object],
    accumulator: object,
) -> object:
    """Call a step according to its declared or inferred shape."""
    takes_input = step.takes_input
    if takes_input is None:
        takes_input = accepts_accumulator(step_fn)
    if takes_input:
        return step_fn(accumulator)
    return step_fn()


def reset_halt_state(executor: StepExecutor) -> None:
    """Clear halt state left over from a previous run."""
    executor.halted = False
    executor.halted_step = NO_PREVIOUS_STEP
    executor.halted_reason = None
    executor.halted_error = None


def _previous_step_name(
    working: Sequence[StepSpec | object],
    index: int,
) -> str | None:
    if index == 0:
        return NO_PREVIOUS_STEP
    previous = working[index - 1]
    assert isinstance(previous, StepSpec)  # noqa: S101
    return previous.name


class SequenceRunner:
    """Runs one SequenceDefinition against executor instances.

    The runner holds no per-run state; halt state is written to
    the executor, so one runner may serve many executors.
    """

    def __init__(self, definition: SequenceDefinition) -> None:
        self.definition = definition

    @property
    def halt_handler(self) -> HaltHandler:
        """Registered halt handler, or the default for the owner."""
        return self.definition.halt_handler or default_halt_handler(
            self.definition.owner,
        )

    def run(
        self,
        executor: StepExecutor,
        initial_value: object = None,
    ) -> object:
        """Execute every step in order and return the result.

        Returns the final accumulator on completion, or the halt
        handler's result when a step halted or raised.

        Raises:
            StepNotDefinedError: If a step name does not resolve
                to a callable on the executor. The message names
                the definition's owner.
        """
        reset_halt_state(executor)
        owner = self.definition.owner
        accumulator = initial_value
        working: list[StepSpec | object] = [*self.definition.steps, TERMINUS]

        index = 0
        while index < len(working):
            if executor.halted:
                executor.halted_step = _previous_step_name(working, index)
                return self.halt_handler(
                    executor.halted_step,
                    executor.halted_reason,
                )

            step = working[index]
            if step is TERMINUS:
                break
            assert isinstance(step, StepSpec)  # noqa: S101

            resolved = resolve_step(executor, step, owner)
            if isinstance(resolved, IOFailure):
                raise StepNotDefinedError(
                    unsafe_perform_io(resolved.failure()),
                )
            step_fn = unsafe_perform_io(resolved.unwrap())

            try:
                accumulator = invoke_step(step, step_fn, accumulator)
            except StepNotDefinedError:
                raise
            except Exception as exc:  # noqa: BLE001
                executor.halt_sequence(str(exc))
                executor.halted_error = exc
                # Re-examine this index so the halt check fires first
                continue

            index += 1

        return accumulator


def run_sequence(
    definition: SequenceDefinition,
    executor: StepExecutor,
    initial_value: object = None,
) -> object:
    """Run definition against executor. See SequenceRunner.run."""
    return SequenceRunner(definition).run(executor, initial_value)


def try_run_sequence(
    definition: SequenceDefinition,
    executor: StepExecutor,
    initial_value: object = None,
) -> IOResult[object, SequenceError]:
    """Run definition, returning configuration errors as IOFailure.

    Halts are not failures here: the halt handler's result is
    returned as IOSuccess, as run_sequence would return it.
    """
    try:
        return IOSuccess(run_sequence(definition, executor, initial_value))
    except StepNotDefinedError as exc:
        return IOFailure(exc.error)
