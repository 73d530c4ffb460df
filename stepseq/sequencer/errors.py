"""Error types for the stepseq sequence engine."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SequenceError:
    """Structured error for sequence configuration and I/O failures."""

    step_name: str
    error_type: str
    message: str
    context: dict[str, object] = field(default_factory=dict)


def step_not_defined(
    step_name: str,
    owner: str,
    lookup_error: Exception | None = None,
) -> SequenceError:
    """Describe a step the executor cannot resolve to a callable."""
    context: dict[str, object] = {
        "step_name": step_name,
        "owner": owner,
    }
    if lookup_error is not None:
        context["lookup_error"] = (
            f"{type(lookup_error).__name__}: {lookup_error}"
        )
    return SequenceError(
        step_name=step_name,
        error_type="StepNotDefinedError",
        message=(
            f"Method `{step_name}` is not defined"
            f" for {owner} used in steps"
        ),
        context=context,
    )


class StepNotDefinedError(AttributeError):
    """A sequence names a step the executor does not implement.

    This is a defect in the sequence definition, not a runtime
    failure of a step, so the runner re-raises it instead of
    converting it into halt state.
    """

    def __init__(self, error: SequenceError) -> None:
        self.error = error
        super().__init__(error.message)

    @property
    def step_name(self) -> str:
        return self.error.step_name

    @property
    def owner(self) -> object:
        return self.error.context.get("owner")
