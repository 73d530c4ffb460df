"""Public API for defining and running step sequences."""
from stepseq.sequencer.engine import (
    SequenceBuilder,
    SequenceRunner,
    run_sequence,
    sequencer,
    try_run_sequence,
)
from stepseq.sequencer.engine.types import (
    NO_PREVIOUS_STEP,
    TERMINUS,
    SequenceDefinition,
    StepSpec,
)
from stepseq.sequencer.errors import SequenceError, StepNotDefinedError
from stepseq.sequencer.haltable import Haltable
from stepseq.sequencer.types import HaltSnapshot

__all__ = [
    "NO_PREVIOUS_STEP",
    "TERMINUS",
    "HaltSnapshot",
    "Haltable",
    "SequenceBuilder",
    "SequenceDefinition",
    "SequenceError",
    "SequenceRunner",
    "StepNotDefinedError",
    "StepSpec",
    "run_sequence",
    "sequencer",
    "try_run_sequence",
]
