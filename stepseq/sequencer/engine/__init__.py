"""Engine package -- ordered step execution with halt handling."""
from stepseq.sequencer.engine.builder import (
    SequenceBuilder,
    sequencer,
)
from stepseq.sequencer.engine.executor import (
    SequenceRunner,
    run_sequence,
    try_run_sequence,
)

__all__ = [
    "SequenceBuilder",
    "SequenceRunner",
    "run_sequence",
    "sequencer",
    "try_run_sequence",
]
