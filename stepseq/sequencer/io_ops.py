"""I/O boundary module -- ALL external I/O goes through here.

This is the single mock point for the test suite. The engine
never writes to stdout/stderr directly; it calls io_ops functions.
"""
from __future__ import annotations

import sys

from returns.io import IOFailure, IOResult, IOSuccess

from stepseq.sequencer.errors import SequenceError


def write_stderr(
    message: str,
) -> IOResult[None, SequenceError]:
    """Write message to stderr (fail-open diagnostics).

    Returns IOSuccess(None) or IOFailure on error.
    """
    try:
        sys.stderr.write(message)
    except OSError as exc:
        return IOFailure(
            SequenceError(
                step_name="io_ops.write_stderr",
                error_type="StderrWriteError",
                message=(
                    f"Failed to write to stderr: {exc}"
                ),
                context={
                    "original_message": message,
                },
            ),
        )
    return IOSuccess(None)
