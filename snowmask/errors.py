from __future__ import annotations

from snowmask.state import PipelineState


class SnowMaskError(Exception):
    """Base error for a failed snow detection run.

    ``state`` is the terminal pipeline state the run ends in.
    """

    state: PipelineState = PipelineState.LOAD_FAILED


class CannotOpenDataset(SnowMaskError):
    state = PipelineState.LOAD_FAILED


class InsufficientBands(SnowMaskError, ValueError):
    state = PipelineState.LOAD_FAILED

    def __init__(self, count: int, required: int):
        self.count = count
        self.required = required
        super().__init__(f"Insufficient bands: found {count}, need at least {required}")


class OutputDriverUnavailable(SnowMaskError):
    state = PipelineState.WRITE_FAILED


class CannotCreateOutput(SnowMaskError):
    state = PipelineState.WRITE_FAILED
