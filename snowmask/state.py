from enum import Enum


class PipelineState(str, Enum):
    """Lifecycle of one snow detection run. No backward transitions."""

    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    LOAD_FAILED = "load_failed"
    CLASSIFYING = "classifying"
    WRITTEN = "written"
    WRITE_FAILED = "write_failed"

    @property
    def terminal(self) -> bool:
        return self in (PipelineState.LOAD_FAILED, PipelineState.WRITE_FAILED, PipelineState.WRITTEN)
