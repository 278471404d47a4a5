"""
Transfer error types.

Every failure on the way to the remote store is a TransferError tagged
with the stage that failed.
"""

from skrins.core.common.enums import TransferStage


class TransferError(RuntimeError):
    """Raised when a file could not be written to the remote store."""

    def __init__(self, stage: TransferStage, reason: str):
        self.stage = stage
        self.reason = reason
        super().__init__(f"Transfer failed at {stage.value}: {reason}")
