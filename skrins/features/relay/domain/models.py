from dataclasses import dataclass, field
from pathlib import Path
from typing import List
from skrins.core.common.enums import ChangeKind

@dataclass(frozen=True)
class ChangeNotification:
    """
    One filesystem change inside the watched directory.
    """
    kind: ChangeKind
    path: Path
    is_directory: bool = False

    @property
    def triggers_scan(self) -> bool:
        """Only creates and writes of files start a pass."""
        if self.is_directory:
            return False
        return self.kind in (ChangeKind.CREATE, ChangeKind.WRITE)

@dataclass
class PassSummary:
    """
    Report returned after one scan-and-process pass. Logged, never stored.
    """
    files_found: int = 0
    uploaded: int = 0
    transcoded: int = 0
    rejected: int = 0
    failed: int = 0
    errors: List[str] = field(default_factory=list)
