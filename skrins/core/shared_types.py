from dataclasses import dataclass
from pathlib import Path

@dataclass(frozen=True)
class CandidateFile:
    """
    A regular file found in the watched directory by one scan.
    Only valid for the pass that produced it; never cached across passes.
    """
    name: str
    extension: str
    path: Path

    def __post_init__(self):
        if not self.name.strip():
            raise ValueError("Candidate file name cannot be empty.")

    def exists(self) -> bool:
        return self.path.exists()
