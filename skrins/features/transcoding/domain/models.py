from dataclasses import dataclass
from pathlib import Path

# Fixed, non-unique output name inside the watched directory.
# Two transcodes in flight would write the same file, so the relay
# processes a scan strictly one file at a time.
TRANSCODE_TARGET_NAME = "out.mp4"

@dataclass(frozen=True)
class TranscodeJob:
    """
    Value Object describing one conversion: source clip -> normalized target.
    """
    source: Path
    target: Path

    def __post_init__(self):
        for label, path in (("Source", self.source), ("Target", self.target)):
            if str(path).strip() in ("", "."):
                raise ValueError(f"{label} path cannot be empty.")
        if self.source == self.target:
            raise ValueError(f"Source and target are the same file: {self.source}")
