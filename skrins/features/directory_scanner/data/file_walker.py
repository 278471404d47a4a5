import os
from pathlib import Path
from typing import Iterator
from ..domain.interfaces import IFileWalker

class LocalFileWalker(IFileWalker):
    """
    Concrete implementation using os.scandir.
    The listing is read in full and sorted before anything is yielded,
    so callers see a stable snapshot in name order.
    """

    def walk(self, root: Path) -> Iterator[Path]:
        with os.scandir(root) as it:
            entries = sorted(it, key=lambda entry: entry.name)

        for entry in entries:
            if entry.is_dir():
                continue
            yield Path(root) / entry.name
