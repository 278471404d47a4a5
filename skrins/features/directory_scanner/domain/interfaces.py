from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator

class IFileWalker(ABC):
    """
    Contract for listing a directory.
    Abstracts os.scandir vs pathlib.
    """
    @abstractmethod
    def walk(self, root: Path) -> Iterator[Path]:
        """
        Yields the regular files directly inside root, sorted by name.
        Subdirectories are skipped, never descended into.

        Raises:
            OSError: if root cannot be listed.
        """
        pass
