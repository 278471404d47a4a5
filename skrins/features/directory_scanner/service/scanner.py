import os
import logging
from pathlib import Path
from typing import List, Optional

from skrins.core.shared_types import CandidateFile
from skrins.features.classification.service.api import extension_of

from ..domain.errors import WatchDirectoryError
from ..domain.interfaces import IFileWalker
from ..data.file_walker import LocalFileWalker

logger = logging.getLogger(__name__)

class DirectoryScanner:
    """
    Service that turns the watched directory into an ordered list of CandidateFiles.
    """

    def __init__(self, walker: Optional[IFileWalker] = None):
        self.walker = walker or LocalFileWalker()

    def ensure_readable(self, directory: Path) -> None:
        """
        Startup check for the watched directory.

        Raises:
            WatchDirectoryError: if it does not exist, is not a directory, or cannot be read.
        """
        if not directory.exists():
            raise WatchDirectoryError(directory, "does not exist")
        if not directory.is_dir():
            raise WatchDirectoryError(directory, "is not a directory")
        if not os.access(directory, os.R_OK | os.X_OK):
            raise WatchDirectoryError(directory, "permission denied")

    def scan(self, directory: Path) -> List[CandidateFile]:
        """
        Lists the directory once. Fresh on every call; nothing is cached.

        Raises:
            WatchDirectoryError: if the directory cannot be read.
        """
        try:
            paths = list(self.walker.walk(directory))
        except OSError as e:
            raise WatchDirectoryError(directory, str(e)) from e

        candidates = []
        for path in paths:
            logger.debug(f"Found {path.name}")
            candidates.append(CandidateFile(
                name=path.name,
                extension=extension_of(path.name),
                path=path
            ))

        logger.info(f"Scan of {directory}: {len(candidates)} file(s)")
        return candidates
