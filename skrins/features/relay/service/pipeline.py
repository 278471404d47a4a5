import logging
from pathlib import Path

from skrins.core.common.enums import ExtensionClass, FileOutcome
from skrins.core.config.settings import Settings
from skrins.core.shared_types import CandidateFile

# Cross-Feature Imports (Service calls Service)
from skrins.features.classification.service.api import classify
from skrins.features.directory_scanner.service.scanner import DirectoryScanner
from skrins.features.publisher.service.api import PublisherService
from skrins.features.transcoding.service.api import TranscodeService
from skrins.features.transfer.domain.errors import TransferError
from skrins.features.transfer.service.api import TransferService

from ..domain.models import PassSummary

logger = logging.getLogger(__name__)


class RelayPipeline:
    """
    The pipeline core: scan -> classify -> (transcode) -> transfer -> publish -> delete.

    Files of one pass are handled strictly one after another. The transcoder
    always writes the same target file, so running two at once would clobber it.
    A file that fails at any step is left where it is and gets another chance
    on the next pass; there is no retry counter and no record of past attempts.
    """

    def __init__(self,
                 settings: Settings,
                 scanner: DirectoryScanner,
                 transcoder: TranscodeService,
                 transfer: TransferService,
                 publisher: PublisherService):
        self.settings = settings
        self.scanner = scanner
        self.transcoder = transcoder
        self.transfer = transfer
        self.publisher = publisher

    def run_pass(self) -> PassSummary:
        """
        Scans the watched directory once and processes every candidate.

        Raises:
            WatchDirectoryError: if the directory cannot be read. Fatal.
        """
        summary = PassSummary()

        # 1. Snapshot the directory (fatal errors propagate)
        candidates = self.scanner.scan(self.settings.watch_dir)
        summary.files_found = len(candidates)

        # 2. One file at a time, in scan order
        for candidate in candidates:
            try:
                outcome = self.process_file(candidate)
            except Exception as e:
                error_msg = f"Failed to process {candidate.name}: {e}"
                logger.exception(error_msg)
                summary.failed += 1
                summary.errors.append(error_msg)
                continue

            if outcome == FileOutcome.UPLOADED:
                summary.uploaded += 1
            elif outcome == FileOutcome.TRANSCODED:
                summary.transcoded += 1
            elif outcome == FileOutcome.REJECTED:
                summary.rejected += 1
            else:
                summary.failed += 1
                summary.errors.append(f"{candidate.name}: {outcome.value}")

        logger.info(
            f"Pass complete. Found: {summary.files_found}, uploaded: {summary.uploaded}, "
            f"transcoded: {summary.transcoded}, rejected: {summary.rejected}, failed: {summary.failed}"
        )
        return summary

    def process_file(self, candidate: CandidateFile) -> FileOutcome:
        """
        Runs one candidate through the state machine and reports where it ended.
        """
        extension_class = classify(candidate.extension)

        if extension_class == ExtensionClass.REJECTED:
            logger.debug(f"Skipping {candidate.name}: extension '{candidate.extension}' not allowed")
            return FileOutcome.REJECTED

        if extension_class == ExtensionClass.REQUIRES_TRANSCODE:
            return self._transcode(candidate)

        return self._upload(candidate)

    def _transcode(self, candidate: CandidateFile) -> FileOutcome:
        logger.info(f"Detected .{candidate.extension} file, converting {candidate.name} to mp4")

        if not self.transcoder.transcode(candidate.path):
            logger.error(f"Transcode failed for {candidate.name}; leaving it in place")
            return FileOutcome.TRANSCODE_FAILED

        # The output is picked up by a later pass, not this one
        self._remove_local(candidate.path)
        return FileOutcome.TRANSCODED

    def _upload(self, candidate: CandidateFile) -> FileOutcome:
        try:
            result = self.transfer.upload(candidate.path, candidate.extension)
        except TransferError as e:
            logger.error(f"Upload of {candidate.name} failed: {e}")
            return FileOutcome.UPLOAD_FAILED

        url = self.transfer.public_url(result.remote_name)
        logger.info(f"Uploaded {candidate.name} ({result.bytes_written} bytes) -> {url}")

        self.publisher.publish(url)
        self._remove_local(candidate.path)
        return FileOutcome.UPLOADED

    @staticmethod
    def _remove_local(path: Path) -> bool:
        try:
            path.unlink()
        except OSError as e:
            logger.error(f"Could not remove {path}: {e}")
            return False
        return True
