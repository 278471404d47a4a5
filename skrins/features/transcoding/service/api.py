import logging
from pathlib import Path
from typing import Optional
from skrins.core.config.settings import Settings
from ..domain.interfaces import ITranscoder
from ..domain.models import TranscodeJob, TRANSCODE_TARGET_NAME
from ..data.ffmpeg_adapter import FFmpegTranscoder

logger = logging.getLogger(__name__)

class TranscodeService:
    """
    Facade for the Transcoding Feature.
    Maps paths to a TranscodeJob and reports a plain success flag.
    """

    def __init__(self, settings: Settings, transcoder: Optional[ITranscoder] = None):
        self.settings = settings
        self.transcoder = transcoder or FFmpegTranscoder(settings.ffmpeg_binary)

    @property
    def target_path(self) -> Path:
        return self.settings.watch_dir / TRANSCODE_TARGET_NAME

    def transcode(self, source_path: Path, target_path: Optional[Path] = None) -> bool:
        """
        Converts source_path into target_path (default: the fixed target in the
        watched directory). The caller owns deleting the source on success.
        """
        try:
            job = TranscodeJob(source=Path(source_path), target=Path(target_path or self.target_path))
        except ValueError as e:
            logger.error(f"Invalid transcode request: {e}")
            return False

        return self.transcoder.transcode(job)
