import subprocess
import logging
from ..domain.interfaces import ITranscoder
from ..domain.models import TranscodeJob

logger = logging.getLogger(__name__)

class FFmpegTranscoder(ITranscoder):
    """
    Concrete implementation of ITranscoder using FFmpeg.
    Lets FFmpeg pick codecs from the target extension (.mov -> .mp4).
    """

    def __init__(self, ffmpeg_binary: str):
        self.ffmpeg_binary = ffmpeg_binary

    def transcode(self, job: TranscodeJob) -> bool:
        # No -y: an existing target makes FFmpeg refuse to overwrite and exit non-zero.
        # stdin is closed so it cannot block on the overwrite prompt.
        cmd = [
            self.ffmpeg_binary,
            "-i", str(job.source),
            str(job.target)
        ]

        logger.info(f"Executing FFmpeg Transcode: {' '.join(cmd)}")

        try:
            result = subprocess.run(
                cmd,
                stdin=subprocess.DEVNULL,
                capture_output=True,
                text=True
            )
        except OSError as e:
            logger.error(f"FFmpeg could not be started ({self.ffmpeg_binary}): {e}")
            return False

        if result.returncode != 0:
            error_message = result.stderr if result.stderr else "Unknown FFmpeg error"
            logger.error(f"FFmpeg Transcode Failed (exit {result.returncode}). STDERR: {error_message}")
            return False

        logger.info(f"[ffmpeg stderr] {result.stderr}")
        logger.info(f"[ffmpeg stdout] {result.stdout}")
        return True
