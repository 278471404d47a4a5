from abc import ABC, abstractmethod
from .models import TranscodeJob

class ITranscoder(ABC):
    """
    Contract for the media normalization engine.
    Abstracts away the underlying tool (FFmpeg) from the relay.
    """

    @abstractmethod
    def transcode(self, job: TranscodeJob) -> bool:
        """
        Converts job.source into job.target.

        Returns:
            True if the converter exited successfully, False otherwise.
            Never raises for converter failures and never deletes job.source.
        """
        pass
