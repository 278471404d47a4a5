from skrins.core.config.settings import Settings
from skrins.features.directory_scanner.service.scanner import DirectoryScanner
from skrins.features.publisher.service.api import PublisherService
from skrins.features.transcoding.service.api import TranscodeService
from skrins.features.transfer.service.api import TransferService

from .pipeline import RelayPipeline
from .watcher import DirectoryWatcher

def build_pipeline(settings: Settings) -> RelayPipeline:
    """
    Public Service API: wires the production adapters
    (os.scandir, FFmpeg, paramiko, pyperclip, plyer) around one Settings value.
    """
    return RelayPipeline(
        settings=settings,
        scanner=DirectoryScanner(),
        transcoder=TranscodeService(settings),
        transfer=TransferService(settings),
        publisher=PublisherService()
    )

def build_watcher(settings: Settings) -> DirectoryWatcher:
    pipeline = build_pipeline(settings)
    return DirectoryWatcher(settings, pipeline, scanner=pipeline.scanner)
