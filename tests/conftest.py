# File: tests/conftest.py

import pytest
import os
import sys
from pathlib import Path

# 1. Add project root to path
sys.path.append(os.getcwd())

from skrins.core.common.enums import TransferStage
from skrins.core.config.settings import Settings
from skrins.features.directory_scanner.service.scanner import DirectoryScanner
from skrins.features.publisher.domain.interfaces import IClipboard, INotifier
from skrins.features.publisher.service.api import PublisherService
from skrins.features.relay.service.pipeline import RelayPipeline
from skrins.features.transcoding.domain.interfaces import ITranscoder
from skrins.features.transcoding.service.api import TranscodeService
from skrins.features.transfer.domain.errors import TransferError
from skrins.features.transfer.domain.interfaces import ITransferClient, ITransferSession
from skrins.features.transfer.service.api import TransferService


# --- FAKE COLLABORATORS ---

class RecordingTranscoder(ITranscoder):
    """Writes a small fake mp4 instead of running FFmpeg."""

    def __init__(self):
        self.succeed = True
        self.jobs = []

    def transcode(self, job) -> bool:
        self.jobs.append(job)
        if not self.succeed:
            return False
        job.target.write_bytes(b"FAKE_MP4")
        return True


class RecordingSession(ITransferSession):
    def __init__(self, client):
        self.client = client

    def send(self, local_path: Path, remote_name: str) -> int:
        if self.client.fail_stage is not None:
            raise TransferError(self.client.fail_stage, "simulated network error")
        try:
            data = Path(local_path).read_bytes()
        except OSError as e:
            raise TransferError(TransferStage.OPEN_SOURCE, str(e)) from e
        self.client.uploads[remote_name] = data
        self.client.sent_from.append(Path(local_path))
        return len(data)

    def close(self) -> None:
        self.client.sessions_closed += 1


class RecordingTransferClient(ITransferClient):
    """In-memory remote store. Set fail_stage to make every transfer fail."""

    def __init__(self):
        self.fail_stage = None
        self.uploads = {}
        self.sent_from = []
        self.sessions_opened = 0
        self.sessions_closed = 0

    def open(self) -> RecordingSession:
        if self.fail_stage == TransferStage.CONNECT:
            raise TransferError(TransferStage.CONNECT, "simulated connection refused")
        self.sessions_opened += 1
        return RecordingSession(self)


class RecordingClipboard(IClipboard):
    def __init__(self, watch_dir: Path):
        self.watch_dir = watch_dir
        self.copied = []
        # Directory listing at the moment of each publish
        self.listing_at_publish = []

    def copy(self, text: str) -> None:
        self.copied.append(text)
        self.listing_at_publish.append(sorted(p.name for p in self.watch_dir.iterdir()))


class RecordingNotifier(INotifier):
    def __init__(self):
        self.shown = []

    def notify(self, title: str, message: str) -> None:
        self.shown.append((title, message))


# --- FIXTURES ---

@pytest.fixture
def watch_dir(tmp_path):
    d = tmp_path / "screens"
    d.mkdir()
    return d


@pytest.fixture
def settings(watch_dir, tmp_path):
    key = tmp_path / "id_ed25519"
    key.write_text("not a real key")
    return Settings(
        watch_dir=watch_dir,
        remote_host="example.com:2003",
        remote_user="relay",
        ssh_key_path=key,
        remote_path="/srv/screens",
        base_url="https://i.example.com",
        ffmpeg_binary="ffmpeg",
        queue_size=10
    )


@pytest.fixture
def transcoder():
    return RecordingTranscoder()


@pytest.fixture
def transfer_client():
    return RecordingTransferClient()


@pytest.fixture
def clipboard(watch_dir):
    return RecordingClipboard(watch_dir)


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def pipeline(settings, transcoder, transfer_client, clipboard, notifier):
    """
    A RelayPipeline with real scanning and classification,
    and in-memory transcoder, remote store and desktop.
    """
    return RelayPipeline(
        settings=settings,
        scanner=DirectoryScanner(),
        transcoder=TranscodeService(settings, transcoder=transcoder),
        transfer=TransferService(settings, client=transfer_client),
        publisher=PublisherService(clipboard=clipboard, notifier=notifier)
    )
