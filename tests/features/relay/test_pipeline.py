import pytest
from pathlib import Path

from skrins.core.common.enums import FileOutcome, TransferStage
from skrins.core.shared_types import CandidateFile
from skrins.features.directory_scanner.domain.errors import WatchDirectoryError

def candidate(path: Path, extension: str) -> CandidateFile:
    return CandidateFile(name=path.name, extension=extension, path=path)

# --- PER-FILE STATE MACHINE ---

def test_rejected_file_is_left_alone(pipeline, watch_dir, transcoder, transfer_client, clipboard):
    notes = watch_dir / "b.txt"
    notes.write_text("keep me")

    outcome = pipeline.process_file(candidate(notes, "txt"))

    assert outcome == FileOutcome.REJECTED
    assert notes.read_text() == "keep me"
    assert transcoder.jobs == []
    assert transfer_client.sessions_opened == 0
    assert clipboard.copied == []

def test_successful_transfer_publishes_once_then_deletes(pipeline, watch_dir, transfer_client, clipboard, notifier):
    shot = watch_dir / "a.png"
    shot.write_bytes(b"PNG")

    outcome = pipeline.process_file(candidate(shot, "png"))

    assert outcome == FileOutcome.UPLOADED
    assert len(transfer_client.uploads) == 1
    remote_name = next(iter(transfer_client.uploads))
    assert remote_name.endswith(".png")

    url = f"https://i.example.com/{remote_name}"
    assert clipboard.copied == [url]
    assert notifier.shown == [("Screenshot uploaded!", url)]
    # Published while the file was still there, deleted afterwards
    assert clipboard.listing_at_publish == [["a.png"]]
    assert not shot.exists()

@pytest.mark.parametrize("stage", [
    TransferStage.CONNECT,
    TransferStage.OPEN_DESTINATION,
    TransferStage.OPEN_SOURCE,
    TransferStage.COPY,
])
def test_failed_transfer_never_publishes_or_deletes(pipeline, watch_dir, transfer_client, clipboard, notifier, stage):
    shot = watch_dir / "a.png"
    shot.write_bytes(b"PNG")
    transfer_client.fail_stage = stage

    outcome = pipeline.process_file(candidate(shot, "png"))

    assert outcome == FileOutcome.UPLOAD_FAILED
    assert shot.exists()
    assert clipboard.copied == []
    assert notifier.shown == []

def test_successful_transcode_deletes_source_without_transfer(pipeline, watch_dir, transcoder, transfer_client):
    clip = watch_dir / "c.mov"
    clip.write_bytes(b"MOV")

    outcome = pipeline.process_file(candidate(clip, "mov"))

    assert outcome == FileOutcome.TRANSCODED
    assert not clip.exists()
    assert (watch_dir / "out.mp4").exists()
    assert transcoder.jobs[0].source == clip
    assert transfer_client.sessions_opened == 0

def test_failed_transcode_keeps_source(pipeline, watch_dir, transcoder, transfer_client):
    clip = watch_dir / "c.mov"
    clip.write_bytes(b"MOV")
    transcoder.succeed = False

    outcome = pipeline.process_file(candidate(clip, "mov"))

    assert outcome == FileOutcome.TRANSCODE_FAILED
    assert clip.read_bytes() == b"MOV"
    assert transfer_client.sessions_opened == 0

def test_publisher_failure_does_not_block_deletion(pipeline, watch_dir, notifier):
    def explode(title, message):
        raise RuntimeError("notification daemon gone")
    notifier.notify = explode

    shot = watch_dir / "a.png"
    shot.write_bytes(b"PNG")

    assert pipeline.process_file(candidate(shot, "png")) == FileOutcome.UPLOADED
    assert not shot.exists()

def test_file_vanishing_before_upload_is_soft_failure(pipeline, watch_dir):
    ghost = watch_dir / "ghost.png"

    assert pipeline.process_file(candidate(ghost, "png")) == FileOutcome.UPLOAD_FAILED

# --- WHOLE PASSES ---

def test_mixed_directory_across_two_passes(pipeline, watch_dir, transcoder, transfer_client):
    """
    a.png uploaded and removed, b.txt untouched, c.mov turned into out.mp4.
    out.mp4 only goes up on the next pass.
    """
    (watch_dir / "a.png").write_bytes(b"PNG")
    (watch_dir / "b.txt").write_text("notes")
    (watch_dir / "c.mov").write_bytes(b"MOV")

    # Pass 1
    summary = pipeline.run_pass()

    assert summary.files_found == 3
    assert summary.uploaded == 1
    assert summary.transcoded == 1
    assert summary.rejected == 1
    assert summary.failed == 0
    assert sorted(p.name for p in watch_dir.iterdir()) == ["b.txt", "out.mp4"]
    assert [p.name for p in transfer_client.sent_from] == ["a.png"]

    # Pass 2
    summary = pipeline.run_pass()

    assert summary.uploaded == 1
    assert sorted(p.name for p in watch_dir.iterdir()) == ["b.txt"]
    assert [p.name for p in transfer_client.sent_from] == ["a.png", "out.mp4"]
    assert [name.rsplit(".", 1)[1] for name in transfer_client.uploads] == ["png", "mp4"]

def test_failed_upload_is_retried_on_next_pass_with_new_name(pipeline, watch_dir, transfer_client, clipboard):
    shot = watch_dir / "a.png"
    shot.write_bytes(b"PNG")
    transfer_client.fail_stage = TransferStage.COPY

    summary = pipeline.run_pass()

    assert summary.failed == 1
    assert summary.errors == ["a.png: upload_failed"]
    assert shot.exists()
    assert clipboard.copied == []

    # Network is back
    transfer_client.fail_stage = None
    summary = pipeline.run_pass()

    assert summary.uploaded == 1
    assert not shot.exists()
    assert len(clipboard.copied) == 1

def test_files_are_processed_in_name_order(pipeline, watch_dir, transfer_client):
    for name in ["z.png", "m.jpg", "a.gif"]:
        (watch_dir / name).write_bytes(b"IMG")

    pipeline.run_pass()

    assert [p.name for p in transfer_client.sent_from] == ["a.gif", "m.jpg", "z.png"]

def test_unexpected_error_only_skips_that_file(pipeline, watch_dir, transfer_client, monkeypatch):
    (watch_dir / "a.png").write_bytes(b"PNG")
    (watch_dir / "b.png").write_bytes(b"PNG")

    original_upload = pipeline.transfer.upload

    def flaky_upload(path, extension):
        if path.name == "a.png":
            raise ValueError("boom")
        return original_upload(path, extension)

    monkeypatch.setattr(pipeline.transfer, "upload", flaky_upload)

    summary = pipeline.run_pass()

    assert summary.failed == 1
    assert summary.uploaded == 1
    assert (watch_dir / "a.png").exists()
    assert not (watch_dir / "b.png").exists()

def test_unreadable_directory_propagates(pipeline, watch_dir):
    watch_dir.rmdir()

    with pytest.raises(WatchDirectoryError):
        pipeline.run_pass()

def test_name_with_trailing_newline_is_never_uploaded(pipeline, watch_dir, transfer_client):
    odd = watch_dir / "shot.png\n"
    odd.write_bytes(b"PNG")

    summary = pipeline.run_pass()

    assert summary.rejected == 1
    assert odd.exists()
    assert transfer_client.uploads == {}
