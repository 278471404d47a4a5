from pathlib import Path
from typing import Callable
from watchdog.events import FileSystemEvent, FileSystemEventHandler
from skrins.core.common.enums import ChangeKind
from ..domain.models import ChangeNotification

# watchdog event_type -> relay change kind.
# A rename into (or within) the directory is a new entry, so it counts as a create.
_KIND_BY_EVENT_TYPE = {
    "created": ChangeKind.CREATE,
    "moved": ChangeKind.CREATE,
    "modified": ChangeKind.WRITE,
}

def to_notification(event: FileSystemEvent) -> ChangeNotification:
    kind = _KIND_BY_EVENT_TYPE.get(event.event_type, ChangeKind.OTHER)
    path = event.src_path
    if event.event_type == "moved":
        path = event.dest_path
    if isinstance(path, bytes):
        path = path.decode()
    return ChangeNotification(kind=kind, path=Path(path), is_directory=event.is_directory)

class NotificationForwarder(FileSystemEventHandler):
    """
    Runs on the watchdog observer thread. Converts every event and hands it
    to the sink; does no work of its own.
    """

    def __init__(self, sink: Callable[[ChangeNotification], bool]):
        self.sink = sink

    def on_any_event(self, event: FileSystemEvent) -> None:
        self.sink(to_notification(event))
