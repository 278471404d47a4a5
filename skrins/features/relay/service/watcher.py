import queue
import time
import logging
import threading
from typing import Optional

from watchdog.observers import Observer

from skrins.core.config.settings import Settings
from skrins.features.directory_scanner.domain.errors import WatchDirectoryError
from skrins.features.directory_scanner.service.scanner import DirectoryScanner

from ..domain.errors import NotificationSourceError
from ..domain.models import ChangeNotification
from ..data.watchdog_handler import NotificationForwarder
from .pipeline import RelayPipeline

logger = logging.getLogger(__name__)


class DirectoryWatcher:
    """
    Event-driven front of the relay.

    The watchdog observer thread only enqueues notifications. A single worker
    thread takes them one at a time and runs a full pass for every create or
    write before looking at the next one, so passes never overlap.
    Notifications arriving while the bounded queue is full are dropped; the
    next one rescans the whole directory anyway.
    """

    def __init__(self,
                 settings: Settings,
                 pipeline: RelayPipeline,
                 scanner: Optional[DirectoryScanner] = None,
                 observer=None,
                 poll_interval: float = 0.5,
                 shutdown_timeout: float = 5.0):
        self.settings = settings
        self.pipeline = pipeline
        self.scanner = scanner or DirectoryScanner()
        self.poll_interval = poll_interval
        self.shutdown_timeout = shutdown_timeout

        self._queue: "queue.Queue[ChangeNotification]" = queue.Queue(maxsize=settings.queue_size)
        self._observer = observer if observer is not None else Observer()
        self._stop_event = threading.Event()
        self._worker: Optional[threading.Thread] = None

        self.fatal_error: Optional[Exception] = None

    def enqueue(self, notification: ChangeNotification) -> bool:
        """
        Called from the observer thread. Never blocks.
        Only notifications that start a pass take up queue space.
        """
        if not notification.triggers_scan:
            return False

        try:
            self._queue.put_nowait(notification)
        except queue.Full:
            logger.debug(f"Notification queue full, dropping {notification.kind.value} on {notification.path}")
            return False
        return True

    def start(self) -> None:
        """
        Raises:
            WatchDirectoryError: the watched directory is unusable.
            NotificationSourceError: the observer could not be started.
        """
        watch_dir = self.settings.watch_dir

        # 1. Refuse to start on a bad directory
        self.scanner.ensure_readable(watch_dir)

        # 2. Worker
        self._stop_event.clear()
        self._worker = threading.Thread(target=self._consume, name="skrins-relay", daemon=True)
        self._worker.start()

        # 3. Notification source
        try:
            self._observer.schedule(NotificationForwarder(self.enqueue), str(watch_dir), recursive=False)
            self._observer.start()
        except OSError as e:
            self.stop()
            raise NotificationSourceError(watch_dir, str(e)) from e

        logger.info(f"Watching {watch_dir}")

    def stop(self) -> None:
        self._stop_event.set()

        if self._observer.is_alive():
            self._observer.stop()
            self._observer.join()

        if self._worker is not None and self._worker is not threading.current_thread():
            # A pass stuck in FFmpeg or a network write must not hold up shutdown
            self._worker.join(timeout=self.shutdown_timeout)
            if self._worker.is_alive():
                logger.warning(f"Relay worker still busy after {self.shutdown_timeout}s, leaving it behind")

    def run_forever(self) -> None:
        """
        Blocks until the worker dies on a fatal error or the process is interrupted.

        Raises:
            WatchDirectoryError: the directory became unreadable during a pass.
        """
        self.start()
        try:
            while self._worker.is_alive():
                self._worker.join(timeout=1.0)
        except KeyboardInterrupt:
            logger.info("Shutting down.")
        finally:
            self.stop()

        if self.fatal_error is not None:
            raise self.fatal_error

    def wait_until_idle(self, timeout: float = 5.0) -> bool:
        """True once every queued notification has been handled."""
        deadline = time.monotonic() + timeout
        while self._queue.unfinished_tasks:
            if time.monotonic() >= deadline or self._stop_event.is_set():
                return False
            time.sleep(0.01)
        return True

    @property
    def is_running(self) -> bool:
        return self._worker is not None and self._worker.is_alive()

    def _consume(self) -> None:
        while not self._stop_event.is_set():
            try:
                notification = self._queue.get(timeout=self.poll_interval)
            except queue.Empty:
                continue

            try:
                if notification.triggers_scan:
                    logger.debug(f"{notification.kind.value}: {notification.path}")
                    self.pipeline.run_pass()
            except WatchDirectoryError as e:
                logger.critical(f"{e}. Stopping the relay.")
                self.fatal_error = e
                self._stop_event.set()
            except Exception as e:
                logger.exception(f"Pass aborted: {e}")
            finally:
                self._queue.task_done()
