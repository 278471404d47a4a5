import logging
from typing import Optional
from ..domain.interfaces import IClipboard, INotifier
from ..domain.models import NOTIFICATION_TITLE
from ..data.clipboard_adapter import PyperclipClipboard
from ..data.notification_adapter import PlyerNotifier

logger = logging.getLogger(__name__)

class PublisherService:
    """
    Hands a public URL to the user: clipboard first, then a notification.
    Best effort. Nothing raised here reaches the relay.
    """

    def __init__(self, clipboard: Optional[IClipboard] = None, notifier: Optional[INotifier] = None):
        self.clipboard = clipboard or PyperclipClipboard()
        self.notifier = notifier or PlyerNotifier()

    def publish(self, url: str) -> None:
        try:
            self.clipboard.copy(url)
        except Exception as e:
            logger.warning(f"Clipboard write failed: {e}")

        try:
            self.notifier.notify(NOTIFICATION_TITLE, url)
        except Exception as e:
            logger.warning(f"Desktop notification failed: {e}")
