from plyer import notification
from ..domain.interfaces import INotifier
from ..domain.models import APP_NAME

class PlyerNotifier(INotifier):
    """
    Desktop notification via plyer (libnotify/dbus, Notification Center, toast).
    """

    def __init__(self, app_name: str = APP_NAME, timeout: int = 10):
        self.app_name = app_name
        self.timeout = timeout

    def notify(self, title: str, message: str) -> None:
        notification.notify(
            title=title,
            message=message,
            app_name=self.app_name,
            timeout=self.timeout
        )
