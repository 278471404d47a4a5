class NotificationSourceError(RuntimeError):
    """The filesystem notification source could not be started."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot watch {path}: {reason}")
