class WatchDirectoryError(RuntimeError):
    """
    The watched directory is missing or unreadable.
    Treated as an operator error: the relay stops.
    """

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read watch directory {path}: {reason}")
