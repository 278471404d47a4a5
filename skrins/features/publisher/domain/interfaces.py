from abc import ABC, abstractmethod

class IClipboard(ABC):
    @abstractmethod
    def copy(self, text: str) -> None:
        """Replaces the system clipboard contents with text."""
        pass

class INotifier(ABC):
    @abstractmethod
    def notify(self, title: str, message: str) -> None:
        """Shows a desktop notification."""
        pass
