from abc import ABC, abstractmethod
from pathlib import Path

class ITransferSession(ABC):
    """
    A single-use connection to the remote store.
    Opened for exactly one file and closed right after.
    """

    @abstractmethod
    def send(self, local_path: Path, remote_name: str) -> int:
        """
        Creates or truncates remote_root/remote_name and streams local_path into it.

        Returns:
            Total number of bytes written.

        Raises:
            TransferError: tagged with the failing stage.
        """
        pass

    @abstractmethod
    def close(self) -> None:
        pass

    def __enter__(self) -> "ITransferSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

class ITransferClient(ABC):
    @abstractmethod
    def open(self) -> ITransferSession:
        """
        Connects and authenticates.

        Raises:
            TransferError: with stage CONNECT.
        """
        pass

class INameGenerator(ABC):
    @abstractmethod
    def generate(self) -> str:
        """Returns a new collision-resistant token."""
        pass
