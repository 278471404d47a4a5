from dataclasses import dataclass
from pathlib import Path
from typing import Optional

@dataclass(frozen=True)
class RemoteObjectName:
    """
    Name of an uploaded object: fresh collision-resistant token + original extension.
    Generated once per transfer attempt; a retry gets a new token.
    """
    token: str
    extension: str

    def __post_init__(self):
        if not self.token:
            raise ValueError("Remote object token cannot be empty.")

    def __str__(self) -> str:
        if not self.extension:
            return self.token
        return f"{self.token}.{self.extension}"

@dataclass(frozen=True)
class RemoteTarget:
    """
    Where and as whom to connect. A single preconfigured identity.
    """
    host: str
    port: int
    username: str
    key_path: Path
    root: str
    key_passphrase: Optional[str] = None
    strict_host_keys: bool = False

    def path_for(self, remote_name: str) -> str:
        # root always carries exactly one trailing slash
        return f"{self.root}{remote_name}"

@dataclass
class UploadResult:
    """
    The result of a successful transfer.
    """
    remote_name: RemoteObjectName
    bytes_written: int
