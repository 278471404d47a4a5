# File: skrins/core/config/settings.py

import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

DEFAULT_SSH_PORT = 22
DEFAULT_QUEUE_SIZE = 100


def _default_ffmpeg() -> str:
    # Auto-detect ffmpeg or fall back to the usual Homebrew/manual install location
    return shutil.which("ffmpeg") or "/usr/local/bin/ffmpeg"


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() == "true"


def with_trailing_slash(value: str) -> str:
    """Normalizes a path or URL to end in exactly one '/'."""
    return value.rstrip("/") + "/"


@dataclass
class Settings:
    """
    Runtime configuration, built once at startup and handed to every
    component's constructor.
    """
    # --- Local side ---
    watch_dir: Path

    # --- Remote store ---
    remote_host: str
    remote_user: str
    ssh_key_path: Path
    remote_path: str
    base_url: str
    ssh_key_passphrase: Optional[str] = None
    strict_host_keys: bool = False

    # --- External Tools ---
    ffmpeg_binary: str = ""

    # --- Watcher ---
    queue_size: int = DEFAULT_QUEUE_SIZE

    def __post_init__(self):
        self.watch_dir = Path(self.watch_dir)
        self.ssh_key_path = Path(self.ssh_key_path) if self.ssh_key_path else Path("")
        self.remote_path = with_trailing_slash(self.remote_path or "")
        self.base_url = with_trailing_slash(self.base_url or "")
        if not self.ffmpeg_binary:
            self.ffmpeg_binary = _default_ffmpeg()

    @classmethod
    def from_env(cls, **overrides) -> "Settings":
        """
        Reads SKRINS_* environment variables. Keyword overrides that are not
        None take precedence (used by the CLI flags).
        """
        values = {
            "watch_dir": os.getenv("SKRINS_WATCH_DIR", ""),
            "remote_host": os.getenv("SKRINS_REMOTE_HOST", ""),
            "remote_user": os.getenv("SKRINS_REMOTE_USER", ""),
            "ssh_key_path": os.getenv("SKRINS_SSH_KEY_PATH", ""),
            "ssh_key_passphrase": os.getenv("SKRINS_SSH_KEY_PASSPHRASE") or None,
            "remote_path": os.getenv("SKRINS_REMOTE_PATH", ""),
            "base_url": os.getenv("SKRINS_BASE_URL", ""),
            "strict_host_keys": _env_flag("SKRINS_STRICT_HOST_KEYS"),
            "ffmpeg_binary": os.getenv("SKRINS_FFMPEG_BINARY", ""),
            "queue_size": int(os.getenv("SKRINS_QUEUE_SIZE", str(DEFAULT_QUEUE_SIZE))),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    @property
    def remote_address(self) -> Tuple[str, int]:
        """Splits 'example.com:2003' into ('example.com', 2003). Port defaults to 22."""
        host, sep, port = self.remote_host.rpartition(":")
        if sep and port.isdigit():
            return host, int(port)
        return self.remote_host, DEFAULT_SSH_PORT

    def validate(self) -> None:
        """
        Raises ValueError naming every required setting that is missing.
        The watch directory itself is checked by the scanner at startup.
        """
        missing = []
        if str(self.watch_dir).strip() in ("", "."):
            missing.append("watch directory (-p / SKRINS_WATCH_DIR)")
        if not self.remote_host:
            missing.append("remote host (-r / SKRINS_REMOTE_HOST)")
        if not self.remote_user:
            missing.append("remote user (-ru / SKRINS_REMOTE_USER)")
        if str(self.ssh_key_path).strip() in ("", "."):
            missing.append("private key (-pk / SKRINS_SSH_KEY_PATH)")
        if self.base_url == "/":
            missing.append("base URL (-url / SKRINS_BASE_URL)")

        if missing:
            raise ValueError(f"Missing required settings: {', '.join(missing)}")
        if self.queue_size < 1:
            raise ValueError(f"Queue size must be positive: {self.queue_size}")
