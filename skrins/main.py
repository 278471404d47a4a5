"""
Skrins - watches a screenshot folder and relays new files to a remote host.

Every new or changed .png/.jpg/.gif/.webm/.mp4 (and a few archive types) in the
watched folder is uploaded over SFTP under a random name. The public URL is
copied to the clipboard and announced with a desktop notification, then the
local file is removed. .mov clips are converted to out.mp4 first and uploaded
on the following change.

Exit Codes:
  0  Interrupted (Ctrl+C)
  1  Fatal runtime error (watch directory unreadable, watcher failed)
  2  Configuration error
"""

import sys
import logging
import argparse
from typing import List, Optional

from skrins.core.config.settings import Settings
from skrins.features.directory_scanner.domain.errors import WatchDirectoryError
from skrins.features.relay.domain.errors import NotificationSourceError
from skrins.features.relay.service.api import build_watcher

logger = logging.getLogger("skrins")

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_CONFIG = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skrins",
        description="Upload new screenshots to a remote host and copy their URL."
    )
    parser.add_argument("-p", dest="watch_dir", help="Path to where screenshots are saved locally")
    parser.add_argument("-r", dest="remote_host", help="Remote host, e.g. example.com:2003 or 43.56.122.31:22")
    parser.add_argument("-ru", dest="remote_user", help="Username on remote host")
    parser.add_argument("-pk", dest="ssh_key_path", help="Private key path")
    parser.add_argument("-rp", dest="remote_path", help="Path on the remote host")
    parser.add_argument("-url", dest="base_url", help="A base URL that points to given screenshot, e.g https://i.slacki.io/")
    parser.add_argument("--ffmpeg", dest="ffmpeg_binary", help="FFmpeg executable used for .mov conversion")
    parser.add_argument("--strict-host-keys", dest="strict_host_keys", action="store_true", default=None,
                        help="Reject remote hosts missing from known_hosts")
    parser.add_argument("--queue-size", dest="queue_size", type=int,
                        help="Pending change notifications kept before new ones are dropped")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def load_settings(args: argparse.Namespace) -> Settings:
    """Environment first, flags on top."""
    return Settings.from_env(
        watch_dir=args.watch_dir,
        remote_host=args.remote_host,
        remote_user=args.remote_user,
        ssh_key_path=args.ssh_key_path,
        remote_path=args.remote_path,
        base_url=args.base_url,
        ffmpeg_binary=args.ffmpeg_binary,
        strict_host_keys=args.strict_host_keys,
        queue_size=args.queue_size
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )
    # paramiko logs every handshake at INFO
    logging.getLogger("paramiko").setLevel(logging.WARNING)

    try:
        settings = load_settings(args)
        settings.validate()
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        return EXIT_CONFIG

    watcher = build_watcher(settings)
    try:
        watcher.run_forever()
    except (WatchDirectoryError, NotificationSourceError) as e:
        logger.critical(f"Fatal: {e}")
        return EXIT_FATAL

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
