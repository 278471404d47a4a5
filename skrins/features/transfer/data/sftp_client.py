import logging
from pathlib import Path
import paramiko
from skrins.core.common.enums import TransferStage
from ..domain.errors import TransferError
from ..domain.interfaces import ITransferClient, ITransferSession
from ..domain.models import RemoteTarget

logger = logging.getLogger(__name__)

# SFTP packets carry at most 32 KiB of data
CHUNK_SIZE = 32768


class SFTPTransferSession(ITransferSession):
    """
    One SSH connection + one SFTP channel, used for a single file.
    """

    def __init__(self, ssh: paramiko.SSHClient, sftp: paramiko.SFTPClient, target: RemoteTarget):
        self.ssh = ssh
        self.sftp = sftp
        self.target = target

    def send(self, local_path: Path, remote_name: str) -> int:
        remote_file_path = self.target.path_for(remote_name)

        # 1. Create (or truncate) the destination first
        try:
            dst_file = self.sftp.open(remote_file_path, "wb")
        except (OSError, paramiko.SSHException) as e:
            raise TransferError(TransferStage.OPEN_DESTINATION, f"{remote_file_path}: {e}") from e

        finished = False
        try:
            # 2. Open the local file
            try:
                src_file = open(local_path, "rb")
            except OSError as e:
                raise TransferError(TransferStage.OPEN_SOURCE, f"{local_path}: {e}") from e

            # 3. Stream it across
            total = 0
            with src_file:
                try:
                    for chunk in iter(lambda: src_file.read(CHUNK_SIZE), b""):
                        dst_file.write(chunk)
                        total += len(chunk)
                    dst_file.close()
                    finished = True
                except (OSError, paramiko.SSHException) as e:
                    raise TransferError(TransferStage.COPY, f"{local_path} -> {remote_file_path}: {e}") from e
        finally:
            if not finished:
                self._discard(dst_file)

        logger.info(f"Total of {total} bytes copied")
        return total

    def close(self) -> None:
        """
        Teardown errors are logged, never raised. Both channels are always closed.
        """
        for channel in (self.sftp, self.ssh):
            try:
                channel.close()
            except (OSError, EOFError, paramiko.SSHException) as e:
                logger.warning(f"Error while closing transfer session: {e}")

    @staticmethod
    def _discard(dst_file) -> None:
        """Closes a destination handle after a failed transfer."""
        try:
            dst_file.close()
        except (OSError, paramiko.SSHException) as e:
            logger.debug(f"Ignoring error while closing remote file after failure: {e}")


class SFTPTransferClient(ITransferClient):
    """
    Concrete implementation of ITransferClient using paramiko.
    Every open() is a fresh SSH handshake; nothing is kept alive between files.
    """

    def __init__(self, target: RemoteTarget):
        self.target = target

    def open(self) -> SFTPTransferSession:
        ssh = paramiko.SSHClient()
        if self.target.strict_host_keys:
            ssh.load_system_host_keys()
            ssh.set_missing_host_key_policy(paramiko.RejectPolicy())
        else:
            ssh.set_missing_host_key_policy(paramiko.AutoAddPolicy())

        logger.debug(f"Connecting to {self.target.username}@{self.target.host}:{self.target.port}")

        try:
            ssh.connect(
                hostname=self.target.host,
                port=self.target.port,
                username=self.target.username,
                key_filename=str(self.target.key_path),
                passphrase=self.target.key_passphrase,
                look_for_keys=False,
                allow_agent=False
            )
            sftp = ssh.open_sftp()
        except (OSError, paramiko.SSHException) as e:
            ssh.close()
            raise TransferError(
                TransferStage.CONNECT,
                f"{self.target.username}@{self.target.host}:{self.target.port}: {e}"
            ) from e

        return SFTPTransferSession(ssh, sftp, self.target)
