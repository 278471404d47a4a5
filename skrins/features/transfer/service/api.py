import logging
from pathlib import Path
from typing import Optional
from skrins.core.config.settings import Settings
from ..domain.interfaces import ITransferClient, INameGenerator
from ..domain.models import RemoteObjectName, RemoteTarget, UploadResult
from ..data.name_generator import ShortUUIDNameGenerator
from ..data.sftp_client import SFTPTransferClient

logger = logging.getLogger(__name__)


def remote_target_from_settings(settings: Settings) -> RemoteTarget:
    host, port = settings.remote_address
    return RemoteTarget(
        host=host,
        port=port,
        username=settings.remote_user,
        key_path=settings.ssh_key_path,
        root=settings.remote_path,
        key_passphrase=settings.ssh_key_passphrase,
        strict_host_keys=settings.strict_host_keys
    )


class TransferService:
    """
    Facade for the Transfer Feature.
    Names the object, opens a single-use session, sends, closes.
    """

    def __init__(self,
                 settings: Settings,
                 client: Optional[ITransferClient] = None,
                 name_generator: Optional[INameGenerator] = None):
        self.settings = settings
        self.client = client or SFTPTransferClient(remote_target_from_settings(settings))
        self.name_generator = name_generator or ShortUUIDNameGenerator()

    def new_remote_name(self, extension: str) -> RemoteObjectName:
        return RemoteObjectName(token=self.name_generator.generate(), extension=extension)

    def upload(self, local_path: Path, extension: str) -> UploadResult:
        """
        Uploads one local file under a freshly generated name.

        Raises:
            TransferError: on any failure (connect, destination, source, copy).
                Nothing is retried; a later attempt gets a new name.
        """
        # 1. Fresh name for every attempt
        remote_name = self.new_remote_name(extension)
        logger.info(f"Uploading {local_path.name} as {remote_name}")

        # 2. Single-use session
        with self.client.open() as session:
            bytes_written = session.send(local_path, str(remote_name))

        return UploadResult(remote_name=remote_name, bytes_written=bytes_written)

    def public_url(self, remote_name: RemoteObjectName) -> str:
        # base_url always carries exactly one trailing slash
        return f"{self.settings.base_url}{remote_name}"
