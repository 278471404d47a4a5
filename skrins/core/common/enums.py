# File: skrins/core/common/enums.py

from enum import Enum, unique

@unique
class ExtensionClass(str, Enum):
    REJECTED = "rejected"
    DIRECT_TRANSFER = "direct_transfer"
    REQUIRES_TRANSCODE = "requires_transcode"

@unique
class ChangeKind(str, Enum):
    CREATE = "create"
    WRITE = "write"
    OTHER = "other"

@unique
class TransferStage(str, Enum):
    CONNECT = "connect"
    OPEN_DESTINATION = "open_destination"
    OPEN_SOURCE = "open_source"
    COPY = "copy"

@unique
class FileOutcome(str, Enum):
    REJECTED = "rejected"
    TRANSCODED = "transcoded"
    TRANSCODE_FAILED = "transcode_failed"
    UPLOADED = "uploaded"
    UPLOAD_FAILED = "upload_failed"
