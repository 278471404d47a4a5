import re
from skrins.core.common.enums import ExtensionClass

class ExtensionRules:
    """
    Central logic for which file extensions the relay accepts.
    Matching is case-sensitive and exact: 'PNG' is not 'png'.
    """

    # Uploaded as-is
    DIRECT_TRANSFER = {
        "jpg", "jpeg", "png", "gif", "webm", "mp4",
        "zip", "tar", "tar.gz", "tar.bz2"
    }

    # Normalized to mp4 first
    REQUIRES_TRANSCODE = {"mov"}

    # Word characters after the last dot, e.g. "shot.png" -> "png"
    # The whole name must match: "shot.png\n" has no such suffix
    _SUFFIX_PATTERN = re.compile(r".*?\.(\w+)", re.DOTALL)

    @classmethod
    def classify(cls, extension: str) -> ExtensionClass:
        if extension in cls.REQUIRES_TRANSCODE:
            return ExtensionClass.REQUIRES_TRANSCODE
        if extension in cls.DIRECT_TRANSFER:
            return ExtensionClass.DIRECT_TRANSFER
        return ExtensionClass.REJECTED

    @classmethod
    def extension_of(cls, filename: str) -> str:
        """
        Returns the extension of a filename without the leading dot,
        or "" if it has none.
        """
        # 1. Compound archive suffixes ("backup.tar.gz" -> "tar.gz")
        for compound in cls._compound_extensions():
            if filename.endswith(f".{compound}") and len(filename) > len(compound) + 1:
                return compound

        # 2. Plain suffix after the last dot
        match = cls._SUFFIX_PATTERN.fullmatch(filename)
        if not match:
            return ""
        return match.group(1)

    @classmethod
    def _compound_extensions(cls):
        allowed = cls.DIRECT_TRANSFER | cls.REQUIRES_TRANSCODE
        return sorted((e for e in allowed if "." in e), key=len, reverse=True)
