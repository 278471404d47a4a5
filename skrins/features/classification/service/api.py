from skrins.core.common.enums import ExtensionClass
from ..data.extension_rules import ExtensionRules

def classify(extension: str) -> ExtensionClass:
    """
    Public Service API: decide what the relay does with a file extension.

    Total function. Anything outside the allow-list is REJECTED.
    """
    return ExtensionRules.classify(extension)

def extension_of(filename: str) -> str:
    """Extension of a filename as used for classification and remote naming."""
    return ExtensionRules.extension_of(filename)
