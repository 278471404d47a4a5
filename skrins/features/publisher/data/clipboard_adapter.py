import pyperclip
from ..domain.interfaces import IClipboard

class PyperclipClipboard(IClipboard):
    """
    System clipboard via pyperclip (pbcopy, xclip/xsel/wl-copy, or win32).
    Raises pyperclip.PyperclipException when no mechanism is available.
    """

    def copy(self, text: str) -> None:
        pyperclip.copy(text)
