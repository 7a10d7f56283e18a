import pyperclip
from loguru import logger

from mathformat.errors import ClipboardError


def copy_to_clipboard(text: str) -> None:
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        raise ClipboardError(
            f"Could not write to the clipboard: {e}. "
            "Make sure a clipboard mechanism (xclip, xsel, wl-clipboard) is installed."
        ) from e
    logger.debug(f"Copied {len(text)} characters to the clipboard")
