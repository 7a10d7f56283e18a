import pyperclip
import pytest

from mathformat import clipboard
from mathformat.errors import ClipboardError


def test_copy_to_clipboard(monkeypatch):
    copied = []
    monkeypatch.setattr(pyperclip, "copy", copied.append)
    clipboard.copy_to_clipboard(r"\frac{a}{b}")
    assert copied == [r"\frac{a}{b}"]


def test_missing_clipboard_raises(monkeypatch):
    def _fail(text):
        raise pyperclip.PyperclipException("no clipboard")

    monkeypatch.setattr(pyperclip, "copy", _fail)
    with pytest.raises(ClipboardError):
        clipboard.copy_to_clipboard("x")
