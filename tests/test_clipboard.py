from unittest.mock import patch

import pyperclip
import pytest

from clipstash.clipboard import MemoryClipboard, PyperclipClipboard
from clipstash.errors import ClipboardUnavailableError


class TestPyperclipClipboard:
    """Tests for the pyperclip-backed clipboard."""

    def test_read(self):
        with patch("clipstash.clipboard.pyperclip.paste", return_value="copied"):
            assert PyperclipClipboard().read() == "copied"

    def test_read_none_is_empty(self):
        with patch("clipstash.clipboard.pyperclip.paste", return_value=None):
            assert PyperclipClipboard().read() == ""

    def test_read_failure(self):
        with patch(
            "clipstash.clipboard.pyperclip.paste",
            side_effect=pyperclip.PyperclipException("no display"),
        ):
            with pytest.raises(ClipboardUnavailableError, match="no display"):
                PyperclipClipboard().read()

    def test_write(self):
        with patch("clipstash.clipboard.pyperclip.copy") as copy:
            PyperclipClipboard().write("echo hi")
        copy.assert_called_once_with("echo hi")

    def test_write_failure(self):
        with patch(
            "clipstash.clipboard.pyperclip.copy",
            side_effect=pyperclip.PyperclipException("no display"),
        ):
            with pytest.raises(ClipboardUnavailableError, match="no display"):
                PyperclipClipboard().write("echo hi")


class TestMemoryClipboard:
    def test_write_then_read(self):
        clip = MemoryClipboard()
        assert clip.read() == ""
        clip.write("a\nb")
        assert clip.read() == "a\nb"
