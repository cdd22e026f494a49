"""Helpers for writing filesystem names to text streams.

Names the filesystem encoding cannot decode reach Python with lone
surrogates (surrogateescape). Strict streams refuse to encode those.
"""

import sys


def fs_bytes(text: str) -> bytes:
    """Encode text back to the raw bytes the filesystem gave us."""
    encoding = sys.getfilesystemencoding()
    try:
        return text.encode(encoding, "surrogateescape")
    except UnicodeEncodeError:
        # Surrogates that surrogateescape did not produce.
        return text.encode(encoding, "backslashreplace")


def printable(text: str) -> str:
    """Return text with undecodable bytes shown as \\xNN escapes."""
    encoding = sys.getfilesystemencoding()
    return fs_bytes(text).decode(encoding, "backslashreplace")
