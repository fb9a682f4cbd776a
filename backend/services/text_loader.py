"""Decode uploaded resume / job description files into plain text.

Only plain-text uploads are accepted; binary document formats are rejected
rather than parsed.
"""

import logging
from pathlib import PurePath

from services.exceptions import InvalidInputError

logger = logging.getLogger(__name__)

TEXT_EXTENSIONS = frozenset({"", ".txt", ".text", ".md"})
BINARY_EXTENSIONS = frozenset({".pdf", ".doc", ".docx", ".rtf", ".odt"})


def decode_text_upload(filename: str | None, content: bytes, label: str = "File") -> str:
    """Return the text of an uploaded file, or raise InvalidInputError."""
    suffix = PurePath(filename or "").suffix.lower()
    if suffix in BINARY_EXTENSIONS:
        raise InvalidInputError(f"{label} must be a plain-text file ({suffix} is not supported)")
    if suffix not in TEXT_EXTENSIONS:
        raise InvalidInputError(f"{label} has unsupported file type: {suffix}")

    try:
        text = content.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        logger.info("Rejected non-UTF-8 upload %r: %s", filename, e)
        raise InvalidInputError(f"{label} is not valid UTF-8 text") from e

    if "\x00" in text:
        raise InvalidInputError(f"{label} looks like a binary file")

    return text.replace("\r\n", "\n").replace("\r", "\n").strip()
