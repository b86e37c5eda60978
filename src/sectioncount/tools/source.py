"""Resolve tool input to document text."""

import logging
from typing import Optional

from .. import config
from ..security import resolve_input_path

logger = logging.getLogger(__name__)


def load_text(text: Optional[str] = None, path: Optional[str] = None) -> str:
    """
    Return the document text given either inline ``text`` or a file ``path``.

    Raises ValueError when neither or both are given, UnsafePathError for a
    refused path and OSError/UnicodeDecodeError when the file can't be read.
    """
    if (text is None) == (path is None):
        raise ValueError("Exactly one of 'text' or 'path' is required")
    if text is not None:
        return text

    resolved = resolve_input_path(path)
    max_bytes = config.get_max_bytes()
    size = resolved.stat().st_size
    if size > max_bytes:
        raise ValueError(f"File too large: {path} ({size} bytes, limit {max_bytes})")

    logger.debug("Reading %s (%d bytes)", resolved, size)
    # newline='' keeps carriage returns untranslated
    with open(resolved, encoding='utf-8', newline='') as f:
        return f.read()
