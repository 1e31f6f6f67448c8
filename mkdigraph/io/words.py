"""Label pool loading from a words file."""

import logging
import re
from pathlib import Path

log = logging.getLogger(__name__)

INVALID_CHARS = re.compile(r"[^a-zA-Z]")


def sanitize_word(line: str) -> str:
    """Strip every character that is not an ASCII letter."""
    return INVALID_CHARS.sub("", line)


def read_words(path: str | Path) -> list[str]:
    """Read a label pool from a words file, one candidate per line.

    Lines are sanitized with :func:`sanitize_word`; empty results are
    dropped and duplicates removed, keeping the first occurrence.

    Args:
        path: Path to the words file.

    Returns:
        List of unique labels in first-seen order.

    Raises:
        OSError: If the file cannot be read.
    """
    words: dict[str, None] = {}
    with open(path, encoding="utf-8", errors="replace") as f:
        for line in f:
            word = sanitize_word(line)
            if word:
                words.setdefault(word, None)

    log.info("Loaded %d labels from %s", len(words), path)
    return list(words)
