"""Helpers for pulling values out of single lines of skin markup."""
from __future__ import annotations

import re
from typing import Optional

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def extract_text_content(line: str) -> str:
    """Return the text between the first ``>`` and the last ``<`` of a line.

    The tag name is not checked. A line without ``>`` is read from its start,
    and a line without a later ``<`` is read to its end, so malformed input
    degrades to best-effort text instead of failing.
    """
    start = line.find(">") + 1
    end = line.rfind("<")
    if end < start:
        end = len(line)
    return line[start:end]


def parse_optional_int(text: Optional[str]) -> Optional[int]:
    """Return ``text`` as a signed 32-bit decimal, or ``None``.

    Only ASCII digits with an optional sign are accepted; surrounding
    whitespace, ``_`` separators and out-of-range values are rejected.
    """
    if text is None or not _INT_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if value < INT_MIN or value > INT_MAX:
        return None
    return value


def parse_int(text: Optional[str], default: int) -> int:
    """Coerce ``text`` to an int, falling back to ``default``."""
    value = parse_optional_int(text)
    return default if value is None else value


def parse_bool(text: Optional[str]) -> bool:
    """Only the exact lowercase ``true`` is truthy."""
    return text == "true"


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def extract_attribute(line: str, name: str) -> Optional[str]:
    """Return the raw value of ``name="..."`` in ``line``, or ``None``."""
    marker = f'{name}="'
    pos = line.find(marker)
    if pos == -1:
        return None
    start = pos + len(marker)
    end = line.find('"', start)
    if end == -1:
        return None
    return line[start:end]


def extract_between(content: str, open_tag: str, close_tag: str) -> Optional[str]:
    """Return the trimmed text between the first ``open_tag`` and the next ``close_tag``."""
    pos = content.find(open_tag)
    if pos == -1:
        return None
    start = pos + len(open_tag)
    end = content.find(close_tag, start)
    if end == -1:
        return None
    return content[start:end].strip()
