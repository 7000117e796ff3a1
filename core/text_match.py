"""
text_match.py - Text Cleaning Tools

Provides filename fragment sanitizing, prefix matching and validity checks
"""

from typing import Optional

# Characters that may never appear in a rendered name fragment
ILLEGAL_CHARS = frozenset('<>:"/\\|?*')

# Control characters U+0000 - U+001F
CONTROL_CHAR_MAX = 0x1F

REPLACEMENT_CHAR = "_"


def is_illegal_char(ch: str) -> bool:
    """
    Check if a single character is illegal in a filename

    Args:
        ch: Single character

    Returns:
        Whether the character must be replaced
    """
    return ch in ILLEGAL_CHARS or ord(ch) <= CONTROL_CHAR_MAX


def sanitize(text: str) -> str:
    """
    Clean a name fragment (folder name, stem or literal text)

    Illegal characters become "_", then surrounding whitespace and dots are
    stripped until neither remains at either end. Never fails, may return "".

    Args:
        text: Original text

    Returns:
        Cleaned text
    """
    if not text:
        return ""

    cleaned = "".join(REPLACEMENT_CHAR if is_illegal_char(ch) else ch for ch in text)

    while True:
        trimmed = cleaned.strip().strip(".")
        if trimmed == cleaned:
            return trimmed
        cleaned = trimmed


def has_prefix(text: str, prefix: str, case_sensitive: bool = False) -> bool:
    """
    Check if text starts with prefix

    Args:
        text: Text to check
        prefix: Prefix (empty string matches everything)
        case_sensitive: Whether case-sensitive

    Returns:
        Whether text starts with prefix
    """
    if not prefix:
        return True

    if case_sensitive:
        return text.startswith(prefix)
    return text.casefold().startswith(prefix.casefold())


def is_valid_filename(name: str) -> tuple[bool, Optional[str]]:
    """
    Check if filename is valid (mainly for Windows)

    Args:
        name: Filename

    Returns:
        (is_valid, error_reason)
    """
    if not name:
        return False, "Filename cannot be empty"

    for char in name:
        if is_illegal_char(char):
            return False, f"Filename contains invalid character: {char!r}"

    if name.endswith(' ') or name.endswith('.'):
        return False, "Filename cannot end with space or dot"

    # Windows reserved names
    reserved_names = {
        'CON', 'PRN', 'AUX', 'NUL',
        'COM1', 'COM2', 'COM3', 'COM4', 'COM5', 'COM6', 'COM7', 'COM8', 'COM9',
        'LPT1', 'LPT2', 'LPT3', 'LPT4', 'LPT5', 'LPT6', 'LPT7', 'LPT8', 'LPT9'
    }
    name_upper = name.upper().split('.')[0]
    if name_upper in reserved_names:
        return False, f"Filename is a Windows reserved name: {name_upper}"

    if len(name) > 255:
        return False, "Filename exceeds 255 characters"

    return True, None
