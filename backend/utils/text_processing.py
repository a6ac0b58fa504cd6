import re
from typing import List, Sequence, Union

# Constants
LINE_SEPARATOR = "\n"
_NEWLINE_WHITESPACE = re.compile(r"\s*\n\s*")

def split_lines(text: str) -> List[str]:
    """Split raw authored text into its display lines.

    Args:
        text: Newline-delimited text as typed into the editor

    Returns:
        Trimmed lines with empty and whitespace-only lines dropped
    """
    if not text:
        return []
    return [line.strip() for line in text.split(LINE_SEPARATOR) if line.strip()]

def join_lines(lines: Sequence[str]) -> str:
    """Join lines back into the single-text form stored on a card."""
    return LINE_SEPARATOR.join(lines)

def collapse_markup_whitespace(text: str) -> str:
    """Collapse whitespace runs that contain a newline into a single space.

    Literal newlines inside markup are source formatting, not line breaks,
    so they must never survive into a card line.
    """
    return _NEWLINE_WHITESPACE.sub(" ", text).strip()

def normalize_stored_text(value: Union[str, Sequence[str], None]) -> str:
    """Normalize a persisted title/rows value to the single-text form.

    Older saves kept titles and rows as arrays of lines; those are joined
    with line breaks. ``None`` becomes an empty string.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return join_lines([str(line) for line in value if line is not None])
