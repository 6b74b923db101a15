"""Small utility helpers used across the xsv_locatable package.

Console logging helpers plus the pure-Python string handling shared by the
configuration resolver and the line decoder. Kept free of heavy
dependencies so it is easy to unit-test.
"""
from datetime import datetime
import re
from typing import Dict, List

COMMENT_DELIMITER = "#"

# Spelled-out names accepted for the ``delimiter`` key of a sidecar config.
DELIMITER_ALIASES: Dict[str, str] = {
    "\\t": "\t",
    "tab": "\t",
    "comma": ",",
    "space": " ",
    "pipe": "|",
    "semicolon": ";",
}

# Plain base-10 integer, optional sign. No whitespace, underscores or non-ASCII digits.
INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def log_info(msg: str) -> None:
    """Print info log message."""
    timestamp = datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] [INFO] {msg}")


def log_warn(msg: str) -> None:
    """Print warning log message."""
    timestamp = datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] [WARN] {msg}")


def log_error(msg: str) -> None:
    """Print error log message."""
    timestamp = datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] [ERROR] {msg}")


def is_integer(value: str) -> bool:
    """True if ``value`` is a plain ASCII integer such as ``42`` or ``-7``."""
    return INTEGER_RE.fullmatch(value) is not None


def is_comment(line: str) -> bool:
    """True for lines starting with the comment delimiter ``#``."""
    return line.startswith(COMMENT_DELIMITER)


def resolve_delimiter(raw: str) -> str:
    """Translate a configured delimiter token into the literal separator.

    Known aliases (``tab``, ``\\t``, ``comma`` ...) are matched case-insensitively.
    Anything else is used verbatim. Returns an empty string for blank input so
    the caller can reject it.
    """
    if raw is None:
        return ""
    alias = DELIMITER_ALIASES.get(raw.strip().lower())
    if alias is not None:
        return alias
    # Surrounding whitespace is only significant when the value is nothing but whitespace
    stripped = raw.strip()
    return stripped if stripped else raw


def split_fields(line: str, delimiter: str) -> List[str]:
    """Split ``line`` on the literal ``delimiter``.

    The delimiter is not a regular expression and quoting is not honoured.
    A line made only of delimiters (or an empty line) has no splittable
    fields and yields an empty list.

    Example: split_fields('chr1\\t100\\t200\\t', '\\t') -> ['chr1', '100', '200', '']
    """
    parts = line.split(delimiter)
    if not any(parts):
        return []
    return parts


def normalize_chrom(chrom: str) -> str:
    """Lightweight normalization for contig names.

    Examples: 'chr1' -> '1', '1' -> '1', 'MT'->'MT'
    Only a leading 'chr' (any case) is stripped.
    """
    if chrom is None:
        return ""
    c = str(chrom)
    if c.lower().startswith("chr"):
        return c[3:]
    return c


__all__ = [
    "COMMENT_DELIMITER",
    "DELIMITER_ALIASES",
    "log_info",
    "log_warn",
    "log_error",
    "INTEGER_RE",
    "is_integer",
    "is_comment",
    "resolve_delimiter",
    "split_fields",
    "normalize_chrom",
]
