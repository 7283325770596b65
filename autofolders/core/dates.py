"""
Date parsing and formatting for journal file names.

Thin adapter over ``arrow`` using moment-style tokens (``YYYY-MM-DD``,
``MMMM``, ``Do``, ``[literal]``...). Parsing is strict: a name is a date
only if it matches the pattern exactly.
"""

import logging
import re
from functools import lru_cache
from typing import List, Optional, Tuple

import arrow

logger = logging.getLogger(__name__)

# Bracketed text is a literal in both the parser and the formatter
_LITERAL_RE = re.compile(r"\[[^\]]*\]")
_LITERAL_SPLIT_RE = re.compile(r"(\[[^\]]*\])")
_TOKEN_RE = re.compile(r"Y{2,4}|M{1,4}|D{1,4}|Do|W")
# Single-letter month and day tokens, not part of MM, DD, DDD or Do
_PADDABLE_RE = re.compile(r"(?<!M)M(?!M)|(?<!D)D(?![Do])")

# Distinct year/month/day values so a lossy pattern cannot round-trip by accident
_REFERENCE_DATE = arrow.Arrow(2023, 11, 24)


def _has_date_token(pattern: str) -> bool:
    return bool(_TOKEN_RE.search(_LITERAL_RE.sub("", pattern)))


def _pad_options(part: str) -> List[str]:
    options = [""]
    pieces = _PADDABLE_RE.split(part)
    tokens = _PADDABLE_RE.findall(part)
    for piece, token in zip(pieces, tokens + [""]):
        variants = (token, token * 2) if token else ("",)
        options = [option + piece + variant for option in options for variant in variants]
    return options


@lru_cache(maxsize=64)
def _renderings(pattern: str) -> Tuple[str, ...]:
    """Patterns whose output counts as an exact match for ``pattern``."""
    patterns = [""]
    for part in _LITERAL_SPLIT_RE.split(pattern):
        options = [part] if _LITERAL_RE.fullmatch(part) else _pad_options(part)
        patterns = [prefix + option for prefix in patterns for option in options]
    return tuple(patterns)


def _parse(name: str, pattern: str) -> Optional[arrow.Arrow]:
    try:
        parsed = arrow.get(name, pattern)
    except (arrow.ParserError, ValueError, TypeError):
        return None

    # arrow accepts a match bounded by whitespace, so "2025-01-15 draft"
    # parses with YYYY-MM-DD; re-rendering rejects anything but an exact match.
    # Single M and D accept one or two digits ("2025-1-05" with YYYY-M-D).
    if not any(parsed.format(candidate) == name for candidate in _renderings(pattern)):
        return None

    return parsed


def parse_strict(name: str, pattern: str) -> Optional[arrow.Arrow]:
    """
    Parse ``name`` against ``pattern`` in strict mode.

    Args:
        name: Text to parse, usually a file base name
        pattern: Date format pattern

    Returns:
        Parsed date, or None if the name does not match the pattern exactly
        or the pattern itself is unusable
    """
    if not name or not _has_date_token(pattern):
        return None

    return _parse(name, pattern)


def format_date(date: arrow.Arrow, pattern: str) -> str:
    """Render ``date`` with ``pattern``."""
    return date.format(pattern)


def today() -> arrow.Arrow:
    """Return the current local date (start of day)."""
    return arrow.now().floor("day")


@lru_cache(maxsize=64)
def is_valid_format(pattern: str) -> bool:
    """
    Check whether a pattern can be used to name and recognise dated files.

    A pattern is valid when it contains at least one date token and a
    reference date rendered with it parses back strictly.

    Args:
        pattern: Date format pattern

    Returns:
        True if the pattern is usable
    """
    if not pattern or not pattern.strip() or not _has_date_token(pattern):
        return False

    rendered = _REFERENCE_DATE.format(pattern)
    if _parse(rendered, pattern) is None:
        logger.debug(f"Format {pattern!r} does not round-trip ({rendered!r})")
        return False

    return True
