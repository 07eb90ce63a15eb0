"""Sums-file line formats.

Two layouts are read and written:

- default (GNU):  ``<hex-digest>  <filename>``
- tagged (BSD):   ``<ALGORITHM> (<filename>) = <hex-digest>``

A line is default format when it starts with an alphanumeric run followed
by two spaces; every other line is parsed as tagged for the run's algorithm.
"""

from __future__ import annotations

import re
from functools import lru_cache

from sumcheck.constants import (
    DEFAULT_FORMAT_SEPARATOR,
    DEFAULT_LINE_PATTERN,
    DEFAULT_LINE_PREFIX_PATTERN,
    TAGGED_LINE_PATTERN_TEMPLATE,
)
from sumcheck.core.models import DigestRecord, ParsedLine

_DEFAULT_PREFIX = re.compile(DEFAULT_LINE_PREFIX_PATTERN)
_DEFAULT_LINE = re.compile(DEFAULT_LINE_PATTERN)


@lru_cache(maxsize=16)
def _tagged_pattern(algorithm: str) -> re.Pattern[str]:
    return re.compile(
        TAGGED_LINE_PATTERN_TEMPLATE.format(
            algorithm=re.escape(algorithm.upper())
        )
    )


def format_line(
    digest_hex: str, filename: str, algorithm: str, *, tagged: bool
) -> str:
    """Build one output line for a computed digest.

    Args:
        digest_hex: Lowercase hex digest
        filename: File name as it should appear in the sums file
        algorithm: Algorithm name, written upper-case in tagged lines
        tagged: Use the BSD tagged layout

    Returns:
        The line without a trailing newline

    """
    if tagged:
        return f"{algorithm.upper()} ({filename}) = {digest_hex}"
    return f"{digest_hex}{DEFAULT_FORMAT_SEPARATOR}{filename}"


def is_tagged_line(line: str) -> bool:
    """Return True unless the line starts like a default-format line."""
    return _DEFAULT_PREFIX.match(line) is None


def parse_default_line(line: str) -> ParsedLine:
    """Parse ``<hex>  <filename>``."""
    match = _DEFAULT_LINE.match(line)
    if match is None:
        return ParsedLine.failure(
            is_tagged=False, reason="missing filename after digest"
        )
    digest_hex, filename = match.groups()
    return ParsedLine.success(DigestRecord(filename, digest_hex, False))


def parse_tagged_line(line: str, algorithm: str) -> ParsedLine:
    """Parse ``<ALGORITHM> (<filename>) = <hex>`` for one algorithm."""
    match = _tagged_pattern(algorithm).match(line)
    if match is None:
        return ParsedLine.failure(
            is_tagged=True,
            reason=f"not a {algorithm.upper()} tagged line",
        )
    filename, digest_hex = match.groups()
    return ParsedLine.success(DigestRecord(filename, digest_hex, True))


def parse_line(line: str, algorithm: str) -> ParsedLine:
    """Classify and parse one sums-file line.

    Args:
        line: Line content without its line terminator
        algorithm: Algorithm name expected in tagged lines

    Returns:
        ParsedLine; on failure its record has an empty filename and digest

    """
    if is_tagged_line(line):
        return parse_tagged_line(line, algorithm)
    return parse_default_line(line)
