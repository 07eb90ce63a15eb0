"""Checker engine: run model, line formats, digest backends and resolution."""

from sumcheck.core.backends import (
    DigestBackend,
    HashlibBackend,
    get_backend,
    to_hex,
)
from sumcheck.core.checker import Checker
from sumcheck.core.formats import (
    format_line,
    is_tagged_line,
    parse_default_line,
    parse_line,
    parse_tagged_line,
)
from sumcheck.core.models import (
    DigestRecord,
    FileTarget,
    Mode,
    ParsedLine,
    RunConfiguration,
    VerificationTally,
)
from sumcheck.core.resolver import is_glob_pattern, resolve_file_set

__all__ = [
    "Checker",
    "DigestBackend",
    "DigestRecord",
    "FileTarget",
    "HashlibBackend",
    "Mode",
    "ParsedLine",
    "RunConfiguration",
    "VerificationTally",
    "format_line",
    "get_backend",
    "is_glob_pattern",
    "is_tagged_line",
    "parse_default_line",
    "parse_line",
    "parse_tagged_line",
    "resolve_file_set",
    "to_hex",
]
