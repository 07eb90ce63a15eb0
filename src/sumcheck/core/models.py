"""Domain types for the checker engine.

These types carry no IO: they describe a run, a parsed sums-file line and
the running failure count of a check.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class Mode(Enum):
    """Operating mode of a run."""

    GENERATE = "generate"
    CHECK = "check"


@dataclass(frozen=True)
class RunConfiguration:
    """Immutable snapshot of parsed command-line options.

    Attributes:
        algorithm: Upper-case algorithm name, e.g. "MD5"
        mode: Generate digests or check sums files
        tag_style: Write BSD tagged lines instead of the default format
        quiet: Suppress OK lines while checking
        status_only: Suppress every per-file message while checking
        input_patterns: File names and glob patterns in command-line order

    """

    algorithm: str
    mode: Mode = Mode.GENERATE
    tag_style: bool = False
    quiet: bool = False
    status_only: bool = False
    input_patterns: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "algorithm", self.algorithm.upper())
        object.__setattr__(self, "input_patterns", tuple(self.input_patterns))

    @property
    def is_check(self) -> bool:
        return self.mode is Mode.CHECK


@dataclass(slots=True, frozen=True)
class FileTarget:
    """A resolved file path."""

    path: str

    @property
    def exists(self) -> bool:
        return Path(self.path).exists()


@dataclass(slots=True, frozen=True)
class DigestRecord:
    """One parsed line of a sums file."""

    recorded_filename: str
    recorded_digest_hex: str
    is_tagged: bool

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "recorded_digest_hex", self.recorded_digest_hex.lower()
        )


@dataclass(slots=True, frozen=True)
class ParsedLine:
    """Result of parsing a sums-file line.

    A failed parse still yields a record whose filename and digest are
    empty, so the caller reports it like a missing file.
    """

    record: DigestRecord
    ok: bool
    reason: str | None = None

    @classmethod
    def success(cls, record: DigestRecord) -> ParsedLine:
        return cls(record=record, ok=True)

    @classmethod
    def failure(cls, *, is_tagged: bool, reason: str) -> ParsedLine:
        return cls(
            record=DigestRecord("", "", is_tagged),
            ok=False,
            reason=reason,
        )


@dataclass
class VerificationTally:
    """Failure counters for a check run.

    ``error_count`` covers the sums file being processed; ``has_any_error``
    is sticky for the whole run and decides the exit status.
    """

    error_count: int = 0
    has_any_error: bool = False
    files_checked: int = field(default=0, repr=False)

    def start_file(self) -> None:
        self.error_count = 0

    def record_failure(self) -> None:
        self.error_count += 1

    def finish_file(self) -> int:
        """Close the current sums file.

        Returns:
            The number of failures counted for that file

        """
        self.files_checked += 1
        if self.error_count > 0:
            self.has_any_error = True
        return self.error_count
