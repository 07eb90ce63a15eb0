"""Checker engine.

Generates digest lines for files, or verifies the entries of sums files.
Every failure is handled at the scope of one file (generate) or one line
(check): it is reported, counted when checking, and the run moves on.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterable
from typing import TextIO

from sumcheck.constants import EXIT_FAILURE, EXIT_SUCCESS
from sumcheck.core.backends import DigestBackend, to_hex
from sumcheck.core.formats import format_line, parse_line
from sumcheck.core.models import (
    DigestRecord,
    FileTarget,
    RunConfiguration,
    VerificationTally,
)
from sumcheck.core.resolver import resolve_file_set
from sumcheck.exceptions import DigestError
from sumcheck.logger import get_logger
from sumcheck.messages import (
    MSG_FAILED,
    MSG_FILE_ERROR,
    MSG_FILE_NOT_FOUND,
    MSG_OK,
    MessageProvider,
)

logger = get_logger(__name__)

Resolver = Callable[[Iterable[str]], list[FileTarget]]


def _describe_error(error: OSError | DigestError) -> str:
    if isinstance(error, DigestError):
        return error.message
    return error.strerror or str(error)


class Checker:
    """Runs one generate or check pass over the configured files."""

    def __init__(
        self,
        config: RunConfiguration,
        backend: DigestBackend,
        messages: MessageProvider,
        *,
        summary_with_status: bool = False,
        resolver: Resolver = resolve_file_set,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        """Initialize the checker.

        Args:
            config: Parsed run configuration
            backend: Digest backend for the run's algorithm
            messages: Provider of user-facing text
            summary_with_status: Print the mismatch summary even when
                config.status_only is set
            resolver: Expands input patterns into file targets
            stdout: Stream for digests and OK lines (default: sys.stdout)
            stderr: Stream for failures and errors (default: sys.stderr)

        """
        self.config = config
        self.backend = backend
        self.messages = messages
        self.summary_with_status = summary_with_status
        self.tally = VerificationTally()
        self._resolver = resolver
        self._stdout = stdout
        self._stderr = stderr

    # Default streams are resolved on every write
    def _write_out(self, text: str) -> None:
        print(text, file=self._stdout or sys.stdout)

    def _write_err(self, text: str) -> None:
        print(text, file=self._stderr or sys.stderr)

    def _report_error(self, text: str) -> None:
        if not self.config.status_only:
            self._write_err(text)

    def _report_missing(self, filename: str) -> None:
        self._report_error(
            self.messages.text(MSG_FILE_NOT_FOUND, filename=filename)
        )

    def _report_failure(
        self, filename: str, error: OSError | DigestError
    ) -> None:
        self._report_error(
            self.messages.text(
                MSG_FILE_ERROR, filename=filename, error=_describe_error(error)
            )
        )

    def run(self) -> int:
        """Process every resolved file and return the exit status.

        Returns:
            EXIT_FAILURE when checking found any failure, else EXIT_SUCCESS

        """
        targets = self._resolver(self.config.input_patterns)
        logger.debug(
            "%s run over %d file(s) with %s",
            self.config.mode.value,
            len(targets),
            self.backend.name,
        )

        for target in targets:
            if self.config.is_check:
                self.check(target.path)
            else:
                self.generate(target.path)

        if self.config.is_check and self.tally.has_any_error:
            return EXIT_FAILURE
        return EXIT_SUCCESS

    def digest_file(self, filename: str) -> str:
        """Compute the hex digest of a file.

        The file handle is closed before returning, including when the
        read fails part way.

        Raises:
            OSError: If the file cannot be opened
            DigestError: If reading the file fails

        """
        with open(filename, "rb") as stream:
            digest = to_hex(self.backend.compute_digest(stream))
        logger.debug("%s %s: %s", self.backend.name, filename, digest)
        return digest

    def generate(self, filename: str) -> None:
        """Print the digest line of one file, or report why it cannot."""
        if not os.path.exists(filename):
            logger.info("Cannot generate digest, %s does not exist", filename)
            self._report_missing(filename)
            return

        try:
            digest = self.digest_file(filename)
        except (OSError, DigestError) as e:
            logger.info("Cannot generate digest for %s: %s", filename, e)
            self._report_failure(filename, e)
            return

        self._write_out(
            format_line(
                digest,
                filename,
                self.config.algorithm,
                tagged=self.config.tag_style,
            )
        )

    def check(self, sums_file: str) -> int:
        """Verify every entry of one sums file.

        Args:
            sums_file: Path of the sums file

        Returns:
            Number of failures counted for this sums file

        """
        self.tally.start_file()

        try:
            with open(sums_file, encoding="utf-8-sig") as handle:
                for line_number, raw_line in enumerate(handle, 1):
                    self.check_line(raw_line.rstrip("\r\n"), line_number)
        except FileNotFoundError:
            logger.info("Sums file %s does not exist", sums_file)
            self._report_missing(sums_file)
            self.tally.record_failure()
        except OSError as e:
            logger.info("Cannot read sums file %s: %s", sums_file, e)
            self._report_failure(sums_file, e)
            self.tally.record_failure()
        except UnicodeDecodeError as e:
            logger.info("Sums file %s is not valid UTF-8: %s", sums_file, e)
            self._report_error(
                self.messages.text(
                    MSG_FILE_ERROR, filename=sums_file, error=e.reason
                )
            )
            self.tally.record_failure()

        errors = self.tally.finish_file()
        logger.info("Checked %s: %d failure(s)", sums_file, errors)

        show_summary = not self.config.status_only or self.summary_with_status
        if errors and show_summary:
            self._write_err(self.messages.mismatch_summary(errors))
        return errors

    def check_line(self, line: str, line_number: int = 0) -> bool:
        """Parse and verify one sums-file line.

        Returns:
            True when the file matched its recorded digest

        """
        parsed = parse_line(line, self.config.algorithm)
        if not parsed.ok:
            logger.debug("Line %d not parsed: %s", line_number, parsed.reason)
        return self.verify_record(parsed.record)

    def verify_record(self, record: DigestRecord) -> bool:
        """Recompute a recorded file's digest and compare it.

        A record with an empty filename (an unparsed line) is reported as
        a missing file.

        Returns:
            True when the file matched its recorded digest

        """
        filename = record.recorded_filename

        if not filename or not os.path.exists(filename):
            self._report_missing(filename)
            self.tally.record_failure()
            return False

        try:
            digest = self.digest_file(filename)
        except (OSError, DigestError) as e:
            logger.info("Cannot verify %s: %s", filename, e)
            self._report_failure(filename, e)
            self.tally.record_failure()
            return False

        if digest == record.recorded_digest_hex:
            if not self.config.quiet and not self.config.status_only:
                self._write_out(f"{filename}: {self.messages.text(MSG_OK)}")
            return True

        if not self.config.status_only:
            self._write_err(f"{filename}: {self.messages.text(MSG_FAILED)}")
        self.tally.record_failure()
        return False
