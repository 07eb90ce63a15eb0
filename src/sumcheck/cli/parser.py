"""Command-line argument parser for sumcheck.

The option syntax follows the classic digest tools rather than argparse:
options may start with ``-`` or ``/``, unknown options are reported but do
not stop the run, and check-only options are honoured wherever ``--check``
appears on the line. That last rule needs check mode to be known before
the other options are read, so parsing takes two passes.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from sumcheck.constants import (
    CHECK_FLAGS,
    HELP_FLAGS,
    OPTION_PREFIXES,
    OPTION_TERMINATOR,
    QUIET_FLAG,
    STATUS_FLAG,
    TAG_FLAG,
    VERSION_FLAG,
)
from sumcheck.core.models import Mode, RunConfiguration


@dataclass(frozen=True)
class ParsedArguments:
    """Outcome of parsing the command line.

    Attributes:
        config: Run configuration built from the arguments
        show_help: --help or /? was given
        show_version: --version was given
        unknown_options: Rejected option tokens, in order of appearance

    """

    config: RunConfiguration
    show_help: bool = False
    show_version: bool = False
    unknown_options: tuple[str, ...] = ()


def _is_option(token: str) -> bool:
    return token.startswith(OPTION_PREFIXES)


class CLIParser:
    """Command-line argument parser for one digest program."""

    def __init__(self, algorithm: str) -> None:
        """Initialize the parser.

        Args:
            algorithm: Algorithm the program computes, e.g. "MD5"

        """
        self.algorithm = algorithm.upper()

    def parse_args(self, args: Sequence[str]) -> ParsedArguments:
        """Parse command-line arguments.

        Args:
            args: Arguments without the program name

        Returns:
            ParsedArguments for the run

        """
        check = self._detect_check_mode(args)

        show_help = False
        show_version = False
        tag = False
        quiet = False
        status = False
        patterns: list[str] = []
        unknown: list[str] = []
        options_done = False

        for arg in args:
            if options_done or not _is_option(arg):
                patterns.append(arg)
            elif arg == OPTION_TERMINATOR:
                options_done = True
            elif arg in HELP_FLAGS:
                show_help = True
            elif arg == VERSION_FLAG:
                show_version = True
            elif arg in CHECK_FLAGS:
                pass
            elif arg == TAG_FLAG:
                tag = True
            elif arg == QUIET_FLAG and check:
                quiet = True
            elif arg == STATUS_FLAG and check:
                status = True
            else:
                unknown.append(arg)

        config = RunConfiguration(
            algorithm=self.algorithm,
            mode=Mode.CHECK if check else Mode.GENERATE,
            # Check mode detects the line format, so --tag only shapes output
            tag_style=tag and not check,
            quiet=quiet,
            status_only=status,
            input_patterns=tuple(patterns),
        )
        return ParsedArguments(
            config=config,
            show_help=show_help,
            show_version=show_version,
            unknown_options=tuple(unknown),
        )

    @staticmethod
    def _detect_check_mode(args: Sequence[str]) -> bool:
        """Scan the options once for --check / -c."""
        for arg in args:
            if arg == OPTION_TERMINATOR:
                return False
            if arg in CHECK_FLAGS:
                return True
        return False
