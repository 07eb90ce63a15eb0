"""Console formatter for the stderr handler.

INFO records are progress notes and print as the bare message. WARNING and
above print with time, logger name and level, the level colored when
stderr is a terminal.
"""

import logging

from sumcheck.constants import LOG_COLORS


class HybridConsoleFormatter(logging.Formatter):
    """Console formatter with simple format for INFO, structured for others.

    Example Output:
        INFO:     "Checked sums.md5: 0 failure(s)"
        WARNING:  "12:30:45 - sumcheck.cli.runner - WARNING - Invalid ..."
    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        *,
        use_color: bool = False,
    ) -> None:
        """Initialize hybrid formatter with structured format template.

        Args:
            fmt: Format string for structured messages (WARNING and above)
            datefmt: Date format string for timestamps
            use_color: Wrap the level name in ANSI color codes

        """
        super().__init__(fmt, datefmt)
        self.use_color = use_color

    def formatMessage(self, record: logging.LogRecord) -> str:  # noqa: N802
        """Render the record body; the level name is colored on a copy."""
        if record.levelno == logging.INFO:
            return record.message
        if not self.use_color or record.levelname not in LOG_COLORS:
            return super().formatMessage(record)

        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = (
            f"{LOG_COLORS[record.levelname]}{record.levelname}"
            f"{LOG_COLORS['RESET']}"
        )
        return super().formatMessage(colored)
