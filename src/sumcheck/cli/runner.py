"""CLI runner for sumcheck.

Orchestrates one program invocation: load settings, parse arguments,
handle help and version, then hand the run to the checker engine.
"""

import sys
from collections.abc import Sequence

from .. import __version__
from ..config import Settings, SettingsManager
from ..constants import EXIT_FAILURE
from ..core import Checker, DigestBackend, get_backend
from ..exceptions import SettingsError
from ..logger import get_logger, update_logger_from_config
from ..messages import (
    MSG_HELP,
    MSG_UNKNOWN_OPTION,
    MSG_VERSION,
    CatalogMessageProvider,
    MessageProvider,
)
from .parser import CLIParser

logger = get_logger(__name__)


class CLIRunner:
    """CLI runner for one digest program."""

    def __init__(
        self,
        algorithm: str,
        prog: str | None = None,
        backend: DigestBackend | None = None,
        messages: MessageProvider | None = None,
        settings_manager: SettingsManager | None = None,
    ) -> None:
        """Initialize CLI runner.

        Args:
            algorithm: Algorithm the program computes, e.g. "MD5"
            prog: Program name shown in help text
            backend: Digest backend (default: hashlib backend for algorithm)
            messages: Message provider (default: catalog for the
                configured locale)
            settings_manager: Settings loader (default: settings.conf)

        Raises:
            UnsupportedAlgorithmError: If no backend exists for algorithm

        """
        self.algorithm = algorithm.upper()
        self.prog = prog or f"sumcheck-{algorithm.lower()}"
        self.backend = backend or get_backend(self.algorithm)
        self.settings_manager = settings_manager or SettingsManager()
        self._messages = messages

    def _load_settings(self) -> Settings:
        try:
            settings = self.settings_manager.load()
        except SettingsError as e:
            logger.warning("%s; using default settings", e)
            return Settings()
        update_logger_from_config(settings)
        return settings

    def run(self, args: Sequence[str]) -> int:
        """Run the program.

        Args:
            args: Command-line arguments without the program name

        Returns:
            Process exit status

        """
        settings = self._load_settings()
        messages = self._messages or CatalogMessageProvider(settings.locale)

        parsed = CLIParser(self.algorithm).parse_args(args)

        for option in parsed.unknown_options:
            print(
                messages.text(MSG_UNKNOWN_OPTION, option=option),
                file=sys.stderr,
            )

        if parsed.show_help:
            print(
                messages.text(
                    MSG_HELP, prog=self.prog, algorithm=self.algorithm
                )
            )
            return EXIT_FAILURE
        if parsed.show_version:
            print(messages.text(MSG_VERSION, version=__version__))
            return EXIT_FAILURE

        logger.debug("Running %s with %s", self.prog, parsed.config)
        checker = Checker(
            parsed.config,
            self.backend,
            messages,
            summary_with_status=settings.summary_with_status,
        )
        return checker.run()
