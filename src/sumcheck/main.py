"""Main CLI entry point for sumcheck.

Each digest program (MD5, SHA1, ...) is a thin binding around main(); see
sumcheck.programs for the console scripts.
"""

import sys
from collections.abc import Sequence

from sumcheck.cli import CLIRunner
from sumcheck.constants import DEFAULT_ALGORITHM, EXIT_FAILURE
from sumcheck.exceptions import UnsupportedAlgorithmError
from sumcheck.logger import get_logger

logger = get_logger(__name__)


def main(
    argv: Sequence[str] | None = None,
    algorithm: str = DEFAULT_ALGORITHM,
    prog: str | None = None,
) -> int:
    """Run the CLI application.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])
        algorithm: Algorithm to compute
        prog: Program name shown in help text

    Returns:
        Process exit status

    """
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        runner = CLIRunner(algorithm, prog=prog)
        return runner.run(args)
    except UnsupportedAlgorithmError as e:
        logger.error("%s", e)
        return EXIT_FAILURE
    except KeyboardInterrupt:
        logger.info("Cancelled by user")
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
