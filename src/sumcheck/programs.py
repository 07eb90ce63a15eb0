"""Console script bindings, one per digest algorithm."""

import sys

from sumcheck.constants import PROGRAM_ALGORITHMS
from sumcheck.main import main


def _run(prog: str) -> None:
    sys.exit(main(algorithm=PROGRAM_ALGORITHMS[prog], prog=prog))


def md5() -> None:
    """Entry point of sumcheck-md5."""
    _run("sumcheck-md5")


def sha1() -> None:
    """Entry point of sumcheck-sha1."""
    _run("sumcheck-sha1")


def sha256() -> None:
    """Entry point of sumcheck-sha256."""
    _run("sumcheck-sha256")


def sha512() -> None:
    """Entry point of sumcheck-sha512."""
    _run("sumcheck-sha512")
