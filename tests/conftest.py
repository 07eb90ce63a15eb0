"""Pytest configuration and fixtures for sumcheck tests."""

import logging
import os
import tempfile
from collections.abc import Callable
from pathlib import Path

import pytest

# Logging is configured when sumcheck modules are imported, so the log and
# settings directories must point away from $HOME before any test imports.
_TEST_ROOT = Path(tempfile.mkdtemp(prefix="sumcheck-tests-"))
os.environ.setdefault("SUMCHECK_LOG_DIR", str(_TEST_ROOT / "logs"))
os.environ.setdefault("SUMCHECK_CONFIG_DIR", str(_TEST_ROOT / "config"))

from sumcheck.core import (  # noqa: E402
    Checker,
    HashlibBackend,
    Mode,
    RunConfiguration,
)
from sumcheck.messages import CatalogMessageProvider  # noqa: E402


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation for all loggers during tests.

    This allows pytest's caplog fixture to capture logs from all loggers,
    even those created with propagate=False in production code.
    """
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("sumcheck"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logger = logging.getLogger(name)
        logger.propagate = propagate_value


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test inside an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def hello_file(workdir: Path) -> Path:
    """Create a.txt containing b"hello" in the working directory."""
    path = workdir / "a.txt"
    path.write_bytes(b"hello")
    return path


@pytest.fixture
def md5_backend() -> HashlibBackend:
    return HashlibBackend("MD5")


@pytest.fixture
def messages() -> CatalogMessageProvider:
    return CatalogMessageProvider("en_US")


@pytest.fixture
def make_checker(
    md5_backend: HashlibBackend, messages: CatalogMessageProvider
) -> Callable[..., Checker]:
    """Build a Checker for MD5 from run options.

    Example:
        >>> checker = make_checker("sums.md5", mode=Mode.CHECK, quiet=True)
    """

    def _make(
        *patterns: str,
        mode: Mode = Mode.GENERATE,
        summary_with_status: bool = False,
        **options: bool,
    ) -> Checker:
        config = RunConfiguration(
            algorithm="MD5", mode=mode, input_patterns=patterns, **options
        )
        return Checker(
            config,
            md5_backend,
            messages,
            summary_with_status=summary_with_status,
        )

    return _make
