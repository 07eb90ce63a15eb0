"""Top-level package for sumcheck.

Author: 2024 - 2025 sumcheck contributors
License: GPL-2.0-or-later
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("sumcheck")
except PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "dev"
