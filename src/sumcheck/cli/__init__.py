"""Command-line interface for sumcheck."""

from .parser import CLIParser, ParsedArguments
from .runner import CLIRunner

__all__ = ["CLIParser", "CLIRunner", "ParsedArguments"]
