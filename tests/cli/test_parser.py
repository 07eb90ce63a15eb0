"""Tests for the two-pass command-line parser."""

import pytest

from sumcheck.cli.parser import CLIParser
from sumcheck.core.models import Mode


@pytest.fixture
def parser() -> CLIParser:
    return CLIParser("md5")


def test_plain_files_generate_mode(parser: CLIParser) -> None:
    parsed = parser.parse_args(["a.txt", "*.log"])

    assert parsed.config.mode is Mode.GENERATE
    assert parsed.config.algorithm == "MD5"
    assert parsed.config.input_patterns == ("a.txt", "*.log")
    assert parsed.unknown_options == ()
    assert not parsed.show_help
    assert not parsed.show_version


@pytest.mark.parametrize("flag", ["--check", "-c"])
def test_check_flag(parser: CLIParser, flag: str) -> None:
    parsed = parser.parse_args([flag, "sums.md5"])

    assert parsed.config.mode is Mode.CHECK
    assert parsed.config.input_patterns == ("sums.md5",)


def test_check_flag_is_idempotent(parser: CLIParser) -> None:
    parsed = parser.parse_args(["-c", "--check", "-c", "sums.md5"])

    assert parsed.config.is_check
    assert parsed.unknown_options == ()


def test_check_only_flags_before_check_are_honoured(parser: CLIParser) -> None:
    parsed = parser.parse_args(["--quiet", "--status", "sums.md5", "-c"])

    assert parsed.config.quiet
    assert parsed.config.status_only
    assert parsed.unknown_options == ()


def test_check_only_flags_without_check_are_unknown(parser: CLIParser) -> None:
    parsed = parser.parse_args(["--quiet", "a.txt", "--status"])

    assert not parsed.config.quiet
    assert not parsed.config.status_only
    assert parsed.unknown_options == ("--quiet", "--status")
    assert parsed.config.input_patterns == ("a.txt",)


def test_tag_applies_when_generating(parser: CLIParser) -> None:
    assert parser.parse_args(["--tag", "a.txt"]).config.tag_style


def test_tag_is_accepted_but_inert_when_checking(parser: CLIParser) -> None:
    parsed = parser.parse_args(["--tag", "-c", "sums.md5"])

    assert not parsed.config.tag_style
    assert parsed.unknown_options == ()


@pytest.mark.parametrize("flag", ["--help", "/?"])
def test_help(parser: CLIParser, flag: str) -> None:
    assert parser.parse_args([flag]).show_help


def test_version(parser: CLIParser) -> None:
    assert parser.parse_args(["--version"]).show_version


@pytest.mark.parametrize("token", ["--bogus", "-x", "/etc/passwd", "-"])
def test_unknown_options_are_collected(parser: CLIParser, token: str) -> None:
    parsed = parser.parse_args([token, "a.txt"])

    assert parsed.unknown_options == (token,)
    assert parsed.config.input_patterns == ("a.txt",)


def test_terminator_ends_option_processing(parser: CLIParser) -> None:
    parsed = parser.parse_args(["--tag", "--", "-c", "/etc/hosts", "--help"])

    assert parsed.config.mode is Mode.GENERATE
    assert parsed.config.tag_style
    assert not parsed.show_help
    assert parsed.config.input_patterns == ("-c", "/etc/hosts", "--help")


def test_second_terminator_is_a_file(parser: CLIParser) -> None:
    parsed = parser.parse_args(["--", "--"])

    assert parsed.config.input_patterns == ("--",)
