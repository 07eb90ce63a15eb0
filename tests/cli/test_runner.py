"""Tests for the CLI runner."""

from pathlib import Path

import pytest

from sumcheck import __version__
from sumcheck.cli.runner import CLIRunner
from sumcheck.config import SettingsManager

HELLO_MD5 = "5d41402abc4b2a76b9719d911017c592"


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    return tmp_path / "config" / "settings.conf"


@pytest.fixture
def runner(settings_file: Path) -> CLIRunner:
    return CLIRunner("md5", settings_manager=SettingsManager(settings_file))


def test_help_prints_usage_and_returns_one(runner, capsys) -> None:
    status = runner.run(["--help", "a.txt"])

    out = capsys.readouterr().out
    assert status == 1
    assert out.startswith("Usage: sumcheck-md5 [OPTION]... [FILE]...")
    assert "MD5 checksums" in out


def test_help_wins_over_version(runner, capsys) -> None:
    runner.run(["--version", "/?"])

    assert "Usage:" in capsys.readouterr().out


def test_version_prints_version_and_returns_one(runner, capsys) -> None:
    status = runner.run(["--version"])

    assert status == 1
    assert capsys.readouterr().out.strip() == f"Version {__version__}"


def test_generate_and_check(runner, hello_file, workdir, capsys) -> None:
    assert runner.run(["a.txt"]) == 0
    (workdir / "sums.md5").write_text(capsys.readouterr().out)

    assert runner.run(["-c", "sums.md5"]) == 0
    assert capsys.readouterr().out == "a.txt: OK\n"


def test_unknown_option_is_reported_and_run_continues(
    runner, hello_file, capsys
) -> None:
    status = runner.run(["--bogus", "a.txt"])

    captured = capsys.readouterr()
    assert status == 0
    assert captured.err == "Unknown option: --bogus\n"
    assert captured.out == f"{HELLO_MD5}  a.txt\n"


def test_unknown_options_reported_before_help(runner, capsys) -> None:
    status = runner.run(["--quiet", "--help"])

    captured = capsys.readouterr()
    assert status == 1
    assert captured.err == "Unknown option: --quiet\n"


def test_no_files_is_a_successful_no_op(runner, workdir, capsys) -> None:
    assert runner.run(["*.none"]) == 0
    assert capsys.readouterr().out == ""


def test_french_locale_from_settings(
    settings_file, hello_file, workdir, capsys
) -> None:
    settings_file.parent.mkdir(parents=True)
    settings_file.write_text("[DEFAULT]\nlocale = fr_FR\n")
    (workdir / "sums.md5").write_text(f"{'0' * 32}  a.txt\n")
    runner = CLIRunner("md5", settings_manager=SettingsManager(settings_file))

    status = runner.run(["-c", "sums.md5"])

    assert status == 1
    assert capsys.readouterr().err.splitlines() == [
        "a.txt: ÉCHEC",
        "ATTENTION : 1 somme de contrôle calculée ne correspond PAS",
    ]


def test_status_summary_setting(
    settings_file, hello_file, workdir, capsys
) -> None:
    settings_file.parent.mkdir(parents=True)
    settings_file.write_text("[DEFAULT]\nsummary_with_status = yes\n")
    (workdir / "sums.md5").write_text(f"{'0' * 32}  a.txt\n")
    runner = CLIRunner("md5", settings_manager=SettingsManager(settings_file))

    assert runner.run(["-c", "--status", "sums.md5"]) == 1
    assert capsys.readouterr().err == (
        "WARNING: 1 computed checksum did NOT match\n"
    )


def test_invalid_settings_fall_back_to_defaults(
    settings_file, hello_file, capsys, caplog
) -> None:
    settings_file.parent.mkdir(parents=True)
    settings_file.write_text("[DEFAULT]\nlog_level = LOUD\n")
    runner = CLIRunner("md5", settings_manager=SettingsManager(settings_file))

    status = runner.run(["a.txt"])

    assert status == 0
    assert capsys.readouterr().out == f"{HELLO_MD5}  a.txt\n"
    assert "using default settings" in caplog.text


def test_sha256_runner(settings_file, hello_file, capsys) -> None:
    runner = CLIRunner(
        "sha256", settings_manager=SettingsManager(settings_file)
    )

    runner.run(["--tag", "a.txt"])

    assert capsys.readouterr().out == (
        "SHA256 (a.txt) = "
        "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824\n"
    )
