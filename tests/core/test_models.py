"""Tests for the checker domain types."""

import dataclasses

import pytest

from sumcheck.core.models import (
    DigestRecord,
    FileTarget,
    Mode,
    ParsedLine,
    RunConfiguration,
    VerificationTally,
)


class TestRunConfiguration:
    """Tests for RunConfiguration."""

    def test_defaults(self) -> None:
        config = RunConfiguration(algorithm="md5")

        assert config.algorithm == "MD5"
        assert config.mode is Mode.GENERATE
        assert not config.tag_style
        assert not config.quiet
        assert not config.status_only
        assert config.input_patterns == ()
        assert not config.is_check

    def test_patterns_are_stored_as_tuple(self) -> None:
        config = RunConfiguration(
            algorithm="MD5", mode=Mode.CHECK, input_patterns=["a", "b"]
        )

        assert config.input_patterns == ("a", "b")
        assert config.is_check

    def test_is_immutable(self) -> None:
        config = RunConfiguration(algorithm="MD5")

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.quiet = True  # type: ignore[misc]


def test_digest_record_lowercases_digest() -> None:
    record = DigestRecord("a.txt", "ABCDEF", is_tagged=False)

    assert record.recorded_digest_hex == "abcdef"


def test_parsed_line_failure_has_empty_record() -> None:
    parsed = ParsedLine.failure(is_tagged=True, reason="bad")

    assert not parsed.ok
    assert parsed.record == DigestRecord("", "", True)
    assert parsed.reason == "bad"


def test_file_target_exists(tmp_path) -> None:
    present = tmp_path / "present"
    present.write_text("x")

    assert FileTarget(str(present)).exists
    assert not FileTarget(str(tmp_path / "absent")).exists


class TestVerificationTally:
    """Tests for VerificationTally."""

    def test_clean_file_leaves_no_error(self) -> None:
        tally = VerificationTally()
        tally.start_file()

        assert tally.finish_file() == 0
        assert not tally.has_any_error

    def test_error_is_sticky_across_files(self) -> None:
        tally = VerificationTally()
        tally.start_file()
        tally.record_failure()
        tally.record_failure()
        assert tally.finish_file() == 2

        tally.start_file()
        assert tally.finish_file() == 0

        assert tally.error_count == 0
        assert tally.has_any_error
        assert tally.files_checked == 2
