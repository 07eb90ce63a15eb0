"""Tests for digest backends and hex rendering."""

import hashlib
import io

import pytest

from sumcheck.core.backends import HashlibBackend, get_backend, to_hex
from sumcheck.exceptions import DigestError, UnsupportedAlgorithmError


class _FailingStream(io.BytesIO):
    """Stream that fails after returning its first chunk."""

    name = "broken.bin"

    def __init__(self) -> None:
        super().__init__(b"x" * 10)
        self._reads = 0

    def read(self, size: int = -1) -> bytes:
        self._reads += 1
        if self._reads > 1:
            raise OSError(5, "Input/output error")
        return super().read(size)


@pytest.mark.parametrize(
    ("algorithm", "expected"),
    [
        ("MD5", "5d41402abc4b2a76b9719d911017c592"),
        ("SHA1", "aaf4c61ddcc5e8a2dabede0f3b482cd9aea9434d"),
        (
            "SHA256",
            "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824",
        ),
    ],
)
def test_compute_digest_known_values(algorithm: str, expected: str) -> None:
    backend = HashlibBackend(algorithm)

    digest = backend.compute_digest(io.BytesIO(b"hello"))

    assert to_hex(digest) == expected


def test_compute_digest_spans_multiple_chunks() -> None:
    backend = HashlibBackend("md5")
    data = b"a" * 200_000

    streamed = backend.compute_digest(io.BytesIO(data))

    assert streamed == hashlib.md5(data).digest()


def test_backend_name_is_uppercase() -> None:
    assert HashlibBackend("sha256").name == "SHA256"


def test_unknown_algorithm_raises() -> None:
    with pytest.raises(UnsupportedAlgorithmError) as exc_info:
        get_backend("NOPE42")

    assert exc_info.value.target == "NOPE42"


def test_read_failure_raises_digest_error() -> None:
    backend = HashlibBackend("MD5")

    with pytest.raises(DigestError) as exc_info:
        backend.compute_digest(_FailingStream())

    assert exc_info.value.message == "Input/output error"
    assert exc_info.value.target == "broken.bin"


class TestToHex:
    """Tests for to_hex."""

    def test_lowercase_two_characters_per_byte(self) -> None:
        assert to_hex(bytes([0x00, 0x0F, 0xA0, 0xFF])) == "000fa0ff"

    @pytest.mark.parametrize("length", [0, 1, 16, 20, 32, 64])
    def test_length_is_twice_byte_count(self, length: int) -> None:
        rendered = to_hex(bytes(range(length)))

        assert len(rendered) == 2 * length
        assert rendered == rendered.lower()

    def test_md5_digest_is_32_characters(self) -> None:
        digest = HashlibBackend("MD5").compute_digest(io.BytesIO(b""))

        assert to_hex(digest) == "d41d8cd98f00b204e9800998ecf8427e"
