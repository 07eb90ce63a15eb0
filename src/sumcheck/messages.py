"""User-facing message catalog.

The checker asks for text by fixed keys; the provider maps each key to an
English message id and translates it with a gettext catalog. Catalogs ship
as ``.po`` sources under ``sumcheck/locales/<locale>/LC_MESSAGES/`` and are
compiled in memory with Babel when loaded, so no build step is needed.
"""

from __future__ import annotations

import gettext
from io import BytesIO
from pathlib import Path
from typing import Any, Protocol

from babel.core import Locale, UnknownLocaleError
from babel.messages.mofile import write_mo
from babel.messages.pofile import read_po
from babel.support import NullTranslations, Translations

from sumcheck.config.paths import Paths
from sumcheck.constants import DEFAULT_LOCALE, MESSAGE_DOMAIN
from sumcheck.logger import get_logger

logger = get_logger(__name__)

# Message keys used by the checker engine
MSG_OK = "ok"
MSG_FAILED = "failed"
MSG_FILE_NOT_FOUND = "file_not_found"
MSG_FILE_ERROR = "file_error"
MSG_UNKNOWN_OPTION = "unknown_option"
MSG_HELP = "help"
MSG_VERSION = "version"

_MESSAGE_IDS: dict[str, str] = {
    MSG_OK: "OK",
    MSG_FAILED: "FAILED",
    MSG_FILE_NOT_FOUND: "{filename}: No such file or directory",
    MSG_FILE_ERROR: "{filename}: {error}",
    MSG_UNKNOWN_OPTION: "Unknown option: {option}",
    MSG_VERSION: "Version {version}",
    MSG_HELP: (
        "Usage: {prog} [OPTION]... [FILE]...\n"
        "Print or check {algorithm} checksums.\n"
        "FILE may contain the wildcards * and ?.\n"
        "\n"
        "  -c, --check   read {algorithm} sums from the FILEs and check them\n"
        "      --tag     create a BSD-style checksum\n"
        "\n"
        "The following options are useful only when verifying checksums:\n"
        "      --quiet   don't print OK for each successfully verified file\n"
        "      --status  don't output anything, status code shows success\n"
        "\n"
        "      --help    display this help and exit\n"
        "      --version output version information and exit\n"
        "      --        treat every following argument as a FILE"
    ),
}

_MISMATCH_SINGULAR = "WARNING: {count} computed checksum did NOT match"
_MISMATCH_PLURAL = "WARNING: {count} computed checksums did NOT match"


class MessageProvider(Protocol):
    """Supplies user-facing strings by fixed key."""

    def text(self, key: str, **kwargs: Any) -> str:
        """Return the message for ``key`` formatted with ``kwargs``."""
        ...

    def mismatch_summary(self, count: int) -> str:
        """Return the end-of-file summary for ``count`` failures."""
        ...


def _catalog_candidates(locale: str) -> list[str]:
    """Return catalog directory names for a locale, most specific first."""
    try:
        parsed = Locale.parse(locale)
    except (UnknownLocaleError, ValueError, TypeError):
        logger.warning("Unknown locale '%s', using English messages", locale)
        return []
    candidates = [str(parsed)]
    if parsed.language not in candidates:
        candidates.append(parsed.language)
    return candidates


def load_translations(
    locale: str, locales_dir: Path | None = None
) -> gettext.NullTranslations:
    """Load the catalog for a locale.

    Args:
        locale: Locale identifier such as "fr_FR" or "fr"
        locales_dir: Directory holding <locale>/LC_MESSAGES/sumcheck.po

    Returns:
        Translations for the locale, or NullTranslations (English) when no
        catalog exists

    """
    locales_dir = locales_dir or Paths.LOCALES_DIR

    for candidate in _catalog_candidates(locale):
        po_file = (
            locales_dir / candidate / "LC_MESSAGES" / f"{MESSAGE_DOMAIN}.po"
        )
        if not po_file.is_file():
            continue

        with po_file.open("rb") as fileobj:
            catalog = read_po(fileobj, locale=candidate, domain=MESSAGE_DOMAIN)

        buffer = BytesIO()
        write_mo(buffer, catalog)
        buffer.seek(0)
        logger.debug("Loaded %s message catalog from %s", candidate, po_file)
        return Translations(fp=buffer, domain=MESSAGE_DOMAIN)

    return NullTranslations()


class CatalogMessageProvider:
    """Message provider backed by a gettext catalog."""

    def __init__(
        self,
        locale: str = DEFAULT_LOCALE,
        locales_dir: Path | None = None,
    ) -> None:
        """Initialize the provider and load the locale's catalog.

        Args:
            locale: Locale identifier
            locales_dir: Override of the bundled catalog directory

        """
        self.locale = locale
        self._translations = load_translations(locale, locales_dir)

    def text(self, key: str, **kwargs: Any) -> str:
        """Return the translated message for ``key``.

        Raises:
            KeyError: If ``key`` is not a known message key

        """
        message = self._translations.gettext(_MESSAGE_IDS[key])
        return message.format(**kwargs) if kwargs else message

    def mismatch_summary(self, count: int) -> str:
        message = self._translations.ngettext(
            _MISMATCH_SINGULAR, _MISMATCH_PLURAL, count
        )
        return message.format(count=count)
