from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from threading import Lock

from suite_money.domain.monetary.iso4217 import ISO_4217_SCALES
from suite_money.errors import InvalidCurrency

logger = logging.getLogger(__name__)

_ISO_CODE_PATTERN = re.compile(r"[A-Z]{3}")
# No whitespace or separators: codes are embedded in the "120.00 CHF" text form
_UNOFFICIAL_CODE_PATTERN = re.compile(r"[A-Z0-9]{2,12}")


class CurrencyRegistry:
    """Validates currency codes against ISO 4217 and runtime-registered unofficial codes.

    Unofficial codes are non-ISO tickers registered at runtime (e.g. "ETH", "USDC").

    Reads never lock. A registration builds a new frozenset under `_lock` and publishes it with a
    single assignment, so concurrent readers see either the old or the new set. A parse racing
    the registration of the same code may not see it yet.
    """

    __slots__ = ("_iso_codes", "_unofficial_codes", "_lock")

    def __init__(self, iso_codes: Iterable[str] | None = None) -> None:
        """Initialize the registry.

        Args:
            iso_codes: Official codes to accept. If None, the bundled ISO 4217 table is used.
        """
        source = ISO_4217_SCALES if iso_codes is None else iso_codes
        self._iso_codes: frozenset[str] = frozenset(_normalize(code) for code in source)
        self._unofficial_codes: frozenset[str] = frozenset()
        self._lock = Lock()

    def parse(self, code: str) -> str:
        """Normalize and validate $code.

        Surrounding whitespace is stripped and letters are upper-cased: "  chf " -> "CHF".

        Args:
            code: Currency code to validate.

        Returns:
            str: Normalized code.

        Raises:
            InvalidCurrency: If $code is neither a registered unofficial code nor an ISO 4217 code.
        """
        normalized = _normalize(code)
        if normalized in self._unofficial_codes:
            return normalized

        # Raise: official codes are 3 letters from the ISO 4217 table
        if not _ISO_CODE_PATTERN.fullmatch(normalized) or normalized not in self._iso_codes:
            raise InvalidCurrency(f"Cannot call `parse` because $code ('{code}') is not a recognised ISO 4217 currency code")

        return normalized

    def register_unofficial(self, code: str) -> str:
        """Register a code that is not part of ISO 4217, such as a crypto ticker.

        Registering an ISO code, or a code that is already registered, changes nothing.

        Args:
            code: Alphanumeric code of 2 to 12 characters (e.g. "ETH", "USDC").

        Returns:
            str: Normalized code.

        Raises:
            InvalidCurrency: If $code is not a 2-12 character alphanumeric code.
        """
        normalized = _normalize(code)

        # Raise: unofficial codes are short alphanumeric tickers
        if not _UNOFFICIAL_CODE_PATTERN.fullmatch(normalized):
            raise InvalidCurrency(f"Cannot call `register_unofficial` because $code ('{code}') is not a 2-12 character alphanumeric code")

        if normalized in self._iso_codes:
            logger.debug(f"Skipped registration of $code '{normalized}' because it is an ISO 4217 code")
            return normalized

        with self._lock:
            if normalized not in self._unofficial_codes:
                self._unofficial_codes = self._unofficial_codes | {normalized}
                logger.info(f"Registered unofficial currency $code '{normalized}'")

        return normalized

    def is_iso(self, code: str) -> bool:
        return _normalize(code) in self._iso_codes

    def is_unofficial(self, code: str) -> bool:
        return _normalize(code) in self._unofficial_codes

    def list_unofficial(self) -> list[str]:
        """Return registered unofficial codes, sorted."""
        return sorted(self._unofficial_codes)


def _normalize(code: str) -> str:
    # Raise: currency codes are strings
    if not isinstance(code, str):
        raise TypeError(f"$code must be a string, but provided value is: {code!r}")
    return code.strip().upper()


# Process-wide registry used whenever no registry is passed explicitly
DEFAULT_CURRENCY_REGISTRY = CurrencyRegistry()
