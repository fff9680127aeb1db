"""
North American Phone Number Value Object
"""
from __future__ import annotations

import re
from typing import Final, Optional

from common_value_objects.domain.base_value_object import BaseValueObject
from common_value_objects.domain.result import Failure, Result, Success
from common_value_objects.errors import InvalidFormatError
from common_value_objects.logging import get_logger

logger = get_logger(__name__)

# Everything except digits and the extension marker is noise
_NOISE_RE: Final = re.compile(r"[^0-9x]", re.IGNORECASE)

# Optional country code, NANP area code + exchange + subscriber number, then an
# optional extension of up to six digits that must run to the end of the input.
_NANP_RE: Final = re.compile(
    r"^1?([2-9][0-9]{2}[2-9][0-9]{2}[0-9]{4})(?:x([0-9]{1,6})\b)?",
    re.IGNORECASE,
)

_EXTENSION_MARKER: Final[str] = " x"

# Currently assigned toll-free area codes. 822 is reserved but not in service.
TOLL_FREE_AREA_CODES: Final[frozenset[str]] = frozenset(
    {"800", "888", "877", "866", "855", "844", "833"}
)

DEFAULT_FORMAT: Final[str] = "(%a) %e-%n %x"
DEFAULT_EXTENSION_PREFIX: Final[str] = "x"


def parse_north_american_phone_number(value: object) -> Optional[str]:
    """
    Parse loosely formatted input into the normalized form ``1XXXYYYZZZZ[ xNNNNNN]``.

    Returns:
        The normalized phone number, or None if the input is not a NANP number.
    """
    if not isinstance(value, str) or not value:
        return None

    cleaned = _NOISE_RE.sub("", value)

    match = _NANP_RE.match(cleaned)
    if match is None:
        return None

    normalized = "1" + match.group(1)
    if match.group(2) is not None:
        normalized += _EXTENSION_MARKER + match.group(2)
    return normalized


class PhoneNumber(BaseValueObject):
    """
    North American (NANP) phone number with an optional extension.

    Accepts human input such as ``(801) 555-1212``, ``1-801-555-1212`` or
    ``801.555.1212 ext. 55`` and stores it as ``18015551212`` /
    ``18015551212 x55``.

    Example:
        >>> PhoneNumber("801.555.1212 ext. 55").normalized()
        '18015551212 x55'
    """

    def __init__(self, phone_number: str) -> None:
        normalized = parse_north_american_phone_number(phone_number)
        if normalized is None:
            raise InvalidFormatError(
                f"The specified value [{phone_number}] does not appear to be a valid "
                "North American phone number.",
                details={"value": phone_number},
            )

        self._phone_number = normalized
        self._finalize_init()

    @classmethod
    def try_parse(cls, phone_number: object) -> Result[PhoneNumber, InvalidFormatError]:
        """
        Non-raising counterpart of the constructor.

        Returns:
            Success(PhoneNumber) or Failure(InvalidFormatError)
        """
        try:
            return Success(cls(phone_number))  # type: ignore[arg-type]
        except InvalidFormatError as e:
            logger.debug("Phone number parse failed", error_code=e.code)
            return Failure(e)

    @property
    def area_code(self) -> str:
        return self._phone_number[1:4]

    @property
    def exchange(self) -> str:
        return self._phone_number[4:7]

    @property
    def subscriber_number(self) -> str:
        return self._phone_number[7:11]

    @property
    def extension(self) -> Optional[str]:
        """Extension digits, or None if the number has no extension."""
        if len(self._phone_number) >= 14:
            return self._phone_number[13:]
        return None

    def normalized(self) -> str:
        """Normalized form ``1XXXYYYZZZZ`` or ``1XXXYYYZZZZ xNNNNNN``."""
        return self._phone_number

    def e164(self) -> str:
        """
        E.164 form, e.g. ``+18015551212``.

        The extension is never included since E.164 has no notion of one.
        """
        return "+" + self._phone_number[:11]

    def is_toll_free(self) -> bool:
        return self.area_code in TOLL_FREE_AREA_CODES

    def format(self, template: str = DEFAULT_FORMAT, extension_prefix: str = DEFAULT_EXTENSION_PREFIX) -> str:
        """
        Format the phone number for display.

        Tokens allowed in the template:
            %a : area code
            %e : exchange
            %n : subscriber number
            %x : extension, prefixed with ``extension_prefix``

        Without an extension, ``%x`` and any whitespace around it are removed.
        There is no escape for a literal ``%`` followed by a token letter.

        Note: display output is not meant to be parsed; use normalized() for that.
        """
        formatted = (
            template.replace("%a", self.area_code)
            .replace("%e", self.exchange)
            .replace("%n", self.subscriber_number)
        )

        extension = self.extension
        if extension is not None:
            return formatted.replace("%x", extension_prefix + extension)
        return re.sub(r"\s*%x\s*", "", formatted)

    def __str__(self) -> str:
        return self.format()

    def _get_equality_components(self) -> tuple:
        return (self._phone_number,)
