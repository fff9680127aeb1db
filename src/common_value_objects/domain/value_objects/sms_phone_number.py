"""
SMS Phone Number Value Object

An SMS-capable number is either a NANP long code (a full phone number without
an extension) or a carrier short code.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final, Optional

from common_value_objects.domain.base_value_object import BaseValueObject
from common_value_objects.domain.result import Failure, Result, Success
from common_value_objects.domain.value_objects.phone_number import PhoneNumber
from common_value_objects.errors import InvalidFormatError, InvalidStateError
from common_value_objects.logging import get_logger

logger = get_logger(__name__)

# Per the CTIA short code registry, codes are five or six digits and never
# start with 0 or 1. Three digit provider codes are not SMS-capable numbers.
_SHORT_CODE_RE: Final = re.compile(r"[2-9][0-9]{4,5}")

# ASCII whitespace and NUL only; other Unicode spaces are not trimmed
_TRIM_CHARACTERS: Final[str] = " \t\n\r\0\x0b"


@dataclass(frozen=True, slots=True)
class LongCode:
    """A full North American phone number used for SMS."""

    phone_number: PhoneNumber

    def __post_init__(self) -> None:
        if self.phone_number.extension is not None:
            raise InvalidFormatError(
                f"SMS phone numbers cannot contain an extension: {self.phone_number.normalized()}",
                details={"value": self.phone_number.normalized()},
            )


@dataclass(frozen=True, slots=True)
class ShortCode:
    """A five or six digit carrier-assigned short code."""

    code: str

    def __post_init__(self) -> None:
        if not isinstance(self.code, str) or _SHORT_CODE_RE.fullmatch(self.code) is None:
            raise InvalidFormatError(
                f"The specified value [{self.code}] is not a valid North American short code.",
                details={"value": self.code},
            )


SmsVariant = LongCode | ShortCode


def parse_long_code(number_string: str) -> Optional[LongCode]:
    result = PhoneNumber.try_parse(number_string)
    if result.is_failure():
        return None

    phone_number = result.unwrap()
    if phone_number.extension is not None:
        # SMS phone numbers can't contain extensions
        return None
    return LongCode(phone_number)


def parse_short_code(number_string: str) -> Optional[ShortCode]:
    if not isinstance(number_string, str):
        return None

    cleaned = number_string.strip(_TRIM_CHARACTERS)
    if _SHORT_CODE_RE.fullmatch(cleaned) is None:
        return None
    return ShortCode(cleaned)


class SmsPhoneNumber(BaseValueObject):
    """
    A short code (five or six digits) or a North American long code.

    The long code interpretation wins whenever the input parses as a phone
    number, so ``8015551212`` is a long code and `` 43553 `` a short code.
    Extensions are rejected outright.
    """

    def __init__(self, number_string: str) -> None:
        variant: Optional[SmsVariant] = parse_long_code(number_string) or parse_short_code(number_string)
        if variant is None:
            raise InvalidFormatError(
                f"The specified value [{number_string}] does not appear to be a valid "
                "North American short code or phone number.",
                details={"value": number_string},
            )

        self._variant: SmsVariant = variant
        self._finalize_init()

    @classmethod
    def try_parse(cls, number_string: object) -> Result[SmsPhoneNumber, InvalidFormatError]:
        """
        Non-raising counterpart of the constructor.

        Returns:
            Success(SmsPhoneNumber) or Failure(InvalidFormatError)
        """
        try:
            return Success(cls(number_string))  # type: ignore[arg-type]
        except InvalidFormatError as e:
            logger.debug("SMS phone number parse failed", error_code=e.code)
            return Failure(e)

    @property
    def variant(self) -> SmsVariant:
        return self._variant

    def is_short_code(self) -> bool:
        return isinstance(self._variant, ShortCode)

    def is_long_code(self) -> bool:
        return isinstance(self._variant, LongCode)

    def get_long_code(self) -> PhoneNumber:
        """
        The wrapped phone number.

        Raises:
            InvalidStateError: If this SMS phone number is a short code
        """
        if isinstance(self._variant, ShortCode):
            raise InvalidStateError(
                f"This SMS phone number [{self._variant.code}] is not a long code",
                details={"value": self._variant.code},
            )
        return self._variant.phone_number

    def format(self) -> str:
        """Display form; not meant to be parsed."""
        if isinstance(self._variant, LongCode):
            return self._variant.phone_number.format()
        return self._variant.code

    def normalized(self) -> str:
        """
        ``1XXXYYYZZZZ`` for long codes, the bare code for short codes.
        """
        if isinstance(self._variant, LongCode):
            return self._variant.phone_number.normalized()
        return self._variant.code

    def delivery_number(self) -> str:
        """
        Carrier-safe destination: E.164 for long codes, the verbatim code for short codes.
        """
        if isinstance(self._variant, LongCode):
            return self._variant.phone_number.e164()
        return self._variant.code

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.normalized()!r})"

    def _get_equality_components(self) -> tuple:
        return (self._variant,)
