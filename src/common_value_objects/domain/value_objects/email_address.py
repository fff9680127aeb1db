"""
Email Address Value Object
"""
from __future__ import annotations

from email_validator import EmailNotValidError, validate_email

from common_value_objects.domain.base_value_object import BaseValueObject
from common_value_objects.domain.result import Failure, Result, Success
from common_value_objects.errors import InvalidFormatError
from common_value_objects.logging import get_logger

logger = get_logger(__name__)


class EmailAddress(BaseValueObject):
    """
    Email address value object.

    Grammar checks are delegated to the email-validator library with
    deliverability checks disabled. The address is kept exactly as given;
    surrounding whitespace makes it invalid rather than being trimmed.

    Example: jimmy.lee@sub.example.com
    """

    def __init__(self, email_address: str) -> None:
        if not isinstance(email_address, str) or email_address != email_address.strip():
            raise self._invalid(email_address)

        try:
            validate_email(
                email_address,
                check_deliverability=False,
                allow_quoted_local=True,
            )
        except EmailNotValidError as e:
            raise self._invalid(email_address, reason=str(e)) from e

        self._value = email_address
        self._finalize_init()

    @staticmethod
    def _invalid(email_address: object, reason: str = "") -> InvalidFormatError:
        details = {"value": email_address}
        if reason:
            details["reason"] = reason
        return InvalidFormatError(
            f"The specified value [{email_address}] does not appear to be a valid email address.",
            details=details,
        )

    @classmethod
    def try_parse(cls, email_address: object) -> Result[EmailAddress, InvalidFormatError]:
        try:
            return Success(cls(email_address))  # type: ignore[arg-type]
        except InvalidFormatError as e:
            logger.debug("Email address parse failed", error_code=e.code)
            return Failure(e)

    @property
    def value(self) -> str:
        return self._value

    @property
    def local_part(self) -> str:
        """Portion of the address before the last "@"."""
        return self._value.rpartition("@")[0]

    @property
    def domain_part(self) -> str:
        """Portion of the address after the last "@"."""
        return self._value.rpartition("@")[2]

    def __str__(self) -> str:
        return self._value

    def _get_equality_components(self) -> tuple:
        return (self._value,)
