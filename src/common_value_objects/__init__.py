"""
Validated, immutable identifier value objects for messaging:
NANP phone numbers, SMS numbers (long and short codes), email addresses and
unambiguous random codes.
"""
from common_value_objects.domain.result import Failure, Result, Success
from common_value_objects.domain.services import OffensiveWordSearcher
from common_value_objects.domain.value_objects import (
    EmailAddress,
    LongCode,
    PhoneNumber,
    ShortCode,
    SmsPhoneNumber,
    UnambiguousString,
)
from common_value_objects.errors import (
    DomainError,
    InvalidFormatError,
    InvalidStateError,
    ResourceError,
    ValidationError,
)

__version__ = "1.0.0"

__all__ = [
    "PhoneNumber",
    "SmsPhoneNumber",
    "LongCode",
    "ShortCode",
    "EmailAddress",
    "UnambiguousString",
    "OffensiveWordSearcher",
    "Result",
    "Success",
    "Failure",
    "DomainError",
    "ValidationError",
    "InvalidFormatError",
    "InvalidStateError",
    "ResourceError",
]
