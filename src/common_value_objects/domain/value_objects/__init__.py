# src/common_value_objects/domain/value_objects/__init__.py
"""Value objects for identifiers used across messaging."""

from .email_address import EmailAddress
from .phone_number import PhoneNumber
from .sms_phone_number import LongCode, ShortCode, SmsPhoneNumber, SmsVariant
from .unambiguous_string import UnambiguousString

__all__ = [
    'EmailAddress',
    'PhoneNumber',
    'SmsPhoneNumber',
    'LongCode',
    'ShortCode',
    'SmsVariant',
    'UnambiguousString',
]
