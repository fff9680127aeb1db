# src/common_value_objects/schemas.py
"""
Pydantic field types for the value objects.

Usage:
    class SendSmsRequest(BaseModel):
        to: SmsPhoneNumberField
        reply_to: Optional[EmailAddressField] = None

Raw strings (or existing instances) are validated into value objects; JSON
output uses the normalized string form.
"""
from __future__ import annotations

from typing import Annotated, Any, Callable, TypeVar

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from common_value_objects.domain.value_objects import EmailAddress, PhoneNumber, SmsPhoneNumber

VO = TypeVar("VO")


def _validator(cls: Callable[[str], VO]) -> Callable[[Any], VO]:
    def validate(value: Any) -> VO:
        if isinstance(value, cls):  # type: ignore[arg-type]
            return value
        if not isinstance(value, str):
            raise ValueError(f"{cls.__name__} must be given as a string")  # type: ignore[attr-defined]
        # InvalidFormatError is a ValueError, so pydantic reports it as a validation error
        return cls(value)

    return validate


PhoneNumberField = Annotated[
    PhoneNumber,
    PlainValidator(_validator(PhoneNumber)),
    PlainSerializer(lambda v: v.normalized(), return_type=str),
    WithJsonSchema({"type": "string", "examples": ["18015551212", "18015551212 x55"]}),
]

SmsPhoneNumberField = Annotated[
    SmsPhoneNumber,
    PlainValidator(_validator(SmsPhoneNumber)),
    PlainSerializer(lambda v: v.normalized(), return_type=str),
    WithJsonSchema({"type": "string", "examples": ["18015551212", "43553"]}),
]

EmailAddressField = Annotated[
    EmailAddress,
    PlainValidator(_validator(EmailAddress)),
    PlainSerializer(lambda v: v.value, return_type=str),
    WithJsonSchema({"type": "string", "format": "email"}),
]

__all__ = ["PhoneNumberField", "SmsPhoneNumberField", "EmailAddressField"]
