from typing import Optional

import pytest
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from common_value_objects import EmailAddress, PhoneNumber, SmsPhoneNumber
from common_value_objects.schemas import EmailAddressField, PhoneNumberField, SmsPhoneNumberField


class Contact(BaseModel):
    phone: PhoneNumberField
    sms: SmsPhoneNumberField
    email: Optional[EmailAddressField] = None


def test_validates_raw_strings():
    contact = Contact(phone="(801) 555-1212 ext. 5", sms=" 43553 ", email="fake@example.com")

    assert contact.phone == PhoneNumber("8015551212 x5")
    assert contact.sms.is_short_code()
    assert contact.email == EmailAddress("fake@example.com")


def test_accepts_instances():
    phone = PhoneNumber("8015551212")
    contact = Contact(phone=phone, sms=SmsPhoneNumber("8015551212"))
    assert contact.phone is phone
    assert contact.email is None


def test_dumps_normalized_strings():
    contact = Contact(phone="801.555.1212 x5", sms="(801) 555-1212", email="fake@example.com")

    assert contact.model_dump(mode="json") == {
        "phone": "18015551212 x5",
        "sms": "18015551212",
        "email": "fake@example.com",
    }


@pytest.mark.parametrize(
    "payload",
    [
        {"phone": "555-1212", "sms": "43553"},
        {"phone": "8015551212", "sms": "8015551212 x1"},
        {"phone": "8015551212", "sms": "43553", "email": "bad@domain"},
        {"phone": 8015551212, "sms": "43553"},
    ],
)
def test_invalid_values_are_validation_errors(payload):
    with pytest.raises(PydanticValidationError):
        Contact(**payload)


def test_json_schema_is_string():
    schema = Contact.model_json_schema()
    assert schema["properties"]["phone"]["type"] == "string"
    assert schema["properties"]["sms"]["type"] == "string"
