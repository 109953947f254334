"""
Unit tests for shared value objects: Email, PhoneNumber, Address.
"""

import pytest

from storefront.core.domain import Address, Email, PhoneNumber, ValidationException


@pytest.mark.unit
@pytest.mark.domain
class TestEmail:
    def test_valid_email_is_trimmed(self):
        email = Email("  hanako@example.co.jp ")

        assert email.value == "hanako@example.co.jp"
        assert email.get_domain() == "example.co.jp"
        assert str(email) == "hanako@example.co.jp"

    @pytest.mark.parametrize("value", ["", "   ", "no-at-sign", "a@b", "a@@example.com", "a b@example.com"])
    def test_invalid_email(self, value):
        with pytest.raises(ValidationException) as exc_info:
            Email(value)

        assert exc_info.value.field == "email"

    def test_too_long_email(self):
        local = "a" * 250
        with pytest.raises(ValidationException, match="cannot exceed 255"):
            Email(f"{local}@example.com")

    def test_equality_by_value(self):
        assert Email("a@example.com") == Email(" a@example.com")


@pytest.mark.unit
@pytest.mark.domain
class TestPhoneNumber:
    @pytest.mark.parametrize("value", ["03-1234-5678", "090-1234-5678", "0312345678", "09012345678"])
    def test_valid_numbers(self, value):
        assert PhoneNumber(value).value == value

    @pytest.mark.parametrize("value", ["", "1234567890", "090-1234-56789", "+81-90-1234-5678", "abc"])
    def test_invalid_numbers(self, value):
        with pytest.raises(ValidationException) as exc_info:
            PhoneNumber(value)

        assert exc_info.value.field == "phone"

    def test_formatted_landline(self):
        assert PhoneNumber("0312345678").formatted() == "03-1234-5678"

    def test_formatted_mobile(self):
        assert PhoneNumber("09012345678").formatted() == "090-1234-5678"
        assert str(PhoneNumber("090-1234-5678")) == "090-1234-5678"


@pytest.mark.unit
@pytest.mark.domain
class TestAddress:
    def test_full_address_with_building(self, tokyo_address):
        assert tokyo_address.full_address() == (
            "〒150-0001 Tokyo Shibuya-ku Jingumae 1-2-3 Omotesando Hills 4F"
        )

    def test_full_address_without_building(self):
        address = Address("530-0001", "Osaka", "Kita-ku", "Umeda 3-1-1")

        assert address.building is None
        assert str(address) == "〒530-0001 Osaka Kita-ku Umeda 3-1-1"

    def test_blank_building_becomes_none(self):
        address = Address("530-0001", "Osaka", "Kita-ku", "Umeda 3-1-1", building="   ")

        assert address.building is None

    def test_fields_are_trimmed(self):
        address = Address(" 530-0001 ", " Osaka ", " Kita-ku ", " Umeda ")

        assert (address.postal_code, address.prefecture, address.city, address.street) == (
            "530-0001",
            "Osaka",
            "Kita-ku",
            "Umeda",
        )

    @pytest.mark.parametrize("postal_code", ["1500001", "150-001", "abc-defg", "", "\uff11\uff15\uff10-\uff10\uff10\uff10\uff11"])
    def test_invalid_postal_code(self, postal_code):
        with pytest.raises(ValidationException) as exc_info:
            Address(postal_code, "Tokyo", "Shibuya-ku", "Jingumae 1-2-3")

        assert exc_info.value.field == "postal_code"

    @pytest.mark.parametrize("field_name", ["prefecture", "city", "street"])
    def test_required_fields(self, field_name):
        values = {
            "postal_code": "150-0001",
            "prefecture": "Tokyo",
            "city": "Shibuya-ku",
            "street": "Jingumae 1-2-3",
        }
        values[field_name] = " "

        with pytest.raises(ValidationException) as exc_info:
            Address(**values)

        assert exc_info.value.field == field_name

    def test_field_length_limit(self):
        with pytest.raises(ValidationException, match="cannot exceed 100"):
            Address("150-0001", "Tokyo", "x" * 101, "Jingumae 1-2-3")

    def test_is_valid_postal_code(self):
        assert Address.is_valid_postal_code("100-0001")
        assert not Address.is_valid_postal_code("100-00011")
        assert not Address.is_valid_postal_code("100-0001\n")
