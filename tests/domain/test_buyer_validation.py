"""Tests for checkout buyer validation."""

import pytest

from storefront.order.buyer import is_valid_email, is_valid_phone, validate_buyer


def _buyer(**overrides):
    buyer = {
        "email": "ana@example.com",
        "first_name": "Ana",
        "last_name": "García",
        "address": "Calle Mayor 1",
        "city": "Madrid",
        "postal_code": "28013",
        "country": "Spain",
        "phone": None,
    }
    buyer.update(overrides)
    return buyer


class TestValidateBuyer:
    def test_complete_buyer_is_valid(self):
        assert validate_buyer(_buyer(), requires_shipping=True) == {}

    def test_shipping_fields_required_for_physical_orders(self):
        errors = validate_buyer(_buyer(address="", city=None), requires_shipping=True)
        assert set(errors) == {"address", "city"}

    def test_shipping_fields_optional_for_digital_orders(self):
        buyer = _buyer(address=None, city=None, postal_code=None, country=None)
        assert validate_buyer(buyer, requires_shipping=False) == {}

    def test_blank_names_are_rejected(self):
        errors = validate_buyer(_buyer(first_name="  ", last_name=""), requires_shipping=False)
        assert errors == {"first_name": ["is required"], "last_name": ["is required"]}

    def test_reports_every_problem_at_once(self):
        errors = validate_buyer({}, requires_shipping=True)
        assert set(errors) == {
            "email",
            "first_name",
            "last_name",
            "address",
            "city",
            "postal_code",
            "country",
        }

    def test_invalid_email(self):
        errors = validate_buyer(_buyer(email="not-an-email"), requires_shipping=False)
        assert errors == {"email": ["is not a valid email address"]}

    def test_invalid_phone(self):
        errors = validate_buyer(_buyer(phone="call me"), requires_shipping=False)
        assert errors == {"phone": ["is not a valid phone number"]}

    def test_overlong_fields_are_reported(self):
        errors = validate_buyer(_buyer(phone="1" * 25, city="x" * 101), requires_shipping=True)
        assert errors == {
            "phone": ["must be at most 20 characters"],
            "city": ["must be at most 100 characters"],
        }

    def test_length_is_measured_after_trimming(self):
        assert validate_buyer(_buyer(postal_code="  28013  " + " " * 20), requires_shipping=True) == {}


@pytest.mark.parametrize(
    "email",
    ["ana@example.com", "first.last+tag@mail.example.org", "a@b.co"],
)
def test_valid_emails(email):
    assert is_valid_email(email)


@pytest.mark.parametrize(
    "email",
    ["ana", "ana@", "@example.com", "ana@example", "ana@@example.com", "ana smith@example.com", "ana@-example.com"],
)
def test_invalid_emails(email):
    assert not is_valid_email(email)


def test_phone_formats():
    assert is_valid_phone("+34 600 000 000")
    assert is_valid_phone("(555) 123-4567")
    assert not is_valid_phone("---")
