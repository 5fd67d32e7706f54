"""Buyer detail validation for checkout.

Collects every problem at once so the caller can show all field errors in a
single round trip.
"""

import re

REQUIRED_FIELDS = ("email", "first_name", "last_name")
SHIPPING_FIELDS = ("address", "city", "postal_code", "country")
MAX_LENGTHS = {
    "email": 254,
    "first_name": 100,
    "last_name": 100,
    "address": 255,
    "city": 100,
    "postal_code": 20,
    "country": 100,
    "phone": 20,
}

_PHONE_PATTERN = re.compile(r"^\+?[\d\s\-()]+$")
_FORBIDDEN_EMAIL_CHARS = (";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")


def is_valid_email(email: str) -> bool:
    """Structural check: one @, non-empty dotted domain, no whitespace or forbidden characters."""
    if any(ch.isspace() for ch in email) or email.count("@") != 1:
        return False

    local_part, domain_part = email.split("@", 1)
    if not local_part or local_part.startswith(".") or local_part.endswith("."):
        return False
    if not domain_part or domain_part.startswith(".") or domain_part.endswith("."):
        return False
    if "." not in domain_part or ".." in local_part or ".." in domain_part:
        return False
    if any(label.startswith("-") or label.endswith("-") for label in domain_part.split(".")):
        return False

    return not any(ch in email for ch in _FORBIDDEN_EMAIL_CHARS)


def is_valid_phone(phone: str) -> bool:
    return bool(re.search(r"\d", phone)) and bool(_PHONE_PATTERN.match(phone))


def validate_buyer(buyer: dict, requires_shipping: bool) -> dict[str, list[str]]:
    """Return ``{field: [messages]}`` for every invalid buyer field (empty when valid).

    Shipping fields are only required when the order contains physical products.
    """
    errors: dict[str, list[str]] = {}

    def value(field):
        return (buyer.get(field) or "").strip()

    required = REQUIRED_FIELDS + (SHIPPING_FIELDS if requires_shipping else ())
    for field in required:
        if not value(field):
            errors[field] = ["is required"]

    email = value("email")
    if email and not is_valid_email(email):
        errors["email"] = ["is not a valid email address"]

    phone = value("phone")
    if phone and not is_valid_phone(phone):
        errors["phone"] = ["is not a valid phone number"]

    for field, limit in MAX_LENGTHS.items():
        if len(value(field)) > limit:
            errors.setdefault(field, []).append(f"must be at most {limit} characters")

    return errors
