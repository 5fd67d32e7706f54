"""Shared BDD fixtures and step definitions for the storefront."""

import pytest
from protean import current_domain
from pytest_bdd import given, parsers

from storefront.catalogue.product.creation import CreateProduct
from storefront.shared.money import to_cents


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def session_id():
    return "cart_bdd_shopper"


@pytest.fixture()
def catalogue():
    """Product ids keyed by slug."""
    return {}


@pytest.fixture()
def error():
    """Container for captured domain errors."""
    return {"exc": None}


@pytest.fixture()
def placed():
    """Container for the order placed at checkout."""
    return {"order": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse("the tax rate is {rate}"))
def tax_rate(monkeypatch, rate):
    monkeypatch.setenv("STOREFRONT_TAX_RATE", rate)


@given(parsers.cfparse('a physical product "{slug}" priced {price} with {stock:d} units in stock'))
def physical_product(catalogue, slug, price, stock):
    catalogue[slug] = _create_product(slug, price, "physical", stock)


@given(parsers.cfparse('a digital product "{slug}" priced {price}'))
def digital_product(catalogue, slug, price):
    catalogue[slug] = _create_product(slug, price, "digital", None)


def _create_product(slug, price, product_type, stock):
    return current_domain.process(
        CreateProduct(
            name=slug.replace("-", " ").title(),
            slug=slug,
            description=f"{product_type.title()} product {slug}",
            price_cents=to_cents(price),
            category="General",
            product_type=product_type,
            stock_quantity=stock,
        ),
        asynchronous=False,
    )
