import os
from pathlib import Path

import pytest
from protean.integrations.pytest import DomainFixture


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Select the config overlay before the domain is imported and initialized."""
    os.environ["PROTEAN_ENV"] = session.config.option.env


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def storefront_bed():
    from storefront.domain import storefront

    bed = DomainFixture(storefront)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(storefront_bed):
    with storefront_bed.domain_context():
        yield


@pytest.fixture()
def make_product():
    """Create a catalogue product through its command and return the new id."""
    from uuid import uuid4

    from protean import current_domain

    from storefront.catalogue.product.creation import CreateProduct

    def _make(**overrides):
        defaults = {
            "name": "Wireless Mouse",
            "slug": f"product-{uuid4().hex[:8]}",
            "description": "Ergonomic wireless mouse with silent clicks.",
            "price_cents": 10000,
            "category": "Electronics",
            "product_type": "physical",
        }
        defaults.update(overrides)
        return current_domain.process(CreateProduct(**defaults), asynchronous=False)

    return _make
