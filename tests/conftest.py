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
    """Select the config overlay before the domain is initialized."""
    os.environ["PROTEAN_ENV"] = session.config.option.env


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def bazaar_bed():
    from bazaar.domain import bazaar
    from bazaar.utils.db import drop_db, setup_db

    bed = DomainFixture(bazaar)
    bed.setup()
    setup_db(bazaar)
    yield bed
    drop_db(bazaar)
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(bazaar_bed):
    with bazaar_bed.domain_context():
        yield


@pytest.fixture(autouse=True)
def _reset_adapters():
    from bazaar.auth.identity import reset_identity_provider
    from bazaar.payments import reset_gateway

    reset_identity_provider()
    reset_gateway()
    yield
    reset_identity_provider()
    reset_gateway()
