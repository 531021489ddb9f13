"""Fixtures for cross-context tests.

Each test pushes the context of the domain it works in; a customer built in
the identity context can then be handed to ordering services.
"""

import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def identity_bed():
    from identity.domain import identity

    bed = DomainFixture(identity)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(scope="session")
def catalogue_bed():
    from catalogue.domain import catalogue

    bed = DomainFixture(catalogue)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(scope="session")
def ordering_bed():
    from ordering.domain import ordering

    bed = DomainFixture(ordering)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture
def identity_ctx(identity_bed):
    with identity_bed.domain_context():
        yield


@pytest.fixture
def catalogue_ctx(catalogue_bed):
    with catalogue_bed.domain_context():
        yield


@pytest.fixture
def dispatcher():
    from bootstrap import build_dispatcher

    return build_dispatcher()
