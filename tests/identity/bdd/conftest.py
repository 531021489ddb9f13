"""Shared BDD fixtures and step definitions for customer notifications."""

import pytest
from identity.customer.customer import Customer
from identity.customer.handlers import (
    ConfirmWhenCustomerIsCreatedHandler,
    InformWhenCustomerAddressIsChangedHandler,
    LogWhenCustomerIsCreatedHandler,
)
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then
from shared.events import EventDispatcher
from structlog.testing import capture_logs


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def dispatcher():
    return EventDispatcher()


@pytest.fixture(autouse=True)
def logs():
    """Capture structlog output for the whole scenario."""
    with capture_logs() as captured:
        yield captured


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


def info_messages(logs):
    return [entry["event"] for entry in logs if entry["log_level"] == "info"]


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("the creation reactions are registered")
def creation_reactions(dispatcher):
    dispatcher.register("CustomerCreated", LogWhenCustomerIsCreatedHandler())
    dispatcher.register("CustomerCreated", ConfirmWhenCustomerIsCreatedHandler())


@given("the address change reaction is registered")
def address_change_reaction(dispatcher):
    dispatcher.register("CustomerAddressChanged", InformWhenCustomerAddressIsChangedHandler())


@given("every reaction is unregistered")
def unregister_everything(dispatcher):
    dispatcher.unregister_all()


@given(parsers.cfparse('customer "{customer_id}" named "{name}" exists'), target_fixture="customer")
def existing_customer(customer_id, name):
    return Customer(id=customer_id, name=name)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the log contains "{message}"'))
def log_contains(logs, message):
    assert message in info_messages(logs)


@then("the log contains in order:")
def log_contains_in_order(logs, datatable):
    expected = [row[0].strip() for row in datatable[1:]]
    assert info_messages(logs) == expected


@then("nothing is logged")
def nothing_logged(logs):
    assert info_messages(logs) == []


@then("the activation is rejected")
def activation_rejected(error):
    assert isinstance(error["exc"], ValidationError)
