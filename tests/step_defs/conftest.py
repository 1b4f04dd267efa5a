"""
Shared BDD steps (pytest-bdd): generic requests and response assertions.
"""

import pytest
from pytest_bdd import parsers, then, when


@pytest.fixture
def response():
    """Store last response for then steps."""
    return {}


@when(parsers.parse('I request "{method}" "{path}"'))
def request_path(sync_client, response, method, path):
    r = sync_client.request(method, path)
    response["status"] = r.status_code
    response["body"] = r.json() if r.content else None


@then(parsers.parse("the response status should be {status:d}"))
def response_status(response, status):
    assert response["status"] == status


@then(parsers.parse('the response body should have "{key}" equals "{value}"'))
def body_field_equals(response, key, value):
    assert response["body"].get(key) == value
