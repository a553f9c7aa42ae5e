import pytest
from fastapi.testclient import TestClient

from main import app


VALID_ADDRESS = {
    "street": "123 Main St",
    "city": "Springfield",
    "state": "IL",
    "zip": "62701",
}

VALID_IDENTITY = {"ssn": "123-45-6789", "email": "a@b.co"}


@pytest.fixture
def address_event():
    return dict(VALID_ADDRESS)


@pytest.fixture
def identity_event():
    return dict(VALID_IDENTITY)


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
