"""Identity check tests."""

import pytest

from app.models import IdentityRequest
from app.services.identity import is_valid_email, is_valid_ssn, validate_identity


def check(ssn, email):
    return validate_identity(IdentityRequest(ssn=ssn, email=email))


def test_grouped_ssn_and_email_pass():
    result = check("123-45-6789", "a@b.co")

    assert result.approved is True
    assert result.message == "identity validation passed"


def test_ungrouped_ssn_passes():
    assert check("123456789", "a@b.co").approved is True


@pytest.mark.parametrize("email", ["a@b.co", "not-an-email"])
def test_misplaced_hyphen_fails_regardless_of_email(email):
    result = check("12-345-6789", email)

    assert result.approved is False
    assert result.message == "identity validation failed"


@pytest.mark.parametrize("ssn", ["123-45-6789", "123456789", "bad"])
def test_bad_email_fails_regardless_of_ssn(ssn):
    assert check(ssn, "not-an-email").approved is False


@pytest.mark.parametrize(
    "ssn",
    [
        "123-45-6789",
        "123456789",
        "000-00-0000",
    ],
)
def test_valid_ssn_shapes(ssn):
    assert is_valid_ssn(ssn)


@pytest.mark.parametrize(
    "ssn",
    [
        None,
        "",
        "12345678",
        "1234567890",
        "123-456789",
        "12345-6789",
        "123-45-678",
        "123 45 6789",
        "abc-de-fghi",
        " 123-45-6789",
        "123-45-6789\n",
        "١٢٣٤٥٦٧٨٩",
    ],
)
def test_invalid_ssn_shapes(ssn):
    assert not is_valid_ssn(ssn)


@pytest.mark.parametrize(
    "email",
    [
        "a@b.co",
        "first.last@example.com",
        "user_name-1@mail.example.info",
        "x@sub-domain.io",
    ],
)
def test_valid_emails(email):
    assert is_valid_email(email)


@pytest.mark.parametrize(
    "email",
    [
        None,
        "",
        "not-an-email",
        "@example.com",
        "user@",
        "user@example",
        "user@example.c",
        "user@example.travel",
        "user+tag@example.com",
        "user@exa_mple.com",
        "user@example.com\n",
        "user@example.c0m",
    ],
)
def test_invalid_emails(email):
    assert not is_valid_email(email)


def test_absent_fields_fail():
    assert validate_identity(IdentityRequest()).approved is False


def test_non_string_ssn_fails():
    request = IdentityRequest.model_validate({"ssn": 123456789, "email": "a@b.co"})

    assert request.ssn is None
    assert validate_identity(request).approved is False


def test_same_input_same_output():
    request = IdentityRequest(ssn="123-45-6789", email="a@b.co")

    assert validate_identity(request) == validate_identity(request)
