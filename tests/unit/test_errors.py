"""Exception hierarchy and the `{user_id}` path parser."""

import pytest

from users_api.api.deps import parse_user_id
from users_api.core.errors import DuplicateEmailError, UserNotFoundError, UserServiceError


def test_not_found_carries_status_and_message():
    exc = UserNotFoundError(7)

    assert exc.status_code == 404
    assert exc.message == "User not found"
    assert exc.user_id == 7
    assert isinstance(exc, UserServiceError)


def test_duplicate_email_carries_status_and_message():
    exc = DuplicateEmailError("ada@example.com")

    assert exc.status_code == 400
    assert str(exc) == "User with this email already exists"
    assert exc.email == "ada@example.com"


def test_base_error_status_override_and_details():
    exc = UserServiceError("boom", status_code=503, details={"op": "list"})

    assert exc.status_code == 503
    assert exc.details == {"op": "list"}
    assert UserServiceError("x").status_code == 500


@pytest.mark.parametrize(
    "raw, expected",
    [("1", 1), ("42", 42), ("007", 7), ("-3", -3), ("9223372036854775807", 2**63 - 1)],
)
def test_parse_user_id_accepts_integers(raw, expected):
    assert parse_user_id(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [
        "abc",
        "1.5",
        "",
        "1_0",
        "+1",
        " 1 ",
        "\u0663",
        "99999999999999999999",
        "-9223372036854775809",
    ],
)
def test_parse_user_id_rejects_non_integers_as_not_found(raw):
    with pytest.raises(UserNotFoundError):
        parse_user_id(raw)
