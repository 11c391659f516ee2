"""Test contact form validation."""

import pytest

from src.commonUtils.exceptions import SubmissionValidationError
from src.schemas.contactSchema import validate_contact_submission


def _errors(payload):
    with pytest.raises(SubmissionValidationError) as exc_info:
        validate_contact_submission(payload)
    return {error.field: error.message for error in exc_info.value.errors}


def test_valid_submission_is_normalised(valid_contact):
    """A valid payload comes back as a ContactForm with every field preserved."""
    form = validate_contact_submission(valid_contact)
    assert form.name == "Jane Q Public"
    assert form.email == "Jane.Public@Example.com"
    assert form.contact_about == "partnership"
    assert form.agree_to_policy is True


def test_every_violation_is_reported(valid_contact):
    """Two invalid fields produce two errors, not one."""
    payload = {**valid_contact, "name": "J", "message": "Too short"}
    errors = _errors(payload)
    assert errors == {
        "name": "Name must be at least 2 characters.",
        "message": "Message must be at least 20 characters.",
    }


def test_all_constraints_at_once():
    payload = {
        "name": "",
        "email": "not-an-email",
        "phone": "123",
        "contactAbout": "",
        "message": "x",
        "agreeToPolicy": False,
    }
    errors = _errors(payload)
    assert len(errors) == 6
    assert errors["email"] == "Please enter a valid email address."
    assert errors["phone"] == "Please enter a valid phone number."
    assert errors["contactAbout"] == "Please select a topic."
    assert errors["agreeToPolicy"] == "You must agree to the policies to continue."


@pytest.mark.parametrize("length", [20, 1000])
def test_message_length_boundaries_accepted(valid_contact, length):
    form = validate_contact_submission({**valid_contact, "message": "m" * length})
    assert len(form.message) == length


@pytest.mark.parametrize(
    "length,expected",
    [
        (19, "Message must be at least 20 characters."),
        (1001, "Message must not exceed 1000 characters."),
    ]
)
def test_message_length_boundaries_rejected(valid_contact, length, expected):
    errors = _errors({**valid_contact, "message": "m" * length})
    assert errors == {"message": expected}


def test_policy_must_be_accepted(valid_contact):
    errors = _errors({**valid_contact, "agreeToPolicy": False})
    assert errors == {"agreeToPolicy": "You must agree to the policies to continue."}


def test_policy_must_be_a_real_boolean(valid_contact):
    errors = _errors({**valid_contact, "agreeToPolicy": "true"})
    assert list(errors) == ["agreeToPolicy"]


def test_missing_field_is_reported(valid_contact):
    payload = dict(valid_contact)
    del payload["phone"]
    assert list(_errors(payload)) == ["phone"]


def test_non_object_payload_is_rejected():
    errors = _errors(None)
    assert list(errors) == [""]
