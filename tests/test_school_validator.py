import pytest

from app.utils.school_validator import SchoolValidator


@pytest.fixture()
def validator():
    return SchoolValidator()


def test_valid_record_has_no_errors(validator, school_data):
    is_valid, errors = validator.validate(school_data)
    assert is_valid
    assert errors == {}


@pytest.mark.parametrize("name", ["", "G"])
def test_short_name_rejected(validator, school_data, name):
    school_data["name"] = name
    is_valid, errors = validator.validate(school_data)
    assert not is_valid
    assert errors == {"name": "School name must be at least 2 characters"}


def test_length_rules_for_address_city_state(validator, school_data):
    school_data.update(address="12 A", city="S", state="I")
    is_valid, errors = validator.validate(school_data)
    assert not is_valid
    assert errors == {
        "address": "Address must be at least 5 characters",
        "city": "City must be at least 2 characters",
        "state": "State must be at least 2 characters",
    }


@pytest.mark.parametrize("contact", ["", "123456789", "12345678901", "12345abcde", "123-456-78", "1234567890\n"])
def test_contact_must_be_ten_digits(validator, school_data, contact):
    school_data["contact"] = contact
    is_valid, errors = validator.validate(school_data)
    assert not is_valid
    assert errors["contact"] == "Contact must be a valid 10-digit number"


@pytest.mark.parametrize("email", ["", "info", "info@", "@gvh.edu", "info gvh@gvh.edu"])
def test_bad_email_rejected(validator, school_data, email):
    school_data["email_id"] = email
    is_valid, errors = validator.validate(school_data)
    assert not is_valid
    assert errors == {"email_id": "Please enter a valid email address"}


@pytest.mark.parametrize("image,accepted", [
    ("", True),
    ("https://example.com/a.png", True),
    ("not a url", False),
    ("example.com/a.png", False),
    ("https://", False),
])
def test_image_url_rules(validator, school_data, image, accepted):
    school_data["image"] = image
    is_valid, errors = validator.validate(school_data)
    assert is_valid is accepted
    if not accepted:
        assert errors == {"image": "Please enter a valid image URL"}


def test_missing_fields_treated_as_empty(validator):
    is_valid, errors = validator.validate({})
    assert not is_valid
    assert set(errors) == {"name", "address", "city", "state", "contact", "email_id"}


@pytest.mark.parametrize("email", ["info@school.local", "a@b.test", "admin@localhost"])
def test_special_use_domains_rejected(validator, school_data, email):
    # email-validator refuses reserved names such as .local and .test
    school_data["email_id"] = email
    is_valid, errors = validator.validate(school_data)
    assert not is_valid
    assert errors == {"email_id": "Please enter a valid email address"}
