import pytest

from fast_permit import Record, cast_only, fetch, permit, validate
from fast_permit.exceptions import UnknownFieldException


class User(Record):
    name: str = None
    email: str = None
    bio: str = None

    class Meta:
        validates = [
            Record.Validates("name", {"validate_length": {"min": 1, "max": 20}}),
            Record.Validates("bio", ("validate_length", {"max": 5})),
        ]


def test_permit_accepts_valid_payload():
    draft = permit(User(), {"name": "Al"}, ["name"])

    assert draft.errors == {}
    assert draft.valid
    assert draft.changes == {"name": "Al"}


def test_permit_reports_blank_required_field():
    draft = permit(User(), {"name": ""}, ["name"])

    assert draft.changes["name"] == ""
    assert draft.messages("name") == ["can't be blank", "should be at least 1 character(s)"]
    assert not draft.valid


def test_permit_drops_unlisted_keys():
    draft = permit(User().change(), {"name": "X", "admin": True}, ["name"])

    assert draft.changes == {"name": "X"}
    assert "admin" not in draft.errors
    assert "admin" not in draft.to_dict()["changes"]


def test_permit_drops_unlisted_keys_from_fake_payload(sample_payload):
    draft = permit(User(), sample_payload, ["name", "email"])

    assert set(draft.changes) <= {"name", "email"}
    assert draft.changes["email"] == sample_payload["email"]


def test_optional_fields_are_permitted_and_validated_but_not_required():
    draft = permit(User(), {"name": "Al", "bio": "too long"}, ["name"], ["bio", "email"])

    assert draft.changes == {"name": "Al", "bio": "too long"}
    assert list(draft.errors) == ["bio"]
    assert draft.messages("bio") == ["should be at most 5 character(s)"]


def test_missing_optional_field_is_fine():
    draft = permit(User(), {"name": "Al"}, ["name"], ["bio"])
    assert draft.valid


def test_fields_outside_the_call_are_not_validated():
    draft = permit(User(bio="way too long"), {"name": "Al"}, ["name"])
    assert draft.valid


def test_fetch_requires_and_validates_without_payload():
    draft = fetch(User(name="Al").change({"bio": "123456"}), ["name", "email"], ["bio"])

    assert draft.messages("email") == ["can't be blank"]
    assert draft.messages("bio") == ["should be at most 5 character(s)"]
    assert "name" not in draft.errors


def test_cast_only_uses_the_same_fields_for_everything():
    draft = cast_only(User(), {"name": "", "bio": "ok", "email": "a@b.c"}, ["name", "bio"])

    assert draft.changes == {"name": "", "bio": "ok"}
    assert draft.has_error("name", "required")
    assert "bio" not in draft.errors


def test_field_without_rules_is_unchanged_by_validate():
    draft = User().change({"email": "a@b.c"})
    assert validate(draft, {"email"}) == draft


def test_programmer_errors_raise():
    with pytest.raises(UnknownFieldException):
        permit(User(), {"nickname": "x"}, ["nickname"])


def test_invalid_draft_is_never_raised():
    draft = permit(User(), {"name": "x" * 30, "bio": "toolong"}, ["name", "email"], ["bio"])

    assert set(draft.errors) == {"name", "email", "bio"}
    assert draft.errors_list()[0] == {"loc": ("email",), "msg": "can't be blank", "type": "required"}
