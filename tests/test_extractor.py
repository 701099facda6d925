import pytest

from fast_permit import Record, change, extract_allowed
from fast_permit import config
from fast_permit.exceptions import UnknownFieldException


class Account(Record):
    name: str = None
    email: str = None
    age: int = None
    admin: bool = False


def test_only_allowed_keys_become_changes(sample_payload):
    draft = extract_allowed(Account().change(), sample_payload, ["name", "email"])

    assert draft.changes == {"name": sample_payload["name"], "email": sample_payload["email"]}
    assert "admin" not in draft.changes
    assert draft.valid


def test_allowed_keys_missing_from_payload_are_left_alone():
    draft = Account(name="Ann").change({"email": "a@b.c"})

    draft = extract_allowed(draft, {"age": 3}, ["name", "email", "age"])

    assert draft.changes == {"email": "a@b.c", "age": 3}


def test_values_are_kept_verbatim_without_cast():
    draft = extract_allowed(Account().change(), {"age": "42", "name": ""}, ["age", "name"])
    assert draft.changes == {"age": "42", "name": ""}


def test_cast_coerces_to_field_annotation():
    draft = extract_allowed(Account().change(), {"age": "42", "admin": "true"}, ["age", "admin"], cast=True)

    assert draft.changes == {"age": 42, "admin": True}
    assert draft.valid


def test_cast_failure_becomes_an_error_not_a_change():
    draft = extract_allowed(Account().change(), {"age": "old", "name": "Ann"}, ["age", "name"], cast=True)

    assert draft.changes == {"name": "Ann"}
    assert draft.messages("age") == ["is invalid"]
    assert draft.has_error("age", "cast")


def test_unknown_allowed_field_is_a_programmer_error():
    with pytest.raises(UnknownFieldException):
        extract_allowed(Account().change(), {}, ["nickname"])


def test_unknown_allowed_field_tolerated_when_not_strict(monkeypatch):
    monkeypatch.setattr(config, "PERMIT_STRICT_FIELDS", False)

    draft = extract_allowed(Account().change(), {"nickname": "x"}, ["nickname"])
    assert draft.changes == {"nickname": "x"}


def test_mapping_base_has_no_field_check():
    draft = extract_allowed(change({"title": "a"}), {"title": "b", "junk": 1}, {"title"})
    assert draft.changes == {"title": "b"}
