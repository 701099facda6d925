import pytest

from fast_permit import Record, permit, validate
from fast_permit.exceptions import InvalidRuleException


class MockUser:
    existing = [1, 2]

    @classmethod
    def exists(cls, query: dict) -> bool:
        return list(query.values())[0] in cls.existing


class Post(Record):
    title: str = None
    tags: list = None
    score: int = None
    slug: str = None
    status: str = None
    author_id: int = None
    reviewer_ids: list = None

    class Meta:
        validates = [
            Record.Validates("title", ("validate_length", {"is_": 4})),
            Record.Validates("tags", ("validate_length", {"min": 1, "max": 2})),
            Record.Validates("score", ("validate_number", {"greater_than": 0, "less_than_or_equal_to": 10})),
            Record.Validates("slug", ("validate_format", {"pattern": r"^[a-z-]+$"})),
            Record.Validates("status", [
                ("validate_inclusion", {"values": ["draft", "published", "admin"]}),
                ("validate_exclusion", {"values": ["admin"]}),
            ]),
            Record.Validates("author_id", ("foreign_key_constraint", {"model": MockUser})),
            Record.Validates("reviewer_ids", ("foreign_key_constraint", {"model": MockUser, "each": True})),
        ]


FIELDS = ["title", "tags", "score", "slug", "status", "author_id", "reviewer_ids"]


def test_valid_payload_passes_every_builtin():
    draft = permit(Post(), {
        "title": "abcd",
        "tags": ["x"],
        "score": 10,
        "slug": "hello-world",
        "status": "draft",
        "author_id": 1,
        "reviewer_ids": [1, 2],
    }, [], FIELDS)

    assert draft.valid


@pytest.mark.parametrize("field, value, message", [
    ("title", "abc", "should be 4 character(s)"),
    ("tags", [], "should have at least 1 item(s)"),
    ("tags", ["a", "b", "c"], "should have at most 2 item(s)"),
    ("score", 0, "must be greater than 0"),
    ("score", 11, "must be less than or equal to 10"),
    ("score", "7", "is invalid"),
    ("slug", "Hello World", "has invalid format"),
    ("status", "archived", "is invalid"),
    ("status", "admin", "is reserved"),
    ("author_id", 3, "does not exist"),
    ("reviewer_ids", [1, 3], "does not exist"),
])
def test_invalid_values(field, value, message):
    draft = permit(Post(), {field: value}, [], [field])
    assert draft.messages(field) == [message]


def test_builtins_only_check_changed_values():
    draft = validate(Post(title="too long", score=-1).change(), FIELDS)
    assert draft.valid


def test_none_changes_are_left_to_the_presence_gate():
    draft = permit(Post(), {"title": None, "author_id": None}, ["title"], ["author_id"])
    assert draft.messages("title") == ["can't be blank"]
    assert "author_id" not in draft.errors


def test_number_rejects_unknown_options_at_definition_time():
    with pytest.raises(InvalidRuleException, match="bigger_than"):
        class Bad(Record):
            score: int = None

            class Meta:
                validates = [Record.Validates("score", ("validate_number", {"bigger_than": 1}))]


@pytest.mark.parametrize("field, value", [
    ("title", 5),
    ("title", 4.0),
    ("tags", 12),
    ("tags", True),
    ("score", ["1"]),
    ("score", {"n": 1}),
    ("slug", 42),
    ("slug", ["hello"]),
    ("status", ["draft"]),
    ("status", {"draft": 1}),
    ("author_id", [1]),
    ("author_id", {"id": 1}),
    ("reviewer_ids", 7),
])
def test_wrong_typed_values_become_errors(field, value):
    draft = permit(Post(), {field: value}, [], [field])

    assert not draft.valid
    assert draft.errors[field]
    assert draft.changes[field] == value


def test_length_of_unsized_value_is_invalid():
    draft = permit(Post(), {"title": 5}, [], ["title"])
    assert draft.messages("title") == ["is invalid"]
    assert draft.has_error("title", "length")


def test_unhashable_values_against_sets():
    class Choice(Record):
        role: str = None
        handle: str = None

        class Meta:
            validates = [
                Record.Validates("role", ("validate_inclusion", {"values": {"a", "b"}})),
                Record.Validates("handle", ("validate_exclusion", {"values": frozenset({"root", "admin"})})),
            ]

    draft = permit(Choice(), {"role": ["x"], "handle": ["root"]}, ["role", "handle"])

    assert draft.messages("role") == ["is invalid"]
    assert "handle" not in draft.errors
