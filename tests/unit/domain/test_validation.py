"""Unit tests for input validation rules."""

from qna.domain.validation import (
    normalize_tags,
    validate_answer,
    validate_profile_update,
    validate_question,
    validate_registration,
)

VALID_TITLE = "How do I reverse a list?"
VALID_DESCRIPTION = "I need the items in the opposite order."


def _fields(errors) -> list[str]:
    return [error.field for error in errors]


class TestNormalizeTags:
    def test_trims_lowercases_and_deduplicates(self):
        assert normalize_tags([" Python ", "python", "SQL", ""]) == ["python", "sql"]


class TestValidateQuestion:
    """Tests for question validation."""

    def test_valid_question_has_no_errors(self):
        assert validate_question(VALID_TITLE, VALID_DESCRIPTION, ["python"]) == []

    def test_title_is_measured_after_trimming(self):
        errors = validate_question("   short    ", VALID_DESCRIPTION, ["python"])

        assert _fields(errors) == ["title"]

    def test_title_length_bounds(self):
        assert validate_question("x" * 10, VALID_DESCRIPTION, ["a"]) == []
        assert validate_question("x" * 200, VALID_DESCRIPTION, ["a"]) == []
        assert _fields(validate_question("x" * 9, VALID_DESCRIPTION, ["a"])) == [
            "title"
        ]
        assert _fields(validate_question("x" * 201, VALID_DESCRIPTION, ["a"])) == [
            "title"
        ]

    def test_short_description(self):
        errors = validate_question(VALID_TITLE, "too short", ["python"])

        assert _fields(errors) == ["description"]

    def test_tag_count_bounds(self):
        assert _fields(validate_question(VALID_TITLE, VALID_DESCRIPTION, [])) == [
            "tags"
        ]
        six = [f"tag{i}" for i in range(6)]
        assert _fields(validate_question(VALID_TITLE, VALID_DESCRIPTION, six)) == [
            "tags"
        ]

    def test_blank_tags_do_not_count(self):
        errors = validate_question(VALID_TITLE, VALID_DESCRIPTION, ["  ", ""])

        assert _fields(errors) == ["tags"]

    def test_overlong_tag(self):
        errors = validate_question(VALID_TITLE, VALID_DESCRIPTION, ["x" * 31])

        assert _fields(errors) == ["tags"]
        assert "30" in errors[0].message

    def test_tag_length_is_measured_after_lowercasing(self):
        # "İ" lowercases to two code points
        errors = validate_question(VALID_TITLE, VALID_DESCRIPTION, ["İ" * 30])

        assert _fields(errors) == ["tags"]

    def test_reports_every_bad_field(self):
        errors = validate_question("short", "short", [])

        assert _fields(errors) == ["title", "description", "tags"]


class TestValidateOthers:
    def test_answer_minimum_length(self):
        assert validate_answer("x" * 10) == []
        assert _fields(validate_answer("x" * 9)) == ["content"]

    def test_registration(self):
        assert validate_registration("alice_01", "secret") == []
        assert _fields(validate_registration("al", "secret")) == ["username"]
        assert _fields(validate_registration("bad name", "secret")) == ["username"]
        assert _fields(validate_registration("alice", "12345")) == ["password"]

    def test_username_rejects_trailing_newline(self):
        assert _fields(validate_registration("alice\n", "secret")) == ["username"]
        assert _fields(validate_registration("a" * 30 + "\n", "secret")) == [
            "username"
        ]

    def test_profile_update_only_checks_given_fields(self):
        assert validate_profile_update() == []
        assert _fields(validate_profile_update(bio="x" * 501)) == ["bio"]
        assert _fields(validate_profile_update(username="!!")) == ["username"]
