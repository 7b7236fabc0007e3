"""Input validation rules.

Each validator returns a list of field errors; an empty list means the input
is valid. Validators never touch storage, so they run before any fetch or
mutation.
"""

from typing import Iterable, Optional

from qna.domain.value.common import ValueObject
from qna.domain.value.types import TAG_MAX_LENGTH, USERNAME_PATTERN

TITLE_MIN_LENGTH = 10
TITLE_MAX_LENGTH = 200
DESCRIPTION_MIN_LENGTH = 20
TAGS_MIN = 1
TAGS_MAX = 5
ANSWER_MIN_LENGTH = 10
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 128
BIO_MAX_LENGTH = 500


class FieldError(ValueObject):
    """Validation failure for a single input field."""

    field: str
    message: str


def normalize_tags(tags: Iterable[str]) -> list[str]:
    """Trim, lowercase and de-duplicate tags, keeping first-seen order."""
    seen: list[str] = []
    for tag in tags:
        normalized = tag.strip().lower()
        if normalized and normalized not in seen:
            seen.append(normalized)
    return seen


def _validate_username(username: str) -> list[FieldError]:
    if not USERNAME_PATTERN.fullmatch(username):
        return [
            FieldError(
                field="username",
                message="Username must be 3-30 characters and contain only letters, numbers and underscores",
            )
        ]
    return []


def validate_registration(username: str, password: str) -> list[FieldError]:
    """Validate sign-up input.

    Args:
        username: Requested username
        password: Plaintext password

    Returns:
        Field errors (empty if valid)
    """
    errors = _validate_username(username)
    if not PASSWORD_MIN_LENGTH <= len(password) <= PASSWORD_MAX_LENGTH:
        errors.append(
            FieldError(
                field="password",
                message=f"Password must be between {PASSWORD_MIN_LENGTH} and {PASSWORD_MAX_LENGTH} characters",
            )
        )
    return errors


def validate_question(title: str, description: str, tags: list[str]) -> list[FieldError]:
    """Validate question input.

    Title is checked after trimming. Tags are checked before normalisation
    for count and length, and must still leave at least one tag afterwards.

    Args:
        title: Question title
        description: Question body
        tags: Raw tag list

    Returns:
        Field errors (empty if valid)
    """
    errors: list[FieldError] = []

    if not TITLE_MIN_LENGTH <= len(title.strip()) <= TITLE_MAX_LENGTH:
        errors.append(
            FieldError(
                field="title",
                message=f"Title must be between {TITLE_MIN_LENGTH} and {TITLE_MAX_LENGTH} characters",
            )
        )

    if len(description) < DESCRIPTION_MIN_LENGTH:
        errors.append(
            FieldError(
                field="description",
                message=f"Description must be at least {DESCRIPTION_MIN_LENGTH} characters long",
            )
        )

    if not TAGS_MIN <= len(tags) <= TAGS_MAX or not normalize_tags(tags):
        errors.append(
            FieldError(field="tags", message=f"Must provide {TAGS_MIN}-{TAGS_MAX} tags")
        )
    elif any(len(tag) > TAG_MAX_LENGTH for tag in normalize_tags(tags)):
        errors.append(
            FieldError(
                field="tags",
                message=f"Each tag must be a string with max {TAG_MAX_LENGTH} characters",
            )
        )

    return errors


def validate_answer(content: str) -> list[FieldError]:
    """Validate answer input."""
    if len(content) < ANSWER_MIN_LENGTH:
        return [
            FieldError(
                field="content",
                message=f"Answer must be at least {ANSWER_MIN_LENGTH} characters long",
            )
        ]
    return []


def validate_profile_update(
    username: Optional[str] = None,
    bio: Optional[str] = None,
) -> list[FieldError]:
    """Validate profile update input; omitted fields are not checked."""
    errors: list[FieldError] = []
    if username is not None:
        errors.extend(_validate_username(username))
    if bio is not None and len(bio) > BIO_MAX_LENGTH:
        errors.append(
            FieldError(
                field="bio",
                message=f"Bio must be at most {BIO_MAX_LENGTH} characters",
            )
        )
    return errors
