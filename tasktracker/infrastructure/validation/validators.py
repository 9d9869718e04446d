"""
Input validation rules for authentication and task payloads.

Every validator is a pure function returning a ValidationResult. Rules are
evaluated in a fixed order and the first failing rule wins.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from email_validator import EmailNotValidError, validate_email as check_email_syntax

from tasktracker.domain.models.base import ValidationError
from tasktracker.domain.models.task import (
    DESCRIPTION_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    TITLE_MIN_LENGTH,
    TaskStatus,
)


PASSWORD_MIN_LENGTH = 6
TASK_UPDATE_FIELDS = ("title", "description", "status")


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validation: valid, or the offending field and a message."""

    valid: bool
    field: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(valid=True)

    @classmethod
    def fail(cls, field: Optional[str], message: str) -> "ValidationResult":
        return cls(valid=False, field=field, message=message)

    def raise_for_error(self) -> None:
        """Raise ValidationError if the result is invalid."""
        if not self.valid:
            raise ValidationError(self.message, self.field)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def is_valid_email(value: str) -> bool:
    """Check email syntax only; no DNS or deliverability lookups."""
    try:
        check_email_syntax(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def validate_status(status: Any) -> ValidationResult:
    """Status must be exactly one of the known values (case-sensitive)."""
    if status is None:
        return ValidationResult.ok()
    if not isinstance(status, str) or status not in TaskStatus.values():
        return ValidationResult.fail("status", "Invalid status. Use: pending or completed")
    return ValidationResult.ok()


def validate_title(title: Any) -> ValidationResult:
    if _is_blank(title):
        return ValidationResult.fail("title", "Title is required")

    length = len(title.strip())
    if length < TITLE_MIN_LENGTH or length > TITLE_MAX_LENGTH:
        return ValidationResult.fail(
            "title",
            f"Title must be between {TITLE_MIN_LENGTH} and {TITLE_MAX_LENGTH} characters"
        )
    return ValidationResult.ok()


def validate_description(description: Any) -> ValidationResult:
    if description is not None and len(description) > DESCRIPTION_MAX_LENGTH:
        return ValidationResult.fail(
            "description",
            f"Description must be at most {DESCRIPTION_MAX_LENGTH} characters"
        )
    return ValidationResult.ok()


def validate_registration(email: Any, password: Any, name: Any) -> ValidationResult:
    """
    Validate a registration payload.

    Order: all fields present, then email shape, then password length.
    """
    if _is_blank(email) or _is_blank(password) or _is_blank(name):
        return ValidationResult.fail(None, "All fields are required")

    if not is_valid_email(email.strip()):
        return ValidationResult.fail("email", "Invalid email")

    if len(password) < PASSWORD_MIN_LENGTH:
        return ValidationResult.fail(
            "password",
            f"Password must be at least {PASSWORD_MIN_LENGTH} characters"
        )

    return ValidationResult.ok()


def validate_login(email: Any, password: Any) -> ValidationResult:
    """Validate a login payload. Presence only; shape was checked at registration."""
    if _is_blank(email) or _is_blank(password):
        return ValidationResult.fail(None, "Email and password are required")
    return ValidationResult.ok()


def validate_task_create(
    title: Any,
    description: Any = None,
    status: Any = None
) -> ValidationResult:
    """Validate a task creation payload. Absent status means pending."""
    for result in (
        validate_title(title),
        validate_description(description),
        validate_status(status),
    ):
        if not result.valid:
            return result
    return ValidationResult.ok()


def validate_task_update(changes: Mapping[str, Any]) -> ValidationResult:
    """
    Validate a partial task update.

    Only known fields with a value count as supplied; an update with nothing
    supplied is rejected.
    """
    supplied = {
        key: value for key, value in changes.items()
        if key in TASK_UPDATE_FIELDS and value is not None
    }
    if not supplied:
        return ValidationResult.fail(None, "No data to update")

    if "title" in supplied:
        result = validate_title(supplied["title"])
        if not result.valid:
            return result

    if "description" in supplied:
        result = validate_description(supplied["description"])
        if not result.valid:
            return result

    return validate_status(supplied.get("status"))


def validate_search_term(term: Any) -> ValidationResult:
    if _is_blank(term):
        return ValidationResult.fail("q", "A search term is required")
    return ValidationResult.ok()
