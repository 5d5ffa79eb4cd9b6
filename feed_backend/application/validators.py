"""
Input checks shared by the auth and post use cases.

Each collector returns every violation it finds so a ValidationError can
report them together.
"""

# Standard library imports
from typing import List, Optional

# External package imports
from email_validator import EmailNotValidError, validate_email

# Local application imports
from ..domain.exceptions import FieldError, ValidationError


MIN_PASSWORD_LENGTH = 5
# bcrypt only hashes the first 72 bytes and rejects longer input
MAX_PASSWORD_BYTES = 72
MIN_POST_TEXT_LENGTH = 5


def _violation(field: str, message: str) -> FieldError:
    return {"field": field, "message": message}


def is_valid_email(email: Optional[str]) -> bool:
    if not email:
        return False
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def collect_registration_errors(email: str, name: str, password: str) -> List[FieldError]:
    errors: List[FieldError] = []
    if not is_valid_email(email):
        errors.append(_violation("email", "E-Mail is invalid."))
    if not name or not name.strip():
        errors.append(_violation("name", "Name is required."))
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        errors.append(
            _violation("password", f"Password must be at least {MIN_PASSWORD_LENGTH} characters.")
        )
    elif len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        errors.append(
            _violation("password", f"Password must be at most {MAX_PASSWORD_BYTES} bytes.")
        )
    return errors


def collect_post_errors(title: str, content: str, image_url: str) -> List[FieldError]:
    errors: List[FieldError] = []
    if not title or len(title.strip()) < MIN_POST_TEXT_LENGTH:
        errors.append(
            _violation("title", f"Title must be at least {MIN_POST_TEXT_LENGTH} characters.")
        )
    if not content or len(content.strip()) < MIN_POST_TEXT_LENGTH:
        errors.append(
            _violation("content", f"Content must be at least {MIN_POST_TEXT_LENGTH} characters.")
        )
    if not image_url or not image_url.strip():
        errors.append(_violation("image_url", "No image provided."))
    return errors


def raise_if_invalid(errors: List[FieldError]) -> None:
    if errors:
        raise ValidationError(errors)
