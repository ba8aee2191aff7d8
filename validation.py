import re
from typing import List
from schemas import UserCreate, ContentCreate, FieldError

USERNAME_PATTERN = re.compile(r"[a-z0-9_]+")
USERNAME_MIN_LENGTH = 4
PASSWORD_MIN_LENGTH = 8

def validate_signup(user: UserCreate) -> List[FieldError]:
    errors = []
    if len(user.username) < USERNAME_MIN_LENGTH:
        errors.append(FieldError(field="username", message=f"Username must be at least {USERNAME_MIN_LENGTH} characters"))
    if not USERNAME_PATTERN.fullmatch(user.username):
        errors.append(FieldError(field="username", message="Only lowercase letters, numbers and underscore allowed"))
    if len(user.password) < PASSWORD_MIN_LENGTH:
        errors.append(FieldError(field="password", message=f"Password must be at least {PASSWORD_MIN_LENGTH} characters"))
    return errors

def validate_content(content: ContentCreate) -> List[FieldError]:
    # link format and type are stored as given
    errors = []
    if not content.link.strip():
        errors.append(FieldError(field="link", message="Link is required"))
    if not content.type.strip():
        errors.append(FieldError(field="type", message="Type is required"))
    return errors

def request_errors(errors: List[dict]) -> List[FieldError]:
    """Turn FastAPI request validation errors into field errors."""
    field_errors = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        field_errors.append(FieldError(field=".".join(loc) or "body", message=error.get("msg", "Invalid value")))
    return field_errors
