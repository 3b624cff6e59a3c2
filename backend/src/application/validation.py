"""
Input Validation
One function per operation; each returns every field error it finds.
"""
from typing import List, Optional

from core.exceptions import FieldError
from domain.enums import JobStatus, JobType
from domain.value_objects import Email


def is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def _require(errors: List[FieldError], field: str, value: Optional[str], label: str) -> bool:
    if is_blank(value):
        errors.append(FieldError(field, f"{label} is required"))
        return False
    return True


def validate_registration(email: Optional[str], name: Optional[str], password: Optional[str]) -> List[FieldError]:
    errors: List[FieldError] = []
    if _require(errors, "email", email, "E-mail") and not Email.is_valid(email):
        errors.append(FieldError("email", "Invalid e-mail"))
    _require(errors, "name", name, "Name")
    _require(errors, "password", password, "Password")
    return errors


def validate_login(email: Optional[str], password: Optional[str]) -> List[FieldError]:
    errors: List[FieldError] = []
    _require(errors, "email", email, "E-mail")
    _require(errors, "password", password, "Password")
    return errors


def validate_job_create(company: Optional[str], position: Optional[str]) -> List[FieldError]:
    errors: List[FieldError] = []
    _require(errors, "company", company, "Company")
    _require(errors, "position", position, "Position")
    return errors


def validate_job_update(
    company: Optional[str],
    position: Optional[str],
    status: Optional[str],
    job_type: Optional[str] = None,
) -> List[FieldError]:
    errors = validate_job_create(company, position)

    allowed = [s.value for s in JobStatus]
    if status not in allowed:
        errors.append(FieldError("status", f"Status must be one of: {', '.join(allowed)}"))

    # job_type is optional on update
    if job_type is not None and job_type not in [t.value for t in JobType]:
        errors.append(FieldError("job_type", "Invalid job type"))

    return errors
