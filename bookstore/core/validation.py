"""Field validation for book submissions.

Every rule is checked independently and all violations are returned
together. Validation never raises; an empty list means the submission
is accepted.
"""
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

TEXT_MAX_LENGTH = 255
MIN_PUBLICATION_YEAR = 1000
MAX_PUBLICATION_YEAR = 2100

# Surface syntax only: ISBN-10 (last symbol may be X) or ISBN-13 starting
# with 978/979, bare or separated by hyphens/spaces, with an optional
# "ISBN", "ISBN-10" or "ISBN-13" prefix. Check digits are not verified.
ISBN_PATTERN = re.compile(
    r"^(?:ISBN(?:-1[03])?:? )?"
    r"(?=[0-9X]{10}$"
    r"|(?=(?:[0-9]+[- ]){3})[- 0-9X]{13}$"
    r"|97[89][0-9]{10}$"
    r"|(?=(?:[0-9]+[- ]){4})[- 0-9]{17}$)"
    r"(?:97[89][- ]?)?[0-9]{1,5}[- ]?[0-9]+[- ]?[0-9]+[- ]?[0-9X]$"
)


@dataclass(frozen=True)
class FieldViolation:
    """A single broken rule on a submission field."""

    field: str
    message: str


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def is_valid_isbn(value: Any) -> bool:
    """Check ISBN-10/ISBN-13 surface syntax."""
    if not isinstance(value, str) or _is_blank(value):
        return False
    return ISBN_PATTERN.fullmatch(value) is not None


def _check_text(field: str, value: Any) -> list[FieldViolation]:
    if _is_blank(value):
        return [FieldViolation(field, f"{field} is required")]
    if not isinstance(value, str):
        return [FieldViolation(field, f"{field} must be a string")]
    if len(value) > TEXT_MAX_LENGTH:
        return [
            FieldViolation(
                field, f"{field} must be between 1 and {TEXT_MAX_LENGTH} characters"
            )
        ]
    return []


def _check_isbn(value: Any) -> list[FieldViolation]:
    if _is_blank(value):
        return [FieldViolation("isbn", "isbn is required")]
    if not is_valid_isbn(value):
        return [FieldViolation("isbn", "isbn is not a valid ISBN-10 or ISBN-13")]
    return []


def _check_year(value: Any, current_year: int) -> list[FieldViolation]:
    if value is None:
        return [FieldViolation("publication_year", "publication_year is required")]
    if isinstance(value, bool) or not isinstance(value, int):
        return [FieldViolation("publication_year", "publication_year must be an integer")]

    violations = []
    if value < MIN_PUBLICATION_YEAR:
        violations.append(
            FieldViolation(
                "publication_year",
                f"publication_year must be at least {MIN_PUBLICATION_YEAR}",
            )
        )
    if value > MAX_PUBLICATION_YEAR:
        violations.append(
            FieldViolation(
                "publication_year",
                f"publication_year must not exceed {MAX_PUBLICATION_YEAR}",
            )
        )
    if value > current_year:
        violations.append(
            FieldViolation(
                "publication_year",
                "publication_year must not be later than the current year",
            )
        )
    return violations


def validate_submission(submission: Any, current_year: Optional[int] = None) -> list[FieldViolation]:
    """Validate a book submission.

    Args:
        submission: Any object exposing ``title``, ``author``, ``isbn`` and
            ``publication_year`` attributes (missing attributes count as absent).
        current_year: Reference year for the "not in the future" rule.
            Defaults to the current calendar year.

    Returns:
        The list of violations, empty when the submission is valid.
    """
    if current_year is None:
        current_year = datetime.now().year

    violations: list[FieldViolation] = []
    violations += _check_text("title", getattr(submission, "title", None))
    violations += _check_text("author", getattr(submission, "author", None))
    violations += _check_isbn(getattr(submission, "isbn", None))
    violations += _check_year(getattr(submission, "publication_year", None), current_year)
    return violations
