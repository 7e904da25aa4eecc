"""Validation utilities for Court Rotation.

This module provides reusable validation functions with consistent error handling.
"""

import re
from typing import Any, Dict, List, Optional, Union

from dateutil.parser import isoparse

from courtrotation.constants import SESSION_DATE_FORMAT, WEIGHT_MAX, WEIGHT_MIN
from courtrotation.exceptions import (
    InvalidConfigurationException,
    InvalidParticipantDataException,
    InvalidSaveDataException,
)

MAX_NAME_LENGTH = 40


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Optional[str] = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Name Validation ==========


def validate_name(name: Optional[str], required: bool = True) -> ValidationResult:
    """Validate a participant display name.

    Runs of whitespace are collapsed to a single space. Any script is
    accepted; control characters are not.

    Args:
        name: Name to validate
        required: Whether name is required

    Returns:
        ValidationResult with validation status
    """
    if not name or not name.strip():
        if required:
            return ValidationResult(
                is_valid=False,
                error_message="Name is required",
            )
        return ValidationResult(is_valid=True, sanitized_value=None)

    name = re.sub(r"\s+", " ", name.strip())

    if len(name) > MAX_NAME_LENGTH:
        return ValidationResult(
            is_valid=False,
            error_message=f"Name must be at most {MAX_NAME_LENGTH} characters",
        )

    if any(not ch.isprintable() for ch in name):
        return ValidationResult(
            is_valid=False,
            error_message="Name contains invalid characters",
        )

    return ValidationResult(is_valid=True, sanitized_value=name)


def validate_name_strict(name: str) -> str:
    """Validate a name and raise exception if invalid.

    Returns:
        The sanitized name

    Raises:
        InvalidParticipantDataException: If name is invalid
    """
    result = validate_name(name, required=True)
    if not result:
        raise InvalidParticipantDataException(result.error_message)
    return result.sanitized_value


# ========== Weight Validation ==========


def validate_weight(value: Union[int, float, str, None]) -> ValidationResult:
    """Validate a fairness weight, clamping it into range.

    Numbers are rounded to the nearest integer and clamped to
    ``WEIGHT_MIN``..``WEIGHT_MAX``; only non-numeric input is invalid.

    Args:
        value: Weight as entered

    Returns:
        ValidationResult whose sanitized value is the clamped integer as text
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return ValidationResult(is_valid=False, error_message="Weight is required")

    if isinstance(value, bool):
        return ValidationResult(
            is_valid=False, error_message=f"Weight must be a number: {value}"
        )

    try:
        number = float(value)
    except (ValueError, TypeError):
        return ValidationResult(
            is_valid=False,
            error_message=f"Weight must be a number: {value}",
        )

    if number != number:  # NaN
        return ValidationResult(
            is_valid=False, error_message=f"Weight must be a number: {value}"
        )

    clamped = max(WEIGHT_MIN, min(WEIGHT_MAX, int(round(number))))
    return ValidationResult(is_valid=True, sanitized_value=str(clamped))


def clamp_weight(value: Union[int, float, str]) -> int:
    """Clamp a weight to an integer in range, raising on non-numeric input.

    Raises:
        InvalidConfigurationException: If value is not a number
    """
    result = validate_weight(value)
    if not result:
        raise InvalidConfigurationException(result.error_message)
    return int(result.sanitized_value)


# ========== Session Date Validation ==========


def validate_session_date(value: Optional[str]) -> ValidationResult:
    """Validate a session day string.

    Any ISO 8601 date or datetime is accepted and normalized to
    ``YYYY-MM-DD``.

    Args:
        value: Date text, e.g. "2025-10-15"

    Returns:
        ValidationResult with the normalized date
    """
    if not value or not value.strip():
        return ValidationResult(
            is_valid=False, error_message="Session date is required"
        )

    try:
        parsed = isoparse(value.strip())
    except (ValueError, OverflowError):
        return ValidationResult(
            is_valid=False,
            error_message=f"Session date must be an ISO date (YYYY-MM-DD): {value}",
        )

    return ValidationResult(
        is_valid=True, sanitized_value=parsed.strftime(SESSION_DATE_FORMAT)
    )


def validate_session_date_strict(value: str) -> str:
    """Validate a session date and raise exception if invalid.

    Raises:
        InvalidConfigurationException: If the date cannot be parsed
    """
    result = validate_session_date(value)
    if not result:
        raise InvalidConfigurationException(result.error_message)
    return result.sanitized_value


# ========== Saved Data Validation ==========


def require_mapping(data: Any, what: str) -> Dict[str, Any]:
    """Return ``data`` if it is a JSON object.

    Raises:
        InvalidSaveDataException: If data is not a dictionary
    """
    if not isinstance(data, dict):
        raise InvalidSaveDataException(
            f"Expected {what} to be an object, got {type(data).__name__}"
        )
    return data


def require_list(data: Any, what: str) -> List[Any]:
    """Return ``data`` if it is a JSON array.

    Raises:
        InvalidSaveDataException: If data is not a list
    """
    if not isinstance(data, list):
        raise InvalidSaveDataException(
            f"Expected {what} to be a list, got {type(data).__name__}"
        )
    return data
