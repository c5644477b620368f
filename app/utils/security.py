"""
FitPulse API - Security Utilities.

Password validation and input clean-up helpers.
"""

import re
from typing import Tuple


def validate_password_strength(password: str) -> Tuple[bool, str]:
    """
    Validate password strength requirements.

    Requirements:
    - Minimum 8 characters
    - At least one letter
    - At least one digit

    Args:
        password: Password string to validate.

    Returns:
        Tuple[bool, str]: (is_valid, error_message)
            - is_valid: True if password meets requirements
            - error_message: Empty if valid, description of issue if invalid

    Example:
        >>> validate_password_strength("short1")
        (False, 'Password must be at least 8 characters')
        >>> validate_password_strength("squats4days")
        (True, '')
    """
    if len(password) < 8:
        return False, "Password must be at least 8 characters"

    if not re.search(r"[A-Za-z]", password):
        return False, "Password must contain at least one letter"

    if not re.search(r"\d", password):
        return False, "Password must contain at least one digit"

    return True, ""


def sanitize_string(value: str, max_length: int = 255) -> str:
    """
    Sanitize a string by stripping whitespace and limiting length.

    Example:
        >>> sanitize_string("  runner42  ")
        'runner42'
    """
    return value.strip()[:max_length]
