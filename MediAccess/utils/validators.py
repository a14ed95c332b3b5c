import re
import logging

import regex

from Model.Login import LoginData
from Model.Signup import SignupData
from Settings.config import PASSWORD_MIN_LENGTH

logger = logging.getLogger(__name__)

EMPTY_FIELDS_MESSAGE = "Please fill in all fields"
INVALID_EMAIL_MESSAGE = "Please enter a valid email address"
SHORT_PASSWORD_MESSAGE = f"Password must be at least {PASSWORD_MIN_LENGTH} characters"

EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,64}")


class EmailValidator:
    """Syntactic email check, permissive on purpose (no deliverability check)"""

    def is_valid_email(self, email: str) -> bool:
        return EMAIL_PATTERN.fullmatch(email) is not None


class SignupValidator:
    """Validate the signup form and return the first user-facing error, if any"""

    def __init__(self):
        self.email_validator = EmailValidator()

    def validate_signup_data(self, data: SignupData):
        """Return an error message, or None when the form is valid.

        Checks run in order and stop at the first failure:
        empty fields, email format, password length.
        """
        if not validate_required(data.full_name, data.email, data.password, data.phone_number):
            logger.debug("Signup rejected: empty field")
            return EMPTY_FIELDS_MESSAGE

        if not self.email_validator.is_valid_email(data.email):
            logger.debug(f"Signup rejected: invalid email {data.email!r}")
            return INVALID_EMAIL_MESSAGE

        if not validate_password(data.password):
            logger.debug("Signup rejected: password too short")
            return SHORT_PASSWORD_MESSAGE

        return None


class LoginValidator:
    def validate_login_data(self, data: LoginData):
        """Return an error message, or None when both credentials are filled in"""
        if not validate_required(data.email, data.password):
            logger.debug("Login rejected: empty field")
            return EMPTY_FIELDS_MESSAGE
        return None


def validate_required(*values):
    """Check that every value is a non-empty string"""
    return all(value != "" for value in values)


def validate_email(email):
    """Validate email address"""
    return EmailValidator().is_valid_email(email)


def count_characters(text):
    """Count user-perceived characters (grapheme clusters), not code points"""
    return len(regex.findall(r"\X", text))


def validate_password(password):
    """Validate password"""
    return count_characters(password) >= PASSWORD_MIN_LENGTH
