"""
Email Validator Module

Contains the EmailValidator class which reports why an address is invalid
instead of raising.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .errors import EmailAddressError, HostAddressError
from .host_address import HostAddressParserBase
from .parser import parse_email, try_parse_email

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """
    Represents the result of an email validation.

    Attributes:
        is_valid: Whether the email is valid
        email: The value that was validated
        user: The local-part when valid
        host: The host part when valid
        error: Message describing the first broken rule
        code: Machine readable error code
        index: Position of the offending character, when there is one
    """
    is_valid: bool
    email: Any
    user: Optional[str] = None
    host: Optional[str] = None
    error: Optional[str] = None
    code: Optional[str] = None
    index: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary format."""
        return {
            'is_valid': self.is_valid,
            'email': self.email,
            'user': self.user,
            'host': self.host,
            'error': self.error,
            'code': self.code,
            'index': self.index
        }


class EmailValidator:
    """
    Validates email addresses and describes the first problem found.

    Example:
        >>> validator = EmailValidator()
        >>> result = validator.validate('user@example.com')
        >>> print(result.is_valid)
        True
    """

    def __init__(self, host_parser: Optional[HostAddressParserBase] = None):
        """
        Initialize the EmailValidator.

        Args:
            host_parser: Optional parser for the host part
        """
        self.host_parser = host_parser

    def validate(self, email: Any) -> ValidationResult:
        """
        Validate an email address.

        Args:
            email: The email address to validate

        Returns:
            ValidationResult object with validation details
        """
        if not isinstance(email, str):
            return ValidationResult(
                is_valid=False,
                email=email,
                error=f"Email must be a string, got {type(email).__name__}",
                code="INVALID_TYPE"
            )

        try:
            address = parse_email(email, self.host_parser)
        except (EmailAddressError, HostAddressError) as error:
            logger.debug("Rejected %r: %s", email, error.message)
            return ValidationResult(
                is_valid=False,
                email=email,
                error=error.message,
                code=error.code,
                index=getattr(error, 'index', None)
            )

        return ValidationResult(
            is_valid=True,
            email=email,
            user=address.user,
            host=str(address.host)
        )

    def validate_batch(self, emails: list) -> list:
        """
        Validate multiple email addresses.

        Args:
            emails: List of email addresses to validate

        Returns:
            List of ValidationResult objects
        """
        return [self.validate(email) for email in emails]

    def is_valid(self, email: Any) -> bool:
        """Quick check if email is valid."""
        if not isinstance(email, str):
            return False
        return try_parse_email(email, self.host_parser) is not None
