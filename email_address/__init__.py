"""
Email Address Package

Parses email addresses into a validated user and host with a single pass
scanner, either raising on the first broken rule or returning None.
"""

from .address import EmailAddress
from .errors import (
    EmailAddressError,
    EmailTooLongError,
    HostAddressError,
    HostAddressIncompleteError,
    HostAddressInvalidCharacterError,
    HostAddressInvalidLengthError,
    HostAddressInvalidValueError,
    HostTooLongError,
    InvalidCharacterError,
    MissingHostError,
    MissingUserError,
    UsernameTooLongError,
)
from .host_address import HostAddress, HostAddressParser, parse_host
from .parser import parse_email, try_parse_email
from .validator import EmailValidator, ValidationResult

__all__ = [
    'EmailAddress', 'parse_email', 'try_parse_email',
    'HostAddress', 'HostAddressParser', 'parse_host',
    'EmailValidator', 'ValidationResult',
    'EmailAddressError', 'EmailTooLongError', 'MissingUserError', 'UsernameTooLongError',
    'MissingHostError', 'InvalidCharacterError',
    'HostAddressError', 'HostTooLongError', 'HostAddressIncompleteError',
    'HostAddressInvalidCharacterError', 'HostAddressInvalidValueError', 'HostAddressInvalidLengthError',
]
__version__ = '1.0.0'
