"""
Parser Module

Public entry points. parse_email() raises for an invalid address while
try_parse_email() returns None; both run the same scanner.
"""

from typing import Optional

from .address import EmailAddress
from .host_address import HostAddressParser, HostAddressParserBase
from .policies import LenientFailureHandler, StrictFailureHandler
from .scanner import scan


def _check_email(email) -> None:
    if not isinstance(email, str):
        raise TypeError(f"email must be a string, got {type(email).__name__}")


def parse_email(email: str, host_parser: Optional[HostAddressParserBase] = None) -> EmailAddress:
    """
    Parse and validate an email address.

    Args:
        email: The email address to parse
        host_parser: Optional parser for the host part, defaults to HostAddressParser

    Returns:
        The validated EmailAddress

    Raises:
        TypeError: If email is not a string
        EmailAddressError: If the local-part or overall length is invalid
        HostAddressError: If the host part is invalid
    """
    _check_email(email)
    return scan(email, StrictFailureHandler(), host_parser or HostAddressParser())


def try_parse_email(email: str, host_parser: Optional[HostAddressParserBase] = None) -> Optional[EmailAddress]:
    """
    Parse an email address, returning None if it is invalid.

    Raises:
        TypeError: If email is not a string
    """
    _check_email(email)
    return scan(email, LenientFailureHandler(), host_parser or HostAddressParser())
