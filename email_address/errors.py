"""
Errors Module

Exception types raised while parsing email and host addresses.
"""

import json
from typing import Optional


def quote(text: str) -> str:
    """Return text double quoted and escaped for display in a message."""
    return json.dumps(text, ensure_ascii=False)


class EmailAddressError(ValueError):
    """Base class for all email address failures."""

    def __init__(self, message: str, address: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.address = address
        self.code = code or self.__class__.__name__


class EmailTooLongError(EmailAddressError):
    """Raised when the whole address reaches the maximum length."""

    def __init__(self, address: str, max_length: int):
        super().__init__(
            f"Email too long {len(address)} >= {max_length}={quote(address)}",
            address,
            code="EMAIL_TOO_LONG"
        )
        self.length = len(address)


class MissingUserError(EmailAddressError):
    """Raised when nothing precedes the @."""

    def __init__(self, address: str):
        super().__init__(f"Missing user={quote(address)}", address, code="MISSING_USER")


class UsernameTooLongError(EmailAddressError):
    """Raised when the local-part holds too many characters."""

    def __init__(self, address: str, count: int):
        super().__init__(f"User too long={count}", address, code="USERNAME_TOO_LONG")
        self.count = count


class MissingHostError(EmailAddressError):
    """Raised when there is no @ or nothing follows it."""

    def __init__(self, address: str):
        super().__init__(f"Missing host={quote(address)}", address, code="MISSING_HOST")


class InvalidCharacterError(EmailAddressError):
    """Raised for an illegal character in the local-part."""

    def __init__(self, address: str, index: int):
        super().__init__(
            f"Invalid character {quote(address[index])} at {index}={quote(address)}",
            address,
            code="INVALID_CHARACTER"
        )
        self.index = index


class HostAddressError(ValueError):
    """Base class for host address failures."""

    def __init__(self, message: str, address: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.address = address
        self.code = code or self.__class__.__name__


class HostTooLongError(HostAddressError):

    def __init__(self, address: str, length: int, max_length: int):
        super().__init__(
            f"Host length {length} >= {max_length} in {quote(address)}",
            address,
            code="HOST_TOO_LONG"
        )
        self.length = length


class HostAddressIncompleteError(HostAddressError):

    def __init__(self, address: str):
        super().__init__(f"Incomplete host address in {quote(address)}", address, code="HOST_INCOMPLETE")


class HostAddressInvalidCharacterError(HostAddressError):

    def __init__(self, address: str, index: int):
        super().__init__(
            f"Invalid character {quote(address[index])} at {index} in {quote(address)}",
            address,
            code="HOST_INVALID_CHARACTER"
        )
        self.index = index


class HostAddressInvalidValueError(HostAddressError):
    """Raised when an IP octet or group holds an out of range value."""

    def __init__(self, address: str, index: int):
        super().__init__(f"Invalid value at {index} in {quote(address)}", address, code="HOST_INVALID_VALUE")
        self.index = index


class HostAddressInvalidLengthError(HostAddressError):
    """Raised when a host name label is too long."""

    def __init__(self, address: str, index: int):
        super().__init__(f"Label too long at {index} in {quote(address)}", address, code="HOST_INVALID_LENGTH")
        self.index = index
