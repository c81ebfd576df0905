"""
Failure Policies Module

The scanner reports the first rule an address breaks through one of the
hooks below. The policy decides what that means for the caller.
"""

from abc import ABC, abstractmethod

from .errors import (
    EmailTooLongError,
    HostAddressError,
    InvalidCharacterError,
    MissingHostError,
    MissingUserError,
    UsernameTooLongError,
)


class FailureHandler(ABC):
    """Hooks invoked by the scanner, at most once per scan."""

    @abstractmethod
    def email_too_long(self, email: str, max_length: int) -> None:
        pass

    @abstractmethod
    def missing_user(self, email: str) -> None:
        pass

    @abstractmethod
    def username_too_long(self, email: str, count: int) -> None:
        pass

    @abstractmethod
    def missing_host(self, email: str) -> None:
        pass

    @abstractmethod
    def invalid_character(self, email: str, index: int) -> None:
        pass

    @abstractmethod
    def invalid_host_address(self, email: str, cause: HostAddressError) -> None:
        pass


class StrictFailureHandler(FailureHandler):
    """Raises a descriptive error for every failure."""

    def email_too_long(self, email: str, max_length: int) -> None:
        raise EmailTooLongError(email, max_length)

    def missing_user(self, email: str) -> None:
        raise MissingUserError(email)

    def username_too_long(self, email: str, count: int) -> None:
        raise UsernameTooLongError(email, count)

    def missing_host(self, email: str) -> None:
        raise MissingHostError(email)

    def invalid_character(self, email: str, index: int) -> None:
        raise InvalidCharacterError(email, index)

    def invalid_host_address(self, email: str, cause: HostAddressError) -> None:
        raise cause


class LenientFailureHandler(FailureHandler):
    """Ignores every failure, the parse simply returns None."""

    def email_too_long(self, email: str, max_length: int) -> None:
        pass

    def missing_user(self, email: str) -> None:
        pass

    def username_too_long(self, email: str, count: int) -> None:
        pass

    def missing_host(self, email: str) -> None:
        pass

    def invalid_character(self, email: str, index: int) -> None:
        pass

    def invalid_host_address(self, email: str, cause: HostAddressError) -> None:
        pass
