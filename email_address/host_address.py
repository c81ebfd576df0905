"""
Host Address Module

Parses the host part of an email address: a host name, an IPv4 address or
an IPv6 address, optionally surrounded by square brackets. Only the syntax is
checked, no network query is ever made.
"""

import ipaddress
import string
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import total_ordering
from typing import Optional, Union

from .errors import (
    HostAddressError,
    HostAddressIncompleteError,
    HostAddressInvalidCharacterError,
    HostAddressInvalidLengthError,
    HostAddressInvalidValueError,
    HostTooLongError,
)

# The host part may not be this long or longer
MAX_HOST_LENGTH = 254

# Labels and octets must be shorter than this
MAX_LABEL_LENGTH = 64

IP4_OCTET_COUNT = 4
IP6_OCTET_COUNT = 16
MAX_OCTET_VALUE = 255

# Emails may prefix a bracketed IPv6 literal with this
IP6_PREFIX = "IPv6:"

LETTERS = frozenset(string.ascii_letters)
DIGITS = frozenset(string.digits)
HEX_DIGITS = frozenset(string.hexdigits)


@total_ordering
@dataclass(frozen=True, eq=False)
class HostAddress:
    """
    A validated host address.

    Attributes:
        address: The host text exactly as it appeared in the input
        values: Packed address bytes, empty for a host name
    """
    address: str
    values: bytes = b""

    @property
    def is_name(self) -> bool:
        return len(self.values) == 0

    @property
    def is_ip4(self) -> bool:
        return len(self.values) == IP4_OCTET_COUNT

    @property
    def is_ip6(self) -> bool:
        return len(self.values) == IP6_OCTET_COUNT

    @property
    def ip_address(self) -> Optional[Union[ipaddress.IPv4Address, ipaddress.IPv6Address]]:
        """The IP address held by this host, or None for a host name."""
        if self.is_name:
            return None
        return ipaddress.ip_address(self.values)

    # Host names are case insensitive
    def _key(self) -> str:
        return self.address.lower()

    def __eq__(self, other):
        if not isinstance(other, HostAddress):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other):
        if not isinstance(other, HostAddress):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self):
        return hash(self._key())

    def __str__(self):
        return self.address


def parse_host(address: str, offset: int = 0, email: bool = False) -> HostAddress:
    """
    Parse the host found from offset to the end of address.

    Args:
        address: The full text, e.g. an entire email address
        offset: Index of the first host character
        email: Whether the host belongs to an email, which allows bracketed
               IPv4 literals and the IPv6: prefix

    Returns:
        The validated HostAddress

    Raises:
        HostAddressError: If the host is not valid. Indexes in the error
                          refer to positions within address.
    """
    if not isinstance(address, str):
        raise TypeError(f"address must be a string, got {type(address).__name__}")

    length = len(address)
    host_length = length - offset
    if host_length >= MAX_HOST_LENGTH:
        raise HostTooLongError(address, host_length, MAX_HOST_LENGTH)
    if host_length <= 0:
        raise HostAddressIncompleteError(address)

    start = offset
    end = length
    bracketed = address[offset] == "["
    missing_closing_bracket = False

    if bracketed:
        start += 1
        if email and address.startswith(IP6_PREFIX, start):
            start += len(IP6_PREFIX)
        if host_length > 1 and address[-1] == "]":
            end -= 1
        else:
            missing_closing_bracket = True

    host = HostAddress(address[offset:], _parse_values(address, start, end))

    # brackets are only for ip6, or ip4 within an email
    if bracketed:
        if not (host.is_ip6 or (host.is_ip4 and email)):
            raise HostAddressInvalidCharacterError(address, offset)
        if missing_closing_bracket:
            raise HostAddressIncompleteError(address)

    return host


def _parse_values(address: str, start: int, end: int) -> bytes:
    if start >= end:
        raise HostAddressIncompleteError(address)

    body = address[start:end]
    if ":" in body:
        return _parse_ip6(address, start, end)
    if all(c in DIGITS or c == "." for c in body):
        return _parse_ip4(address, start, end)

    _check_name(address, start, end)
    return b""


def _check_name(address: str, start: int, end: int) -> None:
    """Verify a dotted host name such as mail.example.com."""
    last = end - 1
    label_start = start
    previous = ""

    for i in range(start, end):
        c = address[i]
        was_previous = previous
        previous = c

        if i == label_start:
            if c in LETTERS or c in DIGITS:
                continue
            raise HostAddressInvalidCharacterError(address, i)

        if i == last:
            if c == ".":
                raise HostAddressIncompleteError(address)
            # cannot end with a dash
            if c in LETTERS or c in DIGITS:
                _check_length(address, label_start, i + 1)
                continue
            raise HostAddressInvalidCharacterError(address, i)

        if c == ".":
            if was_previous == "-":
                raise HostAddressInvalidCharacterError(address, i - 1)
            _check_length(address, label_start, i)
            label_start = i + 1
            continue
        if c == "-" or c in LETTERS or c in DIGITS:
            continue
        raise HostAddressInvalidCharacterError(address, i)


def _parse_ip4(address: str, start: int, end: int) -> bytes:
    """Parse four dotted decimal octets such as 192.168.0.1."""
    octets = []
    octet_start = start

    for i in range(start, end + 1):
        if i < end:
            c = address[i]
            if c in DIGITS:
                continue
            if c != ".":
                raise HostAddressInvalidCharacterError(address, i)

        # either a dot or the end of the address
        if i == octet_start:
            if i == end:
                raise HostAddressIncompleteError(address)
            raise HostAddressInvalidCharacterError(address, i)

        _check_length(address, octet_start, i)
        value = int(address[octet_start:i])
        if value > MAX_OCTET_VALUE:
            raise HostAddressInvalidValueError(address, octet_start)
        octets.append(value)

        if i < end and len(octets) == IP4_OCTET_COUNT:
            raise HostAddressInvalidCharacterError(address, i)
        octet_start = i + 1

    if len(octets) != IP4_OCTET_COUNT:
        raise HostAddressIncompleteError(address)
    return bytes(octets)


def _parse_ip6(address: str, start: int, end: int) -> bytes:
    """Parse colon separated hex groups, with an optional trailing IPv4."""
    for i in range(start, end):
        c = address[i]
        if c not in HEX_DIGITS and c != ":" and c != ".":
            raise HostAddressInvalidCharacterError(address, i)

    body = address[start:end]
    if "." in body:
        # report bad octets at their own position
        _parse_ip4(address, start + body.rfind(":") + 1, end)

    try:
        return ipaddress.IPv6Address(body).packed
    except ipaddress.AddressValueError as error:
        raise HostAddressInvalidValueError(address, start) from error


def _check_length(address: str, start: int, end: int) -> None:
    if end - start >= MAX_LABEL_LENGTH:
        raise HostAddressInvalidLengthError(address, start)


class HostAddressParserBase(ABC):
    """Abstract base class for host address parsers."""

    @abstractmethod
    def parse(self, address: str, offset: int) -> HostAddress:
        """
        Parse the host from offset to the end of address.

        Args:
            address: The full email address
            offset: Index of the first character after the @

        Returns:
            The validated HostAddress

        Raises:
            HostAddressError: If the host is not valid
        """
        pass


class HostAddressParser(HostAddressParserBase):
    """
    Real host address parser.

    Applies the email host rules by default, which accept bracketed IPv4
    literals and the IPv6: prefix.
    """

    def __init__(self, email: bool = True):
        self.email = email

    def parse(self, address: str, offset: int) -> HostAddress:
        return parse_host(address, offset, email=self.email)


class MockHostAddressParser(HostAddressParserBase):
    """
    Mock host address parser for testing purposes.

    Allows configuring predefined responses for specific hosts. Hosts
    without a response are accepted as plain host names.
    """

    def __init__(self, responses: Optional[dict] = None):
        """
        Initialize the mock parser.

        Args:
            responses: Dictionary mapping host text to a HostAddress to
                       return or a HostAddressError to raise
        """
        self.responses = responses or {}
        self.call_history = []

    def set_response(self, host: str, response: Union[HostAddress, HostAddressError]):
        self.responses[host] = response

    def parse(self, address: str, offset: int) -> HostAddress:
        self.call_history.append((address, offset))

        host = address[offset:]
        response = self.responses.get(host)
        if response is None:
            return HostAddress(host)
        if isinstance(response, HostAddressError):
            raise response
        return response

    def reset_history(self):
        """Reset the call history."""
        self.call_history = []
