"""
Scanner Module

A single forward pass over an email address that finds the @, checks every
local-part character and hands the rest to a host address parser. Characters
are validated using the rules from http://en.wikipedia.org/wiki/Email_address
without comments or folding whitespace.
"""

import string
from typing import Optional

from .address import EmailAddress
from .errors import HostAddressError
from .host_address import HostAddressParserBase
from .policies import FailureHandler

# The entire email must be shorter than this
MAX_EMAIL_LENGTH = 255

# The maximum number of characters counted in the local-part
MAX_LOCAL_LENGTH = 64

# Legal local-part characters outside quotes, the dot is handled separately
USERNAME_CHARACTERS = frozenset(string.ascii_letters + string.digits + "!#$%&'*+-/=?^_`{|}~")

# Additional characters that are legal between quotes
QUOTABLE_USERNAME_CHARACTERS = frozenset(' <>[]:;@\\')

# Marks that the previous character was consumed by an escape
NO_PREVIOUS = ""


def scan(email: str, failures: FailureHandler, host_parser: HostAddressParserBase) -> Optional[EmailAddress]:
    """
    Scan an email address.

    Args:
        email: The email address to scan
        failures: Receives the first failure, after which the scan stops
        host_parser: Parses everything after the @

    Returns:
        The EmailAddress, or None if a failure was reported and not raised
    """
    length = len(email)
    if length >= MAX_EMAIL_LENGTH:
        failures.email_too_long(email, MAX_EMAIL_LENGTH)
        return None

    quoted = False
    characters_since_dot = 0
    user_character_count = 0
    previous = NO_PREVIOUS

    for i, c in enumerate(email):
        was_previous = previous
        previous = c

        # opening quote
        if not quoted and c == '"':
            quoted = True
            continue
        if c != "." and c in USERNAME_CHARACTERS:
            characters_since_dot += 1
            continue

        if quoted:
            # escaped quote or backslash
            if was_previous == "\\":
                if c == '"':
                    characters_since_dot += 1
                    continue
                if c == "\\":
                    characters_since_dot += 1
                    previous = NO_PREVIOUS
                    continue
            if c in QUOTABLE_USERNAME_CHARACTERS:
                characters_since_dot += 1
                continue
            # closing quote
            if c == '"':
                quoted = False
            continue

        # a dot may not start the user or follow another dot
        if c == "." and characters_since_dot != 0:
            user_character_count += characters_since_dot
            characters_since_dot = 0
            continue

        if c == "@":
            if was_previous == ".":
                failures.invalid_character(email, i - 1)
                return None
            user_character_count += characters_since_dot
            if user_character_count == 0:
                failures.missing_user(email)
                return None
            if i == length - 1:
                failures.missing_host(email)
                return None
            if user_character_count > MAX_LOCAL_LENGTH:
                failures.username_too_long(email, user_character_count)
                return None
            return _create(email, i, failures, host_parser)

        failures.invalid_character(email, i)
        return None

    failures.missing_host(email)
    return None


def _create(email: str, at: int, failures: FailureHandler, host_parser: HostAddressParserBase) -> Optional[EmailAddress]:
    try:
        host = host_parser.parse(email, at + 1)
    except HostAddressError as error:
        cause = error
    else:
        return EmailAddress._create(email, email[:at], host)

    failures.invalid_host_address(email, cause)
    return None
