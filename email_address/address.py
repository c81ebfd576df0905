"""
Email Address Module

Contains the immutable EmailAddress value produced by a successful parse.
"""

from dataclasses import dataclass, field

from .host_address import HostAddress


@dataclass(frozen=True, order=True, init=False)
class EmailAddress:
    """
    A validated email address.

    Instances only come from parse_email() or try_parse_email(); there is no
    public constructor. Two addresses are equal when their user and host are
    equal, and they sort by user then host. The original text is kept as is.

    Attributes:
        user: The local-part, everything before the @
        host: The HostAddress after the @
        address: The entire email address exactly as given

    Example:
        >>> email = parse_email('user@example.com')
        >>> email.user, str(email.host)
        ('user', 'example.com')
    """
    user: str
    host: HostAddress
    address: str = field(compare=False)

    def __init__(self, *args, **kwargs):
        raise TypeError("EmailAddress cannot be created directly, use parse_email() or try_parse_email()")

    @classmethod
    def _create(cls, address: str, user: str, host: HostAddress) -> "EmailAddress":
        email = object.__new__(cls)
        object.__setattr__(email, "user", user)
        object.__setattr__(email, "host", host)
        object.__setattr__(email, "address", address)
        return email

    def __str__(self):
        return self.address
