"""
Unit Tests for the failure policies

Checks that the strict and lenient entry points agree, and that the scanner
reports through exactly one hook.
"""

import pytest
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import Mock, call
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from email_address import parse_email, try_parse_email
from email_address.errors import (
    EmailAddressError,
    HostAddressError,
    HostAddressInvalidCharacterError,
    InvalidCharacterError,
    MissingHostError,
)
from email_address.host_address import HostAddress, HostAddressParser, MockHostAddressParser
from email_address.policies import FailureHandler, LenientFailureHandler, StrictFailureHandler
from email_address.scanner import scan


EMAILS = [
    "user@example.com",
    "first.last@example.com",
    "user+tag@sub.example.co.uk",
    '"quoted user"@example.com',
    'user"@"@server',
    "user@[1.2.3.4]",
    "user@[IPv6:::1]",
    "a" * 64 + "@example.com",
    "a" * 65 + "@example.com",
    "x" * 300,
    "@example.com",
    "user@",
    "plainaddress",
    "us..er@example.com",
    ".user@example.com",
    "user.@example.com",
    "user@s erver",
    "user@extra@atsign",
    "user@1.2.3.256",
    "",
    " ",
]


def strict_or_none(email):
    try:
        return parse_email(email)
    except (EmailAddressError, HostAddressError):
        return None


class TestPolicyConsistency:
    """Strict and lenient parsing must agree on every input."""

    @pytest.mark.parametrize("email", EMAILS)
    def test_lenient_matches_strict(self, email):
        """Test try_parse_email returns the strict result or None."""
        assert try_parse_email(email) == strict_or_none(email)

    @pytest.mark.parametrize("email", EMAILS)
    def test_lenient_never_raises(self, email):
        """Test try_parse_email does not raise for malformed strings."""
        try_parse_email(email)

    @pytest.mark.parametrize("email", [e for e in EMAILS if strict_or_none(e)])
    def test_idempotent(self, email):
        """Test parsing the address of a result gives an equal result."""
        first = parse_email(email)
        second = parse_email(first.address)
        assert first == second

    @pytest.mark.parametrize("email", [e for e in EMAILS if strict_or_none(e)])
    def test_round_trip(self, email):
        """Test the address is the user and host joined by @."""
        result = parse_email(email)
        assert result.address == result.user + "@" + str(result.host)

    def test_lenient_none_is_type_error(self):
        """Test the argument check also applies to the lenient entry point."""
        with pytest.raises(TypeError):
            try_parse_email(None)


class TestFailureHooks:
    """The scanner invokes at most one hook per scan."""

    def setup_method(self):
        """Set up test fixtures."""
        self.failures = Mock(spec=FailureHandler)
        self.host_parser = HostAddressParser()

    @pytest.mark.parametrize("email,expected", [
        ("x" * 255, call.email_too_long("x" * 255, 255)),
        ("@server", call.missing_user("@server")),
        ("a" * 65 + "@server", call.username_too_long("a" * 65 + "@server", 65)),
        ("user@", call.missing_host("user@")),
        ("plainaddress", call.missing_host("plainaddress")),
        ("us..er@server", call.invalid_character("us..er@server", 3)),
        ("user.@server", call.invalid_character("user.@server", 4)),
    ])
    def test_single_hook(self, email, expected):
        """Test the expected hook is the only call."""
        assert scan(email, self.failures, self.host_parser) is None
        assert self.failures.method_calls == [expected]

    def test_invalid_host_hook_receives_cause(self):
        """Test a host failure is passed through with its cause."""
        assert scan("user@s erver", self.failures, self.host_parser) is None

        self.failures.invalid_host_address.assert_called_once()
        email, cause = self.failures.invalid_host_address.call_args[0]
        assert email == "user@s erver"
        assert isinstance(cause, HostAddressInvalidCharacterError)
        assert cause.index == 6
        assert len(self.failures.method_calls) == 1

    def test_success_calls_no_hook(self):
        """Test a valid email invokes no hook."""
        result = scan("user@server", self.failures, self.host_parser)
        assert result.user == "user"
        assert self.failures.method_calls == []


class TestHostDelegation:
    """The host part is handed to the configured host parser."""

    def setup_method(self):
        """Set up test fixtures."""
        self.host_parser = MockHostAddressParser()

    def test_host_parser_receives_offset_after_at(self):
        """Test the host parser is given the full email and the index after @."""
        email = parse_email("user@anything", self.host_parser)

        assert self.host_parser.call_history == [("user@anything", 5)]
        assert email.host == HostAddress("anything")

    def test_host_parser_not_called_for_invalid_user(self):
        """Test no host parse happens when the user is invalid."""
        assert try_parse_email("us..er@anything", self.host_parser) is None
        assert self.host_parser.call_history == []

    def test_strict_reraises_host_error_unchanged(self):
        """Test the host parser's own error reaches the caller."""
        error = HostAddressInvalidCharacterError("user@bad", 5)
        self.host_parser.set_response("bad", error)

        with pytest.raises(HostAddressInvalidCharacterError) as info:
            parse_email("user@bad", self.host_parser)
        assert info.value is error

    def test_lenient_swallows_host_error(self):
        """Test a host failure becomes None."""
        self.host_parser.set_response("bad", HostAddressInvalidCharacterError("user@bad", 5))

        assert try_parse_email("user@bad", self.host_parser) is None
        assert self.host_parser.call_history == [("user@bad", 5)]


class TestHandlers:
    """Direct tests of the two policies."""

    def test_strict_raises(self):
        """Test each strict hook raises the matching error."""
        handler = StrictFailureHandler()

        with pytest.raises(InvalidCharacterError) as info:
            handler.invalid_character("a b", 1)
        assert info.value.index == 1

        with pytest.raises(MissingHostError):
            handler.missing_host("user")

    def test_lenient_ignores(self):
        """Test each lenient hook returns without raising."""
        handler = LenientFailureHandler()

        handler.email_too_long("x", 255)
        handler.missing_user("@x")
        handler.username_too_long("x@y", 65)
        handler.missing_host("x")
        handler.invalid_character("x", 0)
        handler.invalid_host_address("x@y", HostAddressInvalidCharacterError("x@y", 2))

    def test_failure_handler_is_abstract(self):
        """Test the FailureHandler interface cannot be instantiated."""
        with pytest.raises(TypeError):
            FailureHandler()


class TestConcurrentParsing:
    """Parsing keeps no shared state between calls."""

    def test_parse_from_many_threads(self):
        """Test threads parsing mixed emails get the single threaded results."""
        expected = [strict_or_none(email) for email in EMAILS]

        with ThreadPoolExecutor(max_workers=8) as executor:
            runs = [executor.submit(lambda: [try_parse_email(e) for e in EMAILS]) for _ in range(50)]
            results = [run.result() for run in runs]

        assert all(result == expected for result in results)

    def test_strict_errors_from_many_threads(self):
        """Test each thread sees the index of its own invalid character."""
        emails = [f"{'a' * n}..b@example.com" for n in range(1, 40)]

        def index_of_failure(email):
            with pytest.raises(InvalidCharacterError) as info:
                parse_email(email)
            return info.value.index

        with ThreadPoolExecutor(max_workers=8) as executor:
            indexes = list(executor.map(index_of_failure, emails))

        assert indexes == [n + 1 for n in range(1, 40)]
